"""Entry point for the hex mosaic solver.

Sets up the ECS world, event bus, systems, and Arcade window.

Keys: S step, F full solve, N place next best pixel, C clear, R realistic mode,
O optimal mode, 0-4 pixel filter (any, white, yellow, green, purple).
Clicking a cell cycles it through the colors that still have supply.
"""
import logging

from arcade import Window, run, color

from hexmosaic.constants import WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from hexmosaic.events.bus import (
    EVENT_KEY_PRESS,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EventBus,
)
from hexmosaic.systems.board import BoardSystem
from hexmosaic.systems.input import InputSystem
from hexmosaic.systems.render import RenderSystem
from hexmosaic.systems.score_system import ScoreSystem
from hexmosaic.systems.solver_system import SolverSystem
from hexmosaic.world import create_world

logger = logging.getLogger(__name__)


class HexMosaicWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world(self.event_bus)

        # Render first so it receives the initial score broadcast.
        self.render_system = RenderSystem(self.world, self.event_bus, self)
        self.input_system = InputSystem(self.event_bus, self)

        self.board_system = BoardSystem(self.world, self.event_bus)
        self.solver_system = SolverSystem(self.world, self.event_bus)
        self.score_system = ScoreSystem(self.world, self.event_bus)

        self.background_color = color.BLACK

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_mouse_motion(self, x: float, y: float, dx: float, dy: float):
        self.event_bus.emit(EVENT_MOUSE_MOVE, x=x, y=y)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    window = HexMosaicWindow()
    logger.info("Hex mosaic solver started (%dx%d)", window.width, window.height)
    run()

if __name__ == "__main__":
    main()
