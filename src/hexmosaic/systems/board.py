import logging
from typing import Optional

from esper import World

from hexmosaic.components.board import CapacityExceededError, HexBoard
from hexmosaic.components.pixel import PixelColor
from hexmosaic.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_CLEAR_REQUEST,
    EVENT_CELL_CLICK,
    EVENT_CELL_SET_REJECTED,
    EVENT_CELL_SET_REQUEST,
)
from hexmosaic.world import get_board, get_palette

logger = logging.getLogger(__name__)


class BoardSystem:
    """Owns direct edits to the board: explicit sets, click cycling and clearing.

    Every successful edit is announced with EVENT_BOARD_CHANGED; writes that would
    exceed a color's capacity are reported with EVENT_CELL_SET_REJECTED instead.
    """
    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_SET_REQUEST, self.on_cell_set_request)
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_BOARD_CLEAR_REQUEST, self.on_clear_request)

    @property
    def board(self) -> HexBoard:
        return get_board(self.world)

    def on_cell_set_request(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        color = kwargs.get('color')
        if x is None or y is None or color is None:
            return
        if not HexBoard.in_bounds(x, y):
            return
        try:
            pixel = PixelColor(color)
        except ValueError:
            logger.debug("Ignoring cell set request with unknown color %r", color)
            return
        self.set_cell(x, y, pixel)

    def on_cell_click(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None or not HexBoard.in_bounds(x, y):
            return
        next_color = self.next_color_for(x, y)
        if next_color is None:
            return
        self.set_cell(x, y, next_color, reason='cell_click')

    def on_clear_request(self, sender, **kwargs):
        self.board.clear()
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason='clear', positions=[])

    def set_cell(self, x: int, y: int, color: PixelColor, *, reason: str = 'cell_set') -> bool:
        try:
            self.board.set(x, y, color)
        except CapacityExceededError as exc:
            self.event_bus.emit(EVENT_CELL_SET_REJECTED, x=x, y=y, color=color, reason=str(exc))
            return False
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason=reason, positions=[(x, y)])
        return True

    def next_color_for(self, x: int, y: int) -> Optional[PixelColor]:
        """Next color in the palette cycle after the cell's current one that still has supply."""
        palette = get_palette(self.world)
        board = self.board
        current = board.get(x, y)
        candidate = current
        for _ in range(len(palette.cycle)):
            candidate = palette.next_in_cycle(candidate)
            if not board.is_at_capacity(candidate):
                return candidate
        return None
