from __future__ import annotations

import logging
from typing import Optional

from esper import World

from hexmosaic.ai.advisor import PixelSuggestion, place_next_best_pixel
from hexmosaic.ai.solver import SolverState, solve_board, solve_step
from hexmosaic.components.pixel import PixelColor, pixel_from_name
from hexmosaic.components.solver_settings import SolverSettings
from hexmosaic.constants import SOLVE_MODES
from hexmosaic.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_CLEAR_REQUEST,
    EVENT_NEXT_PIXEL_REQUEST,
    EVENT_NEXT_PIXEL_SUGGESTED,
    EVENT_NEXT_PIXEL_UNAVAILABLE,
    EVENT_PIXEL_FILTER_CHANGED,
    EVENT_SETTINGS_CHANGED,
    EVENT_SOLVE_FINISHED,
    EVENT_SOLVE_MODE_CHANGED,
    EVENT_SOLVE_REQUEST,
    EVENT_SOLVE_STEP_REQUEST,
)
from hexmosaic.world import get_board, get_settings

logger = logging.getLogger(__name__)


class SolverSystem:
    """Runs the greedy solver and the next-pixel advisor on the world's board.

    Height penalty and pixel filter are read from the SolverSettings component,
    which this system also updates on mode / filter change events.
    """

    def __init__(self, world: World, event_bus: EventBus) -> None:
        self.world = world
        self.event_bus = event_bus
        # Steps taken since the last finished solve or board clear.
        self.steps_taken = 0
        event_bus.subscribe(EVENT_SOLVE_STEP_REQUEST, self.on_step_request)
        event_bus.subscribe(EVENT_SOLVE_REQUEST, self.on_solve_request)
        event_bus.subscribe(EVENT_NEXT_PIXEL_REQUEST, self.on_next_pixel_request)
        event_bus.subscribe(EVENT_SOLVE_MODE_CHANGED, self.on_solve_mode_changed)
        event_bus.subscribe(EVENT_PIXEL_FILTER_CHANGED, self.on_pixel_filter_changed)
        event_bus.subscribe(EVENT_BOARD_CLEAR_REQUEST, self.on_board_clear_request)

    @property
    def settings(self) -> SolverSettings:
        return get_settings(self.world)

    # --- Event handlers -------------------------------------------------
    def on_step_request(self, sender, **payload) -> None:
        self.step()

    def on_solve_request(self, sender, **payload) -> None:
        self.solve()

    def on_next_pixel_request(self, sender, **payload) -> None:
        self.place_next_pixel()

    def on_board_clear_request(self, sender, **payload) -> None:
        self.steps_taken = 0

    def on_solve_mode_changed(self, sender, **payload) -> None:
        mode = payload.get("mode")
        # Anything other than an explicit "optimal" selects the realistic mode.
        key = mode if mode in SOLVE_MODES else "realistic"
        self.settings.height_penalty = SOLVE_MODES[key]
        self._emit_settings_changed()

    def on_pixel_filter_changed(self, sender, **payload) -> None:
        color = payload.get("color")
        try:
            pixel_filter = self._coerce_filter(color)
        except ValueError:
            logger.debug("Ignoring unknown pixel filter %r", color)
            return
        self.settings.pixel_filter = pixel_filter
        self._emit_settings_changed()

    # --- Actions ----------------------------------------------------------
    def step(self) -> bool:
        board = get_board(self.world)
        more = solve_step(board, self.settings.height_penalty)
        self.steps_taken += 1
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="solve_step", positions=[])
        if not more:
            self.event_bus.emit(EVENT_SOLVE_FINISHED, steps=self.steps_taken, completed=True)
            self.steps_taken = 0
        return more

    def solve(self) -> SolverState:
        board = get_board(self.world)
        steps, state = solve_board(board, self.settings.height_penalty)
        steps += self.steps_taken
        self.steps_taken = 0
        self.event_bus.emit(EVENT_BOARD_CHANGED, reason="solve", positions=[])
        self.event_bus.emit(EVENT_SOLVE_FINISHED, steps=steps, completed=state == SolverState.DONE)
        return state

    def place_next_pixel(self) -> Optional[PixelSuggestion]:
        board = get_board(self.world)
        settings = self.settings
        suggestion = place_next_best_pixel(board, settings.height_penalty, settings.pixel_filter)
        if suggestion is None:
            self.event_bus.emit(EVENT_NEXT_PIXEL_UNAVAILABLE)
            return None
        self.event_bus.emit(
            EVENT_NEXT_PIXEL_SUGGESTED, x=suggestion.x, y=suggestion.y, color=suggestion.color
        )
        self.event_bus.emit(
            EVENT_BOARD_CHANGED, reason="next_pixel", positions=[(suggestion.x, suggestion.y)]
        )
        return suggestion

    # --- Helpers ----------------------------------------------------------
    def _emit_settings_changed(self) -> None:
        settings = self.settings
        self.event_bus.emit(
            EVENT_SETTINGS_CHANGED,
            height_penalty=settings.height_penalty,
            pixel_filter=settings.pixel_filter,
        )

    @staticmethod
    def _coerce_filter(color) -> Optional[PixelColor]:
        if color is None or isinstance(color, str):
            return pixel_from_name(color)
        pixel = PixelColor(color)
        return None if pixel == PixelColor.EMPTY else pixel
