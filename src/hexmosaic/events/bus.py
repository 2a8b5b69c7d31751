from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # Strong references keep bound methods of systems that are not stored anywhere alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"          # payload: x, y, button
EVENT_MOUSE_MOVE = "mouse_move"            # payload: x, y
EVENT_KEY_PRESS = "key_press"              # payload: symbol, modifiers
EVENT_CELL_CLICK = "cell_click"            # payload: x, y
EVENT_CELL_HOVER = "cell_hover"            # payload: x=int|None, y=int|None


# ============================================================================
# BOARD
# ============================================================================
EVENT_CELL_SET_REQUEST = "cell_set_request"        # payload: x, y, color=PixelColor
EVENT_CELL_SET_REJECTED = "cell_set_rejected"      # payload: x, y, color=PixelColor, reason=str
EVENT_BOARD_CLEAR_REQUEST = "board_clear_request"  # payload: none
EVENT_BOARD_CHANGED = "board_changed"              # payload: reason=str, positions=list[(x,y)]


# ============================================================================
# SOLVER
# ============================================================================
EVENT_SOLVE_STEP_REQUEST = "solve_step_request"        # payload: none
EVENT_SOLVE_REQUEST = "solve_request"                  # payload: none
EVENT_SOLVE_FINISHED = "solve_finished"                # payload: steps=int, completed=bool
EVENT_NEXT_PIXEL_REQUEST = "next_pixel_request"        # payload: none
EVENT_NEXT_PIXEL_SUGGESTED = "next_pixel_suggested"    # payload: x, y, color=PixelColor
EVENT_NEXT_PIXEL_UNAVAILABLE = "next_pixel_unavailable"  # payload: none
EVENT_SOLVE_MODE_CHANGED = "solve_mode_changed"        # payload: mode="realistic"|"optimal"
EVENT_PIXEL_FILTER_CHANGED = "pixel_filter_changed"    # payload: color=str|PixelColor|None
EVENT_SETTINGS_CHANGED = "settings_changed"            # payload: height_penalty=float, pixel_filter=PixelColor|None


# ============================================================================
# SCORING
# ============================================================================
EVENT_SCORE_UPDATED = "score_updated"      # payload: score=ScoreSnapshot, counts=dict[PixelColor,(count,capacity)]
