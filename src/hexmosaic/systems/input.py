from hexmosaic.events.bus import (
    EventBus,
    EVENT_BOARD_CLEAR_REQUEST,
    EVENT_CELL_CLICK,
    EVENT_CELL_HOVER,
    EVENT_KEY_PRESS,
    EVENT_MOUSE_MOVE,
    EVENT_MOUSE_PRESS,
    EVENT_NEXT_PIXEL_REQUEST,
    EVENT_PIXEL_FILTER_CHANGED,
    EVENT_SOLVE_MODE_CHANGED,
    EVENT_SOLVE_REQUEST,
    EVENT_SOLVE_STEP_REQUEST,
)
from hexmosaic.ui.layout import cell_at_point, compute_board_geometry

# Arcade key symbols for letters and digits are their lowercase ASCII codes; we avoid
# importing arcade here so the system runs headless.
KEY_ACTIONS = {
    ord('s'): (EVENT_SOLVE_STEP_REQUEST, {}),
    ord('f'): (EVENT_SOLVE_REQUEST, {}),
    ord('n'): (EVENT_NEXT_PIXEL_REQUEST, {}),
    ord('c'): (EVENT_BOARD_CLEAR_REQUEST, {}),
    ord('r'): (EVENT_SOLVE_MODE_CHANGED, {'mode': 'realistic'}),
    ord('o'): (EVENT_SOLVE_MODE_CHANGED, {'mode': 'optimal'}),
    ord('0'): (EVENT_PIXEL_FILTER_CHANGED, {'color': None}),
    ord('1'): (EVENT_PIXEL_FILTER_CHANGED, {'color': 'white'}),
    ord('2'): (EVENT_PIXEL_FILTER_CHANGED, {'color': 'yellow'}),
    ord('3'): (EVENT_PIXEL_FILTER_CHANGED, {'color': 'green'}),
    ord('4'): (EVENT_PIXEL_FILTER_CHANGED, {'color': 'purple'}),
}

MOUSE_BUTTON_LEFT = 1


class InputSystem:
    """Translates raw window input into board and solver requests."""

    def __init__(self, event_bus: EventBus, window):
        self.event_bus = event_bus
        self.window = window
        self.hovered = None
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_MOUSE_MOVE, self.on_mouse_move)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None or button != MOUSE_BUTTON_LEFT:
            return
        cell = self._cell_at(x, y)
        if cell is None:
            return
        self.event_bus.emit(EVENT_CELL_CLICK, x=cell[0], y=cell[1])

    def on_mouse_move(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        if x is None or y is None:
            return
        cell = self._cell_at(x, y)
        if cell == self.hovered:
            return
        self.hovered = cell
        if cell is None:
            self.event_bus.emit(EVENT_CELL_HOVER, x=None, y=None)
        else:
            self.event_bus.emit(EVENT_CELL_HOVER, x=cell[0], y=cell[1])

    def on_key_press(self, sender, **kwargs):
        action = KEY_ACTIONS.get(kwargs.get('symbol'))
        if action is None:
            return
        name, payload = action
        self.event_bus.emit(name, **payload)

    def _cell_at(self, x: float, y: float):
        left, bottom = compute_board_geometry(self.window.width, self.window.height)
        return cell_at_point(x, y, left, bottom)
