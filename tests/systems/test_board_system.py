from hexmosaic.components.pixel import PixelColor
from hexmosaic.events.bus import (
    EventBus,
    EVENT_BOARD_CHANGED,
    EVENT_BOARD_CLEAR_REQUEST,
    EVENT_CELL_CLICK,
    EVENT_CELL_SET_REJECTED,
    EVENT_CELL_SET_REQUEST,
)
from hexmosaic.systems.board import BoardSystem
from hexmosaic.world import create_world, get_board
from tests.helpers import paint


def _setup():
    bus = EventBus()
    world = create_world(bus)
    system = BoardSystem(world, bus)
    changes = []
    rejections = []
    bus.subscribe(EVENT_BOARD_CHANGED, lambda sender, **kw: changes.append(kw))
    bus.subscribe(EVENT_CELL_SET_REJECTED, lambda sender, **kw: rejections.append(kw))
    return bus, world, system, changes, rejections


def test_set_request_writes_cell_and_announces_change():
    bus, world, _, changes, _ = _setup()
    bus.emit(EVENT_CELL_SET_REQUEST, x=2, y=3, color=PixelColor.GREEN)
    assert get_board(world).get(2, 3) == PixelColor.GREEN
    assert changes == [{"reason": "cell_set", "positions": [(2, 3)]}]


def test_set_request_outside_board_is_ignored():
    bus, world, _, changes, _ = _setup()
    bus.emit(EVENT_CELL_SET_REQUEST, x=6, y=0, color=PixelColor.WHITE)
    assert get_board(world).filled_count() == 0
    assert changes == []


def test_set_request_past_capacity_is_rejected():
    bus, world, _, changes, rejections = _setup()
    paint(get_board(world), [(x, 0) for x in range(5)], PixelColor.YELLOW)
    bus.emit(EVENT_CELL_SET_REQUEST, x=0, y=1, color=PixelColor.YELLOW)
    assert get_board(world).get(0, 1) == PixelColor.EMPTY
    assert changes == []
    assert len(rejections) == 1
    assert rejections[0]["color"] == PixelColor.YELLOW


def test_click_cycles_through_colors_with_supply():
    bus, world, _, _, _ = _setup()
    board = get_board(world)
    bus.emit(EVENT_CELL_CLICK, x=1, y=1)
    assert board.get(1, 1) == PixelColor.WHITE
    bus.emit(EVENT_CELL_CLICK, x=1, y=1)
    assert board.get(1, 1) == PixelColor.YELLOW
    bus.emit(EVENT_CELL_CLICK, x=1, y=1)
    bus.emit(EVENT_CELL_CLICK, x=1, y=1)
    assert board.get(1, 1) == PixelColor.PURPLE
    bus.emit(EVENT_CELL_CLICK, x=1, y=1)
    assert board.get(1, 1) == PixelColor.EMPTY


def test_click_skips_colors_at_capacity():
    bus, world, system, _, _ = _setup()
    board = get_board(world)
    paint(board, [(x, 10) for x in range(5)], PixelColor.YELLOW)
    board.set(3, 3, PixelColor.WHITE)
    assert system.next_color_for(3, 3) == PixelColor.GREEN
    bus.emit(EVENT_CELL_CLICK, x=3, y=3)
    assert board.get(3, 3) == PixelColor.GREEN


def test_clear_request_empties_board():
    bus, world, _, changes, _ = _setup()
    paint(get_board(world), [(0, 0), (1, 0)], PixelColor.WHITE)
    bus.emit(EVENT_BOARD_CLEAR_REQUEST)
    assert get_board(world).filled_count() == 0
    assert changes[-1]["reason"] == "clear"


def test_set_request_with_unknown_color_is_ignored():
    bus, world, _, changes, rejections = _setup()
    bus.emit(EVENT_CELL_SET_REQUEST, x=1, y=1, color=9)
    bus.emit(EVENT_CELL_SET_REQUEST, x=1, y=1, color="yellow")
    assert get_board(world).filled_count() == 0
    assert changes == []
    assert rejections == []
