import pytest
from esper import World

from hexmosaic.components.board import HexBoard
from hexmosaic.components.palette import DEFAULT_PIXEL_COLORS, PixelPalette
from hexmosaic.components.pixel import PixelColor, pixel_from_name
from hexmosaic.events.bus import EventBus
from hexmosaic.world import create_world, get_board, get_palette, get_settings


def test_create_world_defaults():
    world = create_world(EventBus())
    assert get_board(world).filled_count() == 0
    settings = get_settings(world)
    assert settings.height_penalty == 0.7
    assert settings.pixel_filter is None
    assert get_palette(world).background_for(PixelColor.YELLOW) == DEFAULT_PIXEL_COLORS[PixelColor.YELLOW]


def test_create_world_uses_given_board_and_settings():
    board = HexBoard()
    board.set(0, 0, PixelColor.GREEN)
    world = create_world(EventBus(), height_penalty=0.0, pixel_filter=PixelColor.PURPLE, board=board)
    assert get_board(world) is board
    assert get_settings(world).height_penalty == 0.0
    assert get_settings(world).pixel_filter == PixelColor.PURPLE


def test_missing_components_raise():
    world = World()
    with pytest.raises(RuntimeError):
        get_board(world)
    with pytest.raises(RuntimeError):
        get_palette(world)


def test_palette_cycle_wraps_to_empty():
    palette = PixelPalette()
    assert palette.next_in_cycle(PixelColor.EMPTY) == PixelColor.WHITE
    assert palette.next_in_cycle(PixelColor.PURPLE) == PixelColor.EMPTY


def test_pixel_from_name():
    assert pixel_from_name("Yellow") == PixelColor.YELLOW
    assert pixel_from_name(None) is None
    assert pixel_from_name("none") is None
    assert pixel_from_name("empty") is None
    with pytest.raises(ValueError):
        pixel_from_name("orange")
