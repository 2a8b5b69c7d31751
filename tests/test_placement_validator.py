from hexmosaic.components.board import HexBoard
from hexmosaic.components.mosaic import Mosaic, MosaicPattern
from hexmosaic.components.pixel import PixelColor
from hexmosaic.systems.mosaic_ops import (
    find_all_mosaic_placements,
    is_supported,
    is_valid,
    is_valid_placement,
    place_mosaic,
)
from tests.helpers import paint

YELLOW_UP = Mosaic(0, 0, True, MosaicPattern.YELLOW)
TOP_ROW_YELLOWS = [(x, 10) for x in range(5)]


def test_empty_board_accepts_corner_mosaic():
    board = HexBoard()
    assert is_valid_placement(board, YELLOW_UP)
    assert not is_valid(board, YELLOW_UP)


def test_out_of_bounds_mosaic_rejected():
    board = HexBoard()
    assert not is_valid_placement(board, Mosaic(5, 0, True, MosaicPattern.YELLOW))
    assert not is_valid_placement(board, Mosaic(0, 1, False, MosaicPattern.YELLOW))
    assert not is_valid_placement(board, Mosaic(0, 10, True, MosaicPattern.YELLOW))


def test_white_cell_blocks_placement():
    board = HexBoard()
    board.set(1, 1, PixelColor.WHITE)
    assert not is_valid_placement(board, YELLOW_UP)


def test_completed_mosaic_is_valid_but_not_placeable():
    board = paint(HexBoard(), [(0, 0), (1, 0), (1, 1)], PixelColor.YELLOW)
    assert is_valid(board, YELLOW_UP)
    assert not is_valid_placement(board, YELLOW_UP)


def test_partial_fill_must_match_pattern():
    board = HexBoard()
    board.set(0, 0, PixelColor.YELLOW)
    assert is_valid_placement(board, YELLOW_UP)
    assert is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.MIXED_A))
    assert not is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.GREEN))
    assert not is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.MIXED_C))


def test_hue_neighbour_blocks_placement_and_validity():
    board = HexBoard()
    board.set(2, 0, PixelColor.GREEN)
    assert not is_valid_placement(board, YELLOW_UP)
    paint(board, [(0, 0), (1, 0), (1, 1)], PixelColor.YELLOW)
    assert not is_valid(board, YELLOW_UP)


def test_white_neighbours_do_not_block():
    board = HexBoard()
    paint(board, [(0, 1), (2, 0), (2, 1)], PixelColor.WHITE)
    assert is_valid_placement(board, YELLOW_UP)


def test_wrong_colors_are_not_valid():
    board = paint(HexBoard(), [(0, 0), (1, 0)], PixelColor.YELLOW)
    board.set(1, 1, PixelColor.GREEN)
    assert not is_valid(board, YELLOW_UP)


def test_capacity_blocks_placement_needing_more_of_a_hue():
    board = paint(HexBoard(), TOP_ROW_YELLOWS, PixelColor.YELLOW)
    before = bytearray(board.cells)
    assert board.is_at_capacity(PixelColor.YELLOW)
    assert not is_valid_placement(board, YELLOW_UP)
    assert not is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.MIXED_A))
    assert is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.GREEN))
    assert board.cells == before


def test_capacity_counts_only_empty_cells():
    board = paint(HexBoard(), [(0, 10), (1, 10), (2, 10)], PixelColor.PURPLE)
    board.set(0, 0, PixelColor.PURPLE)
    # Four purples placed; the mosaic needs two more.
    assert not is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.PURPLE))
    board.set(2, 10, PixelColor.EMPTY)
    assert is_valid_placement(board, Mosaic(0, 0, True, MosaicPattern.PURPLE))


def test_place_mosaic_paints_cells_and_forced_whites():
    board = HexBoard()
    changed = place_mosaic(board, YELLOW_UP)
    assert [board.get(*p) for p in [(0, 0), (1, 0), (1, 1)]] == [PixelColor.YELLOW] * 3
    whites = [(0, 1), (0, 2), (1, 2), (2, 1), (2, 0)]
    assert all(board.get(*p) == PixelColor.WHITE for p in whites)
    assert board.yellow_count == 3
    assert board.white_count == 5
    assert len(changed) == 8
    assert is_valid(board, YELLOW_UP)


def test_place_mosaic_stops_whites_at_capacity():
    board = HexBoard()
    free = [p for p in HexBoard.iter_cells() if p[1] >= 4]
    paint(board, free[:28], PixelColor.WHITE)
    place_mosaic(board, YELLOW_UP)
    assert board.white_count == 30
    assert board.yellow_count == 3
    whites = [(0, 1), (0, 2), (1, 2), (2, 1), (2, 0)]
    assert sum(1 for p in whites if board.get(*p) == PixelColor.WHITE) == 2


def test_find_all_placements_skips_top_row_and_is_ordered():
    board = HexBoard()
    placements = list(find_all_mosaic_placements(board))
    assert placements
    assert all(m.y < HexBoard.HEIGHT - 1 for m in placements)
    keys = [(m.y, m.x, m.pattern, not m.is_up) for m in placements]
    assert keys == sorted(keys)
    assert all(is_valid_placement(board, m) for m in placements)


def test_support_requires_both_lower_neighbours():
    board = HexBoard()
    assert is_supported(board, 3, 0)
    assert not is_supported(board, 1, 1)
    board.set(0, 0, PixelColor.WHITE)
    assert not is_supported(board, 1, 1)
    board.set(1, 0, PixelColor.YELLOW)
    assert is_supported(board, 1, 1)
    # Wide-row edge cells only rest on one in-bounds cell.
    assert is_supported(board, 0, 1)
    assert not is_supported(board, 6, 1)
    board.set(5, 0, PixelColor.WHITE)
    assert is_supported(board, 6, 1)
