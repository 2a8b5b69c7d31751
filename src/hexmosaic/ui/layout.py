import math
from typing import List, Optional, Tuple

from hexmosaic.components.board import HexBoard
from hexmosaic.constants import (
    BOARD_HEIGHT,
    BOARD_WIDTH_PCT,
    CELL_WIDTH,
    HEX_HALF_WIDTH,
    HEX_RADIUS,
    ROW_HEIGHT,
    WIDE_ROW_WIDTH,
)

Point = Tuple[float, float]


def compute_board_geometry(window_width: int, window_height: int) -> Tuple[float, float]:
    """Return (left, bottom): the center of cell (0, 0) of a wide row and of row 0.

    The board is centered in the left BOARD_WIDTH_PCT of the window and vertically.
    Shared by rendering and input so clicks land on the cell that was drawn there.
    """
    board_span_x = (WIDE_ROW_WIDTH - 1) * CELL_WIDTH
    board_span_y = (BOARD_HEIGHT - 1) * ROW_HEIGHT
    left = (window_width * BOARD_WIDTH_PCT - board_span_x) / 2
    bottom = (window_height - board_span_y) / 2
    return left, bottom


def row_offset(y: int) -> float:
    """Narrow rows sit half a cell to the right of the wide rows around them."""
    return 0.0 if HexBoard.is_wide_row(y) else CELL_WIDTH / 2


def cell_center(x: int, y: int, left: float, bottom: float) -> Point:
    return left + x * CELL_WIDTH + row_offset(y), bottom + y * ROW_HEIGHT


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def cell_at_point(px: float, py: float, left: float, bottom: float) -> Optional[Tuple[int, int]]:
    """Map a window point to the (x, y) cell drawn under it, or None off the board."""
    y = _round_half_up((py - bottom) / ROW_HEIGHT)
    if not 0 <= y < BOARD_HEIGHT:
        return None
    x = _round_half_up((px - left - row_offset(y)) / CELL_WIDTH)
    if not HexBoard.in_bounds(x, y):
        return None
    return x, y


def hexagon_points(cx: float, cy: float) -> List[Point]:
    """Pointy-top hexagon outline around (cx, cy)."""
    half_side = HEX_RADIUS / 2
    return [
        (cx, cy - HEX_RADIUS),
        (cx + HEX_HALF_WIDTH, cy - half_side),
        (cx + HEX_HALF_WIDTH, cy + half_side),
        (cx, cy + HEX_RADIUS),
        (cx - HEX_HALF_WIDTH, cy + half_side),
        (cx - HEX_HALF_WIDTH, cy - half_side),
    ]
