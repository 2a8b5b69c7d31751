from __future__ import annotations

from typing import Iterable, List, Tuple

from hexmosaic.components.board import HexBoard
from hexmosaic.components.pixel import PixelColor

Position = Tuple[int, int]


def paint(board: HexBoard, cells: Iterable[Position], color: PixelColor) -> HexBoard:
    """Set every cell in ``cells`` to ``color`` and return the board for chaining."""
    for x, y in cells:
        board.set(x, y, color)
    return board


def _center_x(x: int, y: int) -> float:
    # Narrow (even) rows sit half a cell to the right; valid for rows off the board too.
    return x + (0.0 if y % 2 == 1 else 0.5)


def hex_neighbours(x: int, y: int) -> List[Position]:
    """The six hexagons touching (x, y), derived from drawn cell centers."""
    cx = _center_x(x, y)
    result = [(x - 1, y), (x + 1, y)]
    for ny in (y - 1, y + 1):
        for target in (cx - 0.5, cx + 0.5):
            result.append((int(round(target - _center_x(0, ny))), ny))
    return result
