from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from hexmosaic.components.board import HexBoard
from hexmosaic.components.mosaic import Mosaic, MosaicPattern
from hexmosaic.components.pixel import HUES, PixelColor, is_hue

Position = Tuple[int, int]

logger = logging.getLogger(__name__)


def mosaic_cells(mosaic: Mosaic) -> List[Position]:
    """Return the three cells covered by ``mosaic`` in pattern order."""
    x, y = mosaic.x, mosaic.y
    wide = int(HexBoard.is_wide_row(y))
    if mosaic.is_up:
        return [(x, y), (x + 1, y), (x + 1 - wide, y + 1)]
    return [(x, y), (x - wide, y + 1), (x + 1 - wide, y + 1)]


def mosaic_adjacent(mosaic: Mosaic) -> List[Position]:
    """Return the nine cells touching ``mosaic``; some may lie off the board."""
    x, y = mosaic.x, mosaic.y
    wide = int(HexBoard.is_wide_row(y))
    if mosaic.is_up:
        return [
            (x - 1, y),
            (x - wide, y + 1),
            (x, y + 2),
            (x + 1, y + 2),
            (x + 2 - wide, y + 1),
            (x + 2, y),
            (x - wide, y - 1),
            (x + 1 - wide, y - 1),
            (x + 2 - wide, y - 1),
        ]
    return [
        (x - 1, y),
        (x - 1 - wide, y + 1),
        (x - wide, y - 1),
        (x + 1 - wide, y - 1),
        (x + 1, y),
        (x + 2 - wide, y + 1),
        (x - 1, y + 2),
        (x, y + 2),
        (x + 1, y + 2),
    ]


def adjacent_in_bounds(mosaic: Mosaic) -> Iterator[Position]:
    for x, y in mosaic_adjacent(mosaic):
        if HexBoard.in_bounds(x, y):
            yield x, y


def _touches_hue(board: HexBoard, mosaic: Mosaic) -> bool:
    return any(is_hue(board.get(x, y)) for x, y in adjacent_in_bounds(mosaic))


def is_valid(board: HexBoard, mosaic: Mosaic) -> bool:
    """Return True if the board already holds ``mosaic`` completely and correctly."""
    cells = mosaic_cells(mosaic)
    if not all(HexBoard.in_bounds(x, y) for x, y in cells):
        return False
    if _touches_hue(board, mosaic):
        return False
    return all(board.get(x, y) == color for (x, y), color in zip(cells, mosaic.colors))


def is_valid_placement(board: HexBoard, mosaic: Mosaic) -> bool:
    """Return True if ``mosaic`` may be committed on the board now.

    Cells may already be partially painted with the matching hues, but never with
    white; the mosaic may not touch any other hue cell and must leave every hue
    within its capacity.
    """
    cells = mosaic_cells(mosaic)
    if not all(HexBoard.in_bounds(x, y) for x, y in cells):
        return False
    current = [board.get(x, y) for x, y in cells]
    if any(pixel == PixelColor.WHITE for pixel in current):
        return False
    if all(is_hue(pixel) for pixel in current):
        return False
    if _touches_hue(board, mosaic):
        return False
    needed = {hue: 0 for hue in HUES}
    for pixel, color in zip(current, mosaic.colors):
        if pixel == PixelColor.EMPTY:
            needed[color] += 1
        elif pixel != color:
            return False
    return all(board.count(hue) + amount <= board.capacity(hue) for hue, amount in needed.items())


def place_mosaic(board: HexBoard, mosaic: Mosaic) -> List[Position]:
    """Paint ``mosaic`` and the white cells it forces around it.

    White is written into every empty in-bounds neighbour until the white supply
    runs out. Returns the positions that changed.
    """
    changed: List[Position] = []
    for (x, y), color in zip(mosaic_cells(mosaic), mosaic.colors):
        if board.get(x, y) != color:
            board.set(x, y, color)
            changed.append((x, y))
    for x, y in adjacent_in_bounds(mosaic):
        if board.get(x, y) != PixelColor.EMPTY:
            continue
        if board.is_at_capacity(PixelColor.WHITE):
            break
        board.set(x, y, PixelColor.WHITE)
        changed.append((x, y))
    logger.debug("Placed %s mosaic at (%d, %d) %s", mosaic.pattern.name, mosaic.x, mosaic.y,
                 "up" if mosaic.is_up else "down")
    return changed


def mosaics_at(x: int, y: int) -> Iterator[Mosaic]:
    """Yield every mosaic anchored at (x, y): pattern by pattern, up before down."""
    for pattern in MosaicPattern:
        yield Mosaic(x, y, True, pattern)
        yield Mosaic(x, y, False, pattern)


def find_all_mosaic_placements(board: HexBoard) -> Iterator[Mosaic]:
    """Lazily yield every legal placement, scanning anchors row-major from the bottom.

    The top row is never an anchor since every mosaic reaches one row above it.
    """
    for y in range(HexBoard.HEIGHT - 1):
        for x in range(HexBoard.row_width(y)):
            for mosaic in mosaics_at(x, y):
                if is_valid_placement(board, mosaic):
                    yield mosaic


def empty_neighbour_count(board: HexBoard, mosaic: Mosaic) -> int:
    """Number of empty cells around ``mosaic``, i.e. white pixels placing it would force."""
    return sum(1 for x, y in adjacent_in_bounds(mosaic) if board.get(x, y) == PixelColor.EMPTY)


def is_supported(board: HexBoard, x: int, y: int) -> bool:
    """Return True if both cells below (x, y) are filled or off the board."""
    wide = int(HexBoard.is_wide_row(y))
    for bx in (x - wide, x + 1 - wide):
        if HexBoard.in_bounds(bx, y - 1) and board.get(bx, y - 1) == PixelColor.EMPTY:
            return False
    return True
