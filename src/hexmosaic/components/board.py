from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Tuple

from hexmosaic.components.pixel import MAX_PIXEL_COUNTS, PIXEL_TYPE_COUNT, PixelColor
from hexmosaic.constants import BOARD_HEIGHT, NARROW_ROW_WIDTH, WIDE_ROW_WIDTH

Position = Tuple[int, int]


class CapacityExceededError(ValueError):
    """Raised when a cell write would push a color past its fixed capacity."""

    def __init__(self, pixel: PixelColor, capacity: int):
        super().__init__(f"Exceeded maximum number of {pixel.name.lower()} pixels ({capacity})")
        self.pixel = pixel
        self.capacity = capacity


# 6 narrow rows of 6 cells plus 5 wide rows of 7 cells.
CELL_COUNT = sum(
    WIDE_ROW_WIDTH if y % 2 == 1 else NARROW_ROW_WIDTH for y in range(BOARD_HEIGHT)
)


def _empty_cells() -> bytearray:
    return bytearray(BOARD_HEIGHT * WIDE_ROW_WIDTH)


def _initial_counts() -> List[int]:
    counts = [0] * PIXEL_TYPE_COUNT
    counts[PixelColor.EMPTY] = CELL_COUNT
    return counts


@dataclass(slots=True)
class HexBoard:
    """Hexagonal pixel board with per-color capacity bookkeeping.

    Rows alternate between narrow (even rows, 6 cells) and wide (odd rows, 7 cells);
    row 0 is the bottom row. Cells are stored row-major in a flat array sized for
    the widest row, so the trailing slot of every narrow row is never addressed.

    ``counts[color]`` always equals the number of cells holding ``color``; only
    ``set`` mutates individual cells.
    """
    cells: bytearray = field(default_factory=_empty_cells)
    counts: List[int] = field(default_factory=_initial_counts)

    HEIGHT = BOARD_HEIGHT
    MIN_WIDTH = NARROW_ROW_WIDTH
    MAX_WIDTH = WIDE_ROW_WIDTH

    # --- Geometry --------------------------------------------------------
    @staticmethod
    def is_wide_row(y: int) -> bool:
        return y % 2 == 1

    @staticmethod
    def row_width(y: int) -> int:
        return HexBoard.MAX_WIDTH if HexBoard.is_wide_row(y) else HexBoard.MIN_WIDTH

    @staticmethod
    def in_bounds(x: int, y: int) -> bool:
        return 0 <= y < BOARD_HEIGHT and 0 <= x < HexBoard.row_width(y)

    @staticmethod
    def iter_cells() -> Iterator[Position]:
        """Yield every in-bounds (x, y) in row-major order, bottom row first."""
        for y in range(BOARD_HEIGHT):
            for x in range(HexBoard.row_width(y)):
                yield x, y

    # --- Cell access -----------------------------------------------------
    @staticmethod
    def _index(x: int, y: int) -> int:
        if not HexBoard.in_bounds(x, y):
            raise IndexError(f"Cell ({x}, {y}) is outside the board")
        return y * WIDE_ROW_WIDTH + x

    def get(self, x: int, y: int) -> PixelColor:
        return PixelColor(self.cells[self._index(x, y)])

    def set(self, x: int, y: int, value: PixelColor) -> None:
        """Write ``value`` into (x, y), keeping counts in step.

        Raises ``IndexError`` for cells off the board, and ``CapacityExceededError``
        (leaving the board untouched) when the write would take ``value`` past its
        capacity.
        """
        value = PixelColor(value)
        index = self._index(x, y)
        previous = self.cells[index]
        if previous == value:
            return
        if value != PixelColor.EMPTY and self.counts[value] + 1 > MAX_PIXEL_COUNTS[value]:
            raise CapacityExceededError(value, MAX_PIXEL_COUNTS[value])
        self.counts[previous] -= 1
        self.counts[value] += 1
        self.cells[index] = value

    def clone(self) -> HexBoard:
        return HexBoard(cells=bytearray(self.cells), counts=list(self.counts))

    def clear(self) -> None:
        self.cells[:] = _empty_cells()
        self.counts[:] = _initial_counts()

    # --- Counts ----------------------------------------------------------
    def count(self, pixel: PixelColor) -> int:
        return self.counts[pixel]

    @staticmethod
    def capacity(pixel: PixelColor) -> int:
        return MAX_PIXEL_COUNTS[PixelColor(pixel)]

    def is_at_capacity(self, pixel: PixelColor) -> bool:
        return pixel != PixelColor.EMPTY and self.counts[pixel] >= MAX_PIXEL_COUNTS[pixel]

    def filled_count(self) -> int:
        return sum(self.counts[p] for p in PixelColor if p != PixelColor.EMPTY)

    @property
    def white_count(self) -> int:
        return self.counts[PixelColor.WHITE]

    @property
    def yellow_count(self) -> int:
        return self.counts[PixelColor.YELLOW]

    @property
    def green_count(self) -> int:
        return self.counts[PixelColor.GREEN]

    @property
    def purple_count(self) -> int:
        return self.counts[PixelColor.PURPLE]
