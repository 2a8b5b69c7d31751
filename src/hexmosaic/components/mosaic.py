from dataclasses import dataclass
from enum import IntEnum
from typing import Tuple

from hexmosaic.components.pixel import PixelColor

MosaicKey = Tuple[int, int, bool]


class MosaicPattern(IntEnum):
    """The nine color arrangements that count as a mosaic.

    Six mixed patterns cover every permutation of the three hues; the last three
    are single-hue mosaics.
    """
    MIXED_A = 0
    MIXED_B = 1
    MIXED_C = 2
    MIXED_D = 3
    MIXED_E = 4
    MIXED_F = 5
    YELLOW = 6
    GREEN = 7
    PURPLE = 8


_Y, _G, _P = PixelColor.YELLOW, PixelColor.GREEN, PixelColor.PURPLE
PATTERN_COLORS = {
    MosaicPattern.MIXED_A: (_Y, _G, _P),
    MosaicPattern.MIXED_B: (_Y, _P, _G),
    MosaicPattern.MIXED_C: (_G, _Y, _P),
    MosaicPattern.MIXED_D: (_G, _P, _Y),
    MosaicPattern.MIXED_E: (_P, _Y, _G),
    MosaicPattern.MIXED_F: (_P, _G, _Y),
    MosaicPattern.YELLOW: (_Y, _Y, _Y),
    MosaicPattern.GREEN: (_G, _G, _G),
    MosaicPattern.PURPLE: (_P, _P, _P),
}


def pattern_colors(pattern: int) -> Tuple[PixelColor, PixelColor, PixelColor]:
    """Return the colors of the three mosaic cells, in cell order."""
    try:
        return PATTERN_COLORS[MosaicPattern(pattern)]
    except ValueError:
        raise ValueError(f"Invalid mosaic pattern: {pattern!r}") from None


@dataclass(frozen=True, slots=True)
class Mosaic:
    """A triangle of three adjacent cells painted with one pattern.

    Up mosaics have two cells on row ``y`` and the apex on row ``y + 1``; (x, y) is
    the left cell of the pair. Down mosaics have a single cell on row ``y`` and the
    pair on row ``y + 1``; (x, y) is that single cell.
    """
    x: int
    y: int
    is_up: bool
    pattern: MosaicPattern

    def __post_init__(self) -> None:
        if not isinstance(self.pattern, MosaicPattern):
            try:
                object.__setattr__(self, "pattern", MosaicPattern(self.pattern))
            except ValueError:
                raise ValueError(f"Invalid mosaic pattern: {self.pattern!r}") from None

    def key(self) -> MosaicKey:
        return self.x, self.y, self.is_up

    @property
    def colors(self) -> Tuple[PixelColor, PixelColor, PixelColor]:
        return pattern_colors(self.pattern)
