"""Pixel color tags and their fixed capacities."""
from enum import IntEnum
from typing import Dict, Optional

from hexmosaic.constants import MAX_GREEN, MAX_PURPLE, MAX_WHITE, MAX_YELLOW


class PixelColor(IntEnum):
    """Color tag stored in a board cell.

    WHITE is the base filler color; YELLOW, GREEN and PURPLE are the scoring hues.
    """
    EMPTY = 0
    WHITE = 1
    YELLOW = 2
    GREEN = 3
    PURPLE = 4


PIXEL_TYPE_COUNT = len(PixelColor)
HUES = (PixelColor.YELLOW, PixelColor.GREEN, PixelColor.PURPLE)

MAX_PIXEL_COUNTS: Dict[PixelColor, int] = {
    PixelColor.EMPTY: 0,
    PixelColor.WHITE: MAX_WHITE,
    PixelColor.YELLOW: MAX_YELLOW,
    PixelColor.GREEN: MAX_GREEN,
    PixelColor.PURPLE: MAX_PURPLE,
}


def is_hue(pixel: int) -> bool:
    return pixel in HUES


def pixel_from_name(name: Optional[str]) -> Optional[PixelColor]:
    """Resolve a lowercase color name (``"white"``, ``"yellow"``...) to a PixelColor.

    ``None``, empty strings and ``"none"`` map to ``None``; unknown names raise ``ValueError``.
    """
    if name is None:
        return None
    key = name.strip().upper()
    if not key or key == "NONE":
        return None
    try:
        color = PixelColor[key]
    except KeyError:
        raise ValueError(f"Unknown pixel color: {name!r}") from None
    if color == PixelColor.EMPTY:
        return None
    return color
