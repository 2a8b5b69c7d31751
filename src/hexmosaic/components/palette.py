from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from hexmosaic.components.pixel import PixelColor

RGB = Tuple[int, int, int]

DEFAULT_PIXEL_COLORS: Dict[PixelColor, RGB] = {
    PixelColor.EMPTY: (136, 136, 136),   # #888
    PixelColor.WHITE: (255, 255, 255),
    PixelColor.YELLOW: (247, 212, 116),  # #F7D474
    PixelColor.GREEN: (86, 163, 107),    # #56A36B
    PixelColor.PURPLE: (191, 149, 240),  # #BF95F0
}


@dataclass(slots=True)
class PaletteRegistry:
    """Empty tag component marking the single entity that stores the pixel palette.

    The same entity also carries a PixelPalette component.
    """
    pass


@dataclass(slots=True)
class PixelPalette:
    """Display colors per pixel type, plus the cycling order used by cell clicks."""
    colors: Dict[PixelColor, RGB] = field(default_factory=lambda: dict(DEFAULT_PIXEL_COLORS))
    cycle: List[PixelColor] = field(default_factory=lambda: list(PixelColor))

    def background_for(self, pixel: PixelColor) -> RGB:
        return self.colors[PixelColor(pixel)]

    def next_in_cycle(self, pixel: PixelColor) -> PixelColor:
        index = self.cycle.index(PixelColor(pixel))
        return self.cycle[(index + 1) % len(self.cycle)]
