from dataclasses import dataclass
from typing import Optional

from hexmosaic.components.pixel import PixelColor
from hexmosaic.constants import REALISTIC_HEIGHT_PENALTY


@dataclass(slots=True)
class SolverSettings:
    """Singleton component holding the user's solver choices.

    height_penalty: bias toward lower rows (0 ignores height, 0.7 respects gravity).
    pixel_filter: when set, next-pixel suggestions are restricted to this color.
    """
    height_penalty: float = REALISTIC_HEIGHT_PENALTY
    pixel_filter: Optional[PixelColor] = None
