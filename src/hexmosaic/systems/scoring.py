from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet, Set, Tuple

from hexmosaic.components.board import HexBoard
from hexmosaic.components.mosaic import MosaicKey
from hexmosaic.components.pixel import PixelColor
from hexmosaic.constants import (
    ARTIST_BONUS_POINTS,
    PIXEL_POINTS,
    SET_BONUS_POINTS,
    SET_BONUS_ROWS,
)
from hexmosaic.systems.mosaic_ops import is_valid, mosaics_at


@dataclass(frozen=True, slots=True)
class ScoreSnapshot:
    """Points breakdown for a board state.

    pixel_count: number of filled cells.
    mosaics: keys (x, y, is_up) of every distinct valid mosaic.
    set_bonuses: whether each row threshold in SET_BONUS_ROWS holds a filled cell.
    """
    pixel_count: int = 0
    mosaics: FrozenSet[MosaicKey] = frozenset()
    set_bonuses: Tuple[bool, ...] = (False,) * len(SET_BONUS_ROWS)

    @property
    def mosaic_count(self) -> int:
        return len(self.mosaics)

    @property
    def thresholds_met(self) -> int:
        return sum(1 for met in self.set_bonuses if met)

    @property
    def pixel_score(self) -> int:
        return self.pixel_count * PIXEL_POINTS

    @property
    def artist_bonus(self) -> int:
        return self.mosaic_count * ARTIST_BONUS_POINTS

    @property
    def set_bonus(self) -> int:
        return self.thresholds_met * SET_BONUS_POINTS

    @property
    def total(self) -> int:
        return self.pixel_score + self.artist_bonus + self.set_bonus

    def as_dict(self) -> dict:
        return {
            "filled_count": self.pixel_count,
            "mosaic_count": self.mosaic_count,
            "thresholds_met": self.thresholds_met,
            "pixel_score": self.pixel_score,
            "artist_bonus": self.artist_bonus,
            "set_bonus": self.set_bonus,
            "total": self.total,
        }


def compute_score(board: HexBoard) -> ScoreSnapshot:
    pixel_count = 0
    mosaics: Set[MosaicKey] = set()
    set_bonuses = [False] * len(SET_BONUS_ROWS)
    for x, y in HexBoard.iter_cells():
        if board.get(x, y) == PixelColor.EMPTY:
            continue
        pixel_count += 1
        for index, threshold in enumerate(SET_BONUS_ROWS):
            if y >= threshold:
                set_bonuses[index] = True
        for mosaic in mosaics_at(x, y):
            if is_valid(board, mosaic):
                mosaics.add(mosaic.key())
    return ScoreSnapshot(
        pixel_count=pixel_count,
        mosaics=frozenset(mosaics),
        set_bonuses=tuple(set_bonuses),
    )
