from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from hexmosaic.ai.solver import solve_board
from hexmosaic.components.board import HexBoard
from hexmosaic.components.pixel import PixelColor, is_hue
from hexmosaic.constants import (
    COMPLETE_MOSAIC_BONUS,
    COMPLETE_SET_BONUS,
    START_MOSAIC_BONUS,
    WRONG_COLOR_PENALTY,
)
from hexmosaic.systems.mosaic_ops import is_supported
from hexmosaic.systems.scoring import ScoreSnapshot, compute_score

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PixelSuggestion:
    x: int
    y: int
    color: PixelColor


def _score_candidate(
    scratch: HexBoard,
    baseline: ScoreSnapshot,
    x: int,
    y: int,
    projected: PixelColor,
    color_filter: Optional[PixelColor],
) -> int:
    score = 0
    if color_filter is not None and projected != color_filter:
        score -= WRONG_COLOR_PENALTY
    if is_hue(projected):
        score += START_MOSAIC_BONUS
    scratch.set(x, y, projected)
    after = compute_score(scratch)
    scratch.set(x, y, PixelColor.EMPTY)
    if after.mosaic_count > baseline.mosaic_count:
        score += COMPLETE_MOSAIC_BONUS
    if after.set_bonus > baseline.set_bonus:
        score += COMPLETE_SET_BONUS
    return score


def suggest_next_pixel(
    board: HexBoard,
    height_penalty: float,
    color_filter: Optional[PixelColor] = None,
) -> Optional[PixelSuggestion]:
    """Recommend the single most useful cell to fill next.

    The board is solved on a copy; every empty, supported cell that the projection
    fills is a candidate. Candidates gain points for starting or completing a mosaic
    and for reaching a new set bonus, and lose heavily when the projected color
    differs from ``color_filter``. The first candidate scanned wins ties.
    """
    baseline = compute_score(board)
    scratch = board.clone()
    solved = board.clone()
    solve_board(solved, height_penalty)

    best: Optional[PixelSuggestion] = None
    best_score = -math.inf
    for x, y in HexBoard.iter_cells():
        if board.get(x, y) != PixelColor.EMPTY:
            continue
        projected = solved.get(x, y)
        if projected == PixelColor.EMPTY:
            continue
        if not is_supported(board, x, y):
            continue
        if board.is_at_capacity(projected):
            continue
        score = _score_candidate(scratch, baseline, x, y, projected, color_filter)
        if score > best_score:
            best = PixelSuggestion(x, y, color_filter if color_filter is not None else projected)
            best_score = score
    if best is not None:
        logger.debug("Next pixel %s at (%d, %d) scored %s", best.color.name, best.x, best.y, best_score)
    return best


def place_next_best_pixel(
    board: HexBoard,
    height_penalty: float,
    color_filter: Optional[PixelColor] = None,
) -> Optional[PixelSuggestion]:
    """Apply ``suggest_next_pixel`` to ``board``; returns the applied suggestion, if any."""
    suggestion = suggest_next_pixel(board, height_penalty, color_filter)
    if suggestion is None or board.is_at_capacity(suggestion.color):
        return None
    board.set(suggestion.x, suggestion.y, suggestion.color)
    return suggestion
