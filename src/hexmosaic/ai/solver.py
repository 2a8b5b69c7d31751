"""Greedy mosaic solver.

Each step commits the legal placement that forces the fewest new white pixels,
optionally biased toward lower rows. Once nothing more fits, the remaining empty
cells are painted white while the white supply lasts.
"""
from __future__ import annotations

import logging
import math
from enum import Enum, auto
from typing import Optional, Tuple

from hexmosaic.components.board import HexBoard
from hexmosaic.components.mosaic import Mosaic
from hexmosaic.components.pixel import PixelColor
from hexmosaic.constants import SOLVER_MAX_STEPS
from hexmosaic.systems.mosaic_ops import (
    empty_neighbour_count,
    find_all_mosaic_placements,
    place_mosaic,
)

logger = logging.getLogger(__name__)


class SolverState(Enum):
    SEARCHING = auto()
    DONE = auto()


def placement_cost(board: HexBoard, mosaic: Mosaic, height_penalty: float) -> float:
    return empty_neighbour_count(board, mosaic) + height_penalty * mosaic.y


def choose_best_placement(board: HexBoard, height_penalty: float) -> Optional[Mosaic]:
    """Return the cheapest legal placement; the first one scanned wins ties."""
    best: Optional[Mosaic] = None
    best_cost = math.inf
    for mosaic in find_all_mosaic_placements(board):
        cost = placement_cost(board, mosaic, height_penalty)
        if cost < best_cost:
            best = mosaic
            best_cost = cost
    return best


def fill_remaining_white(board: HexBoard) -> int:
    """Paint empty cells white, bottom row first, until white runs out. Returns cells painted."""
    painted = 0
    for x, y in HexBoard.iter_cells():
        if board.get(x, y) != PixelColor.EMPTY:
            continue
        if board.is_at_capacity(PixelColor.WHITE):
            break
        board.set(x, y, PixelColor.WHITE)
        painted += 1
    return painted


def solve_step(board: HexBoard, height_penalty: float) -> bool:
    """Run one solver step on ``board`` in place. Returns True while more steps remain."""
    mosaic = choose_best_placement(board, height_penalty)
    if mosaic is not None:
        place_mosaic(board, mosaic)
        return True
    fill_remaining_white(board)
    return False


def solve_board(board: HexBoard, height_penalty: float) -> Tuple[int, SolverState]:
    """Step until the board is solved or SOLVER_MAX_STEPS is reached.

    Returns the number of steps taken and the final state. Reaching the step limit
    is logged rather than raised; the board keeps whatever was placed.
    """
    for step in range(1, SOLVER_MAX_STEPS + 1):
        if not solve_step(board, height_penalty):
            return step, SolverState.DONE
    logger.warning("Solver hard limit reached after %d steps", SOLVER_MAX_STEPS)
    return SOLVER_MAX_STEPS, SolverState.SEARCHING
