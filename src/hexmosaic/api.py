"""Plain-function entry points for driving the solver without the ECS layer."""
from __future__ import annotations

from typing import Dict, Tuple

from hexmosaic.ai.advisor import PixelSuggestion, suggest_next_pixel
from hexmosaic.ai.solver import solve_board, solve_step
from hexmosaic.components.board import CapacityExceededError, HexBoard
from hexmosaic.components.pixel import PixelColor
from hexmosaic.systems.scoring import ScoreSnapshot, compute_score

__all__ = [
    "PixelSuggestion",
    "ScoreSnapshot",
    "clear_board",
    "compute_score",
    "pixel_counts",
    "set_cell",
    "solve",
    "step",
    "suggest_next_pixel",
]


def set_cell(board: HexBoard, x: int, y: int, color: PixelColor) -> bool:
    """Write a single cell. Returns False (board untouched) if the color is used up."""
    if not HexBoard.in_bounds(x, y):
        raise IndexError(f"Cell ({x}, {y}) is outside the board")
    try:
        board.set(x, y, color)
    except CapacityExceededError:
        return False
    return True


def clear_board(board: HexBoard) -> None:
    board.clear()


def step(board: HexBoard, height_penalty: float) -> bool:
    return solve_step(board, height_penalty)


def solve(board: HexBoard, height_penalty: float) -> None:
    solve_board(board, height_penalty)


def pixel_counts(board: HexBoard) -> Dict[PixelColor, Tuple[int, int]]:
    """Map each paintable color to (current count, capacity)."""
    return {
        pixel: (board.count(pixel), HexBoard.capacity(pixel))
        for pixel in PixelColor
        if pixel != PixelColor.EMPTY
    }
