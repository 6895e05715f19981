"""Checks applied to solver results."""

from __future__ import annotations
import numpy as np

from .board import SudokuBoard, EMPTY


def is_solved(board: SudokuBoard) -> bool:
    """
    Check whether a board is complete and breaks no Sudoku rule.

    Solvers report an unsolvable puzzle by handing the input back, so this
    is the check callers use on a solver's result.
    """
    return board.is_solved()


def validate_solution(puzzle: SudokuBoard, solution: SudokuBoard) -> bool:
    """
    Check that ``solution`` is a solved completion of ``puzzle``.

    Args:
        puzzle: The board the solver was given.
        solution: The board it returned.

    Returns:
        True if the sizes match, every given of ``puzzle`` is kept and
        ``solution`` is solved.
    """
    if puzzle.size != solution.size:
        return False
    givens = puzzle.grid != EMPTY
    if not np.array_equal(puzzle.grid[givens], solution.grid[givens]):
        return False
    return solution.is_solved()
