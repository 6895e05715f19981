"""Generalized Sudoku solving by exact cover and dancing links."""

from .core import (
    SudokuBoard,
    EMPTY,
    DlxSudokuError,
    ConstructionError,
    CorruptStructureError,
    is_solved,
)
from .solvers import DLXSolver, BacktrackingSolver, SolverStats

__version__ = "1.0.0"


def solve(board: SudokuBoard) -> SudokuBoard:
    """
    Solve a puzzle with dancing links.

    Returns a new completed board, or ``board`` itself when no solution
    exists; check the result with :func:`is_solved`.
    """
    return DLXSolver().solve(board)


__all__ = [
    "SudokuBoard",
    "EMPTY",
    "DlxSudokuError",
    "ConstructionError",
    "CorruptStructureError",
    "is_solved",
    "solve",
    "DLXSolver",
    "BacktrackingSolver",
    "SolverStats",
]
