"""Solvers module for Sudoku puzzles."""

from .base_solver import SudokuSolver, SolverStats, timed_solve
from .dlx_solver import DLXSolver, decode_solution
from .backtracking_solver import BacktrackingSolver

__all__ = [
    "SudokuSolver",
    "SolverStats",
    "timed_solve",
    "DLXSolver",
    "decode_solution",
    "BacktrackingSolver",
]
