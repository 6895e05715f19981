"""Core module for Sudoku board representation and validation."""

from .board import SudokuBoard, EMPTY
from .exceptions import DlxSudokuError, ConstructionError, CorruptStructureError
from .validator import is_solved, validate_solution

__all__ = [
    "SudokuBoard",
    "EMPTY",
    "DlxSudokuError",
    "ConstructionError",
    "CorruptStructureError",
    "is_solved",
    "validate_solution",
]
