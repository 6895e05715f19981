"""Solver interface and common utilities."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, Protocol, Tuple
import time
import tracemalloc

from ..core.board import SudokuBoard


@dataclass
class SolverStats:
    """Statistics from a solver run."""
    # Core metrics
    solved: bool = False
    time_seconds: float = 0.0
    memory_bytes: int = 0
    iterations: int = 0

    # Algorithm-specific metrics
    backtracks: int = 0
    nodes_explored: int = 0

    # Additional metadata
    algorithm: str = ""
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert stats to dictionary."""
        return {
            "solved": self.solved,
            "time_seconds": self.time_seconds,
            "memory_bytes": self.memory_bytes,
            "iterations": self.iterations,
            "backtracks": self.backtracks,
            "nodes_explored": self.nodes_explored,
            "algorithm": self.algorithm,
            **self.extra
        }


class SudokuSolver(Protocol):
    """
    Anything that can complete a Sudoku board.

    ``solve`` never modifies its argument. It returns a new, solved board,
    or the argument itself when the puzzle has no solution. ``stats``
    describes the most recent call.
    """

    name: str
    stats: SolverStats

    def solve(self, board: SudokuBoard) -> SudokuBoard:
        ...


def timed_solve(solver: SudokuSolver, board: SudokuBoard) -> Tuple[SudokuBoard, SolverStats]:
    """
    Solve a Sudoku puzzle with timing and memory tracking.

    Args:
        solver: The solver to run.
        board: The puzzle to solve.

    Returns:
        Tuple of (result board, stats). The stats object is the solver's own,
        with time and peak memory filled in.
    """
    # Start memory tracking
    tracemalloc.start()

    # Start timing
    start_time = time.perf_counter()

    try:
        solution = solver.solve(board)
    finally:
        # End timing
        elapsed = time.perf_counter() - start_time

        # Get memory usage
        current, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

    stats = solver.stats
    stats.time_seconds = elapsed
    stats.memory_bytes = peak
    return solution, stats
