"""Naive backtracking solver, used as a baseline and correctness oracle."""

from __future__ import annotations
import logging
import time
from typing import List, Optional

from ..core.board import SudokuBoard, EMPTY
from .base_solver import SolverStats

logger = logging.getLogger(__name__)


class _IterationLimitReached(Exception):
    """Unwinds the recursion once the iteration budget is spent."""


class BacktrackingSolver:
    """
    Cell-by-cell recursive backtracking.

    Empty cells are filled in row-major order, trying every digit not
    already used in the cell's row, column or sub-board in ascending order.
    No constraint structure is maintained beyond those checks, so the first
    completion found is the lexicographically smallest one.
    """

    name = "Backtracking"

    def __init__(self, max_iterations: Optional[int] = None):
        """
        Initialize the backtracking solver.

        Args:
            max_iterations: Stop after this many recursive calls and treat the
                            puzzle as unsolved. None searches exhaustively.
        """
        self.max_iterations = max_iterations
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> SudokuBoard:
        """
        Solve using recursive backtracking.

        Returns:
            A new solved board, or ``board`` itself if it has no solution.
        """
        self.stats = SolverStats(algorithm=self.name)
        start_time = time.perf_counter()

        result = board
        # Givens that already clash can never be completed
        if board.is_valid():
            grid = board.to_list()
            try:
                found = self._recurse(grid, board.box_size, 0, 0)
            except _IterationLimitReached:
                self.stats.extra["aborted"] = True
                logger.debug("Backtracking aborted after %d iterations", self.max_iterations)
                found = False
            if found:
                result = SudokuBoard.from_2d_list(grid)
                self.stats.solved = result.is_solved()
        else:
            logger.debug("Givens conflict, not searching %r", board)

        self.stats.time_seconds = time.perf_counter() - start_time
        return result

    @staticmethod
    def _candidates(grid: List[List[int]], box_size: int, i: int, j: int) -> List[int]:
        """Digits, ascending, that can go in (i, j) without an immediate clash."""
        n = len(grid)
        used = [False] * (n + 1)
        for e in range(n):
            used[grid[i][e]] = True
            used[grid[e][j]] = True
        y = i - i % box_size
        x = j - j % box_size
        for di in range(box_size):
            for dj in range(box_size):
                used[grid[y + di][x + dj]] = True
        return [d for d in range(1, n + 1) if not used[d]]

    def _recurse(self, grid: List[List[int]], box_size: int, i: int, j: int) -> bool:
        """
        Fill the grid from (i, j) onward.

        On success the grid holds the completion. On failure every cell this
        call filled has been reset to empty.
        """
        self.stats.iterations += 1
        if self.max_iterations is not None and self.stats.iterations > self.max_iterations:
            raise _IterationLimitReached()

        n = len(grid)
        # Advance to the next empty cell
        while i < n and grid[i][j] != EMPTY:
            j += 1
            if j >= n:
                j = 0
                i += 1
        if i >= n:
            return True

        next_i, next_j = (i, j + 1) if j + 1 < n else (i + 1, 0)
        for digit in self._candidates(grid, box_size, i, j):
            self.stats.nodes_explored += 1
            grid[i][j] = digit
            if self._recurse(grid, box_size, next_i, next_j):
                return True

        grid[i][j] = EMPTY
        self.stats.backtracks += 1
        return False
