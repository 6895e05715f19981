"""Dancing Links (DLX) solver using Knuth's Algorithm X for Exact Cover."""

from __future__ import annotations
import logging
import time
from typing import Optional, Sequence

from ..core.board import SudokuBoard
from ..exact_cover.constraints import ConstraintType
from ..exact_cover.links import DancingLinks
from ..exact_cover.matrix import build_links
from ..exact_cover.search import AlgorithmX
from .base_solver import SolverStats

logger = logging.getLogger(__name__)


def decode_solution(
    links: DancingLinks, nodes: Sequence[int], board: SudokuBoard
) -> SudokuBoard:
    """
    Decode chosen candidate nodes back into a completed board.

    Each node's horizontal ring holds the node under the placement's CELL
    header, giving (row, col), and nodes under its ROW, COLUMN and SUBBOARD
    headers, any of which gives the digit. Given cells are copied unchanged.

    Raises:
        ConstructionError: If the completed grid is not a valid board.
    """
    grid = board.to_list()
    column, right, constraint = links.column, links.right, links.constraint

    for node in nodes:
        cur = node
        while constraint[column[cur]].kind is not ConstraintType.CELL:
            cur = right[cur]
        row, col = constraint[column[cur]].cell
        # The ring is ROW, COLUMN, SUBBOARD, CELL, so the next node carries a digit
        cur = right[cur]
        grid[row][col] = constraint[column[cur]].digit

    return SudokuBoard.from_2d_list(grid)


class DLXSolver:
    """
    Dancing Links solver using Knuth's Algorithm X for Exact Cover.

    Sudoku can be formulated as an exact cover problem. For an n x n board:
    - Each row must have each digit exactly once (n*n constraints)
    - Each column must have each digit exactly once (n*n constraints)
    - Each sub-board must have each digit exactly once (n*n constraints)
    - Each cell must have exactly one value (n*n constraints)

    Constraints already met by the givens are left out of the matrix, as
    are placements the givens rule out.
    """

    name = "Dancing Links (DLX)"

    def __init__(self, max_iterations: Optional[int] = None):
        """
        Initialize the DLX solver.

        Args:
            max_iterations: Stop searching after this many steps and treat the
                            puzzle as unsolved. None searches exhaustively.
        """
        self.max_iterations = max_iterations
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, board: SudokuBoard) -> SudokuBoard:
        """
        Solve using Dancing Links.

        Returns:
            A new solved board, or ``board`` itself if it has no solution.
        """
        self.stats = SolverStats(algorithm=self.name)
        start_time = time.perf_counter()

        matrix = build_links(board)
        search = AlgorithmX(matrix.links, max_iterations=self.max_iterations)
        found = search.search()

        self.stats.iterations = search.iterations
        self.stats.nodes_explored = search.nodes_explored
        self.stats.backtracks = search.backtracks
        self.stats.extra["headers"] = matrix.num_headers
        self.stats.extra["candidates"] = matrix.num_candidates
        if search.aborted:
            self.stats.extra["aborted"] = True

        if found:
            result = decode_solution(matrix.links, search.solution, board)
            self.stats.solved = result.is_solved()
        else:
            logger.debug("DLX found no solution for %r", board)
            result = board

        self.stats.time_seconds = time.perf_counter() - start_time
        return result
