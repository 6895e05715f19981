"""Compile a Sudoku board into a dancing-links exact-cover matrix."""

from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from ..core.board import SudokuBoard, EMPTY
from .constraints import (
    Constraint,
    ConstraintType,
    iter_constraints,
    placement_constraints,
    sub_board_index,
)
from .links import DancingLinks

logger = logging.getLogger(__name__)


@dataclass
class ExactCoverMatrix:
    """The linked structure for one board plus bookkeeping about it."""
    links: DancingLinks
    headers: Dict[Constraint, int] = field(default_factory=dict)
    num_candidates: int = 0
    num_empty_cells: int = 0

    @property
    def num_headers(self) -> int:
        return len(self.headers)


def build_links(board: SudokuBoard) -> ExactCoverMatrix:
    """
    Build the exact cover matrix for the given Sudoku puzzle.

    Constraints already satisfied by a given (a row, column or sub-board
    that already holds the digit, or a filled cell) get no header at all.
    Every other constraint gets one header, appended in
    :func:`iter_constraints` order. Each legal placement of a digit in an
    empty cell then contributes four nodes, one under each of its ROW,
    COLUMN, SUBBOARD and CELL headers, linked into one horizontal ring in
    that order. Cells are visited row-major and digits ascending, so the
    node layout is identical for identical boards.

    A constraint that no placement can satisfy ends up with size 0; the
    search finds that out on its own.
    """
    size = board.size
    box_size = board.box_size
    grid = board.to_list()

    # Which digits each unit already holds
    in_row = [[False] * (size + 1) for _ in range(size)]
    in_col = [[False] * (size + 1) for _ in range(size)]
    in_box = [[False] * (size + 1) for _ in range(size)]
    empty_cells = 0
    for r in range(size):
        for c in range(size):
            d = grid[r][c]
            if d == EMPTY:
                empty_cells += 1
                continue
            in_row[r][d] = True
            in_col[c][d] = True
            in_box[sub_board_index(r, c, box_size)][d] = True

    def satisfied(constraint: Constraint) -> bool:
        kind = constraint.kind
        if kind is ConstraintType.ROW:
            return in_row[constraint.b][constraint.a]
        if kind is ConstraintType.COLUMN:
            return in_col[constraint.b][constraint.a]
        if kind is ConstraintType.SUBBOARD:
            return in_box[constraint.b][constraint.a]
        return grid[constraint.a][constraint.b] != EMPTY

    links = DancingLinks()
    matrix = ExactCoverMatrix(links=links, num_empty_cells=empty_cells)

    for constraint in iter_constraints(size):
        if not satisfied(constraint):
            matrix.headers[constraint] = links.add_header(constraint)

    for r in range(size):
        for c in range(size):
            if grid[r][c] != EMPTY:
                continue
            box = sub_board_index(r, c, box_size)
            for d in range(1, size + 1):
                if in_row[r][d] or in_col[c][d] or in_box[box][d]:
                    continue
                node = None
                for constraint in placement_constraints(r, c, d, box_size):
                    node = links.add_node(matrix.headers[constraint], left=node)
                matrix.num_candidates += 1

    logger.debug(
        "Built exact cover matrix for %dx%d board: %d headers, %d candidates, %d empty cells",
        size, size, matrix.num_headers, matrix.num_candidates, empty_cells,
    )
    return matrix
