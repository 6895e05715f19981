"""Exact-cover formulation of Sudoku and the dancing-links search."""

from .constraints import (
    Constraint,
    ConstraintType,
    iter_constraints,
    placement_constraints,
    sub_board_index,
)
from .links import DancingLinks, LinkNode, ROOT
from .matrix import ExactCoverMatrix, build_links
from .search import AlgorithmX

__all__ = [
    "Constraint",
    "ConstraintType",
    "iter_constraints",
    "placement_constraints",
    "sub_board_index",
    "DancingLinks",
    "LinkNode",
    "ROOT",
    "ExactCoverMatrix",
    "build_links",
    "AlgorithmX",
]
