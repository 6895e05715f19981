"""The four constraint families of Sudoku as exact-cover columns."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class ConstraintType(Enum):
    """Kinds of requirement a completed board must satisfy exactly once."""
    ROW = "ROW"             # digit appears once in a row
    COLUMN = "COLUMN"       # digit appears once in a column
    SUBBOARD = "SUBBOARD"   # digit appears once in a sub-board
    CELL = "CELL"           # cell holds exactly one digit


@dataclass(frozen=True)
class Constraint:
    """
    One column of the exact-cover matrix.

    For ROW, COLUMN and SUBBOARD constraints ``a`` is the digit and ``b`` the
    index of the row, column or sub-board. For CELL constraints ``a`` is the
    row and ``b`` the column of the cell.
    """
    kind: ConstraintType
    a: int
    b: int

    @property
    def digit(self) -> int:
        """Digit this constraint is about. Not defined for CELL constraints."""
        if self.kind is ConstraintType.CELL:
            raise AttributeError("CELL constraints carry no digit")
        return self.a

    @property
    def index(self) -> int:
        """Row, column or sub-board index. Not defined for CELL constraints."""
        if self.kind is ConstraintType.CELL:
            raise AttributeError("CELL constraints carry no unit index")
        return self.b

    @property
    def cell(self) -> Tuple[int, int]:
        """(row, col) of a CELL constraint."""
        if self.kind is not ConstraintType.CELL:
            raise AttributeError(f"{self.kind.value} constraints carry no cell")
        return self.a, self.b

    def __str__(self) -> str:
        if self.kind is ConstraintType.CELL:
            return f"{self.kind.value}{self.a},{self.b}"
        return f"{self.a}{self.kind.value}{self.b}"


def sub_board_index(row: int, col: int, box_size: int) -> int:
    """Index (row-major, 0 to size-1) of the sub-board containing a cell."""
    return (row // box_size) * box_size + col // box_size


def iter_constraints(size: int) -> Iterator[Constraint]:
    """
    Yield every constraint of a size x size board in matrix column order.

    ROW, COLUMN and SUBBOARD constraints come first, each enumerated digit
    by digit and then by unit index; CELL constraints follow in row-major
    order. This order fixes the header ring and so the search tie-breaks.
    """
    for kind in (ConstraintType.ROW, ConstraintType.COLUMN, ConstraintType.SUBBOARD):
        for digit in range(1, size + 1):
            for index in range(size):
                yield Constraint(kind, digit, index)
    for row in range(size):
        for col in range(size):
            yield Constraint(ConstraintType.CELL, row, col)


def placement_constraints(
    row: int, col: int, digit: int, box_size: int
) -> Tuple[Constraint, Constraint, Constraint, Constraint]:
    """The four constraints satisfied by writing ``digit`` into (row, col)."""
    return (
        Constraint(ConstraintType.ROW, digit, row),
        Constraint(ConstraintType.COLUMN, digit, col),
        Constraint(ConstraintType.SUBBOARD, digit, sub_board_index(row, col, box_size)),
        Constraint(ConstraintType.CELL, row, col),
    )
