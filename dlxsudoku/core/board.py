"""Sudoku board representation with support for variable sizes."""

from __future__ import annotations
import numpy as np
from typing import Iterable, List, Optional, Sequence, Tuple

from .exceptions import ConstructionError

EMPTY = 0

# Symbols for digits 1 and up in the compact string form
DIGIT_SYMBOLS = "123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SYMBOL_VALUES = {symbol: value for value, symbol in enumerate(DIGIT_SYMBOLS, 1)}


class SudokuBoard:
    """
    Immutable snapshot of an m² x m² Sudoku board.

    Standard Sudoku is 9x9 with 3x3 boxes, but any perfect square size is
    accepted: 4x4 (2x2 boxes), 16x16 (4x4 boxes), 25x25 (5x5 boxes), ...
    Empty cells hold 0. The grid is stored read-only; solvers return a new
    board instead of editing one in place.
    """

    def __init__(self, size: int = 9, grid: Optional[np.ndarray] = None):
        """
        Initialize a Sudoku board.

        Args:
            size: Board size. Must be a non-negative perfect square.
            grid: Optional initial grid of shape (size, size). If None,
                  creates an empty board.

        Raises:
            ConstructionError: If the size is not a perfect square, the grid
                               has the wrong shape or an entry is outside
                               0..size.
        """
        if size < 0:
            raise ConstructionError(f"Size must be non-negative, got {size}")

        # Validate size is a perfect square
        box_size = int(round(np.sqrt(size)))
        if box_size * box_size != size:
            raise ConstructionError(f"Size must be a perfect square, got {size}")

        self.size = size
        self.box_size = box_size

        if grid is not None:
            arr = np.asarray(grid)
            if arr.shape != (size, size):
                raise ConstructionError(
                    f"Grid shape must be ({size}, {size}), got {arr.shape}"
                )
            if arr.size and not np.issubdtype(arr.dtype, np.integer):
                raise ConstructionError(f"Grid entries must be integers, got {arr.dtype}")
            if np.any((arr < EMPTY) | (arr > size)):
                raise ConstructionError(f"Grid entries must be in 0-{size}")
            self.grid = arr.astype(np.int32)
        else:
            self.grid = np.zeros((size, size), dtype=np.int32)

        self.grid.setflags(write=False)

    @classmethod
    def empty(cls, size: int = 9) -> SudokuBoard:
        """Create a board with every cell empty."""
        return cls(size)

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.grid[row, col])

    def is_empty(self, row: int, col: int) -> bool:
        """Check if cell is empty (value is 0)."""
        return self.grid[row, col] == EMPTY

    def get_row(self, row: int) -> np.ndarray:
        """Get all values in a row."""
        return self.grid[row, :]

    def get_col(self, col: int) -> np.ndarray:
        """Get all values in a column."""
        return self.grid[:, col]

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row = (row // self.box_size) * self.box_size
        box_col = (col // self.box_size) * self.box_size
        return self.grid[box_row:box_row + self.box_size,
                         box_col:box_col + self.box_size].flatten()

    def get_box_index(self, row: int, col: int) -> int:
        """Get the box index (0 to size-1) for a cell."""
        return (row // self.box_size) * self.box_size + (col // self.box_size)

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """Get list of all empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.grid == EMPTY)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def count_empty(self) -> int:
        """Count the number of empty cells."""
        return int(np.sum(self.grid == EMPTY))

    def count_filled(self) -> int:
        """Count the number of filled cells."""
        return int(np.sum(self.grid != EMPTY))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def is_valid(self) -> bool:
        """
        Check if the current board state is valid.
        Does not check if solution is complete, only if no conflicts exist.
        """
        if self.size == 0:
            return True

        # Check all rows
        for i in range(self.size):
            row = self.get_row(i)
            non_zero = row[row != EMPTY]
            if len(non_zero) != len(set(non_zero)):
                return False

        # Check all columns
        for j in range(self.size):
            col = self.get_col(j)
            non_zero = col[col != EMPTY]
            if len(non_zero) != len(set(non_zero)):
                return False

        # Check all boxes
        for box_row in range(0, self.size, self.box_size):
            for box_col in range(0, self.size, self.box_size):
                box = self.get_box(box_row, box_col)
                non_zero = box[box != EMPTY]
                if len(non_zero) != len(set(non_zero)):
                    return False

        return True

    def is_solved(self) -> bool:
        """Check if the puzzle is completely and correctly solved."""
        return self.is_complete() and self.is_valid()

    def to_list(self) -> List[List[int]]:
        """Return the grid as a fresh nested list, safe to modify."""
        return self.grid.tolist()

    def to_string(self) -> str:
        """
        Convert board to a compact string representation.
        Uses 0 for empty cells, 1-9 for standard, A-Z for 10-35.

        Raises:
            ConstructionError: If the board is larger than 35x35, whose
                               digits have no single-character symbol.
        """
        if self.size > len(DIGIT_SYMBOLS):
            raise ConstructionError(
                f"Compact strings hold boards up to {len(DIGIT_SYMBOLS)}x{len(DIGIT_SYMBOLS)}, "
                f"got {self.size}x{self.size}"
            )
        return ''.join(
            '0' if val == EMPTY else DIGIT_SYMBOLS[val - 1] for val in self.grid.flatten()
        )

    def format(self, unknown_char: str = ".", delimiter: str = " ") -> str:
        """
        Render the board one row per line.

        Args:
            unknown_char: Text shown for an empty cell.
            delimiter: Text placed between cells of the same row.
        """
        lines = []
        for row in self.grid:
            lines.append(delimiter.join(
                unknown_char if val == EMPTY else str(val) for val in row
            ))
        return '\n'.join(lines)

    @classmethod
    def from_string(cls, s: str, size: Optional[int] = None) -> SudokuBoard:
        """
        Create a board from a string representation.

        Args:
            s: String of length size*size with values.
               0 or . for empty, 1-9 for values, A-Z (either case) for 10-35.
            size: Board size. Inferred from the string length when omitted.
        """
        if size is None:
            size = int(round(np.sqrt(len(s))))
        if len(s) != size * size:
            raise ConstructionError(f"String length must be {size*size}, got {len(s)}")

        grid = np.zeros((size, size), dtype=np.int32)
        for idx, c in enumerate(s):
            if c == '0' or c == '.':
                value = EMPTY
            elif c.upper() in SYMBOL_VALUES:
                value = SYMBOL_VALUES[c.upper()]
            else:
                raise ConstructionError(f"Unrecognized symbol {c!r} at position {idx}")
            grid[idx // size, idx % size] = value

        return cls(size, grid)

    @classmethod
    def from_2d_list(cls, data: Sequence[Sequence[int]]) -> SudokuBoard:
        """Create a board from a 2D list."""
        size = len(data)
        for i, row in enumerate(data):
            if len(row) != size:
                raise ConstructionError(
                    f"Board not square: row {i} has {len(row)} entries, expected {size}"
                )
            for value in row:
                if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                    raise ConstructionError(f"Board entries must be integers, got {value!r}")
        arr = np.array(data, dtype=np.int64).reshape(size, size)
        return cls(size, arr)

    @classmethod
    def from_alphabet_lines(cls, lines: Iterable[str]) -> SudokuBoard:
        """
        Create a board from the alphabet text format.

        The first line is the alphabet: its first character marks an unknown
        cell and the next n characters stand for digits 1..n. The next n
        lines hold the board, one character per cell.
        """
        lines = [line.rstrip('\r\n') for line in lines]
        while lines and not lines[-1]:
            lines.pop()
        if not lines:
            raise ConstructionError("Missing alphabet line.")

        symbols = lines[0]
        if not symbols:
            raise ConstructionError("Alphabet line is empty.")
        if len(set(symbols)) != len(symbols):
            raise ConstructionError("Alphabet repeats a symbol.")
        lookup = {symbol: value for value, symbol in enumerate(symbols)}
        num_symbols = len(symbols) - 1

        board_lines = lines[1:]
        width = len(board_lines[0]) if board_lines else 0
        if width < num_symbols:
            raise ConstructionError("Board rows are shorter than the alphabet.")
        if width > num_symbols:
            raise ConstructionError("Board rows are longer than the alphabet.")
        for line in board_lines:
            if len(line) != width:
                raise ConstructionError("Board not rectangular.")
        if len(board_lines) != width:
            raise ConstructionError("Board not square.")

        data = []
        for i, line in enumerate(board_lines):
            row = []
            for j, symbol in enumerate(line):
                if symbol not in lookup:
                    raise ConstructionError(f"Unrecognized symbol {symbol!r} at ({i}, {j}).")
                row.append(lookup[symbol])
            data.append(row)

        return cls.from_2d_list(data)

    @classmethod
    def from_file(cls, path: str) -> SudokuBoard:
        """Create a board from a file in the alphabet text format."""
        try:
            with open(path, "r") as f:
                lines = f.readlines()
        except OSError as e:
            raise ConstructionError(f"Error reading {path}: {e}") from e
        return cls.from_alphabet_lines(lines)

    def __str__(self) -> str:
        """Pretty-print the board."""
        lines = []
        horizontal_sep = '+' + (('-' * (self.box_size * 2 + 1)) + '+') * self.box_size

        for i in range(self.size):
            if i % self.box_size == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for j in range(self.size):
                val = self.grid[i, j]
                if val == EMPTY:
                    row_str += ' .'
                elif val <= len(DIGIT_SYMBOLS):
                    row_str += f" {DIGIT_SYMBOLS[val - 1]}"
                else:
                    row_str += f" {val}"

                if (j + 1) % self.box_size == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"SudokuBoard(size={self.size}, filled={self.count_filled()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SudokuBoard):
            return False
        return self.size == other.size and np.array_equal(self.grid, other.grid)

    def __hash__(self) -> int:
        return hash(self.to_string())
