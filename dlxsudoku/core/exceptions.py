"""Exception types raised by the Sudoku engine."""


class DlxSudokuError(Exception):
    """Base class for all errors raised by this package."""


class ConstructionError(DlxSudokuError, ValueError):
    """
    Raised when a board cannot be built.

    Covers dimensions that are not a perfect square, non-square grids,
    entries outside 0..size and unparseable puzzle text.
    """


class CorruptStructureError(DlxSudokuError, RuntimeError):
    """
    Raised when the dancing-links structure is found in an impossible state.

    This is a programming error (cover and uncover applied out of order),
    never a property of the puzzle being solved.
    """
