"""Unit tests for Sudoku board and validation."""

import pytest
import numpy as np
from dlxsudoku.core.board import SudokuBoard
from dlxsudoku.core.exceptions import ConstructionError
from dlxsudoku.core.validator import is_solved, validate_solution


SOLVED_4X4 = [
    [1, 2, 3, 4],
    [3, 4, 1, 2],
    [2, 1, 4, 3],
    [4, 3, 2, 1],
]


class TestSudokuBoard:
    """Tests for SudokuBoard class."""

    def test_create_empty_board(self):
        """Test creating an empty 9x9 board."""
        board = SudokuBoard()
        assert board.size == 9
        assert board.box_size == 3
        assert board.count_empty() == 81
        assert board.count_filled() == 0

    def test_create_16x16_board(self):
        """Test creating a 16x16 board."""
        board = SudokuBoard.empty(16)
        assert board.size == 16
        assert board.box_size == 4

    def test_get_and_is_empty(self):
        """Test reading values."""
        board = SudokuBoard.from_2d_list([[1, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        assert board.get(0, 0) == 1
        assert not board.is_empty(0, 0)
        assert board.is_empty(0, 1)

    def test_grid_is_read_only(self):
        """Boards are snapshots and cannot be edited in place."""
        board = SudokuBoard()
        with pytest.raises(ValueError):
            board.grid[0, 0] = 5

    def test_to_list_is_a_copy(self):
        """Editing the list form leaves the board alone."""
        board = SudokuBoard.from_2d_list(SOLVED_4X4)
        data = board.to_list()
        data[0][0] = 0
        assert board.get(0, 0) == 1

    def test_get_empty_cells_row_major(self):
        """Empty cells are listed row by row."""
        board = SudokuBoard.from_2d_list([[1, 0, 3, 4], [3, 4, 1, 2], [0, 1, 4, 3], [4, 3, 2, 0]])
        assert board.get_empty_cells() == [(0, 1), (2, 0), (3, 3)]

    def test_get_box_index(self):
        """Sub-boards are numbered row-major."""
        board = SudokuBoard()
        assert board.get_box_index(0, 0) == 0
        assert board.get_box_index(4, 7) == 5
        assert board.get_box_index(8, 2) == 6

    def test_is_valid(self):
        """Test board validation."""
        assert SudokuBoard().is_valid()  # Empty board is valid

        board = SudokuBoard.from_2d_list([[1, 1, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        assert not board.is_valid()  # Duplicate in row

    def test_is_solved(self):
        """A complete board without clashes is solved."""
        assert SudokuBoard.from_2d_list(SOLVED_4X4).is_solved()
        assert not SudokuBoard.empty(4).is_solved()

    def test_from_string(self):
        """Test creating board from string."""
        puzzle_str = "0" * 80 + "9"  # 80 zeros and a 9 at the end
        board = SudokuBoard.from_string(puzzle_str)
        assert board.size == 9
        assert board.get(8, 8) == 9

    def test_from_string_letters(self):
        """Digits above 9 are written as letters."""
        board = SudokuBoard.from_string("G" + "." * 255)
        assert board.size == 16
        assert board.get(0, 0) == 16
        assert board.to_string()[0] == "G"

    def test_from_string_rejects_unknown_symbol(self):
        """Punctuation other than '.' is not a cell value."""
        with pytest.raises(ConstructionError):
            SudokuBoard.from_string("?" + "0" * 80)

    def test_from_string_rejects_bad_length(self):
        """String length must be a square of a perfect square."""
        with pytest.raises(ConstructionError):
            SudokuBoard.from_string("123")

    def test_to_string(self):
        """Test converting board to string."""
        board = SudokuBoard.from_2d_list(SOLVED_4X4)
        assert board.to_string() == "1234341221434321"

    def test_format(self):
        """Rows on separate lines, no trailing newline."""
        board = SudokuBoard.from_2d_list([[1, 0, 0, 0], [0] * 4, [0] * 4, [0, 0, 0, 4]])
        assert board.format() == "1 . . .\n. . . .\n. . . .\n. . . 4"
        assert board.format(unknown_char="_", delimiter="") == "1___\n____\n____\n___4"

    def test_str_draws_boxes(self):
        """The pretty form separates sub-boards."""
        text = str(SudokuBoard.from_2d_list(SOLVED_4X4))
        lines = text.split("\n")
        assert lines[0] == "+-----+-----+"
        assert lines[1] == "| 1 2 | 3 4 |"

    def test_size_zero_board(self):
        """The 0x0 board is trivially valid and solved."""
        board = SudokuBoard.empty(0)
        assert board.box_size == 0
        assert board.is_valid()
        assert board.is_solved()
        assert board.to_string() == ""

    def test_string_letters_up_to_35(self):
        """Digits 10-35 are written A-Z and read back."""
        full = [
            [(5 * (r % 5) + r // 5 + c) % 25 + 1 for c in range(25)]
            for r in range(25)
        ]
        board = SudokuBoard.from_2d_list(full)
        text = board.to_string()
        assert "P" in text
        assert SudokuBoard.from_string(text) == board
        assert SudokuBoard.from_string(text.lower()) == board

    def test_string_rejects_boards_above_35(self):
        """A 36x36 board has digits with no single-character symbol."""
        board = SudokuBoard.empty(36)
        with pytest.raises(ConstructionError):
            board.to_string()

        grid = [[0] * 36 for _ in range(36)]
        grid[0][0] = 36
        assert "| 36 " in str(SudokuBoard.from_2d_list(grid))

    def test_equality_and_hash(self):
        """Boards compare by contents."""
        a = SudokuBoard.from_2d_list(SOLVED_4X4)
        b = SudokuBoard.from_string("1234341221434321")
        assert a == b
        assert hash(a) == hash(b)
        assert a != SudokuBoard.empty(4)


class TestConstruction:
    """Tests for construction-time validation."""

    def test_size_not_perfect_square(self):
        """Sizes must be perfect squares."""
        with pytest.raises(ConstructionError):
            SudokuBoard(8)

    def test_construction_error_is_value_error(self):
        """Callers catching ValueError still see construction failures."""
        with pytest.raises(ValueError):
            SudokuBoard(10)

    def test_negative_size(self):
        with pytest.raises(ConstructionError):
            SudokuBoard(-4)

    def test_wrong_grid_shape(self):
        """Grid shape must match the size."""
        with pytest.raises(ConstructionError):
            SudokuBoard(4, np.zeros((9, 9), dtype=np.int32))

    def test_ragged_rows(self):
        """Every row needs as many entries as there are rows."""
        with pytest.raises(ConstructionError):
            SudokuBoard.from_2d_list([[1, 2, 3, 4], [3, 4, 1], [0] * 4, [0] * 4])

    def test_entry_above_size(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_2d_list([[5, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])

    def test_negative_entry(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_2d_list([[-1, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])

    def test_non_integer_entry(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_2d_list([[1.5, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])

    def test_duplicates_are_not_a_construction_error(self):
        """Clashing givens make a board unsolvable, not malformed."""
        board = SudokuBoard.from_2d_list([[1, 1, 0, 0], [0] * 4, [0] * 4, [0] * 4])
        assert board.get(0, 1) == 1


class TestAlphabetFormat:
    """Tests for the alphabet-line text format."""

    def test_parse(self):
        """The first alphabet symbol marks unknown cells."""
        board = SudokuBoard.from_alphabet_lines([".1234\n", "12..\n", "34..\n", "....\n", "....\n"])
        assert board.to_list() == [[1, 2, 0, 0], [3, 4, 0, 0], [0] * 4, [0] * 4]

    def test_custom_alphabet(self):
        """Any symbols can stand for the digits."""
        board = SudokuBoard.from_alphabet_lines(["-abcd", "abcd", "cdab", "badc", "dc-a"])
        assert board.get(0, 0) == 1
        assert board.get(2, 1) == 1
        assert board.is_empty(3, 2)
        assert board.get(3, 3) == 1

    def test_rows_too_short(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_alphabet_lines([".1234", "12.", "34.", "...", "..."])

    def test_rows_too_long(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_alphabet_lines([".1234", "12...", "34...", ".....", "....."])

    def test_ragged_rows(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_alphabet_lines([".1234", "12..", "34.", "....", "...."])

    def test_too_many_rows(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_alphabet_lines([".1234", "12..", "34..", "....", "....", "...."])

    def test_unknown_symbol(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_alphabet_lines([".1234", "12x.", "34..", "....", "...."])

    def test_missing_alphabet(self):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_alphabet_lines([])

    def test_from_file(self, tmp_path):
        """Files are read in the same format."""
        path = tmp_path / "puzzle.txt"
        path.write_text(".1234\n12..\n34..\n....\n....\n")
        board = SudokuBoard.from_file(str(path))
        assert board.get(1, 1) == 4

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConstructionError):
            SudokuBoard.from_file(str(tmp_path / "nope.txt"))


class TestValidator:
    """Tests for validation utilities."""

    def test_is_solved(self):
        assert is_solved(SudokuBoard.from_2d_list(SOLVED_4X4))
        assert not is_solved(SudokuBoard.empty(4))

    def test_validate_solution(self):
        """A solution must keep the givens and be solved."""
        puzzle = SudokuBoard.from_2d_list([[1, 2, 0, 0], [3, 4, 0, 0], [0] * 4, [0] * 4])
        assert validate_solution(puzzle, SudokuBoard.from_2d_list(SOLVED_4X4))

        other = SudokuBoard.from_2d_list([[2, 1, 4, 3], [4, 3, 2, 1], [1, 2, 3, 4], [3, 4, 1, 2]])
        assert other.is_solved()
        assert not validate_solution(puzzle, other)

    def test_validate_solution_size_mismatch(self):
        puzzle = SudokuBoard.empty(9)
        assert not validate_solution(puzzle, SudokuBoard.from_2d_list(SOLVED_4X4))

    def test_validate_solution_incomplete(self):
        puzzle = SudokuBoard.from_2d_list([[1, 2, 0, 0], [3, 4, 0, 0], [0] * 4, [0] * 4])
        assert not validate_solution(puzzle, puzzle)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
