"""
Tests for the maze text format.
"""

import pytest

from labyrinth.grid import Cell, find_violation, parse_rows, split_lines, validate

from .conftest import CORRIDOR, LOOP


class TestValidate:
    """Accepted and rejected grids."""

    def test_minimal_corridor_is_valid(self):
        assert validate(CORRIDOR)

    def test_grid_without_exit_is_valid(self):
        assert validate(LOOP)

    def test_too_few_rows(self):
        assert not validate("222\n213")

    def test_two_entries(self):
        assert not validate("2222\n2114\n2222")

    def test_no_entry(self):
        assert not validate("2222\n2334\n2222")

    def test_too_narrow(self):
        assert not validate("22\n21\n22")

    def test_ragged_rows(self):
        assert not validate("2222\n2134\n222")

    def test_invalid_symbol(self):
        assert not validate("2222\n21x4\n2222")

    def test_open_cell_on_border(self):
        assert not validate("2232\n2134\n2222")

    def test_entry_on_border(self):
        assert not validate("2222\n1334\n2222")

    def test_exit_in_interior(self):
        assert not validate("22222\n21432\n22222")

    def test_empty_text(self):
        assert not validate("")

    def test_trailing_newline_does_not_add_a_row(self):
        assert validate(CORRIDOR + "\n")

    def test_windows_line_endings(self):
        assert validate(CORRIDOR.replace("\n", "\r\n"))

    def test_blank_line_inside_grid(self):
        assert not validate("2222\n\n2134\n2222")


@pytest.mark.parametrize("broken, fixed", [
    ("222\n212", "222\n212\n222"),
    ("22\n21\n22", "222\n212\n222"),
    ("2222\n2134\n222", "2222\n2134\n2222"),
    ("2222\n21x4\n2222", "2222\n2134\n2222"),
    ("2222\n2114\n2222", "2222\n2134\n2222"),
    ("2222\n2334\n2222", "2222\n2134\n2222"),
    ("2232\n2134\n2222", "2222\n2134\n2222"),
    ("22222\n21432\n22222", "22222\n21332\n22242"),
])
def test_fixing_the_violated_rule_makes_the_grid_valid(broken, fixed):
    """Each rejection is caused by exactly the rule the fix addresses."""
    assert not validate(broken)
    assert validate(fixed)


class TestFindViolation:
    """Reasons follow the order the checks run in."""

    def test_valid_grid_has_no_violation(self):
        assert find_violation(CORRIDOR) is None

    def test_row_count_checked_first(self):
        assert "rows" in find_violation("2x\n11")

    def test_width_checked_before_symbols(self):
        assert "columns" in find_violation("2x\n2x\n2x")

    def test_second_entry_reported_while_scanning(self):
        # the later ragged row is never reached
        assert find_violation("2222\n2114\n22") == "more than one entry"

    def test_entry_count_checked_before_border(self):
        assert find_violation("3333\n3333\n3333") == "no entry"

    def test_interior_exit_position(self):
        assert find_violation("22222\n21432\n22222") == "exit at column 2, row 1 is not on the border"


class TestParseRows:
    def test_symbols(self):
        rows = parse_rows(CORRIDOR)
        assert rows[1] == (Cell.WALL, Cell.ENTRY, Cell.OPEN, Cell.EXIT)
        assert len(rows) == 3

    def test_split_lines(self):
        assert split_lines("a\r\nb\n") == ["a", "b"]
        assert split_lines("") == []
