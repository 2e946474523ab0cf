"""
Grid format for maze text.

A maze is plain text, one row per line, every row the same length, built from
four symbols:

    1  entry (exactly one per grid)
    2  wall
    3  open, traversable
    4  exit (border only)

The grid is at least 3x3, its border holds only walls and exits, and its
interior never holds an exit.
"""
from enum import Enum
from typing import List, Optional, Tuple


class Cell(Enum):
    ENTRY = '1'
    WALL = '2'
    OPEN = '3'
    EXIT = '4'


SYMBOLS = frozenset(cell.value for cell in Cell)

MIN_ROWS = 3
MIN_COLUMNS = 3


def split_lines(text: str) -> List[str]:
    """Split on newlines; a trailing newline does not open a new row."""
    if not text:
        return []
    lines = text.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def find_violation(text: str) -> Optional[str]:
    """Return the first rule ``text`` breaks, or None for a valid grid.

    Checks run in a fixed order and stop at the first failure: row count,
    row width, per-row width and alphabet with a running entry count, the
    final entry count, then the border and interior rules.
    """
    lines = split_lines(text)
    if len(lines) < MIN_ROWS:
        return f"expected at least {MIN_ROWS} rows, found {len(lines)}"

    width = len(lines[0])
    if width < MIN_COLUMNS:
        return f"expected at least {MIN_COLUMNS} columns, found {width}"

    entries = 0
    for row, line in enumerate(lines):
        if len(line) != width:
            return f"row {row} has length {len(line)}, expected {width}"
        for col, char in enumerate(line):
            if char not in SYMBOLS:
                return f"invalid symbol {char!r} at column {col}, row {row}"
        entries += line.count(Cell.ENTRY.value)
        if entries > 1:
            return "more than one entry"

    if entries != 1:
        return "no entry"

    last_row = len(lines) - 1
    last_col = width - 1
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            is_edge = row == 0 or row == last_row or col == 0 or col == last_col
            if is_edge:
                if char not in (Cell.WALL.value, Cell.EXIT.value):
                    return f"border cell at column {col}, row {row} must be a wall or an exit"
            elif char == Cell.EXIT.value:
                return f"exit at column {col}, row {row} is not on the border"

    return None


def validate(text: str) -> bool:
    return find_violation(text) is None


def parse_rows(text: str) -> Tuple[Tuple[Cell, ...], ...]:
    return tuple(tuple(Cell(char) for char in line) for line in split_lines(text))
