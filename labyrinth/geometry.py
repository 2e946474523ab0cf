from __future__ import annotations

from numbers import Integral
from typing import TYPE_CHECKING, Iterable, Sequence, Tuple

import numpy as np

from labyrinth.config import MAX_EXACT_INDEX
from labyrinth.errors import CoordinateError, DimensionError

if TYPE_CHECKING:
    from numpy import typing as npt


def _exact_float(index) -> float:
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise CoordinateError(f"cell index must be an integer, got {index!r}")
    if abs(int(index)) > MAX_EXACT_INDEX:
        raise CoordinateError(f"cell index {index} cannot be represented exactly as a float")
    return float(index)


def grid_shape(grid: Sequence[Sequence]) -> Tuple[int, int]:
    """Return (rows, columns) of a grid, measuring columns on the first row."""
    if len(grid) == 0 or len(grid[0]) == 0:
        raise DimensionError("cannot center an empty grid")
    return len(grid), len(grid[0])


def to_screen(
    points: Iterable[Tuple[int, int]],
    grid: Sequence[Sequence]
) -> npt.NDArray[np.float64]:
    """
    Map (col, row) cells to screen coordinates centered on the origin.

    Row 0 lands at the top (largest y) and column 0 at the left (smallest x):
        x = col - (cols_n - 1) / 2
        y = (rows_n - 1) / 2 - row

    Args:
        points: Cells as (col, row) pairs.
        grid: The rows of the grid, e.g. ``Maze.rows`` or the text lines.

    Returns:
        Array of shape (n, 2) with one (x, y) per input cell, in input order.
    """
    rows_n, cols_n = grid_shape(grid)
    half_width = (_exact_float(cols_n) - 1.0) / 2.0
    half_height = (_exact_float(rows_n) - 1.0) / 2.0

    coords = [
        (_exact_float(col) - half_width, half_height - _exact_float(row))
        for col, row in points
    ]
    return np.array(coords, dtype=np.float64).reshape(-1, 2)
