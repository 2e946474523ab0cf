import logging
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional

import numpy as np

from labyrinth.errors import TraceLimitError
from labyrinth.grid import Cell
from labyrinth.maze import Maze

logger = logging.getLogger(__name__)

# north, south, east, west as (dcol, drow)
DIRECTIONS = [(0, -1), (0, 1), (1, 0), (-1, 0)]

WALKABLE = (Cell.OPEN, Cell.EXIT)


@dataclass(frozen=True)
class AnimationStep:
    col: int
    row: int

    @property
    def position(self):
        return self.col, self.row


@dataclass(frozen=True)
class Add(AnimationStep):
    """The cursor steps onto a cell."""


@dataclass(frozen=True)
class Remove(AnimationStep):
    """The cursor backtracks off a cell."""


def record(maze: Maze, max_steps: Optional[int] = None) -> List[AnimationStep]:
    """
    Explore every branch from the entry and return the full step trace.

    Depth-first, neighbours tried north, south, east, west. A cell is skipped
    only while it is on the current branch, so cells are revisited from
    sibling branches and the trace grows with the number of distinct routes.
    Reaching an exit ends the branch immediately. Every Add is followed later
    by a matching Remove.

    Frames live on an explicit stack instead of the call stack; each frame
    keeps its own direction iterator, so the order matches plain recursion.

    Raises NoEntryError when the grid has no entry, and TraceLimitError once
    the trace would exceed ``max_steps`` (unbounded when None).
    """
    start = maze.entry
    height = maze.height
    width = max(len(cells) for cells in maze.rows)
    on_path = np.zeros((height, width), dtype=bool)
    steps: List[AnimationStep] = []

    def emit(step):
        if max_steps is not None and len(steps) >= max_steps:
            raise TraceLimitError(f"trace for maze '{maze.name}' exceeded {max_steps} steps")
        steps.append(step)

    on_path[start[1], start[0]] = True
    emit(Add(*start))
    stack = [(start, iter(DIRECTIONS))]

    while stack:
        (col, row), directions = stack[-1]
        for dcol, drow in directions:
            ncol, nrow = col + dcol, row + drow
            if not (0 <= nrow < height and 0 <= ncol < len(maze.rows[nrow])):
                continue
            if on_path[nrow, ncol]:
                continue
            cell = maze.cell(ncol, nrow)
            if cell not in WALKABLE:
                continue

            emit(Add(ncol, nrow))
            if cell is Cell.EXIT:
                emit(Remove(ncol, nrow))
                continue
            on_path[nrow, ncol] = True
            stack.append(((ncol, nrow), iter(DIRECTIONS)))
            break
        else:
            stack.pop()
            on_path[row, col] = False
            emit(Remove(col, row))

    logger.debug(f"Recorded {len(steps)} steps for maze '{maze.name}'")
    return steps


def is_balanced(steps: Iterable[AnimationStep]) -> bool:
    """True when every coordinate is added and removed the same number of times."""
    counts = Counter()
    for step in steps:
        counts[step.position] += 1 if isinstance(step, Add) else -1
    return not any(counts.values())
