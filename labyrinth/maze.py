import logging
from dataclasses import dataclass
from typing import List, Tuple

from labyrinth import grid
from labyrinth.config import MAP_EXTENSION
from labyrinth.errors import FormatError, MazeNameError, NoEntryError
from labyrinth.grid import Cell

logger = logging.getLogger(__name__)

DEFAULT_MAZE_NAME = 'Default'

DEFAULT_MAZE_TEXT = '\n'.join([
    '2222222222222222222222222222222',
    '2133333333222223333332222223332',
    '2232222223332223232232322223232',
    '2233333223232223232232322223232',
    '2232323223232223232232322222232',
    '2232323223333333232233333333232',
    '2232323222222222232222222222232',
    '2232323333333332233333333332232',
    '2232222222222232222222222232232',
    '2232333333322233333322332232232',
    '2232322232322222232322232232232',
    '2232322232333332232322232232232',
    '2232322232222232232322233332232',
    '2232322233332232232322232232232',
    '2232322222222232232322232232232',
    '2232333333333232232322232232232',
    '2232222222222232232322232232232',
    '2233333332222232232322232232232',
    '2222222232222232232322232232232',
    '2333333333333332232222232233334',
    '2222222222222222222222222222222',
])

Rows = Tuple[Tuple[Cell, ...], ...]


def strip_extension(identifier: str) -> str:
    """Drop the map extension from a file name; 'a.backup.labmap' -> 'a.backup'."""
    index = identifier.rfind(MAP_EXTENSION)
    if index == -1:
        raise MazeNameError(f"'{identifier}' does not contain the {MAP_EXTENSION} extension")
    return identifier[:index]


@dataclass(frozen=True)
class Maze:
    """
    An immutable maze grid and the name it is listed under.

    Build one from file contents with ``Maze.build``, which enforces the grid
    format. The plain constructor only converts rows to cells, so it can hold
    grids that were never validated.
    """
    name: str
    rows: Rows

    def __post_init__(self):
        rows = tuple(
            tuple(cell if isinstance(cell, Cell) else Cell(cell) for cell in row)
            for row in self.rows
        )
        object.__setattr__(self, 'rows', rows)

    @classmethod
    def build(cls, identifier: str, text: str) -> 'Maze':
        name = strip_extension(identifier)
        reason = grid.find_violation(text)
        if reason is not None:
            raise FormatError(f"{identifier}: {reason}")
        maze = cls(name, grid.parse_rows(text))
        logger.debug(f"Built maze '{name}' ({maze.width}x{maze.height})")
        return maze

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def entry(self) -> Tuple[int, int]:
        for row, cells in enumerate(self.rows):
            for col, cell in enumerate(cells):
                if cell is Cell.ENTRY:
                    return col, row
        raise NoEntryError(f"maze '{self.name}' has no entry cell")

    def cell(self, col: int, row: int) -> Cell:
        return self.rows[row][col]

    def coordinates_of(self, *kinds: Cell) -> List[Tuple[int, int]]:
        return [
            (col, row)
            for row, cells in enumerate(self.rows)
            for col, cell in enumerate(cells)
            if cell in kinds
        ]

    def lines(self) -> List[str]:
        return [''.join(cell.value for cell in row) for row in self.rows]

    def __str__(self):
        return '\n'.join(self.lines())


def default_maze() -> Maze:
    return Maze.build(DEFAULT_MAZE_NAME + MAP_EXTENSION, DEFAULT_MAZE_TEXT)


