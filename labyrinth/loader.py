import logging
from pathlib import Path
from typing import List, Optional, Union

from labyrinth import grid
from labyrinth.config import MAP_EXTENSION
from labyrinth.maze import Maze

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def load_file(path: PathLike) -> Optional[Maze]:
    """Read one map file; returns None when its grid is rejected."""
    path = Path(path)
    contents = path.read_text(encoding='utf-8').strip()
    reason = grid.find_violation(contents)
    if reason is not None:
        logger.warning(f"Skipping '{path.name}': {reason}")
        return None
    return Maze.build(path.name, contents)


def load_directory(directory: PathLike = '.') -> List[Maze]:
    """Load every valid map file directly inside ``directory``, sorted by name."""
    directory = Path(directory)
    mazes = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if path.is_dir() or not path.name.endswith(MAP_EXTENSION):
            continue
        maze = load_file(path)
        if maze is not None:
            mazes.append(maze)
    logger.info(f"Loaded {len(mazes)} maze(s) from {directory}")
    return mazes
