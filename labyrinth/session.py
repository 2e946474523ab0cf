"""
Maze session: the active maze, the list it was picked from, and its playback.

Screens and key handling belong to the caller; the session only tracks which
maze is active and keeps the recorded trace in step with it.
"""
import logging
from typing import List, Optional

from labyrinth.animation import AnimationPlayer
from labyrinth.geometry import to_screen
from labyrinth.grid import Cell
from labyrinth.loader import PathLike, load_directory
from labyrinth.maze import Maze, default_maze
from labyrinth.pathfinding import record

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, default: Optional[Maze] = None,
                 player: Optional[AnimationPlayer] = None,
                 max_steps: Optional[int] = None):
        self.default = default if default is not None else default_maze()
        self.maze = self.default
        self.maps: List[Maze] = [self.default]
        self.player = player if player is not None else AnimationPlayer()
        self.max_steps = max_steps

    def refresh_maps(self, directory: PathLike = '.') -> List[Maze]:
        self.maps = [self.default] + load_directory(directory)
        return self.maps

    def select(self, maze: Maze) -> None:
        if maze == self.maze:
            return
        logger.info(f"Selected maze '{maze.name}'")
        self.maze = maze
        self.player.clear()

    def enter(self) -> None:
        """Start playback, recording the trace on first entry."""
        if not self.player.is_loaded:
            logger.info(f"Recording trace for maze '{self.maze.name}'")
            self.player.load(record(self.maze, max_steps=self.max_steps))
        else:
            self.player.reset()

    def leave(self) -> None:
        self.player.clear()

    def tick(self, elapsed: float) -> bool:
        return self.player.tick(elapsed)

    def wall_points(self):
        return self.marker_points(Cell.WALL)

    def marker_points(self, *kinds: Cell):
        return to_screen(self.maze.coordinates_of(*kinds), self.maze.rows)

    def path_points(self):
        return to_screen(self.player.visible_path, self.maze.rows)
