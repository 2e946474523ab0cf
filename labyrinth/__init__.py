"""
Labyrinth: maze grid validation, exhaustive backtracking traces and their
animated replay.
"""
from labyrinth.animation import AnimationPlayer, PlaybackState
from labyrinth.errors import (CoordinateError, DimensionError, FormatError, LabyrinthError, MazeNameError,
                              NoEntryError, TraceLimitError)
from labyrinth.geometry import to_screen
from labyrinth.grid import Cell, find_violation, validate
from labyrinth.maze import Maze, default_maze
from labyrinth.pathfinding import Add, AnimationStep, Remove, record
from labyrinth.session import Session

__all__ = [
    "Add", "AnimationPlayer", "AnimationStep", "Cell", "CoordinateError", "DimensionError",
    "FormatError", "LabyrinthError", "Maze", "MazeNameError", "NoEntryError", "PlaybackState",
    "Remove", "Session", "TraceLimitError", "default_maze", "find_violation", "record",
    "to_screen", "validate",
]
