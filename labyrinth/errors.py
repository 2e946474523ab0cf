class LabyrinthError(Exception):
    """Base class for every error raised by the labyrinth engine."""


class FormatError(LabyrinthError, ValueError):
    """Maze text does not follow the grid format."""


class MazeNameError(LabyrinthError, ValueError):
    """Display name lacks the map file extension."""


class NoEntryError(LabyrinthError, LookupError):
    """Grid has no entry cell to start the search from."""


class DimensionError(LabyrinthError, ValueError):
    """Grid has no rows or an empty first row."""


class CoordinateError(LabyrinthError, ValueError):
    """Cell index cannot be converted to a float exactly."""


class TraceLimitError(LabyrinthError, RuntimeError):
    """Step trace grew past the configured cap."""
