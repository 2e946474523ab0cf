import logging
import os

MAP_EXTENSION = '.labmap'

ANIMATION_FRAME_DELAY_MS = 200

# float64 represents every integer up to this magnitude exactly
MAX_EXACT_INDEX = 2 ** 53

LOG_LEVEL_ENV = 'LABYRINTH_LOG_LEVEL'
DEFAULT_LOG_LEVEL = 'INFO'

FIG_WIDTH = 9
FIG_HEIGHT = 9
DPI = 100
TARGET_FPS = 5

BG_COLOR = '#0A0A15'
WALL_COLOR = '#00FF7F'
PATH_COLOR = '#FF3333'
START_COLOR = '#1E90FF'
END_COLOR = '#FF4500'

CELL_MARKER_SIZE = 0.9


def get_default_log_level():
    name = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.INFO
    return level
