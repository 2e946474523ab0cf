"""
Playback of a recorded step trace.

The player owns no clock. Whoever drives it (a render loop, a test, a
simulated timer) passes the elapsed time to ``tick`` and the player advances
at most one step per frame interval, looping forever.
"""
import logging
from enum import Enum
from typing import List, Sequence, Tuple

from labyrinth.config import ANIMATION_FRAME_DELAY_MS
from labyrinth.pathfinding import Add, AnimationStep

logger = logging.getLogger(__name__)


class PlaybackState(Enum):
    IDLE = 'idle'
    PLAYING = 'playing'


class AnimationPlayer:
    def __init__(self, frame_interval: float = ANIMATION_FRAME_DELAY_MS):
        if frame_interval <= 0:
            raise ValueError(f"frame interval must be positive, got {frame_interval}")
        self.frame_interval = frame_interval
        self.steps: List[AnimationStep] = []
        self.cursor = 0
        self.visible_path: List[Tuple[int, int]] = []
        self.since_last_tick = 0.0

    @property
    def state(self) -> PlaybackState:
        if self.cursor == 0 and not self.visible_path:
            return PlaybackState.IDLE
        return PlaybackState.PLAYING

    @property
    def is_loaded(self) -> bool:
        return bool(self.steps)

    def load(self, steps: Sequence[AnimationStep]) -> None:
        self.steps = list(steps)
        self.reset()
        logger.debug(f"Loaded {len(self.steps)} animation steps")

    def reset(self) -> None:
        """Rewind to the first step, keeping the trace."""
        self.cursor = 0
        self.visible_path.clear()
        self.since_last_tick = 0.0

    def clear(self) -> None:
        """Drop the trace as well, so the next entry records a fresh one."""
        self.steps.clear()
        self.reset()

    def tick(self, elapsed: float) -> bool:
        """
        Advance the clock by ``elapsed`` time units.

        Below one frame interval since the last frame this is a no-op.
        Otherwise one step is applied: Add appends its cell to the visible
        path, Remove deletes the first matching occurrence. When the last step
        has been applied the player rewinds to idle. Time beyond the frame
        boundary is not carried over.

        Returns True when a frame boundary was crossed.
        """
        if elapsed < 0:
            raise ValueError(f"elapsed time cannot be negative, got {elapsed}")

        self.since_last_tick += elapsed
        if self.since_last_tick < self.frame_interval:
            return False
        self.since_last_tick = 0.0

        if self.cursor < len(self.steps):
            step = self.steps[self.cursor]
            if isinstance(step, Add):
                self.visible_path.append(step.position)
            elif step.position in self.visible_path:
                self.visible_path.remove(step.position)
            self.cursor += 1

        if self.cursor >= len(self.steps):
            self.cursor = 0
            self.visible_path.clear()
        return True
