"""Frame pacing and the per-frame game update."""

from __future__ import annotations

import time
from typing import Callable, Optional

from .components import FPS, GameState
from .controls import KeyState
from .move import move
from .score import score_calculator


def _default_ticks() -> int:
    return int(time.monotonic() * 1000)


def _default_sleep(milliseconds: int) -> None:
    time.sleep(milliseconds / 1000)


class FrameClock:
    """Holds the loop to a fixed frame rate and measures the time between frames.

    ``ticks`` returns the current time in milliseconds and ``sleep`` waits a
    number of milliseconds; both default to the system clock.
    """

    def __init__(
        self,
        fps: int = FPS,
        ticks: Optional[Callable[[], int]] = None,
        sleep: Optional[Callable[[int], None]] = None,
    ):
        if fps < 1:
            raise ValueError(f"fps must be at least 1, got {fps}")
        self.frame_target = 1000 // fps
        self._ticks = ticks or _default_ticks
        self._sleep = sleep or _default_sleep
        self.last_frame_time = self._ticks()
        self.delta_time = 0.0

    def reset(self) -> None:
        """Start measuring from now."""
        self.last_frame_time = self._ticks()

    def delay(self, state: GameState) -> tuple:
        """Wait out the rest of the frame; return the new state and the frame's delta time.

        A RESUME state restarts the measurement and becomes RUN.
        """
        if state == GameState.RESUME:
            self.reset()
            state = GameState.RUN

        time_to_wait = self.frame_target - (self._ticks() - self.last_frame_time)
        if 0 < time_to_wait <= self.frame_target:
            self._sleep(time_to_wait)

        now = self._ticks()
        self.delta_time = (now - self.last_frame_time) / 1000.0
        self.last_frame_time = self._ticks()
        return GameState(state), self.delta_time


def update(world, keys: KeyState, delta_time, score: int, rng) -> int:
    """Run the movement and scoring systems once; return the new score."""
    move(world, keys, delta_time)
    return score_calculator(world, keys, score, rng)