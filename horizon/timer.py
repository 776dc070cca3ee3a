"""Frame timing and frames-per-second measurement."""

from __future__ import annotations

import time
from typing import Callable

from .singleton import Singleton


class Timer(Singleton):
    """Tracks the time between frames and the measured frame rate."""

    FIXED_SEC_PER_FRAME = 1 / 144

    def __init__(self, clock: Callable[[], float] = time.perf_counter) -> None:
        self.clock = clock
        self._current_time = 0.0
        self._last_time = 0.0
        self._fps_timer = 0.0
        self._delta_time = 0.0
        self._fps = 0
        self._fps_count = 0

    def update_last_time(self) -> None:
        self._last_time = self.clock()

    def update(self) -> None:
        self._current_time = self.clock()
        self._delta_time = self._current_time - self._last_time
        self._last_time = self._current_time

    def calculate_fps(self) -> None:
        self._fps_timer += self._delta_time
        self._fps_count += 1
        if self._fps_timer >= 1.0:
            self._fps = self._fps_count
            self._fps_count = 0
            self._fps_timer -= 1.0

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def delta_time(self) -> float:
        return self._delta_time

    @property
    def fixed_frame_time(self) -> float:
        return self.FIXED_SEC_PER_FRAME

    @property
    def fps(self) -> int:
        return self._fps