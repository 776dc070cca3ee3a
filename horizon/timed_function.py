"""A component that calls a function after a delay, optionally repeating."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from .component import Component
from .timer import Timer

if TYPE_CHECKING:
    from .game_object import GameObject

TimerFunction = Callable[[float], None]


class TimedFunctionComponent(Component):
    """Calls its function with the total elapsed time once max_time has passed."""

    def __init__(
        self,
        parent: "GameObject | None",
        is_looping: bool,
        max_time: float,
        is_persistent: bool = False,
    ) -> None:
        super().__init__(parent)
        self.is_looping = is_looping
        self.is_persistent = is_persistent
        self.max_time = max_time
        self._elapsed_time = 0.0
        self._total_time = 0.0
        self._is_active = False
        self._timer_function: TimerFunction = lambda _total: None

    @property
    def is_active(self) -> bool:
        return self._is_active

    def set_timer_function(self, timer_function: TimerFunction) -> None:
        self._timer_function = timer_function

    def activate(self) -> None:
        self._elapsed_time = 0.0
        self._is_active = True

    def deactivate(self) -> None:
        self._is_active = False
        self._elapsed_time = 0.0

    def update_timed_function(self) -> None:
        if not self._is_active:
            return
        delta = Timer.instance().delta_time
        self._elapsed_time += delta
        self._total_time += delta
        if self._elapsed_time >= self.max_time:
            self._timer_function(self._total_time)
            if self.is_looping:
                self.activate()
            else:
                self.deactivate()

    def update(self) -> None:
        if not self.is_persistent:
            self.update_timed_function()

    def persistent_update(self) -> None:
        if self.is_persistent:
            self.update_timed_function()