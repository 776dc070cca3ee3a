"""Lives of a player, announced to observers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .component import Component
from .events import Event, Observer, PossibleEvent, Subject

if TYPE_CHECKING:
    from .game_object import GameObject


class HealthComponent(Component):
    """Counts lives and notifies PLAYER_DIED, GAME_OVER and PREVIOUS_LEVEL_DATA."""

    def __init__(self, parent: "GameObject | None", lives: int = 3) -> None:
        super().__init__(parent)
        self._current_lives = lives
        self._subject = Subject()

    def decrease_live(self) -> None:
        """Lose one life; at zero GAME_OVER is sent instead of PLAYER_DIED."""
        if self._current_lives <= 0:
            return
        self._current_lives -= 1
        if self._current_lives == 0:
            self._subject.notify(Event(PossibleEvent.GAME_OVER))
        else:
            self._subject.notify(Event(PossibleEvent.PLAYER_DIED, self._current_lives))

    def add_observer(self, observer: Observer) -> None:
        self._subject.add_observer(observer)

    @property
    def current_lives(self) -> int:
        return self._current_lives

    @current_lives.setter
    def current_lives(self, lives: int) -> None:
        self._current_lives = lives
        self._subject.notify(Event(PossibleEvent.PREVIOUS_LEVEL_DATA, lives))