"""Game events and the observer pattern that distributes them."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class PossibleEvent(Enum):
    PLAYER_DIED = auto()
    GAME_OVER = auto()
    COLOR_CHANGE = auto()
    REMAINING_DISC = auto()
    CATCHING_SAM_OR_SLICK = auto()
    DEFEAT_COILY = auto()
    PREVIOUS_LEVEL_DATA = auto()


@dataclass(frozen=True)
class Event:
    """An event kind with an optional payload."""

    event: PossibleEvent
    data: Any = None


class Observer(ABC):
    @abstractmethod
    def on_notify(self, event: Event) -> None:
        """React to an event."""


class Subject:
    """Holds observers and forwards events to them in order."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove an observer; raises ValueError if it was never added."""
        self._observers.remove(observer)

    def notify(self, event: Event) -> None:
        for observer in list(self._observers):
            if observer is not None:
                observer.on_notify(event)

    def __len__(self) -> int:
        return len(self._observers)