"""Player score, announced to observers."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .component import Component
from .events import Event, Observer, PossibleEvent, Subject

if TYPE_CHECKING:
    from .game_object import GameObject

_EVENT_FOR_INCREASE = {
    25: PossibleEvent.COLOR_CHANGE,
    50: PossibleEvent.REMAINING_DISC,
    300: PossibleEvent.CATCHING_SAM_OR_SLICK,
    500: PossibleEvent.DEFEAT_COILY,
}


class ScoreComponent(Component):
    """Accumulates score; the size of each increase picks the event sent."""

    def __init__(self, parent: "GameObject | None") -> None:
        super().__init__(parent)
        self._current_score = 0
        self._subject = Subject()

    def increase_score(self, score_increase: int) -> None:
        self._current_score += score_increase
        event = _EVENT_FOR_INCREASE.get(score_increase, PossibleEvent.PREVIOUS_LEVEL_DATA)
        self._subject.notify(Event(event, self._current_score))

    @property
    def score(self) -> int:
        return self._current_score

    def add_observer(self, observer: Observer) -> None:
        self._subject.add_observer(observer)