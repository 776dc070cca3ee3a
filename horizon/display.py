"""Text read-outs of a player's lives and score, driven by events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .component import Component
from .events import Event, Observer, PossibleEvent
from .text import TextComponent

if TYPE_CHECKING:
    from .game_object import GameObject

_SCORE_EVENTS = frozenset(
    {
        PossibleEvent.COLOR_CHANGE,
        PossibleEvent.REMAINING_DISC,
        PossibleEvent.CATCHING_SAM_OR_SLICK,
        PossibleEvent.DEFEAT_COILY,
        PossibleEvent.PREVIOUS_LEVEL_DATA,
    }
)


def _find_text(parent: "GameObject | None", owner: str) -> TextComponent:
    text = parent.get_component(TextComponent) if parent is not None else None
    if text is None:
        raise RuntimeError(f"{owner} needs a TextComponent on its game object")
    return text


class HealthDisplayComponent(Component):
    """Shows the remaining lives, or "Game Over", in its object's text component."""

    def __init__(self, parent: "GameObject | None", health: int) -> None:
        super().__init__(parent)
        self._start_health = health
        self._text: TextComponent | None = None

    def initialize(self) -> None:
        self._text = _find_text(self.parent, "HealthDisplayComponent")
        self._text.text = str(self._start_health)

    def set_health_text(self, current_lives: int) -> None:
        if self._text is not None:
            self._text.text = str(current_lives)

    def game_over(self) -> None:
        if self._text is None:
            raise RuntimeError("HealthDisplayComponent is not initialized")
        self._text.text = "Game Over"


class HealthDisplayObserver(Observer):
    """Forwards health events to a HealthDisplayComponent."""

    def __init__(self, display: HealthDisplayComponent) -> None:
        self.display = display

    def on_notify(self, event: Event) -> None:
        if event.event in (PossibleEvent.PREVIOUS_LEVEL_DATA, PossibleEvent.PLAYER_DIED):
            self.display.set_health_text(event.data)
        elif event.event is PossibleEvent.GAME_OVER:
            self.display.game_over()


class ScoreDisplayComponent(Component):
    """Shows the current score in its object's text component."""

    def __init__(self, parent: "GameObject | None") -> None:
        super().__init__(parent)
        self._text: TextComponent | None = None

    def initialize(self) -> None:
        self._text = _find_text(self.parent, "ScoreDisplayComponent")
        self._text.text = str(0)

    def score_increased(self, score: int) -> None:
        if self._text is None:
            return
        self._text.text = str(score)


class ScoreDisplayObserver(Observer):
    """Forwards score events to a ScoreDisplayComponent."""

    def __init__(self, display: ScoreDisplayComponent) -> None:
        self.display = display

    def on_notify(self, event: Event) -> None:
        if event.event in _SCORE_EVENTS:
            self.display.score_increased(event.data)