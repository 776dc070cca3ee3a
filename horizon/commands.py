"""Actions bound to input."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .health import HealthComponent
from .score import ScoreComponent


class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""


class TestCommand(Command):
    """Prints a marker line; useful to check input bindings."""

    __test__ = False

    def execute(self) -> None:
        print("TEST")


class LifeLostCommand(Command):
    def __init__(self, health: HealthComponent) -> None:
        self.health = health

    def execute(self) -> None:
        self.health.decrease_live()


class _ScoreCommand(Command):
    points = 0

    def __init__(self, score: ScoreComponent) -> None:
        self.score = score

    def execute(self) -> None:
        self.score.increase_score(self.points)


class ColorChangeCommand(_ScoreCommand):
    points = 25

    def __init__(self, score: ScoreComponent) -> None:
        super().__init__(score)

    def execute(self) -> None:
        super().execute()


class RemainingDiscCommand(_ScoreCommand):
    points = 50

    def __init__(self, score: ScoreComponent) -> None:
        super().__init__(score)

    def execute(self) -> None:
        super().execute()


class CatchingSamOrSlickCommand(_ScoreCommand):
    points = 300

    def __init__(self, score: ScoreComponent) -> None:
        super().__init__(score)

    def execute(self) -> None:
        super().execute()


class DefeatCoilyCommand(_ScoreCommand):
    points = 500

    def __init__(self, score: ScoreComponent) -> None:
        super().__init__(score)

    def execute(self) -> None:
        super().execute()