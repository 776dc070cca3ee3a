"""Base class for behaviour attached to game objects."""

from __future__ import annotations

import itertools
from collections import Counter
from typing import TYPE_CHECKING, ClassVar

if TYPE_CHECKING:
    from .game_object import GameObject


class Component:
    """A unit of behaviour owned by a GameObject, with lifecycle hooks."""

    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self, parent: "GameObject | None", identifier: str = "NoIdentifier") -> None:
        self._parent = parent
        self._identifier = identifier
        self._id = next(Component._ids)
        self._hook_calls: Counter[str] = Counter()

    @property
    def parent(self) -> "GameObject | None":
        return self._parent

    @property
    def identifier(self) -> str:
        return self._identifier

    def initialize(self) -> None:
        self._hook_calls["initialize"] += 1

    def post_initialize(self) -> None:
        self._hook_calls["post_initialize"] += 1

    def fixed_update(self) -> None:
        self._hook_calls["fixed_update"] += 1

    def persistent_update(self) -> None:
        self._hook_calls["persistent_update"] += 1

    def update(self) -> None:
        self._hook_calls["update"] += 1

    def late_update(self) -> None:
        self._hook_calls["late_update"] += 1

    def render(self) -> None:
        self._hook_calls["render"] += 1

    def reset(self) -> None:
        """Forget the lifecycle calls recorded so far."""
        self._hook_calls.clear()

    def equals(self, other: "Component") -> bool:
        return self._id == other._id