"""Per-class lazily created shared instances."""

from __future__ import annotations

from typing import Any, ClassVar, TypeVar

T = TypeVar("T", bound="Singleton")


class Singleton:
    """Base class giving each subclass one shared instance."""

    _instances: ClassVar[dict[type, Any]] = {}

    @classmethod
    def instance(cls: type[T]) -> T:
        """Return the shared instance, creating it on first use."""
        existing = Singleton._instances.get(cls)
        if existing is None:
            existing = cls()
            Singleton._instances[cls] = existing
        return existing

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the shared instance so the next call creates a fresh one."""
        Singleton._instances.pop(cls, None)