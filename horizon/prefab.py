"""Creation of game objects from JSON descriptions by class name."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

from .game_object import GameObject
from .logger import log_warning


class _Prefab(Protocol):
    game_object: GameObject


Generator = Callable[[Mapping[str, Any]], GameObject]


class PrefabFactory:
    """Maps class names to prefab types built from a JSON value.

    A prefab type is called with the JSON value and must expose the created
    object as ``game_object``.
    """

    def __init__(self) -> None:
        self._generators: dict[str, Generator] = {}

    def register_prefab(self, prefab_type: Callable[[Mapping[str, Any]], _Prefab]) -> None:
        def generate(json_value: Mapping[str, Any]) -> GameObject:
            return prefab_type(json_value).game_object

        self._generators[prefab_type.__name__] = generate

    def get_prefab(self, json_value: Mapping[str, Any]) -> GameObject | None:
        """Build the object named by the value's "class" entry, or None if unknown."""
        class_name = json_value["class"]
        generator = self._generators.get(class_name)
        if generator is None:
            log_warning(
                "PrefabFactory::GetPrefab: class is not part of generators, returning nullptr"
            )
            return None
        return generator(json_value)