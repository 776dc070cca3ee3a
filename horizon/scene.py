"""Scenes: named collections of game objects updated together."""

from __future__ import annotations

from collections import Counter
from typing import Iterator

from .game_object import GameObject
from .logger import log_warning


class Scene:
    """Owns game objects and drives their lifecycle; subclasses override the hooks."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._objects: list[GameObject] = []
        self._is_initialized = False
        self._hook_calls: Counter[str] = Counter()

    @property
    def name(self) -> str:
        return self._name

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(list(self._objects))

    def root_initialize(self) -> None:
        self.initialize()
        for game_object in list(self._objects):
            game_object.initialize()
        self._is_initialized = True

    def root_post_initialize(self) -> None:
        self.post_initialize()

    def root_fixed_update(self) -> None:
        self.fixed_update()
        for game_object in list(self._objects):
            game_object.fixed_update()

    def root_update(self) -> None:
        self.update()
        for game_object in list(self._objects):
            game_object.update()

    def root_late_update(self) -> None:
        self.late_update()
        for game_object in list(self._objects):
            game_object.late_update()

    def root_render(self) -> None:
        self.render()
        for game_object in list(self._objects):
            game_object.render()

    def get_game_object(self, identifier: str) -> GameObject | None:
        """Return the first object with the identifier, or None with a warning."""
        for game_object in self._objects:
            if game_object.identifier == identifier:
                return game_object
        log_warning(
            "Scene::GetGameObject >> GameObject with identifier could not be found, returning nullptr"
        )
        return None

    def get_game_objects(self, identifier: str) -> list[GameObject]:
        return [
            game_object
            for game_object in self._objects
            if game_object is not None and game_object.identifier == identifier
        ]

    def add(self, game_object: GameObject) -> None:
        """Add an object, initializing it at once if the scene already was."""
        if self._is_initialized:
            game_object.initialize()
        self._objects.append(game_object)

    def remove(self, game_object: GameObject) -> None:
        """Remove an object; objects not in the scene are ignored."""
        if game_object in self._objects:
            self._objects.remove(game_object)

    def initialize(self) -> None:
        self._hook_calls["initialize"] += 1

    def post_initialize(self) -> None:
        self._hook_calls["post_initialize"] += 1

    def fixed_update(self) -> None:
        self._hook_calls["fixed_update"] += 1

    def update(self) -> None:
        self._hook_calls["update"] += 1

    def late_update(self) -> None:
        self._hook_calls["late_update"] += 1

    def render(self) -> None:
        self._hook_calls["render"] += 1