"""Keeps the scenes and forwards the frame lifecycle to the active one."""

from __future__ import annotations

from .scene import Scene
from .singleton import Singleton


class SceneManager(Singleton):
    """Holds all scenes; only the active scene is updated and rendered."""

    def __init__(self) -> None:
        self._scenes: list[Scene] = []
        self._initialized = False
        self._active_scene: Scene | None = None

    @property
    def scenes(self) -> tuple[Scene, ...]:
        return tuple(self._scenes)

    def add_scene(self, scene: Scene) -> None:
        """Add a scene; the first scene added becomes active."""
        if scene in self._scenes:
            return
        self._scenes.append(scene)
        if self._initialized:
            scene.root_initialize()
            scene.root_post_initialize()
        if self._active_scene is None:
            self._active_scene = scene

    def add_active_scene(self, scene: Scene) -> None:
        """Add a scene and make it the active one."""
        if scene in self._scenes:
            return
        self._scenes.append(scene)
        self.set_active_scene(scene)
        if self._initialized:
            scene.root_initialize()
            scene.root_post_initialize()

    def remove_scene(self, scene: Scene) -> None:
        if scene in self._scenes:
            self._scenes.remove(scene)

    def set_active_scene(self, scene: Scene) -> None:
        """Activate a scene; scenes not added are ignored."""
        if scene in self._scenes:
            self._active_scene = scene

    @property
    def active_scene(self) -> Scene | None:
        return self._active_scene

    def next_scene(self) -> None:
        """Activate the scene after the active one, wrapping around."""
        if self._active_scene in self._scenes:
            index = self._scenes.index(self._active_scene)
            self._active_scene = self._scenes[(index + 1) % len(self._scenes)]

    def initialize(self) -> None:
        for scene in list(self._scenes):
            scene.root_initialize()
        self._initialized = True

    def post_initialize(self) -> None:
        for scene in list(self._scenes):
            scene.root_post_initialize()

    def fixed_update(self) -> None:
        if self._active_scene is not None:
            self._active_scene.root_fixed_update()

    def update(self) -> None:
        if self._active_scene is not None:
            self._active_scene.root_update()

    def late_update(self) -> None:
        if self._active_scene is not None:
            self._active_scene.root_late_update()

    def render(self) -> None:
        if self._active_scene is not None:
            self._active_scene.root_render()