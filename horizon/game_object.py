"""Game objects: identified containers of components."""

from __future__ import annotations

import itertools
from typing import ClassVar, TypeVar

from .component import Component
from .logger import log_warning
from .timed_function import TimedFunctionComponent

C = TypeVar("C", bound=Component)


class GameObject:
    """Owns components and forwards the frame lifecycle to them."""

    _ids: ClassVar[itertools.count] = itertools.count()

    def __init__(self, identifier: str = "NoIdentifier", activation_time: float | None = None) -> None:
        self._components: list[Component] = []
        self._identifier = identifier
        self._id = next(GameObject._ids)
        self._is_active = activation_time is None

        if activation_time is not None:
            timed = TimedFunctionComponent(self, False, activation_time, True)
            timed.set_timer_function(lambda _total: self.activate())
            timed.activate()
            self.add_component(timed)

    def initialize(self) -> None:
        for component in self._components:
            component.initialize()
        for component in self._components:
            component.post_initialize()

    def fixed_update(self) -> None:
        if not self._is_active:
            return
        for component in self._components:
            component.fixed_update()

    def update(self) -> None:
        for component in self._components:
            component.persistent_update()
        if not self._is_active:
            return
        for component in self._components:
            component.update()

    def late_update(self) -> None:
        if not self._is_active:
            return
        for component in self._components:
            component.late_update()

    def render(self) -> None:
        if not self._is_active:
            return
        for component in self._components:
            component.render()

    def add_component(self, component: Component) -> None:
        self._components.append(component)

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the first component of the given type, or None with a warning."""
        for component in self._components:
            if isinstance(component, component_type):
                return component
        log_warning("GameObject::GetComponent >> Component could not be found")
        return None

    def get_components(self, component_type: type[C]) -> list[C]:
        return [c for c in self._components if isinstance(c, component_type)]

    @property
    def identifier(self) -> str:
        return self._identifier

    def equals(self, other: "GameObject") -> bool:
        return self._id == other._id

    @property
    def is_active(self) -> bool:
        return self._is_active

    def activate(self) -> None:
        self._is_active = True

    def deactivate(self) -> None:
        self._is_active = False