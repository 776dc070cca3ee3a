"""Rectangular triggers that report when other triggers enter and leave them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

from .component import Component
from .logger import log_warning
from .structs import Color, IRect
from .transform import TransformComponent
from .trigger_manager import TriggerManager

if TYPE_CHECKING:
    from .game_object import GameObject


class TriggerAction(Enum):
    ENTER = auto()
    EXIT = auto()


CallBackFunction = Callable[
    ["GameObject | None", "GameObject | None", TriggerAction, str], None
]


@dataclass
class _OverlapData:
    trigger: "TriggerComponent"
    is_overlapping: bool


class TriggerComponent(Component):
    """A collision rectangle offset from its object's transform."""

    visualise = False

    def __init__(
        self,
        parent: "GameObject | None",
        collision_rect: IRect,
        identifier: str = "NoIdentifier",
    ) -> None:
        super().__init__(parent, identifier)
        self._collision_rect = IRect(
            collision_rect.x, collision_rect.y, collision_rect.width, collision_rect.height
        )
        self._offset_x = collision_rect.x
        self._offset_y = collision_rect.y
        self._callback: CallBackFunction | None = None
        self._overlapping: list[_OverlapData] = []
        self._transform: TransformComponent | None = None

    def set_on_trigger_callback(self, function: CallBackFunction) -> None:
        """Set the function called with (own object, other object, action, other identifier)."""
        self._callback = function

    def _fire(
        self, other_parent: "GameObject | None", action: TriggerAction, identifier: str
    ) -> None:
        if self._callback is not None:
            self._callback(self.parent, other_parent, action, identifier)

    def overlaps_with(self, other: "TriggerComponent") -> None:
        """Record an overlap; a new overlap with an active object fires ENTER."""
        for overlap in self._overlapping:
            if other.equals(overlap.trigger):
                overlap.is_overlapping = True
                return
        other_parent = other.parent
        if other_parent is not None and not other_parent.is_active:
            return
        self._overlapping.append(_OverlapData(other, True))
        self._fire(other_parent, TriggerAction.ENTER, other.identifier)

    @property
    def collision_rect(self) -> IRect:
        return self._collision_rect

    @property
    def overlapping_count(self) -> int:
        return len(self._overlapping)

    def initialize(self) -> None:
        """Attach to the object's transform and register with the trigger manager."""
        parent = self.parent
        self._transform = parent.get_component(TransformComponent) if parent is not None else None
        if self._transform is None:
            log_warning("TriggerComponent::Initialize >> GameObject does not have transformComponent")
            return
        self._sync_position()
        TriggerManager.instance().add_trigger_component(self)

    def update(self) -> None:
        """Fire EXIT for overlaps not renewed since the last frame and follow the transform."""
        exited = [overlap for overlap in self._overlapping if not overlap.is_overlapping]
        for overlap in exited:
            self._fire(overlap.trigger.parent, TriggerAction.EXIT, overlap.trigger.identifier)
        self._overlapping = [overlap for overlap in self._overlapping if overlap.is_overlapping]
        for overlap in self._overlapping:
            overlap.is_overlapping = False
        self._sync_position()

    def render(self) -> None:
        if not self.visualise:
            return
        from .renderer import Renderer

        color = Color(0, 255, 0) if self._overlapping else Color(255, 0, 0)
        rect = self._collision_rect
        Renderer.instance().draw_rect(color, IRect(rect.x, rect.y, rect.width, rect.height))

    def _sync_position(self) -> None:
        if self._transform is None:
            return
        position = self._transform.position
        self._collision_rect.x = position.x + self._offset_x
        self._collision_rect.y = position.y + self._offset_y