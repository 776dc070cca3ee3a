"""Position of a game object."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .component import Component
from .structs import IPoint2

if TYPE_CHECKING:
    from .game_object import GameObject


class TransformComponent(Component):
    """Holds an integer position."""

    def __init__(self, parent: "GameObject | None", x: int, y: int) -> None:
        super().__init__(parent)
        self._position = IPoint2(x, y)

    @property
    def position(self) -> IPoint2:
        return IPoint2(self._position.x, self._position.y)

    def set_position(self, x: "int | IPoint2", y: int | None = None) -> None:
        """Set the position from two coordinates or from a point."""
        if isinstance(x, IPoint2):
            self._position = IPoint2(x.x, x.y)
            return
        if y is None:
            raise TypeError("set_position needs a point or both coordinates")
        self._position = IPoint2(x, y)

    def move(self, x: int, y: int) -> None:
        self.set_position(self._position.x + x, self._position.y + y)