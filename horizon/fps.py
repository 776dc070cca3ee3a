"""A component that shows the measured frame rate in a text component."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .component import Component
from .text import TextComponent
from .timer import Timer

if TYPE_CHECKING:
    from .game_object import GameObject


class FPSComponent(Component):
    """Writes "<fps> FPS" into its object's text component each update."""

    def __init__(self, parent: "GameObject | None") -> None:
        super().__init__(parent)
        self._text: TextComponent | None = None

    def initialize(self) -> None:
        parent = self.parent
        self._text = parent.get_component(TextComponent) if parent is not None else None

    def update(self) -> None:
        if self._text is not None:
            self._text.text = f"{Timer.instance().fps} FPS"