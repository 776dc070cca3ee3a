"""A component that draws a line of text."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

from .component import Component
from .renderer import Renderer, Texture2D
from .structs import Color
from .transform import TransformComponent

if TYPE_CHECKING:
    from .game_object import GameObject
    from .resources import Font


class TextComponent(Component):
    """Renders its text with a font; the texture is rebuilt on the next update after a change."""

    def __init__(
        self,
        parent: "GameObject | None",
        text: str,
        font: "Font",
        color: Color | None = None,
    ) -> None:
        super().__init__(parent)
        self._text = text
        self._font = font
        source = color if color is not None else Color(255, 255, 255)
        self._color = Color(source.r, source.g, source.b)
        self._needs_update = True
        self._texture: Texture2D | None = None
        self._transform: TransformComponent | None = None

    @property
    def color(self) -> Color:
        return Color(self._color.r, self._color.g, self._color.b)

    @property
    def texture(self) -> Texture2D | None:
        return self._texture

    @property
    def needs_update(self) -> bool:
        return self._needs_update

    def initialize(self) -> None:
        parent = self.parent
        self._transform = parent.get_component(TransformComponent) if parent is not None else None

    def update(self) -> None:
        if not self._needs_update:
            return
        try:
            surface = self._font.font.render(
                self._text, True, (self._color.r, self._color.g, self._color.b)
            )
        except pygame.error as error:
            raise RuntimeError(f"Render text failed: {error}") from error
        self._texture = Texture2D(surface)
        self._needs_update = False

    def render(self) -> None:
        if self._texture is None:
            return
        if self._transform is not None:
            position = self._transform.position
            Renderer.instance().render_texture(self._texture, position.x, position.y)
        else:
            Renderer.instance().render_texture(self._texture, 0, 0)

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, text: str) -> None:
        self._text = text
        self._needs_update = True