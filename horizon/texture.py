"""A component that draws an image at its object's position."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .component import Component
from .logger import log_warning
from .renderer import Renderer, Texture2D
from .resources import ResourceManager
from .structs import IPoint2, IRect
from .transform import TransformComponent

if TYPE_CHECKING:
    from .game_object import GameObject


class TextureComponent(Component):
    """Draws a region of a loaded texture, scaled and offset from the transform."""

    def __init__(self, parent: "GameObject | None", texture_file: str) -> None:
        super().__init__(parent)
        self._src_rect = IRect(0, 0, -1, -1)
        self._scale = 1.0
        self._texture_offset = IPoint2()
        self._texture: Texture2D = ResourceManager.instance().load_texture(texture_file)
        self._transform: TransformComponent | None = None

    @property
    def texture(self) -> Texture2D:
        return self._texture

    def initialize(self) -> None:
        parent = self.parent
        self._transform = parent.get_component(TransformComponent) if parent is not None else None

    def render(self) -> None:
        renderer = Renderer.instance()
        if self._transform is not None:
            position = self._transform.position
            renderer.render_texture_scaled(
                self._texture,
                position.x + self._texture_offset.x,
                position.y + self._texture_offset.y,
                self._scale,
                self._src_rect,
            )
            return
        log_warning(
            "TextureComponent::Render >> GameObject does not have transformComponent, renderPos = (0,0)"
        )
        renderer.render_texture_scaled(self._texture, 0, 0, self._scale, self._src_rect)

    @property
    def src_rect(self) -> IRect:
        rect = self._src_rect
        return IRect(rect.x, rect.y, rect.width, rect.height)

    def set_src_rect(self, x: int, y: int, width: int, height: int) -> None:
        self._src_rect = IRect(x, y, width, height)

    @property
    def scale(self) -> float:
        return self._scale

    @scale.setter
    def scale(self, scale: float) -> None:
        self._scale = scale

    @property
    def texture_offset(self) -> IPoint2:
        return IPoint2(self._texture_offset.x, self._texture_offset.y)

    @texture_offset.setter
    def texture_offset(self, offset: IPoint2) -> None:
        self._texture_offset = IPoint2(offset.x, offset.y)