"""Frame-based animation over a horizontal strip of a texture."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from .component import Component
from .structs import IPoint2, IRect
from .texture import TextureComponent

if TYPE_CHECKING:
    from .game_object import GameObject


def _round_half_away(value: float) -> int:
    rounded = math.floor(abs(value) + 0.5)
    return int(rounded if value >= 0 else -rounded)


class SpriteComponent(Component):
    """Shows one of several equally wide frames laid out side by side in a source rectangle."""

    def __init__(
        self,
        parent: "GameObject",
        file_name: str,
        src_rect: IRect,
        sprite_amount: int,
    ) -> None:
        super().__init__(parent)
        self._current_sprite = 0
        self._src_rect = IRect(src_rect.x, src_rect.y, src_rect.width, src_rect.height)
        self._sprite_amount = sprite_amount
        self._sprite_width = self._frame_width(sprite_amount)
        self._texture = TextureComponent(parent, file_name)
        parent.add_component(self._texture)

    def _frame_width(self, sprite_amount: int) -> int:
        if sprite_amount == 0:
            raise ValueError("sprite amount must not be zero")
        return _round_half_away(self._src_rect.width / sprite_amount)

    def _apply_frame(self) -> None:
        self._texture.set_src_rect(
            self._src_rect.x + self._sprite_width * self._current_sprite,
            self._src_rect.y,
            self._sprite_width,
            self._src_rect.height,
        )

    @property
    def texture_component(self) -> TextureComponent:
        return self._texture

    def initialize(self) -> None:
        self._texture.set_src_rect(
            self._src_rect.x, self._src_rect.y, self._sprite_width, self._src_rect.height
        )

    @property
    def current_sprite(self) -> int:
        return self._current_sprite

    @current_sprite.setter
    def current_sprite(self, sprite_number: int) -> None:
        """Show a frame; numbers at or past the frame count are ignored."""
        if sprite_number == self._current_sprite or sprite_number >= self._sprite_amount:
            return
        self._current_sprite = sprite_number
        self._apply_frame()

    def next_sprite(self) -> None:
        if self._current_sprite == self._sprite_amount - 1:
            self._current_sprite = 0
        else:
            self._current_sprite += 1
        self._apply_frame()

    def previous_sprite(self) -> None:
        if self._current_sprite == 0:
            self._current_sprite = self._sprite_amount - 1
        else:
            self._current_sprite -= 1
        self._apply_frame()

    def scale(self, scale: float) -> None:
        self._texture.scale = scale

    @property
    def src_rect(self) -> IRect:
        rect = self._src_rect
        return IRect(rect.x, rect.y, rect.width, rect.height)

    @src_rect.setter
    def src_rect(self, src_rect: IRect) -> None:
        self._src_rect = IRect(src_rect.x, src_rect.y, src_rect.width, src_rect.height)

    @property
    def sprite_amount(self) -> int:
        return self._sprite_amount

    @sprite_amount.setter
    def sprite_amount(self, sprite_amount: int) -> None:
        self._sprite_width = self._frame_width(sprite_amount)
        self._sprite_amount = sprite_amount

    @property
    def sprite_width(self) -> int:
        return self._sprite_width

    def set_sprite_offset(self, offset: IPoint2) -> None:
        self._texture.texture_offset = offset