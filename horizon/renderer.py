"""Drawing of textures and shapes onto the window surface."""

from __future__ import annotations

import pygame

from .scene_manager import SceneManager
from .singleton import Singleton
from .structs import Color, IRect


class Texture2D:
    """An image that can be drawn by the renderer."""

    def __init__(self, surface: pygame.Surface) -> None:
        self._surface = surface

    @property
    def surface(self) -> pygame.Surface:
        return self._surface

    @property
    def size(self) -> tuple[int, int]:
        width, height = self._surface.get_size()
        return width, height


class Renderer(Singleton):
    """Draws the active scene and individual textures onto a target surface."""

    def __init__(self) -> None:
        self._surface: pygame.Surface | None = None

    def init(self, window: pygame.Surface | None) -> None:
        """Use the given window surface as the drawing target."""
        if window is None:
            raise RuntimeError("Failed to create renderer: no window surface")
        self._surface = window

    def _target(self) -> pygame.Surface:
        if self._surface is None:
            raise RuntimeError("Renderer is not initialized")
        return self._surface

    def render(self, time: float) -> None:
        """Clear the target, draw the active scene and present the frame."""
        target = self._target()
        target.fill((0, 0, 0))
        SceneManager.instance().render()
        if pygame.display.get_init() and pygame.display.get_surface() is target:
            pygame.display.flip()

    def destroy(self) -> None:
        self._surface = None

    @property
    def surface(self) -> pygame.Surface | None:
        return self._surface

    def render_texture(
        self,
        texture: Texture2D,
        x: int,
        y: int,
        width: int | None = None,
        height: int | None = None,
    ) -> None:
        """Draw a texture at (x, y), stretched to width and height when both are given."""
        target = self._target()
        image = texture.surface
        if width is not None or height is not None:
            if width is None or height is None:
                raise TypeError("render_texture needs both width and height or neither")
            if width <= 0 or height <= 0:
                return
            image = pygame.transform.scale(image, (width, height))
        target.blit(image, (x, y))

    def render_texture_scaled(
        self,
        texture: Texture2D,
        x: int,
        y: int,
        scale: float = 1.0,
        src_rect: IRect | None = None,
    ) -> None:
        """Draw part of a texture, scaled; a source size of -1 by -1 means the whole texture."""
        target = self._target()
        src = src_rect if src_rect is not None else IRect(0, 0, -1, -1)
        width, height = src.width, src.height
        if width == -1 and height == -1:
            width, height = texture.size
        dst_width, dst_height = int(width * scale), int(height * scale)
        if width <= 0 or height <= 0 or dst_width <= 0 or dst_height <= 0:
            return
        piece = pygame.Surface((width, height), pygame.SRCALPHA)
        piece.blit(texture.surface, (0, 0), pygame.Rect(src.x, src.y, width, height))
        if (dst_width, dst_height) != (width, height):
            piece = pygame.transform.scale(piece, (dst_width, dst_height))
        target.blit(piece, (x, y))

    def draw_rect(self, color: Color, rect: IRect) -> None:
        """Draw the outline of a rectangle."""
        target = self._target()
        pygame.draw.rect(
            target,
            (color.r, color.g, color.b),
            pygame.Rect(rect.x, rect.y, rect.width, rect.height),
            1,
        )