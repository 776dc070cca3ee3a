"""Loading of textures and fonts from the data directory."""

from __future__ import annotations

import pygame

from .renderer import Texture2D
from .singleton import Singleton


class Font:
    """A font loaded from a file at a fixed point size."""

    def __init__(self, full_path: str, size: int) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        try:
            self._font = pygame.font.Font(full_path, size)
        except (OSError, pygame.error) as error:
            raise RuntimeError(f"Failed to load font: {error}") from error
        self._size = size

    @property
    def font(self) -> pygame.font.Font:
        return self._font

    @property
    def size(self) -> int:
        return self._size


class ResourceManager(Singleton):
    """Loads resources relative to a data path prefix."""

    def __init__(self) -> None:
        self._data_path = ""

    @property
    def data_path(self) -> str:
        return self._data_path

    def init(self, data_path: str) -> None:
        """Set the data path and make sure image and font support is available."""
        self._data_path = data_path
        if not pygame.image.get_extended():
            raise RuntimeError("Failed to load support for png's and jpg's")
        if not pygame.font.get_init():
            pygame.font.init()
        if not pygame.font.get_init():
            raise RuntimeError("Failed to load support for fonts")

    def load_texture(self, file: str) -> Texture2D:
        full_path = self._data_path + file
        try:
            surface = pygame.image.load(full_path)
        except (OSError, pygame.error) as error:
            raise RuntimeError(f"Failed to load texture: {error}") from error
        return Texture2D(surface)

    def load_font(self, file: str, size: int) -> Font:
        return Font(self._data_path + file, size)