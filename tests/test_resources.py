import os

import pygame
import pytest

from horizon.resources import Font, ResourceManager

PYGAME_DIR = os.path.dirname(pygame.__file__) + os.sep


@pytest.fixture
def manager():
    ResourceManager.reset_instance()
    yield ResourceManager.instance()
    ResourceManager.reset_instance()


def _save_png(path, size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, str(path))


def test_init_stores_data_path(manager, tmp_path):
    prefix = str(tmp_path) + os.sep
    manager.init(prefix)
    assert manager.data_path == prefix


def test_load_texture_from_data_path(manager, tmp_path):
    _save_png(tmp_path / "blue.png", (3, 2), (0, 0, 255))
    manager.init(str(tmp_path) + os.sep)
    texture = manager.load_texture("blue.png")
    assert texture.size == (3, 2)
    assert tuple(texture.surface.get_at((0, 0)))[:3] == (0, 0, 255)


def test_data_path_is_a_plain_prefix(manager, tmp_path):
    _save_png(tmp_path / "img_logo.png", (2, 2), (255, 0, 0))
    manager.init(str(tmp_path / "img_"))
    assert manager.load_texture("logo.png").size == (2, 2)


def test_missing_texture_raises(manager, tmp_path):
    manager.init(str(tmp_path) + os.sep)
    with pytest.raises(RuntimeError, match="Failed to load texture"):
        manager.load_texture("absent.png")


def test_load_font_keeps_size(manager):
    manager.init(PYGAME_DIR)
    font = manager.load_font(pygame.font.get_default_font(), 18)
    assert font.size == 18
    assert font.font.size("A")[1] > 0


def test_missing_font_raises(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to load font"):
        Font(str(tmp_path / "absent.ttf"), 12)


def test_larger_font_renders_taller_text():
    path = PYGAME_DIR + pygame.font.get_default_font()
    small = Font(path, 10)
    large = Font(path, 30)
    assert large.font.size("Hello")[1] > small.font.size("Hello")[1]