import pygame
import pytest

from horizon.renderer import Renderer, Texture2D
from horizon.scene import Scene
from horizon.scene_manager import SceneManager
from horizon.structs import Color, IRect

RED = (255, 0, 0)
GREEN = (0, 255, 0)
BLACK = (0, 0, 0)


def _rgb(surface, x, y):
    return tuple(surface.get_at((x, y)))[:3]


def _solid(size, color):
    surface = pygame.Surface(size, pygame.SRCALPHA)
    surface.fill((*color, 255))
    return Texture2D(surface)


@pytest.fixture
def renderer():
    Renderer.reset_instance()
    SceneManager.reset_instance()
    instance = Renderer.instance()
    target = pygame.Surface((64, 64))
    target.fill(BLACK)
    instance.init(target)
    yield instance
    Renderer.reset_instance()
    SceneManager.reset_instance()


def test_texture_size_matches_surface():
    texture = _solid((5, 7), RED)
    assert texture.size == (5, 7)
    assert texture.surface.get_size() == (5, 7)


def test_init_without_window_raises():
    with pytest.raises(RuntimeError):
        Renderer().init(None)


def test_render_texture_at_position(renderer):
    renderer.render_texture(_solid((4, 4), RED), 10, 12)
    assert _rgb(renderer.surface, 10, 12) == RED
    assert _rgb(renderer.surface, 13, 15) == RED
    assert _rgb(renderer.surface, 14, 12) == BLACK
    assert _rgb(renderer.surface, 9, 12) == BLACK


def test_render_texture_stretched(renderer):
    renderer.render_texture(_solid((2, 2), GREEN), 0, 0, 10, 6)
    assert _rgb(renderer.surface, 9, 5) == GREEN
    assert _rgb(renderer.surface, 10, 5) == BLACK
    assert _rgb(renderer.surface, 9, 6) == BLACK


def test_render_texture_needs_both_dimensions(renderer):
    with pytest.raises(TypeError):
        renderer.render_texture(_solid((2, 2), GREEN), 0, 0, width=4)


def test_render_texture_scaled_source_part(renderer):
    sheet = pygame.Surface((8, 4), pygame.SRCALPHA)
    sheet.fill((*RED, 255), pygame.Rect(0, 0, 4, 4))
    sheet.fill((*GREEN, 255), pygame.Rect(4, 0, 4, 4))
    renderer.render_texture_scaled(Texture2D(sheet), 20, 20, 2.0, IRect(4, 0, 4, 4))
    assert _rgb(renderer.surface, 20, 20) == GREEN
    assert _rgb(renderer.surface, 27, 27) == GREEN
    assert _rgb(renderer.surface, 28, 20) == BLACK


def test_render_texture_scaled_whole_texture_by_default(renderer):
    sheet = pygame.Surface((8, 4), pygame.SRCALPHA)
    sheet.fill((*RED, 255), pygame.Rect(0, 0, 4, 4))
    sheet.fill((*GREEN, 255), pygame.Rect(4, 0, 4, 4))
    renderer.render_texture_scaled(Texture2D(sheet), 0, 0, 1.0, IRect(0, 0, -1, -1))
    assert _rgb(renderer.surface, 0, 0) == RED
    assert _rgb(renderer.surface, 7, 3) == GREEN
    assert _rgb(renderer.surface, 8, 0) == BLACK


def test_draw_rect_outlines_only(renderer):
    renderer.draw_rect(Color(255, 0, 0), IRect(10, 10, 20, 20))
    assert _rgb(renderer.surface, 10, 10) == RED
    assert _rgb(renderer.surface, 29, 29) == RED
    assert _rgb(renderer.surface, 20, 20) == BLACK


def test_render_clears_and_draws_active_scene(renderer):
    calls = []

    class RecordingScene(Scene):
        def render(self):
            calls.append(self.name)

    SceneManager.instance().add_scene(RecordingScene("level"))
    renderer.surface.fill(RED)
    renderer.render(0.0)
    assert calls == ["level"]
    assert _rgb(renderer.surface, 0, 0) == BLACK


def test_destroy_detaches_target(renderer):
    renderer.destroy()
    assert renderer.surface is None
    with pytest.raises(RuntimeError):
        renderer.render_texture(_solid((1, 1), RED), 0, 0)