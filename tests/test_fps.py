import os

import pygame
import pytest

from horizon.fps import FPSComponent
from horizon.game_object import GameObject
from horizon.resources import Font
from horizon.text import TextComponent
from horizon.timer import Timer

FONT_PATH = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


class _StepClock:
    def __init__(self, step):
        self.now = 0.0
        self.step = step

    def __call__(self):
        value = self.now
        self.now += self.step
        return value


@pytest.fixture
def timer():
    Timer.reset_instance()
    instance = Timer.instance()
    instance.clock = _StepClock(0.25)
    yield instance
    Timer.reset_instance()


def _fps_object():
    game_object = GameObject("fps")
    text = TextComponent(game_object, "start", Font(FONT_PATH, 12))
    fps = FPSComponent(game_object)
    game_object.add_component(text)
    game_object.add_component(fps)
    game_object.initialize()
    return game_object, text, fps


def test_update_writes_measured_fps(timer):
    _, text, fps = _fps_object()
    timer.update_last_time()
    for _ in range(4):
        timer.update()
        timer.calculate_fps()
    fps.update()
    assert timer.fps == 4
    assert text.text == f"{timer.fps} FPS"
    assert text.needs_update


def test_text_follows_through_game_object_update(timer):
    game_object, text, _ = _fps_object()
    game_object.update()
    assert text.text == f"{timer.fps} FPS"
    assert text.text.endswith(" FPS")


def test_inactive_object_keeps_text(timer):
    game_object, text, _ = _fps_object()
    game_object.deactivate()
    game_object.update()
    assert text.text == "start"