"""The application: window, audio and the main loop."""

from __future__ import annotations

import threading
from typing import Sequence

import pygame

from .input import InputManager
from .logger import log_error
from .renderer import Renderer
from .scene_manager import SceneManager
from .sound import MixerSoundSystem, SoundSystem, SoundSystemServiceLocator
from .timer import Timer
from .trigger_manager import TriggerManager

DEFAULT_SOUND_FILES = (
    "../Data/sounds/LevelIntro.wav",
    "../Data/sounds/LevelCompleted.wav",
    "../Data/sounds/QBertJump.wav",
    "../Data/sounds/CoilyJump.wav",
    "../Data/sounds/SamSlickJump.wav",
    "../Data/sounds/UggWrongWayJump.wav",
    "../Data/sounds/Disk.wav",
    "../Data/sounds/QBertHit.wav",
    "../Data/sounds/QBertFall.wav",
    "../Data/sounds/CoilyFall.wav",
)

_AUDIO_RATE = 44100
_AUDIO_FORMAT = -16
_AUDIO_CHANNELS = 1
_AUDIO_BUFFERS = 4096


class Engine:
    """Opens the window and audio, then runs scenes until the user quits."""

    def __init__(
        self,
        sound_files: Sequence[str] = DEFAULT_SOUND_FILES,
        title: str = "Programming 4 assignment",
        size: tuple[int, int] = (640, 480),
    ) -> None:
        self.sound_files = tuple(sound_files)
        self.title = title
        self.size = size
        self._window: pygame.Surface | None = None

    def initialize(self) -> None:
        """Start video and audio and register the mixer sound system."""
        pygame.mixer.pre_init(_AUDIO_RATE, _AUDIO_FORMAT, _AUDIO_CHANNELS, _AUDIO_BUFFERS)
        pygame.init()
        if not pygame.display.get_init():
            raise RuntimeError(f"SDL_Init Error: {pygame.get_error()}")

        try:
            self._window = pygame.display.set_mode(self.size)
        except pygame.error as error:
            raise RuntimeError(f"SDL_CreateWindow Error: {error}") from error
        pygame.display.set_caption(self.title)

        Renderer.instance().init(self._window)

        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init(_AUDIO_RATE, _AUDIO_FORMAT, _AUDIO_CHANNELS, _AUDIO_BUFFERS)
            except pygame.error:
                log_error("Horizon::Initialize >> SDL_MIXER could not be initialized")
                raise SystemExit(1)

        SoundSystemServiceLocator.register_sound_system(MixerSoundSystem())
        sound_system = SoundSystemServiceLocator.get_sound_system()
        for path in self.sound_files:
            sound_system.add_audio(path)

    def cleanup(self) -> None:
        Renderer.instance().destroy()
        self._window = None
        pygame.display.quit()
        pygame.mixer.quit()
        SoundSystemServiceLocator.release_service_locator()
        pygame.quit()

    @staticmethod
    def _audio_loop(sound_system: SoundSystem, stop: threading.Event) -> None:
        while not stop.is_set():
            sound_system.update()
            stop.wait(0.001)

    def run(self) -> None:
        """Run the fixed-step main loop until the input asks to quit."""
        self.initialize()
        try:
            input_manager = InputManager.instance()
            renderer = Renderer.instance()
            scene_manager = SceneManager.instance()
            timer = Timer.instance()
            sound_system = SoundSystemServiceLocator.get_sound_system()

            scene_manager.initialize()
            scene_manager.post_initialize()
            timer.update_last_time()

            stop = threading.Event()
            audio_thread = threading.Thread(
                target=self._audio_loop, args=(sound_system, stop), daemon=True
            )
            audio_thread.start()

            lag = 0.0
            keep_running = True
            try:
                while keep_running:
                    timer.update()
                    lag += timer.delta_time

                    keep_running = input_manager.process_input()

                    while lag >= timer.fixed_frame_time:
                        scene_manager.fixed_update()
                        lag -= timer.fixed_frame_time

                    scene_manager.update()
                    scene_manager.late_update()
                    renderer.render(lag / timer.fixed_frame_time)
                    TriggerManager.instance().update()
                    timer.calculate_fps()
            finally:
                stop.set()
                audio_thread.join()
        finally:
            self.cleanup()