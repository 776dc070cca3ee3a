"""Queued sound playback and the locator that hands out the active sound system."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import Counter, deque
from typing import ClassVar, Iterable, Protocol

import pygame

from .logger import log_warning
from .structs import AudioData, SoundId

MAX_VOLUME = 128
_MAX_MESSAGES = 16
_QUEUE_CAPACITY = _MAX_MESSAGES - 1
_MAX_PLAYING_CHANNELS = 4


class PlayableSound(Protocol):
    def set_volume(self, value: float) -> None: ...

    def play(self) -> object: ...


def _playing_channels() -> int:
    if not pygame.mixer.get_init():
        return 0
    return sum(
        1
        for index in range(pygame.mixer.get_num_channels())
        if pygame.mixer.Channel(index).get_busy()
    )


class SoundSystem(ABC):
    """Plays sounds by id; ids are the order in which sounds were added."""

    def __init__(self, sounds: Iterable[PlayableSound | None] = ()) -> None:
        self._sounds: list[PlayableSound | None] = list(sounds)

    @property
    def sounds(self) -> tuple[PlayableSound | None, ...]:
        return tuple(self._sounds)

    @abstractmethod
    def queue_event(self, sound_id: SoundId, volume: int) -> None:
        """Ask for a sound to be played at a volume from 0 to 128."""

    @abstractmethod
    def update(self) -> None:
        """Handle at most one queued request."""

    def add_audio(self, audio_path: str) -> None:
        """Load a sound file; a file that fails to load still takes up its id."""
        try:
            sound: PlayableSound | None = pygame.mixer.Sound(audio_path)
        except (pygame.error, OSError) as error:
            log_warning(f"SoundSystem::AddAudio >> could not load {audio_path}: {error}")
            sound = None
        self._sounds.append(sound)


class NullSoundSystem(SoundSystem):
    """Accepts requests and drops them without playing anything."""

    def __init__(self, sounds: Iterable[PlayableSound | None] = ()) -> None:
        super().__init__(sounds)
        self._calls: Counter[str] = Counter()

    def queue_event(self, sound_id: SoundId, volume: int) -> None:
        self._calls["queue_event"] += 1

    def update(self) -> None:
        self._calls["update"] += 1


class _QueuedSoundSystem(SoundSystem):
    def __init__(self, sounds: Iterable[PlayableSound | None] = ()) -> None:
        super().__init__(sounds)
        self._queue: deque[AudioData] = deque()
        self._lock = threading.Lock()

    def _snapshot(self) -> tuple[AudioData, ...]:
        with self._lock:
            return tuple(AudioData(audio.id, audio.volume) for audio in self._queue)

    def _enqueue(self, sound_id: SoundId, volume: int) -> None:
        if len(self._queue) >= _QUEUE_CAPACITY:
            raise OverflowError("sound queue is full")
        self._queue.append(AudioData(sound_id, volume))

    def _next_request(self) -> AudioData | None:
        with self._lock:
            if not self._queue:
                return None
        if _playing_channels() >= _MAX_PLAYING_CHANNELS:
            return None
        with self._lock:
            return self._queue.popleft() if self._queue else None


class MixerSoundSystem(_QueuedSoundSystem):
    """Plays queued sounds through the mixer; repeated requests for one sound merge."""

    @property
    def pending(self) -> tuple[AudioData, ...]:
        """Requests still waiting, oldest first."""
        return self._snapshot()

    def queue_event(self, sound_id: SoundId, volume: int) -> None:
        """Queue a sound; if it is already queued, keep the louder volume."""
        with self._lock:
            for audio in self._queue:
                if audio.id == sound_id:
                    audio.volume = max(volume, audio.volume)
                    return
            self._enqueue(sound_id, volume)

    def update(self) -> None:
        audio = self._next_request()
        if audio is None:
            return
        sound = self._sounds[audio.id]
        if sound is None:
            return
        sound.set_volume(min(max(audio.volume, 0), MAX_VOLUME) / MAX_VOLUME)
        sound.play()


class MutedSoundSystem(_QueuedSoundSystem):
    """Reports queued sounds on standard output instead of playing them."""

    @property
    def pending(self) -> tuple[AudioData, ...]:
        """Requests still waiting, oldest first."""
        return self._snapshot()

    def queue_event(self, sound_id: SoundId, volume: int) -> None:
        with self._lock:
            self._enqueue(sound_id, volume)

    def update(self) -> None:
        audio = self._next_request()
        if audio is None:
            return
        print(
            f"muted SoundSystem: sound with id {audio.id} "
            f"should be played with volume {audio.volume}",
            flush=True,
        )


class SoundSystemServiceLocator:
    """Gives access to the registered sound system, or a silent one."""

    _default: ClassVar[NullSoundSystem] = NullSoundSystem()
    _instance: ClassVar[SoundSystem | None] = None
    _retired: ClassVar[list[SoundSystem]] = []

    @classmethod
    def get_sound_system(cls) -> SoundSystem:
        instance = SoundSystemServiceLocator._instance
        return instance if instance is not None else SoundSystemServiceLocator._default

    @classmethod
    def register_sound_system(cls, sound_system: SoundSystem | None) -> None:
        """Make a sound system current; None falls back to the silent one."""
        if sound_system is None:
            SoundSystemServiceLocator._instance = None
            return
        previous = SoundSystemServiceLocator._instance
        if previous is not None:
            SoundSystemServiceLocator._retired.append(previous)
        SoundSystemServiceLocator._instance = sound_system

    @classmethod
    def release_service_locator(cls) -> None:
        SoundSystemServiceLocator._instance = None
        SoundSystemServiceLocator._retired.clear()