"""Keyboard and controller input bound to commands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable

import pygame

from .commands import Command
from .singleton import Singleton


class ControllerButton(IntEnum):
    """Controller buttons, numbered as XInput virtual keys."""

    BUTTON_A = 0x5800
    BUTTON_B = 0x5801
    BUTTON_X = 0x5802
    BUTTON_Y = 0x5803
    RIGHT_SHOULDER = 0x5804
    LEFT_SHOULDER = 0x5805
    LEFT_TRIGGER = 0x5806
    RIGHT_TRIGGER = 0x5807
    DPAD_UP = 0x5810
    DPAD_DOWN = 0x5811
    DPAD_LEFT = 0x5812
    DPAD_RIGHT = 0x5813
    START = 0x5814
    SELECT = 0x5815
    LEFT_THUMB_STICK = 0x5816
    RIGHT_THUMB_STICK = 0x5817


class ControllerButtonState(IntEnum):
    BUTTON_DOWN = 0x0001
    BUTTON_UP = 0x0002


class KeyboardButtonState(IntEnum):
    """Keyboard states, numbered as the matching event types."""

    KEY_DOWN = 768
    KEY_UP = 769


# Game-controller button indices as reported in controller events.
_CONTROLLER_BUTTONS = {
    0: ControllerButton.BUTTON_A,
    1: ControllerButton.BUTTON_B,
    2: ControllerButton.BUTTON_X,
    3: ControllerButton.BUTTON_Y,
    4: ControllerButton.SELECT,
    6: ControllerButton.START,
    7: ControllerButton.LEFT_THUMB_STICK,
    8: ControllerButton.RIGHT_THUMB_STICK,
    9: ControllerButton.LEFT_SHOULDER,
    10: ControllerButton.RIGHT_SHOULDER,
    11: ControllerButton.DPAD_UP,
    12: ControllerButton.DPAD_DOWN,
    13: ControllerButton.DPAD_LEFT,
    14: ControllerButton.DPAD_RIGHT,
}
_TRIGGER_AXES = {4: ControllerButton.LEFT_TRIGGER, 5: ControllerButton.RIGHT_TRIGGER}
# A trigger counts as pressed past 30 on a 0..255 scale, as XInput does.
_TRIGGER_THRESHOLD = round(30 / 255 * 32767)


@dataclass(frozen=True)
class _Keystroke:
    virtual_key: int = 0
    flags: int = 0


class InputManager(Singleton):
    """Dispatches input events to bound commands and remembers the latest presses."""

    def __init__(self) -> None:
        self._key_code = 0
        self._keyboard_input = 0
        self._keystroke = _Keystroke()
        self._controller_commands: dict[tuple[ControllerButtonState, ControllerButton], Command] = {}
        self._keyboard_commands: dict[tuple[KeyboardButtonState, int], Command] = {}
        self._pressed_triggers: set[tuple[int, int]] = set()

    def add_controller_input(
        self, button: ControllerButton, button_state: ControllerButtonState, action: Command
    ) -> None:
        """Bind a command; an existing binding for the same button and state is kept."""
        key = (ControllerButtonState(button_state), ControllerButton(button))
        self._controller_commands.setdefault(key, action)

    def add_keyboard_input(
        self, key: int, key_state: KeyboardButtonState, action: Command
    ) -> None:
        """Bind a command; an existing binding for the same key and state is kept."""
        binding = (KeyboardButtonState(key_state), int(key))
        self._keyboard_commands.setdefault(binding, action)

    def is_controller_input_pressed(self, button: ControllerButton) -> bool:
        if self._keystroke.flags != ControllerButtonState.BUTTON_DOWN:
            return False
        return self._keystroke.virtual_key == button

    def is_keyboard_input_pressed(self, key: int) -> bool:
        """Report a pending key press once; the press is consumed when it matches."""
        if self._keyboard_input != KeyboardButtonState.KEY_DOWN:
            return False
        if self._key_code == key:
            self._keyboard_input = 0
            return True
        return False

    def clear_input(self) -> None:
        self._controller_commands.clear()
        self._keyboard_commands.clear()

    def process_input(self, events: Iterable[Any] | None = None) -> bool:
        """Handle one frame of events; returns False when the application should quit."""
        self._keystroke = _Keystroke()
        if events is None:
            events = pygame.event.get()

        strokes: list[_Keystroke] = []
        for event in events:
            if event.type == pygame.QUIT:
                return False
            self._handle_keyboard(event)
            stroke = self._controller_keystroke(event)
            if stroke is not None:
                strokes.append(stroke)

        for stroke in strokes:
            self._keystroke = stroke
            for (state, button), command in sorted(
                self._controller_commands.items(), key=lambda item: item[0]
            ):
                if stroke.flags == state and stroke.virtual_key == button and command is not None:
                    command.execute()
        return True

    def _handle_keyboard(self, event: Any) -> None:
        for (state, key), command in sorted(
            self._keyboard_commands.items(), key=lambda item: item[0]
        ):
            if event.type != state:
                continue
            self._key_code = event.key
            self._keyboard_input = KeyboardButtonState.KEY_DOWN
            if self._key_code == key and command is not None:
                command.execute()

    def _controller_keystroke(self, event: Any) -> _Keystroke | None:
        event_type = event.type
        if event_type in (pygame.CONTROLLERBUTTONDOWN, pygame.CONTROLLERBUTTONUP):
            button = _CONTROLLER_BUTTONS.get(event.button)
            if button is None:
                return None
            state = (
                ControllerButtonState.BUTTON_DOWN
                if event_type == pygame.CONTROLLERBUTTONDOWN
                else ControllerButtonState.BUTTON_UP
            )
            return _Keystroke(button, state)
        if event_type == pygame.CONTROLLERAXISMOTION:
            button = _TRIGGER_AXES.get(event.axis)
            if button is None:
                return None
            trigger = (getattr(event, "instance_id", 0), event.axis)
            pressed = event.value >= _TRIGGER_THRESHOLD
            if pressed and trigger not in self._pressed_triggers:
                self._pressed_triggers.add(trigger)
                return _Keystroke(button, ControllerButtonState.BUTTON_DOWN)
            if not pressed and trigger in self._pressed_triggers:
                self._pressed_triggers.discard(trigger)
                return _Keystroke(button, ControllerButtonState.BUTTON_UP)
        return None