"""Keyboard, mouse and gamepad state tracking."""

from __future__ import annotations

from enum import Enum, auto
from typing import Hashable


class KeyState(Enum):
    """State of a key or button."""

    RELEASED = auto()
    PRESSED = auto()
    HELD = auto()


class MouseButton(Enum):
    """Mouse buttons."""

    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    BUTTON4 = auto()
    BUTTON5 = auto()


class GamepadButton(Enum):
    """Gamepad buttons."""

    A = auto()
    B = auto()
    X = auto()
    Y = auto()
    LB = auto()
    RB = auto()
    SELECT = auto()
    START = auto()
    LEFT_STICK = auto()
    RIGHT_STICK = auto()
    DPAD_UP = auto()
    DPAD_DOWN = auto()
    DPAD_LEFT = auto()
    DPAD_RIGHT = auto()


def _promote(states: dict[Hashable, KeyState]) -> None:
    for name, state in states.items():
        if state is KeyState.PRESSED:
            states[name] = KeyState.HELD


class InputSystem:
    """Tracks pressed, held and released inputs between frames."""

    def __init__(self) -> None:
        self._keys: dict[int, KeyState] = {}
        self._mouse: dict[MouseButton, KeyState] = {}
        self._gamepad: dict[GamepadButton, KeyState] = {}

    def update(self) -> None:
        """Turn every input pressed this frame into a held input."""
        for states in (self._keys, self._mouse, self._gamepad):
            _promote(states)

    def key_pressed(self, key: int) -> None:
        self._keys[key] = KeyState.PRESSED

    def key_released(self, key: int) -> None:
        self._keys[key] = KeyState.RELEASED

    def mouse_button_pressed(self, button: MouseButton) -> None:
        self._mouse[button] = KeyState.PRESSED

    def mouse_button_released(self, button: MouseButton) -> None:
        self._mouse[button] = KeyState.RELEASED

    def gamepad_button_pressed(self, button: GamepadButton) -> None:
        self._gamepad[button] = KeyState.PRESSED

    def gamepad_button_released(self, button: GamepadButton) -> None:
        self._gamepad[button] = KeyState.RELEASED

    def is_key_pressed(self, key: int) -> bool:
        return self._keys.get(key) is KeyState.PRESSED

    def is_key_held(self, key: int) -> bool:
        return self._keys.get(key) is KeyState.HELD

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return self._mouse.get(button) is KeyState.PRESSED

    def is_mouse_button_held(self, button: MouseButton) -> bool:
        return self._mouse.get(button) is KeyState.HELD

    def is_gamepad_button_pressed(self, button: GamepadButton) -> bool:
        return self._gamepad.get(button) is KeyState.PRESSED

    def is_gamepad_button_held(self, button: GamepadButton) -> bool:
        return self._gamepad.get(button) is KeyState.HELD