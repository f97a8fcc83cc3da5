"""Keyboard and mouse state tracked from window events, with per-frame edges."""

from __future__ import annotations

from typing import Any, Optional

from .events import Btn, EventHandler, InputEvent, Key

_KEY_SLOTS = 256
_CAPTURE_PRIORITY = 50


class InputManager:
    """Current and previous-frame keyboard and mouse state."""

    def __init__(self) -> None:
        self.keyboard = [False] * _KEY_SLOTS
        self.prev_keyboard = [False] * _KEY_SLOTS
        self.mouse = [False] * int(Btn.MAX)
        self.prev_mouse = [False] * int(Btn.MAX)
        self.mouse_x = 0
        self.mouse_y = 0
        self.prev_mouse_x = 0
        self.prev_mouse_y = 0
        self.last_window_on: Optional[Any] = None
        self.handlers: list[InputHandler] = []

    def update(self, delta_time: float = 0.0) -> None:
        """Start a new frame: the current state becomes the previous state."""
        self.prev_keyboard = list(self.keyboard)
        self.prev_mouse = list(self.mouse)
        self.prev_mouse_x = self.mouse_x
        self.prev_mouse_y = self.mouse_y

    def create_handler(self, window=None) -> "InputHandler":
        """Create a handler feeding this manager, registering it on ``window`` if it accepts handlers."""
        handler = InputHandler(self, window)
        self.handlers.append(handler)
        register = getattr(window, "add_event_handler", None)
        if callable(register):
            register(handler, _CAPTURE_PRIORITY)
        return handler

    def key_pressed(self, key: Key) -> bool:
        return self.keyboard[key] and not self.prev_keyboard[key]

    def key_released(self, key: Key) -> bool:
        return not self.keyboard[key] and self.prev_keyboard[key]

    def key_down(self, key: Key) -> bool:
        return self.keyboard[key]

    def key_up(self, key: Key) -> bool:
        return not self.keyboard[key]

    def key_was_down(self, key: Key) -> bool:
        return self.prev_keyboard[key]

    def key_was_up(self, key: Key) -> bool:
        return not self.prev_keyboard[key]

    def mouse_pressed(self, button: Btn) -> bool:
        return self.mouse[button] and not self.prev_mouse[button]

    def mouse_released(self, button: Btn) -> bool:
        return not self.mouse[button] and self.prev_mouse[button]

    def mouse_down(self, button: Btn) -> bool:
        return self.mouse[button]

    def mouse_up(self, button: Btn) -> bool:
        return not self.mouse[button]

    def mouse_was_down(self, button: Btn) -> bool:
        return self.prev_mouse[button]

    def mouse_was_up(self, button: Btn) -> bool:
        return not self.prev_mouse[button]

    def mouse_position(self) -> tuple[int, int]:
        return self.mouse_x, self.mouse_y

    def mouse_prev_position(self) -> tuple[int, int]:
        return self.prev_mouse_x, self.prev_mouse_y

    def mouse_motion(self) -> tuple[int, int]:
        """Mouse movement since the last update."""
        return self.mouse_x - self.prev_mouse_x, self.mouse_y - self.prev_mouse_y


class InputHandler(EventHandler):
    """Event handler that records key, button and motion events into a manager."""

    def __init__(self, manager: InputManager, window=None) -> None:
        self.manager = manager
        self.window = window

    def on_key(self, kind: InputEvent, key: Key) -> bool:
        if kind == InputEvent.PRESS:
            self.manager.keyboard[key] = True
        elif kind == InputEvent.RELEASE:
            self.manager.keyboard[key] = False
        return False

    def on_mouse_button(self, kind: InputEvent, button: Btn) -> bool:
        if kind == InputEvent.PRESS:
            self.manager.mouse[button] = True
        elif kind == InputEvent.RELEASE:
            self.manager.mouse[button] = False
        return False

    def on_mouse_motion(self, x: int, y: int) -> bool:
        self.manager.last_window_on = self.window
        self.manager.mouse_x = x
        self.manager.mouse_y = y
        return False