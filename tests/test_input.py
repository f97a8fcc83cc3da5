import pytest

from nsengine.events import Btn, EventHandlerList, InputEvent, Key
from nsengine.input import InputHandler, InputManager


class _FakeWindow:
    def __init__(self):
        self.handlers = EventHandlerList()
        self.calls = []

    def add_event_handler(self, handler, priority):
        self.calls.append((handler, priority))
        self.handlers.insert(handler, priority)


@pytest.fixture
def manager():
    return InputManager()


def test_key_press_edges(manager):
    h = manager.create_handler()
    assert h.on_key(InputEvent.PRESS, Key.P) is False
    assert manager.key_down(Key.P)
    assert manager.key_pressed(Key.P)
    assert manager.key_was_up(Key.P)
    manager.update(0.016)
    assert not manager.key_pressed(Key.P)
    assert manager.key_was_down(Key.P)
    h.on_key(InputEvent.RELEASE, Key.P)
    assert manager.key_released(Key.P)
    assert manager.key_up(Key.P)
    manager.update()
    assert not manager.key_released(Key.P)


def test_keys_independent(manager):
    h = manager.create_handler()
    h.on_key(InputEvent.PRESS, Key.A)
    assert manager.key_down(Key.A)
    assert manager.key_up(Key.B)


def test_mouse_button_edges(manager):
    h = manager.create_handler()
    assert h.on_mouse_button(InputEvent.PRESS, Btn.RIGHT) is False
    assert manager.mouse_pressed(Btn.RIGHT)
    assert manager.mouse_down(Btn.RIGHT)
    assert manager.mouse_up(Btn.LEFT)
    manager.update()
    assert manager.mouse_was_down(Btn.RIGHT)
    h.on_mouse_button(InputEvent.RELEASE, Btn.RIGHT)
    assert manager.mouse_released(Btn.RIGHT)
    manager.update()
    assert manager.mouse_was_up(Btn.RIGHT)


def test_mouse_motion(manager):
    window = object()
    h = InputHandler(manager, window)
    assert h.on_mouse_motion(10, 20) is False
    assert manager.mouse_position() == (10, 20)
    assert manager.last_window_on is window
    manager.update()
    h.on_mouse_motion(15, 12)
    assert manager.mouse_prev_position() == (10, 20)
    assert manager.mouse_motion() == (15 - 10, 12 - 20)


def test_create_handler_registers_on_window(manager):
    window = _FakeWindow()
    h = manager.create_handler(window)
    assert window.calls == [(h, 50)]
    assert list(window.handlers) == [h]
    assert manager.handlers == [h]


def test_initial_state(manager):
    assert manager.mouse_position() == (0, 0)
    assert manager.mouse_motion() == (0, 0)
    assert manager.last_window_on is None
    assert not manager.key_down(Key.SPACE)