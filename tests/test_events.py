import pytest

from nsengine.events import Btn, EventHandler, EventHandlerList, InputEvent, Key


def test_key_codes_fixed_by_source():
    assert Key(0x41) is Key.A
    assert Key(0x70) is Key.F1
    assert Key(0x92) is Key.NUMPAD_EQUAL
    assert Key(0xDF) is Key.MAX


def test_button_codes():
    assert [Btn(i) for i in range(3)] == [Btn.LEFT, Btn.MIDDLE, Btn.RIGHT]
    assert Btn(3) is Btn.MAX


def test_key_digits_contiguous():
    digits = [Key._0, Key._1, Key._2, Key._3, Key._4, Key._5, Key._6, Key._7, Key._8, Key._9]
    assert [Key(0x30 + i) for i in range(10)] == digits


def test_default_handler_declines_everything():
    h = EventHandler()
    assert h.handle_platform_event(object()) is False
    assert h.on_mouse_motion(1, 2) is False
    assert h.on_mouse_button(InputEvent.PRESS, Btn.LEFT) is False
    assert h.on_key(InputEvent.RELEASE, Key.A) is False
    assert h.on_resize(640, 480) is False
    assert h.on_quit() is False


def test_insert_orders_by_priority():
    lst = EventHandlerList()
    a, b, c = EventHandler(), EventHandler(), EventHandler()
    lst.insert(a, 50)
    lst.insert(b, 10)
    lst.insert(c, 30)
    assert list(lst) == [b, c, a]
    assert len(lst) == 3


def test_equal_priority_goes_first():
    lst = EventHandlerList()
    a, b = EventHandler(), EventHandler()
    lst.insert(a, 5)
    lst.insert(b, 5)
    assert list(lst) == [b, a]


def test_remove():
    lst = EventHandlerList()
    a, b = EventHandler(), EventHandler()
    lst.insert(a, 1)
    lst.insert(b, 2)
    lst.remove(a)
    assert list(lst) == [b]
    lst.remove(a)
    assert list(lst) == [b]


def test_empty_list():
    lst = EventHandlerList()
    assert len(lst) == 0
    assert list(lst) == []


@pytest.mark.parametrize("value", [0x41, 0x70, 0x08])
def test_key_from_value(value):
    assert int(Key(value)) == value