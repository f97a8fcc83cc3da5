"""Frame timers that advance by the global game speed."""

from __future__ import annotations

import itertools
from typing import Callable, Iterator

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_game_speed = 1.0


def set_game_speed(speed: float) -> None:
    """Set the global speed factor applied by Timer.add, increment and decrement."""
    global _game_speed
    _game_speed = float(speed)


def get_game_speed() -> float:
    """Current global speed factor."""
    return _game_speed


def _speed_applies() -> bool:
    return _game_speed <= 0.99 or _game_speed >= 1.01


class Timer:
    """A counter with a float value, its integer part and the previous integer value."""

    __slots__ = ("previous", "current", "current_f")

    def __init__(self, value: float = 0) -> None:
        self.previous = -1
        self.current = 0
        self.current_f = 0.0
        self.set(value)

    def add(self, value: float) -> None:
        """Advance by ``value``, scaled by the game speed when it is not 1."""
        self.previous = self.current
        if _speed_applies():
            value *= _game_speed
        self.current_f += value
        self.current = int(self.current_f)

    def add_nogamespeed(self, value: float) -> None:
        """Advance by ``value`` regardless of the game speed."""
        self.previous = self.current
        self.current_f += value
        self.current = int(self.current_f)

    def set(self, value: float) -> None:
        """Jump to ``value``; the previous value becomes one less than the new one."""
        self.current_f = float(value)
        self.current = int(value)
        self.previous = self.current - 1

    def increment(self) -> None:
        self.previous = self.current
        if _speed_applies():
            self.current_f += _game_speed
            self.current = int(self.current_f)
            return
        self.current_f += 1.0
        self.current += 1

    def decrement(self) -> None:
        self.previous = self.current
        if _speed_applies():
            self.current_f -= _game_speed
            self.current = int(self.current_f)
            return
        self.current_f -= 1.0
        self.current -= 1

    def reset(self) -> None:
        self.current = 0
        self.current_f = 0.0
        self.previous = -1

    def reset_neg999999(self) -> None:
        self.current = 0
        self.current_f = 0.0
        self.previous = -999999

    def ticked(self) -> bool:
        """Whether the integer value changed on the last update."""
        return self.previous != self.current

    def had_value(self, value: float) -> bool:
        """Whether the last update crossed or reached ``value``."""
        return (self.previous < value <= self.current) or (
            self.previous > value >= self.current
        )

    def _passed(self) -> Iterator[int]:
        # Counts upward from previous to current (exclusive), wrapping like a 32-bit int.
        if self.previous <= self.current:
            return iter(range(self.previous, self.current))
        return itertools.chain(
            range(self.previous, _I32_MAX + 1), range(_I32_MIN, self.current)
        )

    def was_modulo(self, value: int) -> int:
        """Number of passed values whose magnitude is a multiple of ``value``."""
        return self.count_true(lambda v: abs(v) % value == 0)

    def had_true(self, predicate: Callable[[int], bool]) -> bool:
        """Whether ``predicate`` holds for any value passed on the last update."""
        return any(predicate(v) for v in self._passed())

    def count_true(self, predicate: Callable[[int], bool]) -> int:
        """Number of values passed on the last update for which ``predicate`` holds."""
        return sum(1 for v in self._passed() if predicate(v))

    def copy(self) -> "Timer":
        other = Timer.__new__(Timer)
        other.previous = self.previous
        other.current = self.current
        other.current_f = self.current_f
        return other

    def __iadd__(self, value):
        self.add(value)
        return self

    def __isub__(self, value):
        self.add(-value)
        return self

    @staticmethod
    def _key(other):
        if isinstance(other, Timer):
            return other.current
        if isinstance(other, (int, float)):
            return other
        return NotImplemented

    def __eq__(self, other):
        key = self._key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.current == key

    __hash__ = None  # mutable

    def __lt__(self, other):
        key = self._key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.current < key

    def __le__(self, other):
        key = self._key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.current <= key

    def __gt__(self, other):
        key = self._key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.current > key

    def __ge__(self, other):
        key = self._key(other)
        if key is NotImplemented:
            return NotImplemented
        return self.current >= key

    def __bool__(self) -> bool:
        return self.current != 0

    def __int__(self) -> int:
        return self.current

    def __repr__(self) -> str:
        return (
            f"Timer(current={self.current}, current_f={self.current_f}, "
            f"previous={self.previous})"
        )