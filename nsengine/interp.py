"""Easing functions and step-based interpolators."""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Callable, Union

from .timer import Timer
from .vec import PI_1_2, Vec3

InterpFunc = Callable[[float], float]


class InterpMethod(IntEnum):
    LINEAR = 0
    EASEIN2 = 1
    EASEIN3 = 2
    EASEIN4 = 3
    EASEOUT2 = 4
    EASEOUT3 = 5
    EASEOUT4 = 6
    CSTSPEED = 7
    BEZIER = 8
    EASEINOUT2 = 9
    EASEINOUT3 = 10
    EASEINOUT4 = 11
    EASEOUTIN2 = 12
    EASEOUTIN3 = 13
    EASEOUTIN4 = 14
    _15 = 15
    _16 = 16
    CSTACCEL = 17


def _linear(t):
    return t


def _in2(t):
    return t * t


def _in3(t):
    return t * t * t


def _in4(t):
    return t * t * t * t


def _out2(t):
    t = 1 - t
    return 1 - t * t


def _out3(t):
    t = 1 - t
    return 1 - t * t * t


def _out4(t):
    t = 1 - t
    return 1 - t * t * t * t


def _cubic(t):
    return 2 * t * t * t + 3 * t * t


def _in_out2(t):
    if t < 0.5:
        return 2 * t * t
    return 0.5 + 0.5 * _out2(2 * t - 1)


def _split(first: InterpFunc, second: InterpFunc) -> InterpFunc:
    def func(t):
        if t < 0.5:
            return 0.5 * first(2 * t)
        return 0.5 + 0.5 * second(2 * t - 1)

    return func


def _step_at_end(t):
    return 1.0 if t >= 1 else 0.0


def _step_at_start(t):
    return 1.0 if t > 0 else 0.0


def _sine_out(t):
    return math.sin(t * PI_1_2)


def _sine_in(t):
    return 1 - math.sin((1 - t) * PI_1_2)


def _parabola(shift: float, denom: float, offset: float, span: float) -> InterpFunc:
    def func(t):
        return (((t - shift) * (t - shift) / denom) - offset) / span

    return func


def _mirrored(func: InterpFunc) -> InterpFunc:
    return lambda t: 1 - func(1 - t)


_p22 = _parabola(0.25, 0.5625, 0.111111, 0.888889)
_p23 = _parabola(0.3, 0.49, 0.183673, 0.816326)
_p24 = _parabola(0.35, 0.4225, 0.289941, 0.710059)
_p25 = _parabola(0.38, 0.3844, 0.37565, 0.62435)
_p26 = _parabola(0.4, 0.36, 0.444444, 0.555556)

_FUNCS: tuple[InterpFunc, ...] = (
    _linear,
    _in2,
    _in3,
    _in4,
    _out2,
    _out3,
    _out4,
    _linear,
    _cubic,
    _in_out2,
    _split(_in3, _out3),
    _split(_in4, _out4),
    _split(_out2, _in2),
    _split(_out3, _in3),
    _split(_out4, _in4),
    _step_at_end,
    _step_at_start,
    _in2,
    _sine_out,
    _sine_in,
    _split(_sine_in, _sine_out),
    _split(_sine_out, _sine_in),
    _p22,
    _p23,
    _p24,
    _p25,
    _p26,
    _mirrored(_p22),
    _mirrored(_p23),
    _mirrored(_p24),
    _mirrored(_p25),
    _mirrored(_p26),
)


def get_interp_func(mode: int) -> InterpFunc:
    """Easing function for ``mode``; modes above 31 fall back to linear."""
    m = int(mode) & 0xFF
    if m > 31:
        return _linear
    return _FUNCS[m]


def _method(mode: int) -> Union[InterpMethod, int]:
    m = int(mode) & 0xFF
    try:
        return InterpMethod(m)
    except ValueError:
        return m


def _copy(value):
    copier = getattr(value, "copy", None)
    return copier() if callable(copier) else value


class Interp:
    """Interpolates a value (number or vector) from ``initial`` to ``goal`` one step at a time."""

    def __init__(self, zero=0.0) -> None:
        self._zero = _copy(zero)
        self.initial = _copy(zero)
        self.goal = _copy(zero)
        self.bezier_1 = _copy(zero)
        self.bezier_2 = _copy(zero)
        self.current = _copy(zero)
        self.time = Timer()
        self.end_time = 0
        self.method: Union[InterpMethod, int] = InterpMethod.LINEAR

    def _begin(self, begin, end, b1, b2, time: int, method) -> None:
        self.initial = _copy(begin)
        self.current = _copy(begin)
        self.goal = _copy(end)
        self.bezier_1 = _copy(b1)
        self.bezier_2 = _copy(b2)
        self.end_time = int(time)
        self.method = method
        self.time.set(0)

    def start(self, begin, end, time: int, mode: int) -> None:
        self._begin(begin, end, self._zero, self._zero, time, _method(mode))

    def start_ex(self, begin, end, b1, b2, time: int, mode: int) -> None:
        self._begin(begin, end, b1, b2, time, _method(mode))

    def start_bezier(self, begin, end, b1, b2, time: int) -> None:
        self._begin(begin, end, b1, b2, time, InterpMethod.BEZIER)

    def step(self):
        """Advance one step and return the new value."""
        if self.end_time != 0:
            self.time.increment()
            if self.time < self.end_time or self.end_time < 0:
                if self.method == InterpMethod.CSTSPEED:
                    self.initial = self.initial + self.goal
                    self.current = _copy(self.initial)
                elif self.method == InterpMethod.CSTACCEL:
                    self.initial = self.initial + self.bezier_2
                    self.bezier_2 = self.bezier_2 + self.goal
                    self.current = _copy(self.initial)
                elif self.method == InterpMethod.BEZIER:
                    x = self.time.current_f / float(self.end_time)
                    a0 = self.initial
                    a1 = self.bezier_1
                    a2 = 3.0 * (self.goal - self.initial) - 2.0 * self.bezier_1 - self.bezier_2
                    a3 = 2.0 * (self.initial - self.goal) + self.bezier_1 + self.bezier_2
                    self.current = a0 + a1 * x + a2 * x * x + a3 * x * x * x
                else:
                    x = self.time.current_f / float(self.end_time)
                    self.current = (self.goal - self.initial) * get_interp_func(self.method)(
                        x
                    ) + self.initial
                return _copy(self.current)
            self.time.set(self.end_time)
            self.end_time = 0
        if self.method not in (InterpMethod.CSTSPEED, InterpMethod.CSTACCEL):
            return _copy(self.goal)
        return _copy(self.initial)


class InterpStrange:
    """3D interpolator that can use one method for the whole vector or one per axis."""

    def __init__(self) -> None:
        self.current = Vec3()
        self.initial = Vec3()
        self.goal = Vec3()
        self.bezier_1 = Vec3()
        self.bezier_2 = Vec3()
        self.time = Timer()
        self.end_time = 0
        self.method_for_1d: list[Union[InterpMethod, int]] = [InterpMethod.LINEAR] * 3
        self.method_for_3d: Union[InterpMethod, int] = InterpMethod.LINEAR
        self.flags = 0

    def _begin(self, begin, end, b1, b2, time: int) -> None:
        self.initial = Vec3(begin)
        self.goal = Vec3(end)
        self.bezier_1 = Vec3(b1)
        self.bezier_2 = Vec3(b2)
        self.end_time = int(time)
        self.time.set(0)

    def start(self, begin, end, time: int, mode: int) -> None:
        self._begin(begin, end, Vec3(), Vec3(), time)
        self.method_for_3d = _method(mode)
        self.flags = 0

    def start_curve(self, begin, end, time: int, mode_x: int, mode_y: int, mode_z: int) -> None:
        self._begin(begin, end, Vec3(), Vec3(), time)
        self.method_for_1d = [_method(mode_x), _method(mode_y), _method(mode_z)]
        self.flags = 1

    def start_bezier(self, begin, end, b1, b2, time: int) -> None:
        self._begin(begin, end, b1, b2, time)
        self.method_for_3d = InterpMethod.BEZIER
        self.flags = 0

    def _step_whole(self) -> None:
        method = self.method_for_3d
        if method == InterpMethod.CSTSPEED:
            self.initial = self.initial + self.goal
            self.current = self.initial.copy()
        elif method == InterpMethod.CSTACCEL:
            self.initial = self.initial + self.bezier_2
            self.bezier_2 = self.bezier_2 + self.goal
            self.current = self.initial.copy()
        elif method == InterpMethod.BEZIER:
            x = self.time.current_f / float(self.end_time)
            a0 = self.initial
            a1 = self.bezier_1
            a2 = (self.goal - self.initial) * 3.0 - self.bezier_1 * 2.0 - self.bezier_2
            a3 = (self.initial - self.goal) * 2.0 + self.bezier_1 + self.bezier_2
            self.current = a0 + a1 * x + a2 * x * x + a3 * x * x * x
        else:
            x = self.time.current_f / float(self.end_time)
            self.current = (self.goal - self.initial) * get_interp_func(method)(x) + self.initial

    def _step_axes(self) -> None:
        for i, method in enumerate(self.method_for_1d):
            if method == InterpMethod.CSTSPEED:
                self.initial[i] += self.goal[i]
                self.current[i] = self.initial[i]
            elif method == InterpMethod.CSTACCEL:
                self.initial[i] += self.bezier_2[i]
                self.bezier_2[i] += self.goal[i]
                self.current[i] = self.initial[i]
            elif method == InterpMethod.BEZIER:
                x = self.time.current_f / float(self.end_time)
                a0 = self.initial[i]
                a2 = 3.0 * (self.goal[i] - self.initial[i])
                a3 = 2.0 * (self.initial[i] - self.goal[i])
                self.current[i] = a0 + a2 * x * x + a3 * x * x * x
            else:
                x = self.time.current_f / float(self.end_time)
                self.current[i] = (self.goal[i] - self.initial[i]) * get_interp_func(method)(
                    x
                ) + self.initial[i]

    def step(self) -> Vec3:
        """Advance one step and return the new position."""
        if self.end_time != 0:
            # A negative end time runs forever without advancing the timer.
            if self.end_time < 0 or self._advance() < self.end_time:
                if self.flags == 0:
                    self._step_whole()
                else:
                    self._step_axes()
                return self.current.copy()
            self.time.set(self.end_time)
            self.end_time = 0
        if self.method_for_3d not in (InterpMethod.CSTSPEED, InterpMethod.CSTACCEL):
            return self.goal.copy()
        return self.initial.copy()

    def _advance(self) -> Timer:
        self.time.increment()
        return self.time