"""Small fixed-size vectors and common math constants."""

from __future__ import annotations

import math
import numbers
from typing import Callable, Iterator

PI = 3.14159265358979323846
PI_2 = 6.28318530717958647692
PI_1_2 = 1.57079632679489661923
PI_1_4 = 0.78539816339744830561
PI_1_6 = 0.5235987755982988
PI_INV = 0.318309886183791
PI_2_INV = 0.159154943091895
SQRT_2 = 1.41421356237309504880
SQRT_3 = 1.73205080756887729352
SQRT_1_2 = 0.70710678118654752440
SQRT_1_3 = 0.57735026918962576450
DEG_2_RAD = PI / 180.0
RAD_2_DEG = 180.0 / PI

INF = 1e30
FEPSILON = 1.192092896e-07


class Vector:
    """A mutable vector of fixed size with element-wise arithmetic."""

    __slots__ = ("_data",)
    SIZE = 0
    _coerce: Callable[[float], float] = staticmethod(float)

    def __init__(self, *components):
        if len(components) == 1 and not isinstance(components[0], numbers.Real):
            components = tuple(components[0])
        if not components:
            components = (0,) * self.SIZE
        elif len(components) == 1:
            components = components * self.SIZE
        if len(components) != self.SIZE:
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE} components, got {len(components)}"
            )
        self._data = [self._coerce(c) for c in components]

    def _combine(self, other, op):
        if isinstance(other, Vector):
            if len(other) != len(self):
                raise ValueError("vectors must have the same size")
            values = [op(a, b) for a, b in zip(self._data, other._data)]
        elif isinstance(other, numbers.Real):
            values = [op(a, other) for a in self._data]
        else:
            return NotImplemented
        return type(self)(*values)

    def __add__(self, other):
        return self._combine(other, lambda a, b: a + b)

    def __radd__(self, other):
        return self._combine(other, lambda a, b: b + a)

    def __sub__(self, other):
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other):
        return self._combine(other, lambda a, b: b - a)

    def __mul__(self, other):
        return self._combine(other, lambda a, b: a * b)

    def __rmul__(self, other):
        return self._combine(other, lambda a, b: b * a)

    def __truediv__(self, other):
        return self._combine(other, lambda a, b: a / b)

    def __neg__(self):
        return type(self)(*(-a for a in self._data))

    def __getitem__(self, index):
        return self._data[index]

    def __setitem__(self, index, value):
        self._data[index] = self._coerce(value)

    def __iter__(self) -> Iterator:
        return iter(self._data)

    def __len__(self) -> int:
        return self.SIZE

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._data == other._data

    __hash__ = None  # mutable

    def copy(self):
        """Return an independent copy of this vector."""
        return type(self)(*self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._data)})"


def _component(index: int, name: str) -> property:
    def getter(self):
        return self._data[index]

    def setter(self, value):
        self._data[index] = self._coerce(value)

    return property(getter, setter, doc=f"The {name} component.")


class Vec2(Vector):
    """Two-component float vector."""

    __slots__ = ()
    SIZE = 2
    x = _component(0, "x")
    y = _component(1, "y")


class Vec3(Vector):
    """Three-component float vector."""

    __slots__ = ()
    SIZE = 3
    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")


class Vec4(Vector):
    """Four-component float vector."""

    __slots__ = ()
    SIZE = 4
    x = _component(0, "x")
    y = _component(1, "y")
    z = _component(2, "z")
    w = _component(3, "w")


class IVec2(Vector):
    """Two-component integer vector; results are truncated toward zero."""

    __slots__ = ()
    SIZE = 2
    _coerce = staticmethod(int)
    x = _component(0, "x")
    y = _component(1, "y")


def dot(a: Vector, b: Vector) -> float:
    """Dot product of two vectors of equal size."""
    if len(a) != len(b):
        raise ValueError("vectors must have the same size")
    return sum(x * y for x, y in zip(a, b))


def cross(a: Vec3, b: Vec3) -> Vec3:
    """Cross product of two 3-component vectors."""
    if not (isinstance(a, Vec3) and isinstance(b, Vec3)):
        raise TypeError("cross product needs two Vec3")
    return Vec3(
        a.y * b.z - b.y * a.z,
        a.z * b.x - b.z * a.x,
        a.x * b.y - b.x * a.y,
    )


def length_sq(v: Vector) -> float:
    """Squared Euclidean length."""
    return dot(v, v)


def length(v: Vector) -> float:
    """Euclidean length."""
    return math.sqrt(length_sq(v))


def normalize(v: Vector) -> Vector:
    """Return ``v`` scaled to unit length; raises ZeroDivisionError for a zero vector."""
    return v / length(v)


def zero2() -> Vec2:
    return Vec2(0.0, 0.0)


def one2() -> Vec2:
    return Vec2(1.0, 1.0)


def up2() -> Vec2:
    return Vec2(0.0, 1.0)


def down2() -> Vec2:
    return Vec2(0.0, -1.0)


def left2() -> Vec2:
    return Vec2(-1.0, 0.0)


def right2() -> Vec2:
    return Vec2(1.0, 0.0)


def zero3() -> Vec3:
    return Vec3(0.0, 0.0, 0.0)


def one3() -> Vec3:
    return Vec3(1.0, 1.0, 1.0)


def up3() -> Vec3:
    return Vec3(0.0, 1.0, 0.0)


def down3() -> Vec3:
    return Vec3(0.0, -1.0, 0.0)


def left3() -> Vec3:
    return Vec3(-1.0, 0.0, 0.0)


def right3() -> Vec3:
    return Vec3(1.0, 0.0, 0.0)


def back3() -> Vec3:
    return Vec3(0.0, 0.0, -1.0)


def forward3() -> Vec3:
    return Vec3(0.0, 0.0, 1.0)


def zero4() -> Vec4:
    return Vec4(0.0, 0.0, 0.0, 0.0)


def one4() -> Vec4:
    return Vec4(1.0, 1.0, 1.0, 1.0)