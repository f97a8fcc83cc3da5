"""RGBA colours with float channels (Colorf) and 8-bit channels (Color)."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass
from typing import Callable, Iterable, Iterator

_CHANNELS = ("r", "g", "b", "a")


def _u8(value) -> int:
    """Truncate toward zero and wrap to an unsigned byte."""
    return int(value) & 0xFF


def _fdiv(a: float, b: float) -> float:
    """Float division giving IEEE results for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _pack(values: Iterable[int]) -> int:
    n = 0
    for v in values:
        n = (n << 8) | v
    return n


def _unpack(n: int) -> tuple[int, int, int, int]:
    n &= 0xFFFFFFFF
    return (n >> 24) & 0xFF, (n >> 16) & 0xFF, (n >> 8) & 0xFF, n & 0xFF


@dataclass
class Colorf:
    """Colour with float channels, normally in [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    def __post_init__(self) -> None:
        self.r = float(self.r)
        self.g = float(self.g)
        self.b = float(self.b)
        self.a = float(self.a)

    @classmethod
    def gray(cls, value: float, a: float = 1.0) -> "Colorf":
        return cls(value, value, value, a)

    @classmethod
    def from_color(cls, color: "Color") -> "Colorf":
        return cls(color.r / 255.0, color.g / 255.0, color.b / 255.0, color.a / 255.0)

    @classmethod
    def from_rgba32(cls, n: int) -> "Colorf":
        r, g, b, a = _unpack(n)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_argb32(cls, n: int) -> "Colorf":
        a, r, g, b = _unpack(n)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_abgr32(cls, n: int) -> "Colorf":
        a, b, g, r = _unpack(n)
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    def _bytes(self, order: str) -> int:
        return _pack(_u8(getattr(self, ch) * 255) for ch in order)

    def to_rgba32(self) -> int:
        return self._bytes("rgba")

    def to_argb32(self) -> int:
        return self._bytes("argb")

    def to_abgr32(self) -> int:
        return self._bytes("abgr")

    def to_color(self) -> "Color":
        return Color.from_colorf(self)

    def hue(self) -> float:
        """Hue in [0, 1)."""
        lo = min(self.r, self.g, self.b)
        hi = max(self.r, self.g, self.b)
        delta = hi - lo
        if delta == 0:
            return 0.0
        if self.r == hi:
            h = (self.g - self.b) / delta
        elif self.g == hi:
            h = 2 + (self.b - self.r) / delta
        else:
            h = 4 + (self.r - self.g) / delta
        h /= 6.0
        if h < 0:
            h += 1.0
        return h

    def saturation(self) -> float:
        lo = min(self.r, self.g, self.b)
        hi = max(self.r, self.g, self.b)
        return (hi - lo) / hi if hi != 0 else 0.0

    def value(self) -> float:
        return max(self.r, self.g, self.b)

    def set_hsv(self, h: float, s: float, v: float, a: float = 1.0) -> "Colorf":
        """Set channels from hue, saturation, value and alpha; returns self."""
        self.a = float(a)
        if s == 0:
            self.r = self.g = self.b = float(v)
            return self
        turns = h * 6.0 / 6
        hh = 6 * (turns - math.trunc(turns))
        i = int(hh)
        f = hh - i
        p = v * (1 - s)
        q = v * (1 - s * f)
        t = v * (1 - s * (1 - f))
        sectors = {
            0: (v, t, p),
            1: (q, v, p),
            2: (p, v, t),
            3: (p, q, v),
            4: (t, p, v),
        }
        self.r, self.g, self.b = (float(c) for c in sectors.get(i, (v, p, q)))
        return self

    def set_h(self, h: float) -> "Colorf":
        return self.set_hsv(h, self.saturation(), self.value())

    def set_s(self, s: float) -> "Colorf":
        return self.set_hsv(self.hue(), s, self.value())

    def set_v(self, v: float) -> "Colorf":
        return self.set_hsv(self.hue(), self.saturation(), v)

    def invert(self) -> "Colorf":
        """Invert the colour channels in place (alpha unchanged); returns self."""
        self.r = 1.0 - self.r
        self.g = 1.0 - self.g
        self.b = 1.0 - self.b
        return self

    def inverted(self) -> "Colorf":
        return Colorf(*self).invert()

    def lerp(self, other: "Colorf", weight: float) -> "Colorf":
        return Colorf(*(x + weight * (y - x) for x, y in zip(self, other)))

    def darkened(self, amount: float) -> "Colorf":
        k = 1.0 - amount
        return Colorf(self.r * k, self.g * k, self.b * k, self.a)

    def lightened(self, amount: float) -> "Colorf":
        return Colorf(
            self.r + (1.0 - self.r) * amount,
            self.g + (1.0 - self.g) * amount,
            self.b + (1.0 - self.b) * amount,
            self.a,
        )

    def blend(self, over: "Colorf") -> "Colorf":
        """Composite ``over`` on top of this colour."""
        sa = 1.0 - over.a
        res_a = self.a * sa + over.a
        if res_a == 0:
            return Colorf(0.0, 0.0, 0.0, 0.0)
        return Colorf(
            (self.r * self.a * sa + over.r * over.a) / res_a,
            (self.g * self.a * sa + over.g * over.a) / res_a,
            (self.b * self.a * sa + over.b * over.a) / res_a,
            res_a,
        )

    def __iter__(self) -> Iterator[float]:
        return iter((self.r, self.g, self.b, self.a))

    def __getitem__(self, index: int) -> float:
        return getattr(self, _CHANNELS[index])

    def __setitem__(self, index: int, value: float) -> None:
        setattr(self, _CHANNELS[index], float(value))

    def _combine(self, other, op: Callable[[float, float], float]):
        if isinstance(other, Colorf):
            return Colorf(*(op(x, y) for x, y in zip(self, other)))
        if isinstance(other, numbers.Real):
            return Colorf(*(op(x, other) for x in self))
        return NotImplemented

    def __add__(self, other):
        return self._combine(other, lambda x, y: x + y) if isinstance(other, Colorf) else NotImplemented

    def __sub__(self, other):
        return self._combine(other, lambda x, y: x - y) if isinstance(other, Colorf) else NotImplemented

    def __mul__(self, other):
        return self._combine(other, lambda x, y: x * y)

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        return self._combine(other, _fdiv)

    def __neg__(self) -> "Colorf":
        return Colorf(*(1.0 - x for x in self))

    def __pos__(self) -> "Colorf":
        return Colorf(*self)


def _channel(index: int) -> property:
    def getter(self) -> int:
        return self._c[index]

    def setter(self, value) -> None:
        self._c[index] = _u8(value)

    return property(getter, setter, doc=f"The {_CHANNELS[index]} channel (0-255).")


def _u8add(x: int, y: int) -> int:
    return min(x + y, 255)


def _u8sub(x: int, y: int) -> int:
    return max(x - y, 0)


def _u8mul(x: int, y: int) -> int:
    return min(x * y, 255)


def _clamp_byte(m: float) -> int:
    if math.isnan(m) or m < 0:
        return 0
    if m > 255:
        return 255
    return int(m)


class Color:
    """Colour with 8-bit channels; arithmetic saturates at 0 and 255."""

    __slots__ = ("_c",)

    r = _channel(0)
    g = _channel(1)
    b = _channel(2)
    a = _channel(3)

    def __init__(self, r=0, g=0, b=0, a=255) -> None:
        self._c = [_u8(r), _u8(g), _u8(b), _u8(a)]

    @classmethod
    def gray(cls, value: int, a: int = 255) -> "Color":
        return cls(value, value, value, a)

    @classmethod
    def from_colorf(cls, color: Colorf) -> "Color":
        return cls(*(_u8(x * 255) for x in color))

    @classmethod
    def from_rgba32(cls, n: int) -> "Color":
        r, g, b, a = _unpack(n)
        return cls(r, g, b, a)

    @classmethod
    def from_argb32(cls, n: int) -> "Color":
        a, r, g, b = _unpack(n)
        return cls(r, g, b, a)

    @classmethod
    def from_abgr32(cls, n: int) -> "Color":
        a, b, g, r = _unpack(n)
        return cls(r, g, b, a)

    def to_rgba32(self) -> int:
        return _pack((self.r, self.g, self.b, self.a))

    def to_argb32(self) -> int:
        return _pack((self.a, self.r, self.g, self.b))

    def to_abgr32(self) -> int:
        return _pack((self.a, self.b, self.g, self.r))

    def to_colorf(self) -> Colorf:
        return Colorf.from_color(self)

    def hue(self) -> float:
        return self.to_colorf().hue()

    def saturation(self) -> float:
        return self.to_colorf().saturation()

    def value(self) -> float:
        return self.to_colorf().value()

    def _assign(self, color: Colorf) -> "Color":
        self._c = Color.from_colorf(color)._c
        return self

    def set_hsv(self, h: float, s: float, v: float, a: float = 1.0) -> "Color":
        """Set channels from hue, saturation, value and alpha in [0, 1]; returns self."""
        return self._assign(self.to_colorf().set_hsv(h, s, v, a))

    def set_h(self, h: float) -> "Color":
        return self._assign(self.to_colorf().set_h(h))

    def set_s(self, s: float) -> "Color":
        return self._assign(self.to_colorf().set_s(s))

    def set_v(self, v: float) -> "Color":
        return self._assign(self.to_colorf().set_v(v))

    def invert(self) -> "Color":
        """Replace each colour channel c by 1 - c, wrapped to a byte; returns self."""
        self._c[:3] = [_u8(1 - x) for x in self._c[:3]]
        return self

    def inverted(self) -> "Color":
        return self.copy().invert()

    def copy(self) -> "Color":
        return Color(*self._c)

    def lerp(self, other: "Color", weight: float) -> "Color":
        return Color(*(_u8(x + weight * (y - x)) for x, y in zip(self, other)))

    def darkened(self, amount: float) -> "Color":
        k = 1.0 - amount
        return Color(_u8(self.r * k), _u8(self.g * k), _u8(self.b * k), self.a)

    def lightened(self, amount: float) -> "Color":
        return Color(
            _u8(self.r + (255 - self.r) * amount),
            _u8(self.g + (255 - self.g) * amount),
            _u8(self.b + (255 - self.b) * amount),
            self.a,
        )

    def blend(self, over: "Color") -> "Color":
        """Composite ``over`` on top of this colour."""
        sa = 1.0 - over.a / 255.0
        res_a = self.a * sa + over.a
        if res_a == 0:
            return Color(0, 0, 0, 0)
        scale = res_a * 255
        return Color(
            _u8((self.r * self.a * sa + over.r * over.a) / scale),
            _u8((self.g * self.a * sa + over.g * over.a) / scale),
            _u8((self.b * self.a * sa + over.b * over.a) / scale),
            _u8(res_a),
        )

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._c))

    def __getitem__(self, index: int) -> int:
        return self._c[index]

    def __setitem__(self, index: int, value: int) -> None:
        self._c[index] = _u8(value)

    def __eq__(self, other):
        if isinstance(other, (Color, Colorf)):
            return all(x == y for x, y in zip(self, other))
        return NotImplemented

    __hash__ = None  # mutable

    def __add__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(_u8add(x, y) for x, y in zip(self, other)))

    def __iadd__(self, other):
        """Saturating in-place add; green, blue and alpha are summed with the updated red."""
        if not isinstance(other, Color):
            return NotImplemented
        self.r = _u8add(self.r, other.r)
        self.g = _u8add(self.r, other.g)
        self.b = _u8add(self.r, other.b)
        self.a = _u8add(self.r, other.a)
        return self

    def __sub__(self, other):
        if not isinstance(other, Color):
            return NotImplemented
        return Color(*(_u8sub(x, y) for x, y in zip(self, other)))

    def __mul__(self, other):
        if isinstance(other, Color):
            return Color(*(_u8mul(x, y) for x, y in zip(self, other)))
        if isinstance(other, numbers.Real):
            return Color(*(_clamp_byte(x * other) for x in self))
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, numbers.Real):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if isinstance(other, Color):
            return Color(*(x // y for x, y in zip(self, other)))
        if isinstance(other, numbers.Real):
            return Color(*(_clamp_byte(_fdiv(x, other)) for x in self))
        return NotImplemented

    def __repr__(self) -> str:
        return f"Color({self.r}, {self.g}, {self.b}, {self.a})"


def mix(c1: Color, c2: Color) -> Color:
    """Channel-wise multiply of two colours, scaled back to 0-255."""
    return Color(*(min(x * y // 255, 255) for x, y in zip(c1, c2)))