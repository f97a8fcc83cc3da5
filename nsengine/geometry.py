"""Scalar helpers, random numbers and 2D/3D geometry routines."""

from __future__ import annotations

import math
import random
import time
from typing import Sequence

from .vec import DEG_2_RAD, PI, PI_2, RAD_2_DEG, Vec2, Vec3, Vec4

RAND_MAX = 2147483647


class _LazyRandom:
    """Random generator seeded from the clock on first use."""

    def __init__(self) -> None:
        self._rng = random.Random()
        self._seeded = False

    def next(self) -> int:
        if not self._seeded:
            self._rng.seed(int(time.monotonic()))
            self._seeded = True
        return self._rng.randint(0, RAND_MAX)


_generator = _LazyRandom()


def _fdiv(a: float, b: float) -> float:
    """Floating-point division with IEEE results for a zero divisor."""
    if b != 0:
        return a / b
    if a == 0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def clamp(value, low, high):
    """Clamp ``value`` to ``[low, high]``; a NaN value stays NaN."""
    value = low if value < low else value
    return high if high < value else value


def is_power_of_2(value: int) -> bool:
    return value != 0 and (value & (value - 1)) == 0


def angle_normalize(angle: float) -> float:
    """Bring an angle into [-PI, PI), using at most 32 correction steps."""
    budget = 32
    while angle >= PI:
        if budget == 0:
            return angle
        budget -= 1
        angle -= PI_2
    while angle < -PI:
        if budget == 0:
            return angle
        budget -= 1
        angle += PI_2
    return angle


def rand() -> int:
    """Random integer in ``[0, RAND_MAX]``."""
    return _generator.next()


def randrange(low: int, high: int) -> int:
    """Random integer in ``[low, high]``."""
    span = high - low + 1
    return rand() % abs(span) + low


def frand() -> float:
    """Random float in ``[0, 1]``."""
    return rand() / RAND_MAX


def frandrange(low: float, high: float) -> float:
    return frand() * (high - low) + low


def frandm11() -> float:
    return frandrange(-1.0, 1.0)


def frandangle() -> float:
    return frandrange(-PI, PI)


def deg_2_rad(degrees: float) -> float:
    return degrees * DEG_2_RAD


def rad_2_deg(radians: float) -> float:
    return radians * RAD_2_DEG


def _point_pair(args) -> tuple[tuple[float, ...], tuple[float, ...]]:
    if len(args) == 2:
        p1, p2 = (tuple(p) for p in args)
        if len(p1) != len(p2) or len(p1) not in (2, 3):
            raise TypeError("expected two 2D or two 3D points")
        return p1, p2
    if len(args) == 4:
        return tuple(args[:2]), tuple(args[2:])
    if len(args) == 6:
        return tuple(args[:3]), tuple(args[3:])
    raise TypeError("expected two points or 4 or 6 coordinates")


def point_distance_sq(*args) -> float:
    """Squared distance between two 2D or 3D points."""
    p1, p2 = _point_pair(args)
    return sum((b - a) * (b - a) for a, b in zip(p1, p2))


def point_distance(*args) -> float:
    """Distance between two 2D or 3D points."""
    return math.sqrt(point_distance_sq(*args))


def point_direction(*args) -> float:
    """Angle in radians of the direction from the first point to the second."""
    p1, p2 = _point_pair(args)
    if len(p1) != 2:
        raise TypeError("direction needs 2D points")
    (x1, y1), (x2, y2) = p1, p2
    if x1 == x2 and y1 == y2:
        return 0.0
    dx = x2 - x1
    dy = y2 - y1
    if dx == 0:
        a = math.copysign(math.pi / 2, dy) * math.copysign(1.0, dx)
    else:
        a = math.atan(dy / dx)
    if dx < 0:
        a -= PI
    if a < -PI:
        a += 2 * PI
    return a


def lengthdir_x(length: float, direction: float) -> float:
    return length * math.cos(direction)


def lengthdir_y(length: float, direction: float) -> float:
    return length * math.sin(direction)


def lengthdir_vec(length: float, direction: float) -> Vec2:
    return Vec2(lengthdir_x(length, direction), lengthdir_y(length, direction))


def lengthdir_vec3(length: float, direction: float) -> Vec3:
    return Vec3(lengthdir_x(length, direction), lengthdir_y(length, direction), 0.0)


def point_distance_to_segment(s1: Sequence[float], s2: Sequence[float], p: Sequence[float]) -> float:
    """Distance from point ``p`` to segment ``s1``-``s2`` (NaN for a degenerate segment)."""
    tempt = (p[0] - s1[0]) * (s2[0] - s1[0]) + (p[1] - s1[1]) * (s2[1] - s1[1])
    dist = point_distance_sq(s1[0], s1[1], s2[0], s2[1])
    t = clamp(_fdiv(tempt, dist), 0.0, 1.0)
    return point_distance(
        p[0], p[1], s1[0] + (s2[0] - s1[0]) * t, s1[1] + (s2[1] - s1[1]) * t
    )


def _sign(value: float) -> int:
    if value < 0:
        return -1
    if value > 0:
        return 1
    return 0


def segment_intersect(a1, a2, b1, b2) -> bool:
    """Whether segments ``a1``-``a2`` and ``b1``-``b2`` intersect."""
    o1 = _sign((b1[1] - a1[1]) * (a2[0] - b1[0]) - (b1[0] - a1[0]) * (a2[1] - b1[1]))
    o2 = _sign((b2[1] - a1[1]) * (a2[0] - b2[0]) - (b2[0] - a1[0]) * (a2[1] - b2[1]))
    o3 = _sign((a1[1] - b1[1]) * (b2[0] - a1[0]) - (a1[0] - b1[0]) * (b2[1] - a1[1]))
    o4 = _sign((a2[1] - b1[1]) * (b2[0] - a2[0]) - (a2[0] - b1[0]) * (b2[1] - a2[1]))

    if o1 != o2 and o3 != o4:
        return True
    if o1 == 0 and point_distance_to_segment(a1, a2, b1) == 0:
        return True
    if o2 == 0 and point_distance_to_segment(a1, a2, b1) == 0:
        return True
    if o3 == 0 and point_distance_to_segment(b1, b2, a1) == 0:
        return True
    if o4 == 0 and point_distance_to_segment(b1, b2, a1) == 0:
        return True
    return False


def segment_distance_x(a1, a2, b1, b2, minimum: bool) -> float:
    """Horizontal gap between two segments over their shared vertical range."""
    ax1, ay1 = a1[0], a1[1]
    ax2, ay2 = a2[0], a2[1]
    bx1, by1 = b1[0], b1[1]
    bx2, by2 = b2[0], b2[1]
    if ay1 > ay2:
        ay1, ay2 = ay2, ay1
    if by1 > by2:
        by1, by2 = by2, by1

    if ay1 > by2 or by1 > ay2:
        return 0.0

    if by1 < ay1:
        top = bx1 + _fdiv((bx2 - bx1) * (ay1 - by1), by2 - by1) - ax1
    else:
        top = bx1 - (ax1 + _fdiv((ax2 - ax1) * (by1 - ay1), ay2 - ay1))
    if by2 < ay2:
        bottom = bx2 - (ax1 + _fdiv((ax2 - ax1) * (by2 - ay1), ay2 - ay1))
    else:
        bottom = bx1 + _fdiv((bx2 - bx1) * (ay2 - by1), by2 - by1) - ax2

    return _fmin(top, bottom) if minimum else _fmax(top, bottom)


def segment_distance_y(a1, a2, b1, b2, minimum: bool) -> float:
    """Vertical gap between two segments over their shared horizontal range."""
    ax1, ay1 = a1[0], a1[1]
    ax2, ay2 = a2[0], a2[1]
    bx1, by1 = b1[0], b1[1]
    bx2, by2 = b2[0], b2[1]
    if ax1 > ax2:
        ax1, ax2 = ax2, ax1
    if bx1 > bx2:
        bx1, bx2 = bx2, bx1

    if ax1 > bx2 or bx1 > ax2:
        return 0.0

    if bx1 < ax1:
        left = by1 + _fdiv((by2 - by1) * (ax1 - bx1), bx2 - bx1) - ay1
    else:
        left = by1 - ay1 + _fdiv((ay2 - ay1) * (bx1 - ax1), ax2 - ax1)
    if bx2 < ax2:
        right = by2 - ay1 + _fdiv((ay2 - ay1) * (bx2 - ax1), ax2 - ax1)
    else:
        right = by1 + _fdiv((by2 - by1) * (ax2 - bx1), bx2 - bx1) - ay2

    return _fmin(left, right) if minimum else _fmax(left, right)


def barycentric(p1, p2, p3, pos) -> float:
    """Height at ``pos`` (x, z) on the triangle plane through ``p1``, ``p2``, ``p3``."""
    det = (p2[2] - p3[2]) * (p1[0] - p3[0]) + (p3[0] - p2[0]) * (p1[2] - p3[2])
    l1 = _fdiv((p2[2] - p3[2]) * (pos[0] - p3[0]) + (p3[0] - p2[0]) * (pos[1] - p3[2]), det)
    l2 = _fdiv((p3[2] - p1[2]) * (pos[0] - p3[0]) + (p1[0] - p3[0]) * (pos[1] - p3[2]), det)
    l3 = 1 - l1 - l2
    return l1 * p1[1] + l2 * p2[1] + l3 * p3[1]


def point_in_rectangle(x, y, x1, y1, x2, y2) -> bool:
    """Whether (x, y) lies in the rectangle with the given corners, edges included."""
    if x2 < x1:
        x1, x2 = x2, x1
    if y2 < y1:
        y1, y2 = y2, y1
    return x1 <= x <= x2 and y1 <= y <= y2


def rectangle_intersect(x1, y1, x2, y2, x3, y3, x4, y4, equal: bool = False) -> bool:
    """Whether two rectangles overlap; with ``equal`` touching edges do not count."""
    if x2 < x1:
        x1, x2 = x2, x1
    if y2 < y1:
        y1, y2 = y2, y1
    if x4 < x3:
        x3, x4 = x4, x3
    if y4 < y3:
        y3, y4 = y4, y3
    if equal:
        return not (x1 >= x4 or x2 <= x3 or y1 >= y4 or y2 <= y3)
    return not (x1 > x4 or x2 < x3 or y1 > y4 or y2 < y3)


def rectangle_intersect_vec(r1: Vec4, r2: Vec4, equal: bool = False) -> bool:
    """Rectangle overlap test with rectangles given as (x1, y1, x2, y2) vectors."""
    return rectangle_intersect(*r1, *r2, equal)