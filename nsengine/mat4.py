"""4x4 transformation matrices as numpy arrays (row-major, column vectors)."""

from __future__ import annotations

import math

import numpy as np

from .vec import Vec3, normalize


def _as_mat(m) -> np.ndarray:
    arr = np.asarray(m, dtype=float)
    if arr.shape != (4, 4):
        raise ValueError(f"expected a 4x4 matrix, got shape {arr.shape}")
    return arr


def _as_vec3(v) -> np.ndarray:
    arr = np.asarray(tuple(v), dtype=float)
    if arr.shape != (3,):
        raise ValueError(f"expected 3 components, got shape {arr.shape}")
    return arr


def _unit(v: np.ndarray) -> np.ndarray:
    n = float(np.linalg.norm(v))
    if n == 0:
        raise ZeroDivisionError("cannot normalize a zero vector")
    return v / n


def identity() -> np.ndarray:
    return np.eye(4)


def transpose(m) -> np.ndarray:
    return _as_mat(m).T.copy()


def inverse(m) -> np.ndarray:
    """Inverse matrix; raises numpy.linalg.LinAlgError when singular."""
    return np.linalg.inv(_as_mat(m))


def translate(m, offset) -> np.ndarray:
    """``m`` followed by a translation, applied on the right."""
    t = np.eye(4)
    t[:3, 3] = _as_vec3(offset)
    return _as_mat(m) @ t


def rotate(m, angle: float, axis) -> np.ndarray:
    """``m`` followed by a rotation of ``angle`` radians around ``axis``."""
    ax, ay, az = _unit(_as_vec3(axis))
    c = math.cos(angle)
    s = math.sin(angle)
    a = np.array([ax, ay, az])
    k = np.array([[0.0, -az, ay], [az, 0.0, -ax], [-ay, ax, 0.0]])
    r = np.eye(4)
    r[:3, :3] = c * np.eye(3) + (1 - c) * np.outer(a, a) + s * k
    return _as_mat(m) @ r


def scale(m, factors) -> np.ndarray:
    """``m`` followed by a per-axis scale."""
    s = np.eye(4)
    s[0, 0], s[1, 1], s[2, 2] = _as_vec3(factors)
    return _as_mat(m) @ s


def orthographic(left, right, bottom, top, near_clip, far_clip) -> np.ndarray:
    """Right-handed orthographic projection to a [-1, 1] depth range."""
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far_clip - near_clip)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far_clip + near_clip) / (far_clip - near_clip)
    return m


def _perspective(fov_rad, aspect_ratio, near_clip, far_clip, handedness: float) -> np.ndarray:
    if aspect_ratio == 0:
        raise ValueError("aspect ratio must not be zero")
    tan_half = math.tan(fov_rad / 2.0)
    m = np.zeros((4, 4))
    m[0, 0] = 1.0 / (aspect_ratio * tan_half)
    m[1, 1] = 1.0 / tan_half
    m[2, 2] = handedness * (far_clip + near_clip) / (far_clip - near_clip)
    m[3, 2] = handedness
    m[2, 3] = -(2.0 * far_clip * near_clip) / (far_clip - near_clip)
    return m


def perspective(fov_rad, aspect_ratio, near_clip, far_clip) -> np.ndarray:
    """Right-handed perspective projection to a [-1, 1] depth range."""
    return _perspective(fov_rad, aspect_ratio, near_clip, far_clip, -1.0)


def perspective_lh(fov_rad, aspect_ratio, near_clip, far_clip) -> np.ndarray:
    """Left-handed perspective projection to a [-1, 1] depth range."""
    return _perspective(fov_rad, aspect_ratio, near_clip, far_clip, 1.0)


def lookat(position, target, up) -> np.ndarray:
    """Right-handed view matrix looking from ``position`` at ``target``."""
    eye = _as_vec3(position)
    f = _unit(_as_vec3(target) - eye)
    s = _unit(np.cross(f, _as_vec3(up)))
    u = np.cross(s, f)
    m = np.eye(4)
    m[0, :3], m[0, 3] = s, -s.dot(eye)
    m[1, :3], m[1, 3] = u, -u.dot(eye)
    m[2, :3], m[2, 3] = -f, f.dot(eye)
    return m


def lookat_lh(position, target, up) -> np.ndarray:
    """Left-handed view matrix looking from ``position`` at ``target``."""
    eye = _as_vec3(position)
    f = _unit(_as_vec3(target) - eye)
    s = _unit(np.cross(_as_vec3(up), f))
    u = np.cross(f, s)
    m = np.eye(4)
    m[0, :3], m[0, 3] = s, -s.dot(eye)
    m[1, :3], m[1, 3] = u, -u.dot(eye)
    m[2, :3], m[2, 3] = f, -f.dot(eye)
    return m


def mk4_identity() -> np.ndarray:
    return identity()


def mk4_rotate(angle: float, axis) -> np.ndarray:
    return rotate(identity(), angle, axis)


def mk4_rotate_x(angle: float) -> np.ndarray:
    return rotate(identity(), angle, (1, 0, 0))


def mk4_rotate_y(angle: float) -> np.ndarray:
    return rotate(identity(), angle, (0, 1, 0))


def mk4_rotate_z(angle: float) -> np.ndarray:
    return rotate(identity(), angle, (0, 0, 1))


def mk4_scale(factors) -> np.ndarray:
    return scale(identity(), factors)


def mk4_translate(offset) -> np.ndarray:
    return translate(identity(), offset)


def _column(m, index: int, sign: float) -> Vec3:
    col = _as_mat(m)[:3, index]
    return normalize(Vec3(*(sign * float(c) for c in col)))


def forward(m) -> Vec3:
    return _column(m, 2, -1.0)


def backward(m) -> Vec3:
    return _column(m, 2, 1.0)


def up(m) -> Vec3:
    return _column(m, 1, 1.0)


def down(m) -> Vec3:
    return _column(m, 1, -1.0)


def left(m) -> Vec3:
    return _column(m, 0, -1.0)


def right(m) -> Vec3:
    return _column(m, 0, 1.0)