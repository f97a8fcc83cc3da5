import math

import pytest

from nsengine.vec import (
    DEG_2_RAD,
    PI,
    RAD_2_DEG,
    IVec2,
    Vec2,
    Vec3,
    Vec4,
    back3,
    cross,
    dot,
    down2,
    down3,
    forward3,
    left2,
    left3,
    length,
    length_sq,
    normalize,
    one2,
    one3,
    one4,
    right2,
    right3,
    up2,
    up3,
    zero2,
    zero3,
    zero4,
)


def test_default_vectors_are_zero():
    assert Vec2() == zero2()
    assert Vec3() == zero3()
    assert Vec4() == zero4()


def test_single_value_broadcasts():
    assert Vec4(1.5) == Vec4(1.5, 1.5, 1.5, 1.5)
    assert Vec4(1) == one4()
    assert Vec3(1) == one3()
    assert Vec2(1) == one2()


def test_wrong_arity_raises():
    with pytest.raises(ValueError):
        Vec3(1, 2)
    with pytest.raises(ValueError):
        Vec2(1, 2, 3)


def test_named_components_and_indexing():
    v = Vec4(1, 2, 3, 4)
    assert (v.x, v.y, v.z, v.w) == (v[0], v[1], v[2], v[3])
    assert list(v) == [1.0, 2.0, 3.0, 4.0]
    assert len(v) == 4
    v[1] = 9
    assert v.y == 9
    v.z = 7
    assert v[2] == 7


def test_construct_from_iterable():
    v = Vec3([1, 2, 3])
    assert v == Vec3(1, 2, 3)
    assert Vec3(v) == v


def test_add_sub_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a
    assert a - a == zero3()
    assert -a + a == zero3()


def test_scalar_mul_matches_repeated_add():
    a = Vec2(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2
    assert (a * 4) / 4 == a


def test_scalar_add_both_sides():
    a = Vec3(1, 2, 3)
    assert 1 + a == a + 1
    assert (a + 1) - 1 == a


def test_mismatched_sizes_raise():
    with pytest.raises(ValueError):
        Vec2(1, 2) + Vec3(1, 2, 3)
    with pytest.raises(ValueError):
        dot(Vec2(1, 2), Vec3(1, 2, 3))


def test_equality_requires_same_type():
    assert Vec2(1, 2) == Vec2(1, 2)
    assert not (Vec2(1, 2) == IVec2(1, 2))


def test_copy_is_independent():
    a = Vec3(1, 2, 3)
    b = a.copy()
    b[0] = 10
    assert a[0] == 1
    assert b[0] == 10


def test_ivec2_truncates_division():
    v = IVec2(7, -7) / 2
    assert v == IVec2(3, -3)
    assert all(isinstance(c, int) for c in v)


def test_dot_and_length():
    v = Vec3(3.0, -1.0, 2.5)
    assert dot(v, v) == length_sq(v)
    assert math.isclose(length(v) ** 2, length_sq(v))


def test_normalize_gives_unit_parallel_vector():
    v = Vec3(3.0, -4.0, 12.0)
    n = normalize(v)
    assert math.isclose(length(n), 1.0)
    assert all(math.isclose(c, 0.0, abs_tol=1e-12) for c in cross(n, v))


def test_normalize_zero_raises():
    with pytest.raises(ZeroDivisionError):
        normalize(zero3())


def test_cross_is_orthogonal():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert math.isclose(dot(c, a), 0.0, abs_tol=1e-12)
    assert math.isclose(dot(c, b), 0.0, abs_tol=1e-12)
    assert cross(right3(), up3()) == forward3()


def test_cross_needs_vec3():
    with pytest.raises(TypeError):
        cross(Vec2(1, 0), Vec2(0, 1))


def test_direction_constants_are_opposites():
    assert up2() == -down2()
    assert left2() == -right2()
    assert up3() == -down3()
    assert left3() == -right3()
    assert back3() == -forward3()
    assert length(up3()) == 1.0


def test_angle_constants():
    assert math.isclose(length(Vec2(PI, 0.0)), math.pi)
    assert math.isclose(length(Vec2(180.0 * DEG_2_RAD, 0.0)), math.pi)
    assert math.isclose(dot(Vec2(DEG_2_RAD, 0.0), Vec2(RAD_2_DEG, 0.0)), 1.0)