import math

import pytest

from nsengine.color import Color, Colorf, mix


def test_colorf_default_is_opaque_black():
    assert Colorf() == Colorf(0, 0, 0, 1.0)


def test_color_default_alpha():
    c = Color()
    assert list(c) == [0, 0, 0, 255]


def test_gray_constructors():
    assert Colorf.gray(0.5) == Colorf(0.5, 0.5, 0.5, 1.0)
    assert Color.gray(7, 9) == Color(7, 7, 7, 9)


@pytest.mark.parametrize("n", [0x11223344, 0xDEADBEEF, 0, 0xFFFFFFFF])
def test_color_packing_round_trips(n):
    assert Color.from_rgba32(n).to_rgba32() == n
    assert Color.from_argb32(n).to_argb32() == n
    assert Color.from_abgr32(n).to_abgr32() == n


def test_color_unpack_orders():
    n = 0x11223344
    assert Color.from_rgba32(n) == Color(0x11, 0x22, 0x33, 0x44)
    assert Color.from_argb32(n) == Color(0x22, 0x33, 0x44, 0x11)
    assert Color.from_abgr32(n) == Color(0x44, 0x33, 0x22, 0x11)


def test_colorf_packing_matches_color():
    c = Color(255, 0, 255, 0)
    f = Colorf.from_color(c)
    assert f.to_rgba32() == c.to_rgba32()
    assert f.to_argb32() == c.to_argb32()
    assert f.to_abgr32() == c.to_abgr32()
    assert Colorf.from_rgba32(c.to_rgba32()) == f


def test_color_colorf_conversion():
    assert Color.from_colorf(Colorf(1, 0, 1, 0)) == Color(255, 0, 255, 0)
    assert Colorf(1, 0, 1, 0).to_color() == Color(255, 0, 255, 0)
    assert Color(255, 0, 0, 255).to_colorf() == Colorf(1, 0, 0, 1)


def test_color_saturating_add_and_sub():
    assert Color(200, 10, 0, 255) + Color(100, 10, 0, 1) == Color(255, 10 + 10, 0, 255)
    assert Color(10, 50, 0, 0) - Color(20, 5, 0, 0) == Color(0, 50 - 5, 0, 0)


def test_color_iadd_uses_updated_red():
    c = Color(10, 1, 2, 3)
    c += Color(5, 5, 5, 5)
    assert c.r == 10 + 5
    assert c.g == c.r + 5
    assert c.b == c.r + 5


def test_color_multiply():
    assert Color(16, 2, 0, 255) * Color(16, 3, 0, 0) == Color(255, 2 * 3, 0, 0)
    assert Color(100, 100, 100, 100) * 3.0 == Color(255, 255, 255, 255)
    assert Color(100, 100, 100, 100) * -1.0 == Color(0, 0, 0, 0)
    assert 0.5 * Color(100, 50, 20, 8) == Color(100, 50, 20, 8) * 0.5


def test_color_divide():
    assert Color(9, 8, 7, 6) / Color(2, 2, 2, 2) == Color(9 // 2, 8 // 2, 7 // 2, 6 // 2)
    with pytest.raises(ZeroDivisionError):
        Color(1, 1, 1, 1) / Color(0, 1, 1, 1)
    assert Color(5, 5, 5, 5) / 0.0 == Color(255, 255, 255, 255)


def test_mix_with_white_is_identity():
    c = Color(12, 34, 56, 78)
    assert mix(c, Color(255, 255, 255, 255)) == c
    assert mix(c, Color(0, 0, 0, 0)) == Color(0, 0, 0, 0)


def test_colorf_add_sub_round_trip():
    a = Colorf(0.25, 0.5, 0.75, 1.0)
    b = Colorf(0.125, 0.25, 0.125, 0.5)
    assert list((a + b) - b) == pytest.approx(list(a))


def test_colorf_negation_and_pos():
    c = Colorf(0.25, 0.5, 0.75, 1.0)
    assert -c == Colorf(1 - 0.25, 1 - 0.5, 1 - 0.75, 1 - 1.0)
    assert -(-c) == c
    p = +c
    assert p == c and p is not c


def test_colorf_scalar_ops():
    c = Colorf(0.25, 0.5, 0.75, 1.0)
    assert 2.0 * c == c * 2.0
    assert list((c * 2.0) / 2.0) == pytest.approx(list(c))
    assert (Colorf(1, 1, 1, 1) / 0.0).r == math.inf


def test_colorf_lerp_endpoints():
    a = Colorf(0.1, 0.2, 0.3, 0.4)
    b = Colorf(0.9, 0.8, 0.7, 0.6)
    assert list(a.lerp(b, 0.0)) == pytest.approx(list(a))
    assert list(a.lerp(b, 1.0)) == pytest.approx(list(b))


def test_colorf_darken_lighten():
    c = Colorf(0.2, 0.4, 0.6, 0.3)
    assert c.darkened(0.0) == c
    assert c.darkened(1.0) == Colorf(0, 0, 0, 0.3)
    assert c.lightened(1.0) == Colorf(1, 1, 1, 0.3)


def test_colorf_blend():
    base = Colorf(0.2, 0.4, 0.6, 1.0)
    over = Colorf(0.9, 0.1, 0.5, 1.0)
    assert base.blend(over) == over
    assert list(base.blend(Colorf(0.3, 0.3, 0.3, 0.0))) == pytest.approx(list(base))
    assert Colorf(1, 1, 1, 0).blend(Colorf(1, 1, 1, 0)) == Colorf(0, 0, 0, 0)


def test_colorf_set_hsv_red():
    assert list(Colorf().set_hsv(0.0, 1.0, 1.0)) == pytest.approx([1, 0, 0, 1])


def test_colorf_hsv_round_trip():
    c = Colorf(0.2, 0.4, 0.6, 0.5)
    back = Colorf().set_hsv(c.hue(), c.saturation(), c.value(), 0.5)
    assert list(back) == pytest.approx(list(c))


def test_colorf_zero_saturation_is_gray():
    c = Colorf().set_hsv(0.7, 0.0, 0.25, 0.5)
    assert c == Colorf(0.25, 0.25, 0.25, 0.5)
    assert c.hue() == 0.0
    assert Colorf(0, 0, 0).saturation() == 0.0


def test_hue_agrees_between_types():
    assert Color(0, 255, 0).hue() == pytest.approx(Colorf(0, 1, 0).hue())
    assert Color(0, 255, 0).hue() == pytest.approx(1 / 3)


def test_colorf_invert():
    c = Colorf(0.25, 0.5, 0.75, 0.5)
    inv = c.inverted()
    assert c == Colorf(0.25, 0.5, 0.75, 0.5)
    assert inv.a == 0.5
    assert list(inv.invert()) == pytest.approx(list(c))


def test_color_invert_wraps():
    c = Color(0, 1, 0, 200)
    inv = c.inverted()
    assert inv.r == 1 and inv.g == 0 and inv.a == 200
    assert c == Color(0, 1, 0, 200)


def test_item_access():
    c = Color(1, 2, 3, 4)
    c[1] = 7
    assert c.g == 7
    with pytest.raises(IndexError):
        c[4]
    f = Colorf(0.1, 0.2, 0.3, 0.4)
    f[3] = 0.9
    assert f.a == 0.9
    assert f[0] == 0.1


def test_color_set_hsv_gray_white():
    assert Color().set_hsv(0.0, 0.0, 1.0) == Color(255, 255, 255, 255)


def test_color_lerp_and_shading():
    a = Color(10, 20, 30, 40)
    b = Color(200, 100, 50, 0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b
    assert a.darkened(1.0) == Color(0, 0, 0, 40)
    assert a.lightened(1.0) == Color(255, 255, 255, 40)


def test_color_blend_transparent():
    assert Color(5, 5, 5, 0).blend(Color(9, 9, 9, 0)) == Color(0, 0, 0, 0)


def test_color_equals_colorf_raw():
    assert Color(1, 0, 0, 1) == Colorf(1, 0, 0, 1)
    assert Color(255, 0, 0, 255) != Colorf(1, 0, 0, 1)