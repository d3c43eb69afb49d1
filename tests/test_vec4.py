import pytest

from wireframe3d.vec4 import Vec4


def test_default_w_is_one():
    v = Vec4()
    assert (v.x, v.y, v.z, v.w) == (0.0, 0.0, 0.0, 1.0)


def test_three_components_give_unit_w():
    v = Vec4(2.0, 3.0, 4.0)
    assert v.w == 1.0


def test_explicit_w_kept():
    v = Vec4(2.0, 3.0, 4.0, 0.0)
    assert v.w == 0.0


def test_colour_aliases():
    v = Vec4(0.1, 0.2, 0.3, 0.4)
    assert (v.r, v.g, v.b, v.a) == (0.1, 0.2, 0.3, 0.4)
    v.a = 0.9
    assert v.w == 0.9


def test_subtract_self_is_zero_with_unit_w():
    a = Vec4(3.0, -1.0, 2.5, 7.0)
    assert a - a == Vec4(0.0, 0.0, 0.0, 1.0)


def test_add_matches_subtract():
    a = Vec4(3.0, -1.0, 2.5)
    b = Vec4(1.0, 4.0, -0.5)
    assert a + b == a - b


def test_multiply_by_ones_resets_w():
    a = Vec4(3.0, -1.0, 2.5, 5.0)
    assert a * Vec4(1.0, 1.0, 1.0) == Vec4(a.x, a.y, a.z, 1.0)


def test_str_format():
    assert str(Vec4(1.0, 2.0, 3.0)) == "(1, 2, 3, 1)"


def test_multiply_rejects_other_types():
    with pytest.raises(TypeError):
        Vec4() * "x"