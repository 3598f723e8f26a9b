import pytest

from rasterkit.mathutil import HALF_PI
from rasterkit.vector2 import Vector2


def test_size_and_dot_agree():
    v = Vector2(3.0, 4.0)
    assert v.dot(v) == v.size_squared()
    assert v.size() ** 2 == pytest.approx(v.size_squared())


@pytest.mark.parametrize("v", [Vector2(3, 4), Vector2(-0.2, 7.0), Vector2(1e-3, -2e-3)])
def test_normalized_has_unit_length_and_same_direction(v):
    n = v.normalized()
    assert n.size() == pytest.approx(1.0)
    assert n.angle() == pytest.approx(v.angle())


def test_normalized_zero_and_unit():
    assert Vector2.ZERO.normalized() == Vector2.ZERO
    assert Vector2.UNIT_Y.normalized() is Vector2.UNIT_Y


def test_arithmetic_round_trips():
    a = Vector2(1.5, -2.0)
    b = Vector2(0.25, 4.0)
    assert (a + b) - b == a
    assert -a + a == Vector2.ZERO
    assert (a * 2.0) / 2.0 == a
    assert 2.0 * a == a * 2.0
    assert tuple(a * b) == (a.x * b.x, a.y * b.y)


def test_in_place_add_leaves_constants_untouched():
    v = Vector2.ZERO
    v += Vector2.ONE
    assert v == Vector2.ONE
    assert Vector2.ZERO == Vector2(0.0, 0.0)


def test_indexing():
    v = Vector2(5.0, 6.0)
    assert (v[0], v[1]) == (v.x, v.y)
    assert list(v) == [5.0, 6.0]
    with pytest.raises(IndexError):
        v[2]


def test_equals_in_tolerance_is_inclusive_on_x_only():
    origin = Vector2.ZERO
    assert origin.equals_in_tolerance(Vector2(0.5, 0.0), 0.5)
    assert not origin.equals_in_tolerance(Vector2(0.0, 0.5), 0.5)
    assert origin.equals_in_tolerance(Vector2(1e-9, -1e-9))


def test_max():
    assert Vector2(-1.0, 3.0).max() == 3.0
    assert Vector2(8.0, 3.0).max() == 8.0


def test_angles():
    assert Vector2.UNIT_Y.angle() == pytest.approx(HALF_PI)
    assert Vector2.UNIT_X.angle() == 0.0
    assert Vector2.UNIT_Y.angle_in_degree() == pytest.approx(90.0)


@pytest.mark.parametrize("v", [Vector2(3, 4), Vector2(-2, 1), Vector2(-1, -5), Vector2(0.5, -0.5)])
def test_polar_round_trip(v):
    back = v.to_polar_coordinate().to_cartesian_coordinate()
    assert tuple(back) == pytest.approx(tuple(v), abs=1e-5)


def test_str_format():
    assert str(Vector2(1.5, -2)) == "(1.500, -2.000)"