import pytest

from villagedefense.vector2 import Vector2


def test_add_sub_round_trip():
    a = Vector2(1.5, -2.0)
    b = Vector2(3.0, 4.0)
    assert (a + b) - b == a


def test_scalar_multiplication_matches_addition():
    a = Vector2(1.5, -2.0)
    assert a * 2 == a + a
    assert 2 * a == a * 2


def test_vector_multiplication_is_dot_product():
    a = Vector2(1.0, 2.0)
    b = Vector2(3.0, 4.0)
    assert a * b == a.dot(b)
    assert Vector2(1.0, 0.0).dot(Vector2(0.0, 1.0)) == 0


def test_length():
    assert Vector2(3.0, 4.0).length() == pytest.approx(5.0)
    assert Vector2().length() == 0


def test_normalize_gives_unit_vector():
    v = Vector2(-7.0, 2.5).normalize()
    assert v.length() == pytest.approx(1.0)


def test_normalize_zero_vector():
    assert Vector2(0.0, 0.0).normalize() == Vector2(0.0, 0.0)


def test_approx_zero():
    assert Vector2(0.00001, 0.0).approx_zero()
    assert not Vector2(0.1, 0.0).approx_zero()


def test_ordering_compares_lengths():
    short = Vector2(1.0, 0.0)
    long = Vector2(0.0, -2.0)
    assert short < long
    assert long > short
    assert not (long < short)


def test_in_place_add_rebinds():
    v = Vector2(1.0, 1.0)
    original = v
    v += Vector2(1.0, 1.0)
    assert v == original + original