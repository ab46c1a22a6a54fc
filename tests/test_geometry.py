import pytest

from piston_sketch.core.geometry import is_zero, normalize, polar, rect_corners


def test_normalize():
    assert normalize(3.0, 4.0) == pytest.approx((0.6, 0.8))
    assert normalize(0.0, 0.0) == (0.0, 0.0)


def test_is_zero_uses_epsilon():
    assert is_zero(0.0009)
    assert is_zero(-0.0009)
    assert not is_zero(0.001)


def test_polar():
    assert polar(2.0, 0.0) == pytest.approx((2.0, 0.0))


def test_rect_corners_for_horizontal_bar():
    corners = rect_corners((0.0, 0.0), (10.0, 0.0), 4.0)
    expected = [(0.0, 2.0), (10.0, 2.0), (10.0, -2.0), (0.0, -2.0)]
    for got, want in zip(corners, expected):
        assert got == pytest.approx(want)
