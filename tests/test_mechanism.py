import dataclasses
import math

import pytest

from piston_sketch.core.mechanism import (
    EngineParams,
    PistonPosition,
    cylinder_parameter,
    piston_position,
    solve_piston_position,
)


def test_vertical_cylinder_at_zero_angle():
    res = piston_position(50.0, 100.0, (0.0, 0.0), (0.0, 20.0), 0.0)
    assert res.is_valid
    assert res.value[0] == pytest.approx(0.0, abs=1e-12)
    assert res.value[1] == pytest.approx(math.sqrt(100.0 ** 2 - 50.0 ** 2))
    assert res.value[1] == pytest.approx(86.60, abs=0.01)


def test_vertical_cylinder_at_pi_is_symmetric():
    res = piston_position(50.0, 100.0, (0.0, 0.0), (0.0, 20.0), math.pi)
    assert res.is_valid
    assert res.value[0] == pytest.approx(0.0, abs=1e-9)
    assert res.value[1] == pytest.approx(86.60, abs=0.01)


def test_piston_is_one_rod_length_from_crankpin():
    params = EngineParams(crank_radius=40.0, rod_length=130.0, cylinder_origin=(15.0, 30.0),
                          cylinder_direction=(1.0, 3.0))
    for i in range(24):
        params.crank_angle = i * math.pi / 12
        res = solve_piston_position(params)
        assert res.is_valid
        cx, cy = params.crankpin()
        assert math.hypot(res.value[0] - cx, res.value[1] - cy) == pytest.approx(130.0)


def test_piston_lies_on_cylinder_axis():
    params = EngineParams(crank_radius=30.0, rod_length=90.0, cylinder_origin=(-10.0, 5.0),
                          cylinder_direction=(2.0, 5.0), crank_angle=1.1)
    res = solve_piston_position(params)
    assert res.is_valid
    ox, oy = params.cylinder_origin
    dx, dy = params.cylinder_direction
    cross = (res.value[0] - ox) * dy - (res.value[1] - oy) * dx
    assert cross == pytest.approx(0.0, abs=1e-9)


def test_zero_crank_radius_gives_fixed_offset():
    for direction in [(0.0, 1.0), (3.0, 4.0), (-2.0, 0.5)]:
        norm = math.hypot(*direction)
        expected = (70.0 * direction[0] / norm, 70.0 * direction[1] / norm)
        for alpha in [0.0, 0.7, math.pi, 4.0, -2.5]:
            res = piston_position(0.0, 70.0, (0.0, 0.0), direction, alpha)
            assert res.is_valid
            assert res.value == pytest.approx(expected)


def test_rod_shorter_than_crank_offset_is_invalid():
    res = piston_position(50.0, 10.0, (0.0, 0.0), (0.0, 1.0), 0.0)
    assert not res.is_valid
    assert res == PistonPosition.invalid()


def test_zero_direction_is_invalid():
    res = piston_position(50.0, 100.0, (0.0, 0.0), (0.0, 0.0), 0.3)
    assert not res.is_valid


def test_tangent_rod_has_single_valid_root():
    # crankpin (50, 0) is exactly 50 from the x = 0 axis: discriminant == 0
    res = piston_position(50.0, 50.0, (0.0, 0.0), (0.0, 1.0), 0.0)
    assert res.is_valid
    assert res.value == pytest.approx((0.0, 0.0), abs=1e-12)


def test_slightly_short_rod_is_invalid_without_tolerance():
    res = piston_position(50.0, 50.0 - 1e-11, (0.0, 0.0), (0.0, 1.0), 0.0)
    assert not res.is_valid


def test_larger_root_is_selected():
    # horizontal cylinder through the crank centre; roots are t = +-sqrt(L^2 - r^2 sin^2)
    res = piston_position(50.0, 100.0, (0.0, 0.0), (1.0, 0.0), math.pi / 2)
    assert res.is_valid
    assert res.value[0] == pytest.approx(math.sqrt(100.0 ** 2 - 50.0 ** 2))
    flipped = piston_position(50.0, 100.0, (0.0, 0.0), (-1.0, 0.0), math.pi / 2)
    assert flipped.value[0] == pytest.approx(-math.sqrt(100.0 ** 2 - 50.0 ** 2))


def test_direction_magnitude_does_not_matter():
    base = piston_position(45.0, 120.0, (10.0, -20.0), (3.0, 4.0), 0.9)
    for k in [0.001, 0.5, 10.0, 1e4]:
        res = piston_position(45.0, 120.0, (10.0, -20.0), (3.0 * k, 4.0 * k), 0.9)
        assert res.is_valid
        assert res.value == pytest.approx(base.value)


def test_solver_is_idempotent():
    params = EngineParams(crank_radius=33.3, rod_length=77.7, cylinder_origin=(1.5, -2.5),
                          cylinder_direction=(0.3, 1.7), crank_angle=2.2)
    first = solve_piston_position(params)
    second = solve_piston_position(params)
    assert first == second
    assert first.value[0] == second.value[0]
    assert first.value[1] == second.value[1]


def test_solver_does_not_mutate_params():
    params = EngineParams(crank_angle=1.0)
    before = params.copy()
    solve_piston_position(params)
    assert params == before


def test_result_is_immutable():
    res = PistonPosition.valid((1.0, 2.0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        res.is_valid = False


def test_plus_root_can_land_behind_cylinder_origin():
    # Cylinder origin above the crank with the rod long enough to reach below it.
    params = EngineParams(crank_radius=50.0, rod_length=70.0, cylinder_origin=(0.0, 100.0),
                          cylinder_direction=(0.0, 1.0), crank_angle=-math.pi / 2)
    res = solve_piston_position(params)
    assert res.is_valid
    assert res.value[1] == pytest.approx(20.0)
    assert cylinder_parameter(params, res.value) == pytest.approx(-80.0)


def test_default_engine_reaches_cylinder():
    params = EngineParams()
    assert params.crankpin() == pytest.approx((50.0, 0.0))
    res = solve_piston_position(params)
    assert res.is_valid
    assert res.value[1] == pytest.approx(math.sqrt(70.0 ** 2 - 50.0 ** 2))
