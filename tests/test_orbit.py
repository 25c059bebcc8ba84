"""Tests for orbit state defaults and angle limit policies."""

import logging

import numpy as np
import pytest

from orbitcam import CameraLimits, CameraMode, Clamp, OrbitState, Wrap, wrap_degrees


def test_defaults_match_configuration() -> None:
    orbit = OrbitState()

    assert np.array_equal(orbit.offset, [0.0, 0.5, -6.0])
    assert orbit.x_angle == 0.0
    assert orbit.y_angle == 0.0
    assert np.array_equal(orbit.target, [0.0, 0.0, 0.0])
    assert orbit.mode is CameraMode.THIRD_PERSON_ORBIT
    assert orbit.fov_degrees == 45.0
    assert orbit.limits.x == Clamp(-2.0, 20.0)
    assert isinstance(orbit.limits.y, Wrap)
    assert isinstance(orbit.limits.z, Wrap)


def test_default_instances_do_not_share_vectors() -> None:
    a, b = OrbitState(), OrbitState()
    a.offset[2] = -10.0
    a.target[0] = 4.0

    assert b.offset[2] == -6.0
    assert b.target[0] == 0.0


def test_adjust_x_angle_clamps_to_limits() -> None:
    orbit = OrbitState()

    orbit.adjust_x_angle(5.0)
    assert orbit.x_angle == 5.0

    orbit.adjust_x_angle(25.0)
    assert orbit.x_angle == 20.0

    orbit.adjust_x_angle(-100.0)
    assert orbit.x_angle == -2.0


def test_repeated_x_adjustments_stay_within_clamp() -> None:
    rng = np.random.default_rng(3)
    orbit = OrbitState()

    for delta in rng.uniform(-50.0, 50.0, size=200):
        orbit.adjust_x_angle(float(delta))
        assert -2.0 <= orbit.x_angle <= 20.0


def test_adjust_x_angle_wraps_once() -> None:
    orbit = OrbitState(limits=CameraLimits(x=Wrap()))
    orbit.x_angle = 350.0

    orbit.adjust_x_angle(20.0)
    assert orbit.x_angle == pytest.approx(10.0)

    orbit.adjust_x_angle(-20.0)
    assert orbit.x_angle == pytest.approx(350.0)


def test_adjust_y_angle_counts_increase_twice() -> None:
    orbit = OrbitState()

    orbit.adjust_y_angle(10.0)
    assert orbit.y_angle == pytest.approx(20.0)

    orbit.y_angle = 350.0
    orbit.adjust_y_angle(10.0)
    assert orbit.y_angle == pytest.approx(10.0)

    orbit.y_angle = 10.0
    orbit.adjust_y_angle(-10.0)
    assert orbit.y_angle == pytest.approx(350.0)


def test_adjust_y_angle_with_clamp() -> None:
    orbit = OrbitState(limits=CameraLimits(y=Clamp(0.0, 30.0)))

    orbit.adjust_y_angle(20.0)

    assert orbit.y_angle == 30.0


def test_wrap_keeps_in_range_angles_in_range() -> None:
    rng = np.random.default_rng(11)
    orbit = OrbitState(limits=CameraLimits(x=Wrap(), y=Wrap()))

    for start, delta in zip(rng.uniform(0.0, 360.0, 100), rng.uniform(-360.0, 360.0, 100)):
        orbit.x_angle = float(start)
        orbit.adjust_x_angle(float(delta))
        assert 0.0 <= orbit.x_angle < 360.0

    for start, delta in zip(rng.uniform(0.0, 360.0, 100), rng.uniform(-180.0, 180.0, 100)):
        orbit.y_angle = float(start)
        orbit.adjust_y_angle(float(delta))
        assert 0.0 <= orbit.y_angle < 360.0


def test_wrap_applies_a_single_correction() -> None:
    assert wrap_degrees(800.0) == 440.0
    assert wrap_degrees(-400.0) == -40.0
    assert wrap_degrees(360.0) == 360.0
    assert wrap_degrees(0.0) == 0.0
    assert wrap_degrees(361.0) == 1.0
    assert wrap_degrees(-1.0) == 359.0


def test_inverted_clamp_is_normalized_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="orbitcam.orbit"):
        limit = Clamp(5.0, -5.0)

    assert limit.min == -5.0
    assert limit.max == 5.0
    assert "swapping" in caplog.text
    assert limit.apply(12.0) == 5.0


def test_copy_is_independent() -> None:
    orbit = OrbitState()
    clone = orbit.copy()
    clone.offset[1] = 3.0
    clone.adjust_x_angle(4.0)

    assert orbit.offset[1] == 0.5
    assert orbit.x_angle == 0.0
    assert clone.limits is orbit.limits
