"""Tests for quaternion helpers."""

import math

import numpy as np

from orbitcam.math3d import (
    IDENTITY_QUAT,
    lerp,
    quat_from_rotation_x,
    quat_from_rotation_y,
    quat_mul,
    quat_rotate,
    quat_slerp,
)


def test_rotation_y_turns_forward_to_negative_x() -> None:
    q = quat_from_rotation_y(math.pi / 2)

    assert np.allclose(quat_rotate(q, np.array([0.0, 0.0, -1.0])), [-1.0, 0.0, 0.0])


def test_quat_mul_applies_right_operand_first() -> None:
    yaw = quat_from_rotation_y(math.pi / 2)
    pitch = quat_from_rotation_x(math.pi / 2)
    v = np.array([0.0, 0.0, -1.0])

    combined = quat_rotate(quat_mul(yaw, pitch), v)

    assert np.allclose(combined, quat_rotate(yaw, quat_rotate(pitch, v)))
    assert np.allclose(combined, [0.0, 1.0, 0.0])


def test_slerp_halfway() -> None:
    end = quat_from_rotation_y(math.pi / 2)

    half = quat_slerp(IDENTITY_QUAT, end, 0.5)

    assert np.allclose(half, quat_from_rotation_y(math.pi / 4))


def test_slerp_endpoints() -> None:
    end = quat_from_rotation_x(1.0)

    assert np.allclose(quat_slerp(IDENTITY_QUAT, end, 0.0), IDENTITY_QUAT)
    assert np.allclose(quat_slerp(IDENTITY_QUAT, end, 1.0), end)


def test_slerp_takes_shortest_path() -> None:
    end = quat_from_rotation_y(math.pi / 2)

    a = quat_slerp(IDENTITY_QUAT, end, 0.3)
    b = quat_slerp(IDENTITY_QUAT, -end, 0.3)

    assert np.allclose(a, b)


def test_lerp_extrapolates() -> None:
    a = np.array([0.0, 0.0, 0.0])
    b = np.array([1.0, 2.0, 3.0])

    assert np.allclose(lerp(a, b, 2.0), [2.0, 4.0, 6.0])
