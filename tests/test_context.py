"""Tests for the per-frame camera systems."""

import numpy as np
import pytest

from orbitcam import (
    CameraContext,
    CameraError,
    CameraRig,
    DuplicateCameraError,
    position_and_rotate_camera,
    update_camera_focus,
)


def test_rig_without_camera_is_a_no_op() -> None:
    rig = CameraRig()

    rig.update(0.016)

    assert rig.camera is None
    assert np.array_equal(rig.focus.origin(), np.zeros(3))


def test_second_primary_camera_is_rejected() -> None:
    context = CameraContext()
    context.spawn()

    with pytest.raises(DuplicateCameraError):
        context.spawn()
    assert issubclass(DuplicateCameraError, CameraError)


def test_rig_places_camera_then_tracks_focus() -> None:
    rig = CameraRig()
    camera = rig.context.spawn()

    rig.update(1.0)

    assert np.allclose(camera.transform.translation, [0.0, 0.5, 6.0])
    assert np.array_equal(rig.focus.origin(), camera.transform.translation)
    assert np.array_equal(rig.focus.forward(), camera.transform.forward())
    assert np.array_equal(rig.focus.right(), camera.transform.right())


def test_focus_keeps_last_snapshot_after_camera_removed() -> None:
    rig = CameraRig()
    rig.context.spawn()
    rig.update(1.0)
    origin = rig.focus.origin()

    removed = rig.context.despawn()
    rig.update(1.0)

    assert removed is not None
    assert np.array_equal(rig.focus.origin(), origin)


def test_systems_follow_a_moving_target() -> None:
    rig = CameraRig()
    camera = rig.context.spawn()
    camera.orbit.target = np.array([10.0, 0.0, 0.0])

    position_and_rotate_camera(rig.context, 0.025)
    update_camera_focus(rig.context, rig.focus)

    # Halfway from the origin toward (10, 0.5, 6)
    assert np.allclose(rig.focus.origin(), [5.0, 0.25, 3.0])
