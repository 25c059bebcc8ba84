"""Camera placement: desired transform from orbit parameters, then smoothing."""

import math

import numpy as np

from config import camera as config
from .math3d import WORLD_UP, lerp, quat_slerp
from .orbit import CameraMode, OrbitState
from .transform import CameraTransform


def desired_transform(orbit: OrbitState) -> CameraTransform:
    """
    Compute where the camera wants to be for the given orbit parameters.

    The placement basis at the target is turned by yaw and then by pitch,
    while the returned orientation is built pitch first and yaw second.
    The two orders differ on purpose once both angles are nonzero.
    """
    x_angle = math.radians(orbit.x_angle)
    y_angle = math.radians(orbit.y_angle)

    basis = CameraTransform.from_translation(orbit.target)
    basis.rotate_y(y_angle)
    basis.rotate_x(x_angle)

    forward = basis.forward()
    forward = forward / np.linalg.norm(forward)
    right = basis.right()
    right = right / np.linalg.norm(right)

    offset = orbit.offset
    if orbit.mode is CameraMode.FIRST_PERSON:
        position = basis.translation + WORLD_UP * offset[1]
    else:
        position = (
            basis.translation
            + forward * offset[2]
            + right * offset[0]
            + WORLD_UP * offset[1]
        )

    desired = CameraTransform(translation=position)
    desired.rotate_x(x_angle)
    desired.rotate_y(y_angle)
    return desired


def blend_factor(elapsed: float, speed: float = None, clamp: bool = None) -> float:
    """
    Interpolation parameter for one frame.

    With `clamp` off, long frames push the factor past 1 and the camera
    overshoots its target.
    """
    if elapsed < 0:
        raise ValueError(f"elapsed time must be non-negative, got {elapsed}")
    if speed is None:
        speed = config.CAMERA["smoothing_speed"]
    if clamp is None:
        clamp = config.CAMERA["clamp_blend"]

    factor = elapsed * speed
    if clamp:
        factor = min(factor, 1.0)
    return factor


def place_camera(transform: CameraTransform, orbit: OrbitState, elapsed: float,
                 speed: float = None, clamp: bool = None) -> CameraTransform:
    """
    Move `transform` toward the desired placement for this frame.

    Position is blended linearly and rotation spherically with the same
    factor. The transform is updated in place and returned.
    """
    factor = blend_factor(elapsed, speed, clamp)
    if factor == 0.0:
        return transform

    desired = desired_transform(orbit)
    transform.rotation = quat_slerp(transform.rotation, desired.rotation, factor)
    transform.translation = lerp(transform.translation, desired.translation, factor)
    return transform
