"""Orbit camera placement, smoothing and focus tracking."""

from .errors import CameraError, DuplicateCameraError
from .transform import CameraTransform
from .orbit import (
    CameraAxisLimit,
    CameraLimits,
    CameraMode,
    Clamp,
    OrbitState,
    PrimaryCamera,
    Wrap,
    wrap_degrees,
)
from .placement import blend_factor, desired_transform, place_camera
from .focus import CameraFocus, FocusSnapshot
from .context import (
    CameraContext,
    CameraEntity,
    CameraRig,
    position_and_rotate_camera,
    update_camera_focus,
)

__all__ = [
    "CameraError",
    "DuplicateCameraError",
    "CameraTransform",
    "CameraAxisLimit",
    "CameraLimits",
    "CameraMode",
    "Clamp",
    "OrbitState",
    "PrimaryCamera",
    "Wrap",
    "wrap_degrees",
    "blend_factor",
    "desired_transform",
    "place_camera",
    "CameraFocus",
    "FocusSnapshot",
    "CameraContext",
    "CameraEntity",
    "CameraRig",
    "position_and_rotate_camera",
    "update_camera_focus",
]
