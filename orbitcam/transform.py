"""Position + orientation of the camera entity."""

import numpy as np

from .math3d import (
    IDENTITY_QUAT,
    quat_from_rotation_x,
    quat_from_rotation_y,
    quat_mul,
    quat_rotate,
)

_NEG_Z = np.array([0.0, 0.0, -1.0])
_POS_X = np.array([1.0, 0.0, 0.0])
_POS_Y = np.array([0.0, 1.0, 0.0])


class CameraTransform:
    """
    Translation and rotation of a camera.

    The camera looks down its local -Z axis with +X to the right and +Y up.
    Rotations applied through `rotate` pre-multiply the current rotation,
    i.e. they turn the transform around the parent (world) axes.
    """

    def __init__(self, translation=None, rotation=None):
        if translation is None:
            translation = np.zeros(3)
        if rotation is None:
            rotation = IDENTITY_QUAT
        self.translation = np.array(translation, dtype=np.float64)
        self.rotation = np.array(rotation, dtype=np.float64)

    @classmethod
    def from_translation(cls, translation) -> "CameraTransform":
        return cls(translation=translation)

    def __repr__(self):
        return f"CameraTransform(translation={self.translation}, rotation={self.rotation})"

    def copy(self) -> "CameraTransform":
        return CameraTransform(self.translation.copy(), self.rotation.copy())

    def rotate(self, q: np.ndarray):
        self.rotation = quat_mul(q, self.rotation)

    def rotate_x(self, angle: float):
        """Rotate around the world X axis by `angle` radians."""
        self.rotate(quat_from_rotation_x(angle))

    def rotate_y(self, angle: float):
        """Rotate around the world Y axis by `angle` radians."""
        self.rotate(quat_from_rotation_y(angle))

    def forward(self) -> np.ndarray:
        return quat_rotate(self.rotation, _NEG_Z)

    def right(self) -> np.ndarray:
        return quat_rotate(self.rotation, _POS_X)

    def up(self) -> np.ndarray:
        return quat_rotate(self.rotation, _POS_Y)
