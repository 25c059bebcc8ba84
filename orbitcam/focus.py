"""Shared snapshot of where the primary camera is looking."""

import math
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from .math3d import quat_from_rotation_x, quat_from_rotation_y, quat_mul, quat_rotate
from .transform import CameraTransform


@dataclass(frozen=True, eq=False)
class FocusSnapshot:
    """Origin and axes of the most recently placed camera."""
    origin: np.ndarray = field(default_factory=lambda: np.zeros(3))
    forward: np.ndarray = field(default_factory=lambda: np.zeros(3))
    right: np.ndarray = field(default_factory=lambda: np.zeros(3))

    @classmethod
    def from_transform(cls, transform: CameraTransform) -> "FocusSnapshot":
        return cls(
            origin=transform.translation.copy(),
            forward=transform.forward(),
            right=transform.right(),
        )


class CameraFocus:
    """
    Process-wide focus state, written once per frame after placement.

    Readers see whole snapshots only: `update` swaps in a new immutable
    snapshot instead of writing the three vectors one by one. Until the
    first update all vectors are zero.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()
        self._snapshot = FocusSnapshot()

    @property
    def snapshot(self) -> FocusSnapshot:
        return self._snapshot

    def update(self, transform: CameraTransform):
        self._snapshot = FocusSnapshot.from_transform(transform)

    def origin(self) -> np.ndarray:
        return self._snapshot.origin.copy()

    def forward(self) -> np.ndarray:
        return self._snapshot.forward.copy()

    def right(self) -> np.ndarray:
        return self._snapshot.right.copy()

    def forward_flat(self) -> np.ndarray:
        # Reads the right axis, same as right_flat; movement code is tuned to this.
        flat = self._snapshot.right.copy()
        flat[1] = 0.0
        return flat

    def right_flat(self) -> np.ndarray:
        flat = self._snapshot.right.copy()
        flat[1] = 0.0
        return flat

    def forward_randomized(self, spread: float, as_radians: bool = False) -> np.ndarray:
        """
        Sample a direction in a cone around the forward axis.

        A point is drawn uniformly on a disc of radius ``sqrt(spread)``; its
        two coordinates become pitch and yaw amounts. By default these amounts
        are read as degrees, which keeps the jitter small. Pass
        ``as_radians=True`` to use them as radians directly.

        Args:
            spread: Size of the sampling disc (0 returns the forward axis)
            as_radians: Skip the degree conversion of the sampled angles

        Returns:
            Rotated forward vector
        """
        snapshot = self._snapshot
        radius = math.sqrt(spread * self.rng.random())
        theta = self.rng.random() * 2.0 * math.pi
        rot_x = radius * math.cos(theta)
        rot_y = radius * math.sin(theta)
        if not as_radians:
            rot_x = math.radians(rot_x)
            rot_y = math.radians(rot_y)

        rotation = quat_mul(quat_from_rotation_y(rot_y), quat_from_rotation_x(rot_x))
        return quat_rotate(rotation, snapshot.forward)
