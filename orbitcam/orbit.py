"""Orbit parameters of the primary camera and the limits applied to its angles."""

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from config import camera as config

logger = logging.getLogger(__name__)


class CameraMode(Enum):
    """How the camera is placed relative to its target."""
    THIRD_PERSON_ORBIT = "third_person_orbit"
    FIRST_PERSON = "first_person"


def wrap_degrees(value: float) -> float:
    """
    Bring an angle back into the degree range with a single correction.

    Only one turn is added or removed, so values more than a full turn out
    of range stay out of range until the next adjustment.
    """
    if value > 360.0:
        return value - 360.0
    if value < 0.0:
        return value + 360.0
    return value


class CameraAxisLimit:
    """Policy applied to an orbit angle after every adjustment."""

    def apply(self, value: float) -> float:
        raise NotImplementedError

    @staticmethod
    def from_config(limit) -> "CameraAxisLimit":
        """A `(min, max)` pair clamps, `None` wraps."""
        if limit is None:
            return Wrap()
        lo, hi = limit
        return Clamp(lo, hi)


@dataclass(frozen=True)
class Clamp(CameraAxisLimit):
    min: float
    max: float

    def __post_init__(self):
        if self.min > self.max:
            logger.warning("Clamp limit has min %.3f > max %.3f, swapping", self.min, self.max)
            lo, hi = self.max, self.min
            object.__setattr__(self, "min", lo)
            object.__setattr__(self, "max", hi)

    def apply(self, value: float) -> float:
        return max(self.min, min(self.max, value))


@dataclass(frozen=True)
class Wrap(CameraAxisLimit):
    def apply(self, value: float) -> float:
        return wrap_degrees(value)


@dataclass
class CameraLimits:
    """
    Per-axis angle policies.

    Only `x` and `y` are applied; there is no z angle to adjust, so `z` is
    carried for configuration completeness.
    """
    x: CameraAxisLimit = field(default_factory=lambda: CameraAxisLimit.from_config(config.CAMERA["x_limit"]))
    y: CameraAxisLimit = field(default_factory=lambda: CameraAxisLimit.from_config(config.CAMERA["y_limit"]))
    z: CameraAxisLimit = field(default_factory=lambda: CameraAxisLimit.from_config(config.CAMERA["z_limit"]))


@dataclass
class OrbitState:
    """
    Orbit parameters for one camera.

    Attributes:
        offset: Offset in camera-local axes (x lateral, y vertical, z distance behind target)
        x_angle: Pitch in degrees
        y_angle: Yaw in degrees
        target: World-space point the camera orbits
        mode: Placement mode
        fov_degrees: Field of view handed to the renderer
        limits: Per-axis angle policies
    """
    offset: np.ndarray = field(default_factory=lambda: np.array(config.CAMERA["offset"], dtype=np.float64))
    x_angle: float = config.CAMERA["x_angle"]
    y_angle: float = config.CAMERA["y_angle"]
    target: np.ndarray = field(default_factory=lambda: np.zeros(3))
    mode: CameraMode = CameraMode.THIRD_PERSON_ORBIT
    fov_degrees: float = config.CAMERA["fov"]
    limits: CameraLimits = field(default_factory=CameraLimits)

    def adjust_x_angle(self, increase: float):
        """Add `increase` to the pitch and apply the x limit."""
        self.x_angle = self.limits.x.apply(self.x_angle + increase)

    def adjust_y_angle(self, increase: float):
        """
        Add `increase` to the yaw and apply the y limit.

        The increase is counted twice: once unconditionally and once more
        when the limit is applied. Input sensitivity downstream is tuned
        against this, so the final yaw is `limit(old + 2 * increase)`.
        """
        self.y_angle += increase
        self.y_angle = self.limits.y.apply(self.y_angle + increase)

    def copy(self) -> "OrbitState":
        return OrbitState(
            offset=self.offset.copy(),
            x_angle=self.x_angle,
            y_angle=self.y_angle,
            target=self.target.copy(),
            mode=self.mode,
            fov_degrees=self.fov_degrees,
            limits=self.limits,
        )


# Name used by hosts that tag the camera entity directly
PrimaryCamera = OrbitState
