"""Per-frame camera systems and the context they run against."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .errors import DuplicateCameraError
from .focus import CameraFocus
from .orbit import OrbitState
from .placement import place_camera
from .transform import CameraTransform

logger = logging.getLogger(__name__)


@dataclass
class CameraEntity:
    """The primary camera: a transform owned by the host plus its orbit state."""
    transform: CameraTransform = field(default_factory=CameraTransform)
    orbit: OrbitState = field(default_factory=OrbitState)


class CameraContext:
    """Holds zero or one primary camera."""

    def __init__(self, camera: Optional[CameraEntity] = None):
        self.camera = camera

    def spawn(self, transform: CameraTransform = None, orbit: OrbitState = None) -> CameraEntity:
        """Register the primary camera. Only one may exist at a time."""
        if self.camera is not None:
            raise DuplicateCameraError("a primary camera is already registered")
        self.camera = CameraEntity(
            transform=transform if transform is not None else CameraTransform(),
            orbit=orbit if orbit is not None else OrbitState(),
        )
        logger.debug("Primary camera registered at %s", self.camera.transform.translation)
        return self.camera

    def despawn(self) -> Optional[CameraEntity]:
        camera, self.camera = self.camera, None
        if camera is not None:
            logger.debug("Primary camera removed")
        return camera


def position_and_rotate_camera(context: CameraContext, elapsed: float):
    """Move the primary camera toward its orbit placement."""
    camera = context.camera
    if camera is None:
        logger.debug("No primary camera, skipping placement")
        return
    place_camera(camera.transform, camera.orbit, elapsed)


def update_camera_focus(context: CameraContext, focus: CameraFocus):
    """Copy the placed camera transform into the focus snapshot."""
    camera = context.camera
    if camera is None:
        return
    focus.update(camera.transform)


class CameraRig:
    """
    Owns the camera context and the shared focus, and runs both per-frame
    systems in order: placement first, then focus tracking.
    """

    def __init__(self, context: CameraContext = None, focus: CameraFocus = None):
        self.context = context if context is not None else CameraContext()
        self.focus = focus if focus is not None else CameraFocus()

    @property
    def camera(self) -> Optional[CameraEntity]:
        return self.context.camera

    def update(self, elapsed: float):
        position_and_rotate_camera(self.context, elapsed)
        update_camera_focus(self.context, self.focus)
