"""Exceptions raised by the camera core."""


class CameraError(Exception):
    """Base class for camera misuse by the host application."""


class DuplicateCameraError(CameraError):
    """A second primary camera was registered while one is active."""
