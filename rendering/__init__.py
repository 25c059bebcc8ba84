"""Rendering components for the camera demo."""

from .grid import Grid
from .target import TargetMarker
from .text import TextRenderer

__all__ = ["Grid", "TargetMarker", "TextRenderer"]
