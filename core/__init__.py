"""Demo host for the orbit camera."""

from .input_handler import InputHandler
from .application import Application

__all__ = ["InputHandler", "Application"]
