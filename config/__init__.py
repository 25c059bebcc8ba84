"""Configuration for the orbit camera."""
