"""Input handling: turns keyboard and mouse input into orbit adjustments."""

import numpy as np
import pygame
from pygame.locals import *
from config import camera as config

from orbitcam import CameraFocus, CameraMode, OrbitState


class InputHandler:
    """Handles keyboard and mouse input for the primary camera."""

    def __init__(self, orbit: OrbitState, focus: CameraFocus):
        self.orbit = orbit
        self.focus = focus
        self.mouse_dragging = False
        self.last_mouse_pos = (0, 0)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            if event.key == K_f:
                self.toggle_mode()
            elif event.key == K_SPACE:
                sample = self.focus.forward_randomized(config.INPUT["jitter_range"])
                print(f"[Camera] Randomized forward: {np.round(sample, 3)}")
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.mouse_dragging = True
                self.last_mouse_pos = pygame.mouse.get_pos()
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                self.mouse_dragging = False
        elif event.type == MOUSEWHEEL:
            self.zoom(event.y * config.INPUT["zoom_speed"])

        return True

    def toggle_mode(self):
        if self.orbit.mode is CameraMode.THIRD_PERSON_ORBIT:
            self.orbit.mode = CameraMode.FIRST_PERSON
        else:
            self.orbit.mode = CameraMode.THIRD_PERSON_ORBIT

    def zoom(self, delta: float):
        """Move the camera closer (positive delta) or further from the target."""
        self.orbit.offset[2] = max(
            config.INPUT["min_distance"],
            min(config.INPUT["max_distance"], self.orbit.offset[2] + delta)
        )

    def handle_continuous_input(self, dt: float):
        """Handle continuous keyboard input (called each frame)."""
        keys = pygame.key.get_pressed()
        rot_speed = config.INPUT["keyboard_rotate_speed"] * dt

        if keys[K_LEFT]:
            self.orbit.adjust_y_angle(-rot_speed)
        if keys[K_RIGHT]:
            self.orbit.adjust_y_angle(rot_speed)
        if keys[K_UP]:
            self.orbit.adjust_x_angle(rot_speed)
        if keys[K_DOWN]:
            self.orbit.adjust_x_angle(-rot_speed)

        if self.mouse_dragging:
            current_pos = pygame.mouse.get_pos()
            dx = current_pos[0] - self.last_mouse_pos[0]
            dy = current_pos[1] - self.last_mouse_pos[1]
            self.orbit.adjust_y_angle(-dx * config.INPUT["mouse_sensitivity"])
            self.orbit.adjust_x_angle(-dy * config.INPUT["mouse_sensitivity"])
            self.last_mouse_pos = current_pos
