"""Demo host: drives the orbit camera around a moving target."""

import math

import numpy as np
import pygame
from pygame.locals import *
from OpenGL.GL import *
from OpenGL.GLU import *

from config import camera as config
from orbitcam import CameraRig
from .input_handler import InputHandler
from rendering import Grid, TargetMarker, TextRenderer


class Application:
    """Main application managing the frame loop and rendering."""

    def __init__(self):
        pygame.init()
        pygame.display.set_mode(
            (config.WINDOW["width"], config.WINDOW["height"]),
            DOUBLEBUF | OPENGL
        )
        pygame.display.set_caption(config.WINDOW["title"])

        # Camera
        self.rig = CameraRig()
        self.camera = self.rig.context.spawn()
        self.input_handler = InputHandler(self.camera.orbit, self.rig.focus)

        # Rendering components
        self.grid = Grid()
        self.marker = TargetMarker()
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0
        self.target_phase = 0.0

        print(f"[Camera] Primary camera at {self.camera.transform.translation}, fov {self.camera.orbit.fov_degrees:.0f}°")
        self._setup_gl()

    def _setup_gl(self):
        """Initialize OpenGL settings."""
        glClearColor(*config.COLORS["background"])
        glEnable(GL_DEPTH_TEST)
        self._apply_projection()

    def _apply_projection(self):
        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(
            self.camera.orbit.fov_degrees,
            config.WINDOW["width"] / config.WINDOW["height"],
            config.CAMERA["near_clip"],
            config.CAMERA["far_clip"]
        )
        glMatrixMode(GL_MODELVIEW)

    def _apply_view(self):
        """Load the view matrix from the placed camera transform."""
        transform = self.camera.transform
        eye = transform.translation
        look_at = eye + transform.forward()
        up = transform.up()
        glLoadIdentity()
        gluLookAt(
            eye[0], eye[1], eye[2],
            look_at[0], look_at[1], look_at[2],
            up[0], up[1], up[2]
        )

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if not self.input_handler.handle_event(event):
                self.running = False

    def _move_target(self, dt: float):
        self.target_phase += config.TARGET["orbit_speed"] * dt
        r = config.TARGET["orbit_radius"]
        self.camera.orbit.target = np.array([
            r * math.cos(self.target_phase),
            config.TARGET["height"],
            r * math.sin(self.target_phase),
        ])

    def _update(self, dt: float):
        """Update camera state."""
        # Cap dt so a stall does not throw the camera past its target
        dt = min(dt, 0.05)

        self.input_handler.handle_continuous_input(dt)
        self._move_target(dt)
        self.rig.update(dt)

    def _render(self):
        """Render the scene."""
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        self._apply_view()

        self.grid.draw()
        self.marker.draw(self.camera.orbit.target)

        # Draw HUD
        orbit = self.camera.orbit
        focus = self.rig.focus
        screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.text_renderer.draw_text(
            f"{orbit.mode.value}  |  FPS: {self.fps:.0f}",
            10, 10, screen_size
        )
        self.text_renderer.draw_text(
            f"pitch: {orbit.x_angle:.1f}°  yaw: {orbit.y_angle:.1f}°  dist: {-orbit.offset[2]:.1f}",
            10, 35, screen_size
        )
        fwd = focus.forward()
        self.text_renderer.draw_text(
            f"forward: ({fwd[0]:+.2f}, {fwd[1]:+.2f}, {fwd[2]:+.2f})",
            10, 60, screen_size
        )

        pygame.display.flip()

    def run(self):
        """Main application loop."""
        while self.running:
            dt = self.clock.tick() / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
