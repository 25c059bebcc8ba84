"""Ground grid for spatial reference."""

from OpenGL.GL import *
from config import camera as config


class Grid:
    """Draws a flat line grid on the y = 0 plane."""

    def __init__(self):
        self.half_extent = config.GRID["half_extent"]
        self.spacing = config.GRID["spacing"]
        self.color = config.GRID["color"]

    def draw(self):
        e = self.half_extent

        glBegin(GL_LINES)
        glColor3f(*self.color)
        for i in range(-e, e + 1, self.spacing):
            # Lines parallel to Z, then parallel to X
            glVertex3f(i, 0.0, -e); glVertex3f(i, 0.0, e)
            glVertex3f(-e, 0.0, i); glVertex3f(e, 0.0, i)
        glEnd()
