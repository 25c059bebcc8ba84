"""Marker drawn at the camera target."""

from OpenGL.GL import *
from config import camera as config


class TargetMarker:
    """Draws a wireframe octahedron around the orbit target."""

    def __init__(self):
        self.size = config.TARGET["size"]
        self.color = config.TARGET["color"]

    def draw(self, position):
        """
        Draw the marker.

        Args:
            position: World-space center of the marker
        """
        x, y, z = position
        s = self.size
        tips = [
            (x + s, y, z), (x, y, z + s), (x - s, y, z), (x, y, z - s)
        ]
        top = (x, y + s, z)
        bottom = (x, y - s, z)

        glBegin(GL_LINES)
        glColor3f(*self.color)
        for i, tip in enumerate(tips):
            nxt = tips[(i + 1) % len(tips)]
            glVertex3f(*tip); glVertex3f(*nxt)
            glVertex3f(*tip); glVertex3f(*top)
            glVertex3f(*tip); glVertex3f(*bottom)
        glEnd()
