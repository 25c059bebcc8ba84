"""
Orbit Camera Demo
=================

A third-person camera following a target that circles the origin.

Controls:
    - Arrow keys: Pitch / yaw the camera
    - Mouse drag: Pitch / yaw the camera
    - Mouse wheel: Orbit distance
    - F: Toggle third-person / first-person
    - Space: Print a randomized forward sample
    - ESC: Quit
"""

import logging

from core import Application


def main():
    logging.basicConfig(level=logging.INFO, format="[%(name)s] %(message)s")
    app = Application()
    app.run()


if __name__ == "__main__":
    main()
