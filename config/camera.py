"""Configuration for the orbit camera and its demo host."""

WINDOW = {
    "width": 1280,
    "height": 720,
    "title": "Orbit Camera"
}

CAMERA = {
    "offset": (0.0, 0.5, -6.0),   # lateral, vertical, distance behind target
    "x_angle": 0.0,               # pitch (degrees)
    "y_angle": 0.0,               # yaw (degrees)
    "fov": 45.0,
    "near_clip": 0.1,
    "far_clip": 500.0,
    "x_limit": (-2.0, 20.0),      # clamp range for pitch, None = wrap
    "y_limit": None,
    "z_limit": None,
    "smoothing_speed": 20.0,      # blend factor per second
    "clamp_blend": True,          # keep blend factor within [0, 1]
}

TARGET = {
    "orbit_radius": 8.0,          # demo target moves on this circle
    "orbit_speed": 0.4,           # radians per second
    "height": 0.0,
    "size": 0.5,
    "color": (0.9, 0.4, 0.2)
}

INPUT = {
    "keyboard_rotate_speed": 60.0,
    "mouse_sensitivity": 0.3,
    "zoom_speed": 0.5,
    "min_distance": -40.0,
    "max_distance": -1.0,
    "jitter_range": 25.0
}

GRID = {
    "half_extent": 50,
    "spacing": 2,
    "color": (0.2, 0.2, 0.25)
}

COLORS = {
    "background": (0.01, 0.01, 0.02, 1.0),
    "text": (0.9, 0.9, 0.9)
}
