"""Vector and quaternion helpers on numpy arrays.

Quaternions are stored as ``[x, y, z, w]``. ``quat_mul(a, b)`` applies ``b``
first and ``a`` second when the result rotates a vector.
"""

import math
import numpy as np

WORLD_UP = np.array([0.0, 1.0, 0.0])
IDENTITY_QUAT = np.array([0.0, 0.0, 0.0, 1.0])

# Above this dot product slerp degenerates, so fall back to nlerp
SLERP_DOT_THRESHOLD = 0.9995


def vec3(x: float, y: float, z: float) -> np.ndarray:
    return np.array([x, y, z], dtype=np.float64)


def lerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """Linear interpolation, extrapolating when t is outside [0, 1]."""
    return a + (b - a) * t


def quat_normalize(q: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(q)
    if length == 0:
        return IDENTITY_QUAT.copy()
    return q / length


def quat_from_axis_angle(axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotation of `angle` radians around a unit `axis`."""
    half = angle * 0.5
    s = math.sin(half)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, math.cos(half)])


def quat_from_rotation_x(angle: float) -> np.ndarray:
    return quat_from_axis_angle(np.array([1.0, 0.0, 0.0]), angle)


def quat_from_rotation_y(angle: float) -> np.ndarray:
    return quat_from_axis_angle(np.array([0.0, 1.0, 0.0]), angle)


def quat_mul(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Hamilton product a * b."""
    ax, ay, az, aw = a
    bx, by, bz, bw = b
    return np.array([
        aw * bx + ax * bw + ay * bz - az * by,
        aw * by - ax * bz + ay * bw + az * bx,
        aw * bz + ax * by - ay * bx + az * bw,
        aw * bw - ax * bx - ay * by - az * bz,
    ])


def quat_rotate(q: np.ndarray, v: np.ndarray) -> np.ndarray:
    """Rotate vector v by unit quaternion q."""
    u = q[:3]
    w = q[3]
    t = 2.0 * np.cross(u, v)
    return v + w * t + np.cross(u, t)


def quat_slerp(a: np.ndarray, b: np.ndarray, t: float) -> np.ndarray:
    """
    Spherical interpolation from a to b along the shortest arc.

    Values of t above 1 extrapolate past b, the same way `lerp` does.
    """
    dot = float(np.dot(a, b))
    if dot < 0.0:
        b = -b
        dot = -dot

    if dot > SLERP_DOT_THRESHOLD:
        return quat_normalize(lerp(a, b, t))

    theta = math.acos(dot)
    scale_a = math.sin(theta * (1.0 - t))
    scale_b = math.sin(theta * t)
    return (a * scale_a + b * scale_b) / math.sin(theta)
