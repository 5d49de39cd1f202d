import math

import numpy as np


def vec3(x, y, z):
    return np.array([x, y, z], dtype=np.float64)


def length(v):
    return math.sqrt(float(np.dot(v, v)))


def normalize(v):
    m = length(v)
    if m == 0:
        return np.zeros(3)
    return v / m


def quat_from_axis_angle(axis, angle):
    """Quaternion (x, y, z, w) rotating by `angle` radians about `axis`."""
    half = angle * 0.5
    s = math.sin(half)
    return np.array([axis[0] * s, axis[1] * s, axis[2] * s, math.cos(half)], dtype=np.float64)


def rotate_by_quat(v, q):
    """Rotate vector `v` by quaternion `q` (q * v * q^-1 for unit q)."""
    qv = q[:3]
    uv = np.cross(qv, v)
    uuv = np.cross(qv, uv)
    return v + 2.0 * (q[3] * uv + uuv)


def wrap_unit(x):
    """Wrap a scalar into [0, 1)."""
    r = x % 1.0
    # x % 1.0 can round up to exactly 1.0 for tiny negative x
    return 0.0 if r >= 1.0 else r
