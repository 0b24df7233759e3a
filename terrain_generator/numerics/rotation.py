# terrain_generator/numerics/rotation.py
# Quaternions are (x, y, z, w) tuples, matching the host engines we export to.
from __future__ import annotations
import math
from typing import Sequence, Tuple

import numpy as np

Quat = Tuple[float, float, float, float]

_EPS = 1e-9


def _normalized(v: Sequence[float]) -> np.ndarray:
    a = np.asarray(v, dtype=np.float64)
    n = float(np.linalg.norm(a))
    if n < _EPS:
        raise ValueError("cannot normalize a zero-length vector")
    return a / n


def quat_multiply(q1: Sequence[float], q2: Sequence[float]) -> Quat:
    """Hamilton product q1 * q2 (apply q2 first, then q1)."""
    x1, y1, z1, w1 = (float(c) for c in q1)
    x2, y2, z2, w2 = (float(c) for c in q2)
    return (
        w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
        w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
        w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
        w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
    )


def from_to_rotation(from_dir: Sequence[float], to_dir: Sequence[float]) -> Quat:
    """Shortest-arc rotation that takes from_dir onto to_dir."""
    a = _normalized(from_dir)
    b = _normalized(to_dir)
    d = float(np.dot(a, b))

    if d >= 1.0 - _EPS:
        return (0.0, 0.0, 0.0, 1.0)
    if d <= -1.0 + _EPS:
        # opposite vectors: half turn about any axis perpendicular to a
        axis = np.cross(a, (1.0, 0.0, 0.0))
        if np.linalg.norm(axis) < 1e-6:
            axis = np.cross(a, (0.0, 1.0, 0.0))
        axis = _normalized(axis)
        return (float(axis[0]), float(axis[1]), float(axis[2]), 0.0)

    c = np.cross(a, b)
    q = np.array([c[0], c[1], c[2], 1.0 + d])
    q /= np.linalg.norm(q)
    return (float(q[0]), float(q[1]), float(q[2]), float(q[3]))


def rotate_vector(q: Sequence[float], v: Sequence[float]) -> Tuple[float, float, float]:
    x, y, z, w = (float(c) for c in q)
    qv = (float(v[0]), float(v[1]), float(v[2]), 0.0)
    r = quat_multiply(quat_multiply((x, y, z, w), qv), (-x, -y, -z, w))
    return r[0], r[1], r[2]


def quat_angle_deg(q: Sequence[float]) -> float:
    w = max(-1.0, min(1.0, abs(float(q[3]))))
    return math.degrees(2.0 * math.acos(w))
