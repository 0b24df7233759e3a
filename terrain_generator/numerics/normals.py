# terrain_generator/numerics/normals.py
from __future__ import annotations
import numpy as np


def compute_vertex_normals(positions: np.ndarray, triangles: np.ndarray) -> np.ndarray:
    """
    Area-weighted smooth vertex normals, (V, 3) float32.

    Face normals are cross(p1 - p0, p2 - p0); with the grid winding used by the
    mesh builder a flat surface points to +Y. Vertices that belong to no
    triangle (or only to degenerate ones) get +Y.
    """
    pos = np.asarray(positions, dtype=np.float64)
    tri = np.asarray(triangles, dtype=np.int64).reshape(-1, 3)
    normals = np.zeros_like(pos)
    if tri.size:
        p0 = pos[tri[:, 0]]
        face = np.cross(pos[tri[:, 1]] - p0, pos[tri[:, 2]] - p0)
        for k in range(3):
            np.add.at(normals, tri[:, k], face)

    length = np.linalg.norm(normals, axis=1, keepdims=True)
    up = np.array([0.0, 1.0, 0.0])
    safe = np.where(length > 1e-12, length, 1.0)
    normals = np.where(length > 1e-12, normals / safe, up)
    return normals.astype(np.float32)
