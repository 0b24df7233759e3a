# ==============================================================================
# File: terrain_generator/core/export/numpy_exporters.py
# Purpose: Save/load generated mesh buffers as compressed NPZ.
# ==============================================================================
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Optional, Tuple

import numpy as np

from ..types import MeshBuffers

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def write_mesh_npz(path: str, mesh: MeshBuffers, normals: Optional[np.ndarray] = None) -> None:
    """Saves the mesh buffers (and normals, if any) into one compressed NPZ file."""
    arrays = {
        "positions": mesh.positions,
        "colors": mesh.colors,
        "raw_heights": mesh.raw_heights,
        "triangles": mesh.triangles,
    }
    if normals is not None:
        arrays["normals"] = normals

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    with open(tmp_path, "wb") as f:
        np.savez_compressed(f, **arrays)
    os.replace(tmp_path, path)
    logger.debug("Mesh saved: %s (%d vertices)", path, mesh.vertex_count)


def read_mesh_npz(path: str) -> Tuple[MeshBuffers, Optional[np.ndarray]] | None:
    """Reads a mesh written by write_mesh_npz; None if the file is missing."""
    if not os.path.exists(path):
        return None
    with np.load(path) as data:
        mesh = MeshBuffers(
            positions=data["positions"],
            colors=data["colors"],
            raw_heights=data["raw_heights"],
            triangles=data["triangles"],
        )
        normals = data["normals"] if "normals" in data.files else None
    return mesh, normals
