# ==============================================================================
# File: terrain_generator/core/export/binary_exporters.py
# Purpose: Raw binary heightmaps for engines that import .r16 terrain.
# ==============================================================================
from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Tuple

import numpy as np

from ..types import GridSpec, MeshBuffers

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def write_heightmap_r16(
        path: str,
        mesh: MeshBuffers,
        grid: GridSpec,
        height_range: Tuple[float, float],
) -> None:
    """Saves shaped vertex heights as 16-bit unsigned little-endian samples.

    Rows run along Z, samples along X, (depth+1) x (width+1) in total.
    Heights are normalised into height_range and clipped.
    """
    lo, hi = float(height_range[0]), float(height_range[1])
    span = hi - lo
    if span <= 0:
        logger.warning("Empty height range %s for %s, using [lo, lo+1].", height_range, path)
        span = 1.0

    heights = mesh.positions[:, 1].astype(np.float64).reshape(grid.vertices_z, grid.vertices_x)
    normalized = np.clip((heights - lo) / span, 0.0, 1.0)
    final_array = (normalized * 65535.0).astype("<u2")

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    with open(tmp_path, "wb") as f:
        f.write(final_array.tobytes())
    os.replace(tmp_path, path)
    logger.debug("16-bit heightmap saved: %s (%dx%d)", path, grid.vertices_x, grid.vertices_z)
