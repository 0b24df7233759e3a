# ==============================================================================
# File: terrain_generator/core/export/image_exporters.py
# Purpose: PNG previews of the vertex colour buffer.
# ==============================================================================
from __future__ import annotations
import logging
import os
from pathlib import Path

import numpy as np
from PIL import Image

from ..types import GridSpec, MeshBuffers

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def write_color_preview(path: str, mesh: MeshBuffers, grid: GridSpec, scale: int = 1) -> None:
    """One pixel per vertex; +Z points up in the image."""
    rgba = np.clip(mesh.colors, 0.0, 1.0).reshape(grid.vertices_z, grid.vertices_x, 4)
    pixels = (rgba * 255.0 + 0.5).astype(np.uint8)

    img = Image.fromarray(pixels).transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    if scale > 1:
        img = img.resize((grid.vertices_x * scale, grid.vertices_z * scale), Image.Resampling.NEAREST)

    _ensure_path_exists(path)
    tmp_path = path + ".tmp"
    img.save(tmp_path, format="PNG")
    os.replace(tmp_path, path)
    logger.debug("Preview image saved: %s", path)
