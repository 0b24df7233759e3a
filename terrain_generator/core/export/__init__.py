# ==============================================================================
# File: terrain_generator/core/export/__init__.py
# Purpose: Entry point of the export package.
# ==============================================================================
from __future__ import annotations

from .binary_exporters import write_heightmap_r16
from .image_exporters import write_color_preview
from .json_exporters import write_placements_json
from .numpy_exporters import read_mesh_npz, write_mesh_npz

__all__ = [
    "write_heightmap_r16",
    "write_color_preview",
    "write_placements_json",
    "write_mesh_npz",
    "read_mesh_npz",
]
