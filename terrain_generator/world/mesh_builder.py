# ==============================================================================
# File: terrain_generator/world/mesh_builder.py
# Purpose: Regular-grid vertex/index buffers from noise, shaping and colour bands.
# ==============================================================================
from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from ..algorithms.terrain.coloring import classify_heights
from ..algorithms.terrain.sampling import NoiseSampler
from ..algorithms.terrain.shaping import shape_heights
from ..core.types import ColorBand, GridSpec, MeshBuffers, NoiseConfig, ShapeConfig
from ..core.validation import validate_grid

logger = logging.getLogger(__name__)


def grid_triangles(grid: GridSpec) -> np.ndarray:
    """
    Two triangles per cell, cells in row-major order, shape (width*depth*2, 3).

    For cell (x, z) with v = z*(width+1) + x the pair is
    (v, v+width+1, v+1) and (v+1, v+width+1, v+width+2).
    """
    validate_grid(grid)
    row = grid.vertices_x
    z, x = np.mgrid[0:grid.depth, 0:grid.width]
    v = (z.astype(np.int64) * row + x).ravel()

    first = np.stack([v, v + row, v + 1], axis=1)
    second = np.stack([v + 1, v + row, v + row + 1], axis=1)
    # interleave so each cell's two triangles are adjacent
    faces = np.stack([first, second], axis=1).reshape(-1, 3)
    return faces.astype(np.uint32)


class GridMeshBuilder:
    """Builds the height-displaced, vertex-coloured terrain surface for one pass."""

    def __init__(self, grid: GridSpec, noise: NoiseConfig, shape: ShapeConfig,
                 bands: Sequence[ColorBand] = ()):
        self.grid = grid
        self.noise = noise
        self.shape = shape
        self.bands = tuple(bands)

    def build(self) -> MeshBuffers:
        grid = self.grid
        validate_grid(grid)

        raw = NoiseSampler(self.noise).sample_grid(grid).ravel()
        heights = shape_heights(raw, self.shape)

        z, x = np.mgrid[0:grid.vertices_z, 0:grid.vertices_x]
        positions = np.stack([x.ravel(), heights, z.ravel()], axis=1).astype(np.float32)

        # colours use the unshaped height
        colors = classify_heights(raw, self.bands)
        triangles = grid_triangles(grid)

        logger.debug(
            "Mesh %dx%d: %d vertices, %d triangles, raw=[%.3f..%.3f], y=[%.2f..%.2f]",
            grid.width, grid.depth, positions.shape[0], triangles.shape[0],
            float(raw.min()), float(raw.max()), float(heights.min()), float(heights.max()),
        )
        return MeshBuffers(
            positions=positions,
            colors=colors,
            raw_heights=raw,
            triangles=triangles,
        )


def build_mesh(grid: GridSpec, noise: NoiseConfig, shape: ShapeConfig,
               bands: Sequence[ColorBand] = ()) -> MeshBuffers:
    return GridMeshBuilder(grid, noise, shape, bands).build()
