# ==============================================================================
# File: terrain_generator/core/constants.py
# Purpose: Global constants (index limits, sentinel colours, axis conventions).
# ==============================================================================
from __future__ import annotations
from typing import Tuple

# Vertex indices are stored as uint32.
MAX_VERTEX_COUNT: int = 2 ** 32 - 1

# Slider ranges of the terrain editor.
FREQUENCY_RANGE: Tuple[float, float] = (0.0, 0.5)
ELEVATION_EXPONENT_RANGE: Tuple[float, float] = (1.0, 10.0)
TERRACE_COUNT_RANGE: Tuple[int, int] = (1, 32)
SPAWN_FREQUENCY_RANGE: Tuple[float, float] = (0.0, 1.0)

# RGBA, 0..1
Rgba = Tuple[float, float, float, float]

MAGENTA: Rgba = (1.0, 0.0, 1.0, 1.0)  # "no colour bands configured"

UP_AXIS: Tuple[float, float, float] = (0.0, 1.0, 0.0)
IDENTITY_ROTATION: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)  # x, y, z, w

NOISE_BASIS_PERLIN = "perlin"
NOISE_BASIS_SIMPLEX = "simplex"
NOISE_BASES: Tuple[str, ...] = (NOISE_BASIS_PERLIN, NOISE_BASIS_SIMPLEX)

# Shorter vectors have no usable direction.
MIN_VECTOR_LENGTH: float = 1e-9
UNIT_QUAT_TOLERANCE: float = 1e-3
