# ==============================================================================
# File: terrain_generator/__init__.py
# Purpose: Public API of the procedural terrain generator.
# ==============================================================================
from __future__ import annotations

from .algorithms.terrain.coloring import classify, classify_heights
from .algorithms.terrain.sampling import NoiseSampler, sample
from .algorithms.terrain.shaping import shape_height, shape_heights
from .core.errors import (
    ConfigurationError,
    DegenerateInputWarning,
    PresetNotFoundError,
    TerrainError,
)
from .core.preset import load_preset
from .core.types import (
    ColorBand,
    GenerationConfig,
    GenerationResult,
    GridSpec,
    HostTransform,
    MeshBuffers,
    NoiseConfig,
    PlacementRequest,
    ShapeConfig,
    SpawnRule,
    TerrainType,
)
from .core.validation import clamp_grid, validate_config, validate_host
from .pipeline import make_rng, mesh_normals, regenerate
from .world.features.placement import PlacementEngine, place
from .world.instances import ManagedInstanceSet
from .world.mesh_builder import GridMeshBuilder, build_mesh

__all__ = [
    "ColorBand",
    "ConfigurationError",
    "DegenerateInputWarning",
    "GenerationConfig",
    "GenerationResult",
    "GridMeshBuilder",
    "GridSpec",
    "HostTransform",
    "ManagedInstanceSet",
    "MeshBuffers",
    "NoiseConfig",
    "NoiseSampler",
    "PlacementEngine",
    "PlacementRequest",
    "PresetNotFoundError",
    "ShapeConfig",
    "SpawnRule",
    "TerrainError",
    "TerrainType",
    "build_mesh",
    "clamp_grid",
    "classify",
    "classify_heights",
    "load_preset",
    "make_rng",
    "mesh_normals",
    "place",
    "regenerate",
    "sample",
    "shape_height",
    "shape_heights",
    "validate_config",
    "validate_host",
]
