# terrain_generator/core/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Protocol, Tuple

import numpy as np

from .constants import (
    IDENTITY_ROTATION,
    NOISE_BASIS_PERLIN,
    UP_AXIS,
    Rgba,
)


class TerrainType(str, Enum):
    """How a raw noise sample becomes an elevation."""

    ELEVATION = "elevation"
    TERRACE = "terrace"


@dataclass(frozen=True)
class GridSpec:
    """Cells along X (width) and Z (depth); vertices are one more per axis."""

    width: int
    depth: int

    @property
    def vertices_x(self) -> int:
        return int(self.width) + 1

    @property
    def vertices_z(self) -> int:
        return int(self.depth) + 1

    @property
    def vertex_count(self) -> int:
        return self.vertices_x * self.vertices_z

    @property
    def triangle_count(self) -> int:
        return int(self.width) * int(self.depth) * 2


@dataclass(frozen=True)
class NoiseConfig:
    offset: Tuple[float, float] = (0.0, 0.0)
    frequency: float = 0.01
    octaves: int = 2
    seed: int = 0
    basis: str = NOISE_BASIS_PERLIN


@dataclass(frozen=True)
class ShapeConfig:
    policy: TerrainType = TerrainType.ELEVATION
    elevation_exponent: float = 3.0
    terrace_count: int = 20
    height_range: Tuple[float, float] = (0.0, 128.0)


@dataclass(frozen=True)
class ColorBand:
    min_value: float
    color: Rgba


@dataclass(frozen=True)
class SpawnRule:
    """A decoration that may claim vertices whose raw height lies strictly inside spawn_level."""

    prototype_id: Any
    spawn_level: Tuple[float, float]
    spawn_frequency: float
    rotate_on_normal: bool = False


@dataclass(frozen=True)
class HostTransform:
    """Pose of the host object the terrain is parented under."""

    position: Tuple[float, float, float] = (0.0, 0.0, 0.0)
    rotation: Tuple[float, float, float, float] = IDENTITY_ROTATION
    up: Tuple[float, float, float] = UP_AXIS


@dataclass
class MeshBuffers:
    """Vertex and index buffers of one generation pass (row-major, x fastest)."""

    positions: np.ndarray    # (V, 3) float32
    colors: np.ndarray       # (V, 4) float32
    raw_heights: np.ndarray  # (V,) float64, pre-shaping noise
    triangles: np.ndarray    # (T, 3) uint32

    @property
    def vertex_count(self) -> int:
        return int(self.positions.shape[0])

    @property
    def triangle_count(self) -> int:
        return int(self.triangles.shape[0])


@dataclass(frozen=True)
class PlacementRequest:
    vertex_index: int
    world_position: Tuple[float, float, float]
    orientation: Tuple[float, float, float, float]
    rule_index: int
    prototype_id: Any = None


@dataclass(frozen=True)
class GenerationConfig:
    """Everything a single regeneration pass needs, apart from the random source."""

    grid: GridSpec
    noise: NoiseConfig = field(default_factory=NoiseConfig)
    shape: ShapeConfig = field(default_factory=ShapeConfig)
    bands: Tuple[ColorBand, ...] = ()
    spawn_rules: Tuple[SpawnRule, ...] = ()
    id: str = "custom"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "grid": {"width": self.grid.width, "depth": self.grid.depth},
            "noise": {
                "offset": list(self.noise.offset),
                "frequency": self.noise.frequency,
                "octaves": self.noise.octaves,
                "seed": self.noise.seed,
                "basis": self.noise.basis,
            },
            "shape": {
                "type": self.shape.policy.value,
                "elevation_exponent": self.shape.elevation_exponent,
                "terrace_count": self.shape.terrace_count,
                "height_range": list(self.shape.height_range),
            },
            "levels": [
                {"min_value": b.min_value, "color": list(b.color)} for b in self.bands
            ],
            "world_elements": [
                {
                    "prototype": r.prototype_id,
                    "spawn_level": list(r.spawn_level),
                    "spawn_frequency": r.spawn_frequency,
                    "rotate_on_normal": r.rotate_on_normal,
                }
                for r in self.spawn_rules
            ],
        }


@dataclass
class GenerationResult:
    mesh: MeshBuffers
    normals: np.ndarray | None
    placements: List[PlacementRequest] = field(default_factory=list)
    occupancy: np.ndarray | None = None
    metrics: Dict[str, Any] = field(default_factory=dict)


class RandomSource(Protocol):
    """Anything with random() -> float in [0, 1): numpy Generator, random.Random, ..."""

    def random(self) -> float: ...
