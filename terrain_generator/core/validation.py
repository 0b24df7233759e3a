# ========================
# file: terrain_generator/core/validation.py
# ========================
from __future__ import annotations

import logging
import math
import warnings
from typing import Sequence

import numpy as np

from .constants import (
    ELEVATION_EXPONENT_RANGE,
    FREQUENCY_RANGE,
    MAX_VERTEX_COUNT,
    MIN_VECTOR_LENGTH,
    NOISE_BASES,
    SPAWN_FREQUENCY_RANGE,
    TERRACE_COUNT_RANGE,
    UNIT_QUAT_TOLERANCE,
)
from .errors import ConfigurationError, DegenerateInputWarning
from .types import (
    ColorBand,
    GenerationConfig,
    GridSpec,
    HostTransform,
    NoiseConfig,
    ShapeConfig,
    SpawnRule,
    TerrainType,
)

logger = logging.getLogger(__name__)


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigurationError(msg)


def _finite(*values: float) -> bool:
    return all(math.isfinite(float(v)) for v in values)


def _warn_degenerate(msg: str) -> None:
    logger.warning(msg)
    warnings.warn(msg, DegenerateInputWarning, stacklevel=3)


def _is_integer(v) -> bool:
    return isinstance(v, (int, np.integer)) and not isinstance(v, bool)


def validate_grid(grid: GridSpec) -> None:
    _require(_is_integer(grid.width) and _is_integer(grid.depth),
             f"grid width and depth must be integers, got {grid.width!r}x{grid.depth!r}")
    _require(int(grid.width) >= 1 and int(grid.depth) >= 1, "grid width and depth must be >= 1")
    _require(
        grid.vertex_count <= MAX_VERTEX_COUNT,
        f"grid {grid.width}x{grid.depth} needs {grid.vertex_count} vertices, "
        f"max is {MAX_VERTEX_COUNT}",
    )


def validate_noise(noise: NoiseConfig) -> None:
    lo, hi = FREQUENCY_RANGE
    _require(_finite(noise.frequency), "noise.frequency must be finite")
    _require(lo <= noise.frequency <= hi, f"noise.frequency must be in [{lo}, {hi}]")
    _require(int(noise.octaves) >= 1, "noise.octaves must be >= 1")
    _require(len(noise.offset) == 2 and _finite(*noise.offset), "noise.offset must be two finite numbers")
    _require(noise.basis in NOISE_BASES, f"noise.basis must be one of {NOISE_BASES}")


def validate_shape(shape: ShapeConfig) -> None:
    _require(isinstance(shape.policy, TerrainType), "shape.policy must be a TerrainType")
    lo, hi = ELEVATION_EXPONENT_RANGE
    _require(
        _finite(shape.elevation_exponent) and lo <= shape.elevation_exponent <= hi,
        f"shape.elevation_exponent must be in [{lo}, {hi}]",
    )
    tlo, thi = TERRACE_COUNT_RANGE
    _require(tlo <= int(shape.terrace_count) <= thi, f"shape.terrace_count must be in [{tlo}, {thi}]")
    _require(
        len(shape.height_range) == 2 and _finite(*shape.height_range),
        "shape.height_range must be two finite numbers",
    )


def validate_bands(bands: Sequence[ColorBand], warn_empty: bool = True) -> None:
    for i, band in enumerate(bands):
        # a NaN threshold makes the "largest qualifying band" undefined
        _require(_finite(band.min_value), f"levels[{i}].min_value must be finite")
        _require(len(band.color) == 4, f"levels[{i}].color must be RGBA")
    if not bands and warn_empty:
        _warn_degenerate("No colour bands configured, vertices fall back to magenta.")


def validate_spawn_rules(rules: Sequence[SpawnRule], warn_empty: bool = True) -> None:
    lo, hi = SPAWN_FREQUENCY_RANGE
    for i, rule in enumerate(rules):
        _require(
            len(rule.spawn_level) == 2 and _finite(*rule.spawn_level),
            f"world_elements[{i}].spawn_level must be two finite numbers",
        )
        _require(
            _finite(rule.spawn_frequency) and lo <= rule.spawn_frequency <= hi,
            f"world_elements[{i}].spawn_frequency must be in [{lo}, {hi}]",
        )
    if not rules and warn_empty:
        _warn_degenerate("No world elements configured, nothing will be placed.")


def validate_config(config: GenerationConfig, warn_empty: bool = True) -> None:
    """Reject a config wholesale; raises ConfigurationError on the first failing check."""
    validate_grid(config.grid)
    validate_noise(config.noise)
    validate_shape(config.shape)
    validate_bands(config.bands, warn_empty)
    validate_spawn_rules(config.spawn_rules, warn_empty)


def clamp_grid(width: int, depth: int) -> GridSpec:
    """Editor-style clamp: sizes below 1 become 1, oversize grids are refused."""
    w, d = int(width), int(depth)
    if w < 1 or d < 1:
        logger.warning("Grid width and depth must be greater than 0, clamping %dx%d to 1x1.", w, d)
        w, d = 1, 1
    grid = GridSpec(w, d)
    validate_grid(grid)
    return grid


def validate_host(host: HostTransform) -> None:
    """Host pose used for placement: finite position, non-zero up axis, unit (x, y, z, w) rotation."""
    position = np.asarray(host.position, dtype=np.float64)
    _require(position.shape == (3,) and bool(np.all(np.isfinite(position))),
             f"host.position must be three finite numbers, got {host.position}")

    up = np.asarray(host.up, dtype=np.float64)
    _require(up.shape == (3,) and bool(np.all(np.isfinite(up))) and np.linalg.norm(up) >= MIN_VECTOR_LENGTH,
             f"host.up must be a finite non-zero vector, got {host.up}")

    rotation = np.asarray(host.rotation, dtype=np.float64)
    _require(
        rotation.shape == (4,) and bool(np.all(np.isfinite(rotation)))
        and abs(np.linalg.norm(rotation) - 1.0) <= UNIT_QUAT_TOLERANCE,
        f"host.rotation must be a unit quaternion (x, y, z, w), got {host.rotation}",
    )
