# terrain_generator/algorithms/terrain/shaping.py
from __future__ import annotations
import numpy as np

from ...core.types import ShapeConfig, TerrainType


def terrace(raw: np.ndarray, terrace_count: int) -> np.ndarray:
    """Quantize to terrace_count + 1 levels; ties round half to even."""
    n = float(terrace_count)
    return np.rint(raw * n) / n


def elevation(raw: np.ndarray, exponent: float) -> np.ndarray:
    # negative noise overshoot would turn a fractional power into NaN
    return np.power(np.maximum(raw, 0.0), float(exponent))


def shape_heights(raw: np.ndarray, config: ShapeConfig) -> np.ndarray:
    """Raw noise -> world-space heights inside config.height_range."""
    raw = np.asarray(raw, dtype=np.float64)
    if config.policy == TerrainType.TERRACE:
        y = terrace(raw, config.terrace_count)
    else:
        y = elevation(raw, config.elevation_exponent)
    lo, hi = float(config.height_range[0]), float(config.height_range[1])
    return lo + y * (hi - lo)


def shape_height(raw: float, config: ShapeConfig) -> float:
    return float(shape_heights(np.array([raw], dtype=np.float64), config)[0])
