# ==============================================================================
# File: terrain_generator/algorithms/terrain/sampling.py
# Purpose: Multi-octave coherent noise sampling (raw heights, ~[0, 1]).
# ==============================================================================
from __future__ import annotations

import logging

import numpy as np
from opensimplex import OpenSimplex

from ...core.constants import NOISE_BASIS_PERLIN
from ...core.types import GridSpec, NoiseConfig
from ...numerics.fast_noise_2d import coherent_noise01, fbm_average, fbm_average_grid
from ...numerics.fast_noise_helpers import build_permutation

logger = logging.getLogger(__name__)


class NoiseSampler:
    """
    Averages `octaves` layers of 2D coherent noise, doubling the frequency per layer.

    The average is plain (every layer has weight 1/octaves), so the result stays
    roughly in [0, 1]; coherent noise may overshoot slightly at the extremes and
    the value is never clamped.
    """

    def __init__(self, config: NoiseConfig):
        self.config = config
        self._perm: np.ndarray | None = None
        self._simplex: OpenSimplex | None = None
        if config.basis == NOISE_BASIS_PERLIN:
            self._perm = build_permutation(config.seed)
        else:
            self._simplex = OpenSimplex(int(config.seed))

    def coherent(self, x: float, z: float) -> float:
        """Single-layer noise in ~[0, 1] at the given (already scaled) coordinates."""
        if self._perm is not None:
            return float(coherent_noise01(float(x), float(z), self._perm))
        return 0.5 * (self._simplex.noise2(float(x), float(z)) + 1.0)

    def sample(self, x: float, z: float) -> float:
        cfg = self.config
        ox, oz = float(cfg.offset[0]), float(cfg.offset[1])
        if self._perm is not None:
            return float(fbm_average(float(x), float(z), ox, oz,
                                     float(cfg.frequency), int(cfg.octaves), self._perm))
        total = 0.0
        freq = float(cfg.frequency)
        for _ in range(int(cfg.octaves)):
            total += self.coherent((x + ox) * freq, (z + oz) * freq)
            freq *= 2.0
        return total / int(cfg.octaves)

    def sample_grid(self, grid: GridSpec) -> np.ndarray:
        """Raw heights for every vertex, shape (depth + 1, width + 1)."""
        cfg = self.config
        ox, oz = float(cfg.offset[0]), float(cfg.offset[1])
        logger.debug("Sampling %dx%d vertices: basis=%s freq=%.4f octaves=%d",
                     grid.vertices_x, grid.vertices_z, cfg.basis, cfg.frequency, cfg.octaves)
        if self._perm is not None:
            return fbm_average_grid(int(grid.width), int(grid.depth), ox, oz,
                                    float(cfg.frequency), int(cfg.octaves), self._perm)

        xs = np.arange(grid.vertices_x, dtype=np.float64) + ox
        zs = np.arange(grid.vertices_z, dtype=np.float64) + oz
        total = np.zeros((grid.vertices_z, grid.vertices_x), dtype=np.float64)
        freq = float(cfg.frequency)
        for _ in range(int(cfg.octaves)):
            # noise2array returns (len(zs), len(xs))
            total += 0.5 * (self._simplex.noise2array(xs * freq, zs * freq) + 1.0)
            freq *= 2.0
        return total / int(cfg.octaves)


def sample(x: float, z: float, config: NoiseConfig) -> float:
    return NoiseSampler(config).sample(x, z)
