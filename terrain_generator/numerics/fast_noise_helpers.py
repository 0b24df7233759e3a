# terrain_generator/numerics/fast_noise_helpers.py
from __future__ import annotations
import numpy as np
from numba import njit

PERM_SIZE = 256


def build_permutation(seed: int) -> np.ndarray:
    """Seeded 0..255 permutation, doubled to 512 entries so lookups never wrap."""
    rng = np.random.default_rng(int(seed) & 0xFFFFFFFFFFFFFFFF)
    p = rng.permutation(PERM_SIZE).astype(np.int64)
    return np.concatenate((p, p))


@njit(inline='always', cache=True)
def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@njit(inline='always', cache=True)
def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


@njit(inline='always', cache=True)
def _grad(h: int, x: float, y: float) -> float:
    # improved-noise gradient set, sliced at z = 0
    h = h & 15
    u = x if h < 8 else y
    if h < 4:
        v = y
    elif h == 12 or h == 14:
        v = x
    else:
        v = 0.0
    if (h & 1) != 0:
        u = -u
    if (h & 2) != 0:
        v = -v
    return u + v
