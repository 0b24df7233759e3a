# terrain_generator/numerics/fast_noise_2d.py
from __future__ import annotations
import numpy as np
from numba import njit, prange
from .fast_noise_helpers import _fade, _lerp, _grad


@njit(inline='always', cache=True)
def perlin_noise_2d(x: float, z: float, perm: np.ndarray) -> float:
    """Improved Perlin gradient noise, roughly [-1, 1]; zero on lattice points."""
    x_floor = np.floor(x)
    z_floor = np.floor(z)
    xi = int(x_floor) & 255
    zi = int(z_floor) & 255
    xf = x - x_floor
    zf = z - z_floor
    u = _fade(xf)
    v = _fade(zf)
    a = perm[xi] + zi
    b = perm[xi + 1] + zi
    n00 = _grad(perm[a], xf, zf)
    n10 = _grad(perm[b], xf - 1.0, zf)
    n01 = _grad(perm[a + 1], xf, zf - 1.0)
    n11 = _grad(perm[b + 1], xf - 1.0, zf - 1.0)
    return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)


@njit(cache=True)
def coherent_noise01(x: float, z: float, perm: np.ndarray) -> float:
    """Perlin noise remapped to ~[0, 1]. Not clamped."""
    return 0.5 * (perlin_noise_2d(x, z, perm) + 1.0)


@njit(inline='always', cache=True)
def _fbm_average(x: float, z: float, offset_x: float, offset_z: float,
                 frequency: float, octaves: int, perm: np.ndarray) -> float:
    total = 0.0
    freq = frequency
    for _ in range(octaves):
        total += 0.5 * (perlin_noise_2d((x + offset_x) * freq, (z + offset_z) * freq, perm) + 1.0)
        freq *= 2.0
    return total / octaves


@njit(cache=True)
def fbm_average(x: float, z: float, offset_x: float, offset_z: float,
                frequency: float, octaves: int, perm: np.ndarray) -> float:
    """Plain (unweighted) average of `octaves` layers, frequency doubling per layer."""
    return _fbm_average(x, z, offset_x, offset_z, frequency, octaves, perm)


@njit(cache=True, parallel=True)
def fbm_average_grid(width: int, depth: int, offset_x: float, offset_z: float,
                     frequency: float, octaves: int, perm: np.ndarray) -> np.ndarray:
    """(depth + 1, width + 1) grid of fbm_average at integer vertex coordinates."""
    out = np.empty((depth + 1, width + 1), dtype=np.float64)
    for z in prange(depth + 1):
        for x in range(width + 1):
            out[z, x] = _fbm_average(float(x), float(z), offset_x, offset_z,
                                     frequency, octaves, perm)
    return out
