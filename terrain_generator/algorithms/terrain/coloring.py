# ==============================================================================
# File: terrain_generator/algorithms/terrain/coloring.py
# Purpose: Banded vertex colours from raw (unshaped) heights.
# ==============================================================================
from __future__ import annotations
from typing import Sequence

import numpy as np

from ...core.constants import MAGENTA, Rgba
from ...core.types import ColorBand


def classify(raw_height: float, bands: Sequence[ColorBand]) -> Rgba:
    """
    Colour of the band with the largest min_value strictly below raw_height.

    - no bands at all -> magenta
    - no band qualifies -> band 0, whatever its own threshold is
    - equal thresholds -> the earlier band wins
    """
    if not bands:
        return MAGENTA

    best = 0
    best_value = None
    for i, band in enumerate(bands):
        if band.min_value < raw_height and (best_value is None or band.min_value > best_value):
            best = i
            best_value = band.min_value
    return tuple(bands[best].color)


def classify_heights(raw_heights: np.ndarray, bands: Sequence[ColorBand]) -> np.ndarray:
    """Vectorized classify(); returns (N, 4) float32 RGBA."""
    raw = np.asarray(raw_heights, dtype=np.float64).ravel()
    if not bands:
        return np.tile(np.asarray(MAGENTA, dtype=np.float32), (raw.size, 1))

    thresholds = np.array([b.min_value for b in bands], dtype=np.float64)
    palette = np.array([b.color for b in bands], dtype=np.float32)

    qualifies = thresholds[None, :] < raw[:, None]
    masked = np.where(qualifies, thresholds[None, :], -np.inf)
    # argmax returns the first maximum, same tie-break as classify()
    index = np.argmax(masked, axis=1)
    index[~qualifies.any(axis=1)] = 0
    return palette[index]
