# ========================
# file: terrain_generator/core/preset/defaults.py
# ========================
from __future__ import annotations
from typing import Any, Dict

# Editor defaults; a preset only needs the keys it changes.
DEFAULT_TERRAIN_PRESET: Dict[str, Any] = {
    "id": "terrain/base_default",
    "grid": {"width": 500, "depth": 500},
    "noise": {
        "offset": [0.0, 0.0],
        "frequency": 0.01,
        "octaves": 2,
        "seed": 0,
        "basis": "perlin",
    },
    "shape": {
        "type": "elevation",
        "elevation_exponent": 3.0,
        "terrace_count": 20,
        "height_range": [0.0, 128.0],
    },
    "levels": [],
    "world_elements": [],
}
