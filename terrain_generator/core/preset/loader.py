# ========================
# file: terrain_generator/core/preset/loader.py
# ========================
from __future__ import annotations
import os
import json
import copy
import logging
from typing import Any, Dict, Union, Mapping

from ..colors import parse_color
from ..types import (
    ColorBand,
    GenerationConfig,
    GridSpec,
    NoiseConfig,
    ShapeConfig,
    SpawnRule,
    TerrainType,
)
from ..validation import validate_config
from .defaults import DEFAULT_TERRAIN_PRESET
from .registry import resolve_preset_path
from .validators import validate_dict

logger = logging.getLogger(__name__)


def deep_merge(base: Dict[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursive dict merge. Lists/tuples are replaced, not merged element-wise."""
    out = copy.deepcopy(base)
    for k, v in overrides.items():
        if isinstance(v, Mapping) and isinstance(out.get(k), dict):
            out[k] = deep_merge(out[k], v)
        else:
            out[k] = copy.deepcopy(v)
    return out


def _load_json_file(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _build_config(merged: Dict[str, Any]) -> GenerationConfig:
    noise = merged["noise"]
    shape = merged["shape"]
    return GenerationConfig(
        id=merged["id"],
        grid=GridSpec(int(merged["grid"]["width"]), int(merged["grid"]["depth"])),
        noise=NoiseConfig(
            offset=(float(noise["offset"][0]), float(noise["offset"][1])),
            frequency=float(noise["frequency"]),
            octaves=int(noise["octaves"]),
            seed=int(noise["seed"]),
            basis=str(noise["basis"]),
        ),
        shape=ShapeConfig(
            policy=TerrainType(shape["type"]),
            elevation_exponent=float(shape["elevation_exponent"]),
            terrace_count=int(shape["terrace_count"]),
            height_range=(float(shape["height_range"][0]), float(shape["height_range"][1])),
        ),
        bands=tuple(
            ColorBand(min_value=float(lv["min_value"]), color=parse_color(lv["color"]))
            for lv in merged["levels"]
        ),
        spawn_rules=tuple(
            SpawnRule(
                prototype_id=el["prototype"],
                spawn_level=(float(el["spawn_level"][0]), float(el["spawn_level"][1])),
                spawn_frequency=float(el["spawn_frequency"]),
                rotate_on_normal=bool(el.get("rotate_on_normal", False)),
            )
            for el in merged["world_elements"]
        ),
    )


def load_preset(
    source: Union[str, Dict[str, Any]], overrides: Mapping[str, Any] | None = None
) -> GenerationConfig:
    """Load a terrain preset from id/path/dict, merge with defaults and apply overrides.

    Args:
        source: preset id (e.g., 'terrain/default'), or file path to JSON, or raw dict
        overrides: mapping of ad-hoc overrides (last layer)
    Returns:
        GenerationConfig (immutable dataclass) ready for regenerate()
    Raises:
        PresetNotFoundError: unknown id
        ConfigurationError: malformed or out-of-range values
    """
    if isinstance(source, str):
        if os.path.isfile(source):
            data = _load_json_file(source)
        else:
            # treat as id
            path = resolve_preset_path(source)
            data = _load_json_file(path)
    elif isinstance(source, dict):
        data = source
    else:
        raise TypeError("source must be str path/id or dict")

    merged = deep_merge(DEFAULT_TERRAIN_PRESET, data)
    if overrides:
        merged = deep_merge(merged, overrides)

    validate_dict(merged)
    config = _build_config(merged)
    # empty band/element lists are reported when the pass actually runs
    validate_config(config, warn_empty=False)

    logger.debug(
        "Loaded preset '%s': %dx%d grid, %d levels, %d elements",
        config.id, config.grid.width, config.grid.depth,
        len(config.bands), len(config.spawn_rules),
    )
    return config
