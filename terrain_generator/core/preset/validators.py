# ========================
# file: terrain_generator/core/preset/validators.py
# ========================
from __future__ import annotations
from typing import Any, Dict

from ..colors import parse_color
from ..errors import ConfigurationError
from ..types import TerrainType


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigurationError(msg)


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def _is_pair(v: Any) -> bool:
    return isinstance(v, (list, tuple)) and len(v) == 2 and all(_is_number(c) for c in v)


def validate_dict(cfg: Dict[str, Any]) -> None:
    """Structural validation of a merged preset dict.

    Value ranges are checked later on the built GenerationConfig.
    Raises ConfigurationError on the first failing check.
    """
    _require(isinstance(cfg.get("id"), str) and cfg["id"], "Preset.id must be non-empty string")

    grid = cfg.get("grid")
    _require(isinstance(grid, dict), "grid must be an object")
    for key in ("width", "depth"):
        _require(isinstance(grid.get(key), int) and not isinstance(grid.get(key), bool),
                 f"grid.{key} must be an integer")

    noise = cfg.get("noise")
    _require(isinstance(noise, dict), "noise must be an object")
    _require(_is_pair(noise.get("offset")), "noise.offset must be [x, z]")
    _require(_is_number(noise.get("frequency")), "noise.frequency must be a number")
    _require(isinstance(noise.get("octaves"), int), "noise.octaves must be an integer")
    _require(isinstance(noise.get("seed"), int), "noise.seed must be an integer")
    _require(isinstance(noise.get("basis"), str), "noise.basis must be a string")

    shape = cfg.get("shape")
    _require(isinstance(shape, dict), "shape must be an object")
    kinds = tuple(t.value for t in TerrainType)
    _require(shape.get("type") in kinds, f"shape.type must be one of {kinds}")
    _require(_is_number(shape.get("elevation_exponent")), "shape.elevation_exponent must be a number")
    _require(isinstance(shape.get("terrace_count"), int), "shape.terrace_count must be an integer")
    _require(_is_pair(shape.get("height_range")), "shape.height_range must be [min, max]")

    levels = cfg.get("levels")
    _require(isinstance(levels, list), "levels must be a list")
    for i, level in enumerate(levels):
        _require(isinstance(level, dict), f"levels[{i}] must be an object")
        _require(_is_number(level.get("min_value")), f"levels[{i}].min_value must be a number")
        try:
            parse_color(level.get("color"))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"levels[{i}].color is invalid: {e}") from e

    elements = cfg.get("world_elements")
    _require(isinstance(elements, list), "world_elements must be a list")
    for i, el in enumerate(elements):
        _require(isinstance(el, dict), f"world_elements[{i}] must be an object")
        _require("prototype" in el, f"world_elements[{i}].prototype is required")
        _require(_is_pair(el.get("spawn_level")), f"world_elements[{i}].spawn_level must be [min, max]")
        _require(_is_number(el.get("spawn_frequency")),
                 f"world_elements[{i}].spawn_frequency must be a number")
        _require(isinstance(el.get("rotate_on_normal", False), bool),
                 f"world_elements[{i}].rotate_on_normal must be a boolean")
