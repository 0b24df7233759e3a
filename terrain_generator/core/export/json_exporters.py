# ==============================================================================
# File: terrain_generator/core/export/json_exporters.py
# Purpose: JSON dumps of placement requests.
# ==============================================================================
from __future__ import annotations
import dataclasses
import json
import logging
import os
from pathlib import Path
from typing import Any, Iterable

import numpy as np

from ..types import PlacementRequest

logger = logging.getLogger(__name__)


def _ensure_path_exists(path: str) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


def _atomic_write_json(path: str, data: Any) -> None:
    """Writes through a temp file so readers never see a half-written JSON."""
    _ensure_path_exists(path)
    tmp_path = path + ".tmp"

    def default_serializer(o):
        if dataclasses.is_dataclass(o):
            return dataclasses.asdict(o)
        if isinstance(o, np.integer):
            return int(o)
        if isinstance(o, np.floating):
            return float(o)
        if isinstance(o, np.ndarray):
            return o.tolist()
        raise TypeError(f"Object of type {type(o).__name__} is not JSON serializable")

    with open(tmp_path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2, default=default_serializer)
    os.replace(tmp_path, path)
    logger.debug("JSON file saved: %s", path)


def write_placements_json(path: str, placements: Iterable[PlacementRequest]) -> None:
    """Placement list in commit order; prototype ids are written with str() if not JSON-native."""
    items = []
    for p in placements:
        proto = p.prototype_id
        if not isinstance(proto, (str, int, float, bool, type(None))):
            proto = str(proto)
        items.append({
            "vertex_index": int(p.vertex_index),
            "rule_index": int(p.rule_index),
            "prototype": proto,
            "position": [float(c) for c in p.world_position],
            "orientation": [float(c) for c in p.orientation],
        })
    _atomic_write_json(path, {"count": len(items), "placements": items})
