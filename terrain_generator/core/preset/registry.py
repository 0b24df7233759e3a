# ========================
# file: terrain_generator/core/preset/registry.py
# ========================
from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Union

from ..errors import PresetNotFoundError

logger = logging.getLogger(__name__)

# Bundled presets ship inside the package; host folders are searched first.
_BUNDLED_ROOT = Path(__file__).resolve().parents[2] / "presets"
_SEARCH_ROOTS: List[Path] = [_BUNDLED_ROOT]


def _normalize_id(preset_id: str) -> str:
    rel = preset_id.replace("\\", "/").strip("/")
    if rel.endswith(".json"):
        rel = rel[: -len(".json")]
    return rel


def search_folders() -> List[Path]:
    return list(_SEARCH_ROOTS)


def available_presets() -> List[str]:
    """Ids of every *.json under the search folders, e.g. 'terrain/default'."""
    ids = set()
    for root in _SEARCH_ROOTS:
        if root.is_dir():
            ids.update(p.relative_to(root).with_suffix("").as_posix() for p in root.rglob("*.json"))
    return sorted(ids)


def resolve_preset_path(preset_id: str) -> str:
    """Map an id like 'terrain/default' (the .json suffix is optional) to a file path."""
    rel = _normalize_id(preset_id)
    if not rel:
        raise PresetNotFoundError("Empty preset id")
    for root in _SEARCH_ROOTS:
        candidate = root / f"{rel}.json"
        if candidate.is_file():
            logger.debug("Preset '%s' -> %s", preset_id, candidate)
            return str(candidate)
    known = ", ".join(available_presets()) or "none"
    raise PresetNotFoundError(f"Preset id '{preset_id}' not found (available: {known})")


def add_search_folder(path: Union[str, Path]) -> None:
    """Register a host preset folder; it shadows the bundled presets with the same id."""
    folder = Path(path).resolve()
    if folder not in _SEARCH_ROOTS:
        _SEARCH_ROOTS.insert(0, folder)
