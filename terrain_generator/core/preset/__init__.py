from .defaults import DEFAULT_TERRAIN_PRESET
from .loader import deep_merge, load_preset
from .registry import add_search_folder, available_presets, resolve_preset_path, search_folders

__all__ = [
    "DEFAULT_TERRAIN_PRESET",
    "add_search_folder",
    "available_presets",
    "deep_merge",
    "load_preset",
    "resolve_preset_path",
    "search_folders",
]
