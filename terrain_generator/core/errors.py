# ========================
# file: terrain_generator/core/errors.py
# ========================
class TerrainError(Exception):
    """Base error for the terrain generator."""


class ConfigurationError(TerrainError):
    """Raised when a generation config is rejected before any buffer is built."""


class PresetNotFoundError(ConfigurationError):
    """Raised when a preset id or path cannot be resolved."""


class DegenerateInputWarning(UserWarning):
    """Input is legal but degenerate (no colour bands, no spawn rules)."""
