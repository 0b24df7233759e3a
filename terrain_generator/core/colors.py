"""Colour conversion for preset files and previews."""

from __future__ import annotations

from typing import Sequence, Union

from .constants import Rgba

ColorLike = Union[str, Sequence[float]]


def hex_to_rgba(hex_color: str, alpha: float = 1.0) -> Rgba:
    """'#RRGGBB' or '#RRGGBBAA' -> RGBA floats in 0..1.

    Raises:
        ValueError: if the hex string has the wrong length or digits
    """
    s = hex_color.strip().lstrip('#')
    if len(s) not in (6, 8):
        raise ValueError(f"Invalid hex color: {hex_color!r}")
    r = int(s[0:2], 16) / 255.0
    g = int(s[2:4], 16) / 255.0
    b = int(s[4:6], 16) / 255.0
    a = int(s[6:8], 16) / 255.0 if len(s) == 8 else float(alpha)
    return (r, g, b, a)


def parse_color(value: ColorLike) -> Rgba:
    """Hex string, or 3/4 floats in 0..1 (alpha defaults to 1)."""
    if isinstance(value, str):
        return hex_to_rgba(value)
    comps = [float(c) for c in value]
    if len(comps) == 3:
        comps.append(1.0)
    if len(comps) != 4:
        raise ValueError(f"colour must have 3 or 4 components, got {len(comps)}")
    return (comps[0], comps[1], comps[2], comps[3])
