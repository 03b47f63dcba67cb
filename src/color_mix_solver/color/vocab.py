"""
vocab
=====

Does: Name colors for human-readable step descriptions and CLI output: fixed
      names for the default palette, CSS3 names via webcolors, and nearest
      CSS4 name via matplotlib (lazy).
Used By: Lightness strategy descriptions, explanations, CLI rendering.
Returns: Plain strings; the CSS4 map is built once and cached.
"""

from __future__ import annotations
from functools import lru_cache
from typing import Dict, Mapping, Optional
import logging

import webcolors

from color_mix_solver.color.primitives import RGB, hex_to_rgb, normalize_hex, rgb_distance

log = logging.getLogger(__name__)

__all__ = [
    "PALETTE_NAMES",
    "color_name",
    "nearest_color_name",
]

# ── Default palette names ────────────────────────────────────────────────────
PALETTE_NAMES: Mapping[str, str] = {
    "#ff0000": "red",
    "#00ff00": "green",
    "#0000ff": "blue",
    "#ffffff": "white",
    "#000000": "black",
    "#ffff00": "yellow",
    "#ff00ff": "magenta",
    "#00ffff": "cyan",
}


def color_name(hex_color: str) -> str:
    """
    Does: Name a hex color for display.
    Returns: Palette name, else CSS3 name, else the hex string unchanged.
    """
    key = normalize_hex(hex_color)
    if key is None:
        return hex_color
    if key in PALETTE_NAMES:
        return PALETTE_NAMES[key]
    try:
        return webcolors.hex_to_name(key)
    except ValueError:
        return hex_color


@lru_cache(maxsize=1)
def _get_css4_color_map() -> Dict[str, RGB]:
    """Does: Build {name: RGB} from matplotlib's CSS4 table (lazy import)."""
    from matplotlib.colors import CSS4_COLORS

    named: Dict[str, RGB] = {}
    for css_name, hx in CSS4_COLORS.items():
        rgb = hex_to_rgb(hx)
        if rgb is not None:
            named[css_name] = rgb
    log.debug("CSS4 color map built (%d names)", len(named))
    return named


def nearest_color_name(rgb: RGB, known_rgb_map: Optional[Mapping[str, RGB]] = None) -> Optional[str]:
    """Does: Find the nearest named color by Euclidean RGB distance (first wins ties)."""
    known = known_rgb_map if known_rgb_map is not None else _get_css4_color_map()
    best_name, best_d = None, float("inf")
    for name, ref in known.items():
        d = rgb_distance(rgb, ref)
        if d < best_d:
            best_name, best_d = name, d
    return best_name
