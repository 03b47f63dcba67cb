"""
primitives.py
=============

Does: Convert between hex and RGB, compute Euclidean sRGB distance and the
      accuracy percentage derived from it, blend colors by plain averaging,
      and derive HSL for hue/lightness reasoning.
Used By: Every solver strategy, result formatting, level validation, CLI.
Returns: RGB triples (tuple[int,int,int]), hex strings, floats.
"""

from __future__ import annotations
import logging
import math
import re
from typing import Iterable, Optional, Tuple

from webcolors import hex_to_rgb as _webcolors_hex_to_rgb

# Public surface
__all__ = [
    "RGB",
    "HSL",
    "BLACK",
    "MAX_DISTANCE",
    "hex_to_rgb",
    "normalize_hex",
    "rgb_to_hex",
    "rgb_distance",
    "accuracy",
    "blend",
    "round_half_up",
    "rgb_to_hsl",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]
HSL = Tuple[float, float, float]

BLACK: RGB = (0, 0, 0)
MAX_DISTANCE: float = math.sqrt(3 * 255 * 255)

# Six hex digits, optional '#', nothing else (no padding, no shorthand, no names).
_HEX_RE = re.compile(r"#?([0-9a-f]{6})", re.IGNORECASE)


# =============================================================================
# 1) HEX <-> RGB
# =============================================================================

def hex_to_rgb(text: str) -> Optional[RGB]:
    """Does: Parse '#rrggbb' / 'rrggbb' (any case) into an RGB triple.

    Returns None for any other shape instead of raising, so callers can treat
    a bad palette entry as a failed attempt.
    """
    if not isinstance(text, str):
        return None
    m = _HEX_RE.fullmatch(text)
    if not m:
        return None
    return tuple(_webcolors_hex_to_rgb("#" + m.group(1)))


def normalize_hex(text: str) -> Optional[str]:
    """Does: Return the canonical lowercase '#rrggbb' form, or None if invalid."""
    rgb = hex_to_rgb(text)
    return None if rgb is None else rgb_to_hex(rgb)


def rgb_to_hex(rgb: RGB) -> str:
    """Does: Format an RGB triple as lowercase '#rrggbb'.

    No clamping is performed; callers pre-clamp values that may leave [0, 255].
    """
    r, g, b = rgb
    return "#" + "".join(format(int(c), "02x") for c in (r, g, b))


# =============================================================================
# 2) DISTANCE & ACCURACY
# =============================================================================

def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in sRGB space."""
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)))


def accuracy(target: RGB, actual: RGB) -> float:
    """Does: Express closeness as a percentage of the maximum RGB distance.

    100 iff the colors are identical, never below 0.
    """
    return max(0.0, 100.0 - (rgb_distance(target, actual) / MAX_DISTANCE) * 100.0)


# =============================================================================
# 3) BLENDING
# =============================================================================

def round_half_up(value: float) -> int:
    """Does: Round .5 away from zero for non-negative values (127.5 -> 128)."""
    return int(math.floor(value + 0.5))


def blend(colors: Iterable[RGB]) -> RGB:
    """Does: Average each channel across `colors`, rounding half-up.

    blend([]) is black; blend([c]) is c.
    """
    items = list(colors)
    if not items:
        return BLACK
    n = len(items)
    r = round_half_up(sum(c[0] for c in items) / n)
    g = round_half_up(sum(c[1] for c in items) / n)
    b = round_half_up(sum(c[2] for c in items) / n)
    return (r, g, b)


# =============================================================================
# 4) HSL
# =============================================================================

def rgb_to_hsl(rgb: RGB) -> HSL:
    """Does: Convert RGB to (hue degrees, saturation %, lightness %), unrounded.

    Achromatic colors report hue 0 and saturation 0.
    """
    r, g, b = (c / 255.0 for c in rgb)
    hi, lo = max(r, g, b), min(r, g, b)
    lightness = (hi + lo) / 2
    if hi == lo:
        return 0.0, 0.0, lightness * 100

    d = hi - lo
    saturation = d / (2 - hi - lo) if lightness > 0.5 else d / (hi + lo)
    if hi == r:
        hue = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        hue = (b - r) / d + 2
    else:
        hue = (r - g) / d + 4
    return hue / 6 * 360, saturation * 100, lightness * 100
