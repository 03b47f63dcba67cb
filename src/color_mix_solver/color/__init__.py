"""
color.
=====

Does: Aggregate the RGB primitives (hex parsing, distance, accuracy, blend, HSL)
      and color naming helpers shared by the solver strategies and the CLI.
Returns: Pure functions; no side effects beyond lazy caching of named colors.
"""

from .primitives import (
    BLACK,
    HSL,
    MAX_DISTANCE,
    RGB,
    accuracy,
    blend,
    hex_to_rgb,
    normalize_hex,
    rgb_distance,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from .vocab import (
    PALETTE_NAMES,
    color_name,
    nearest_color_name,
)

__all__ = [
    # primitives
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
    # vocab
    "PALETTE_NAMES",
    "color_name",
    "nearest_color_name",
]

__docformat__ = "google"
