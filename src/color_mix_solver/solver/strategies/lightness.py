# src/color_mix_solver/solver/strategies/lightness.py
from __future__ import annotations

"""
lightness.py

Does: Pick the palette anchor whose hue is closest to the target, then append
      white (to lighten) or black (to darken) in up to three units.
Returns: SolverResult; failure if no anchor is in the palette or the mix
         misses tolerance.
Used by: solve(), right after the exhaustive search.

Hue first, lightness second. White and black are never combined and
saturation is not corrected; later strategies cover those cases.
"""

import logging
import math
from typing import List, NamedTuple, Optional, Sequence, Tuple

from color_mix_solver.color.primitives import RGB, rgb_distance, rgb_to_hsl
from color_mix_solver.color.vocab import color_name
from color_mix_solver.solver.constants import (
    BASE_LIGHTNESS,
    BLACK,
    HUE_ANCHORS,
    LIGHTNESS,
    LIGHTNESS_MARGIN,
    MAX_LIGHTNESS_UNITS,
    WHITE,
)
from color_mix_solver.solver.results import combination_result, failure, mix
from color_mix_solver.solver.types import RandomSource, SolverOptions, SolverResult

__all__ = [
    "HueMatch",
    "LightnessAdjustment",
    "hue_distance",
    "find_closest_hue",
    "lightness_adjustment",
    "build_lightness_combination",
    "solve_lightness",
]

log = logging.getLogger(__name__)


class HueMatch(NamedTuple):
    color: str
    distance: float


class LightnessAdjustment(NamedTuple):
    white: int
    black: int


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance on the hue wheel, in degrees."""
    d = abs(h1 - h2)
    return min(d, 360 - d)


def find_closest_hue(target_hue: float, palette: Sequence[str]) -> Optional[HueMatch]:
    """Closest hue anchor present in `palette`; earlier anchors win ties."""
    best: Optional[HueMatch] = None
    for anchor, hue in HUE_ANCHORS:
        if anchor not in palette:
            continue
        d = hue_distance(target_hue, hue)
        if best is None or d < best.distance:
            best = HueMatch(anchor, d)
    return best


def lightness_adjustment(target_lightness: float) -> LightnessAdjustment:
    """
    Units of white or black needed to move a ~50% lightness anchor toward
    `target_lightness`. Heuristic: the deviation from 50% is scaled onto 0..3
    units and rounded up.
    """
    if target_lightness > BASE_LIGHTNESS + LIGHTNESS_MARGIN:
        ratio = (target_lightness - BASE_LIGHTNESS) / (100 - BASE_LIGHTNESS)
        return LightnessAdjustment(min(MAX_LIGHTNESS_UNITS, math.ceil(ratio * MAX_LIGHTNESS_UNITS)), 0)
    if target_lightness < BASE_LIGHTNESS - LIGHTNESS_MARGIN:
        ratio = (BASE_LIGHTNESS - target_lightness) / BASE_LIGHTNESS
        return LightnessAdjustment(0, min(MAX_LIGHTNESS_UNITS, math.ceil(ratio * MAX_LIGHTNESS_UNITS)))
    return LightnessAdjustment(0, 0)


def _describe(color: str, index: int, total: int) -> str:
    name = color_name(color)
    if index == 0:
        return f"Add {name} ({color}) as base color to slot {index + 1}"
    if color == WHITE:
        return f"Add white ({color}) to slot {index + 1} to lighten the mixture"
    if color == BLACK:
        return f"Add black ({color}) to slot {index + 1} to darken the mixture"
    return f"Add {name} ({color}) to slot {index + 1}"


def _explain(colors: Sequence[str]) -> str:
    white = sum(1 for c in colors if c == WHITE)
    black = sum(1 for c in colors if c == BLACK)
    parts = [f"Start with {color_name(colors[0])}"]
    if white:
        parts.append(f"then add {white} part{'s' if white > 1 else ''} white to lighten")
    if black:
        parts.append(f"then add {black} part{'s' if black > 1 else ''} black to darken")
    return ", ".join(parts) + "."


def build_lightness_combination(target: RGB, palette: Sequence[str]) -> Optional[Tuple[List[str], HueMatch]]:
    """Anchor + white/black units for `target`, or None if no anchor is available."""
    hue, _saturation, lightness = rgb_to_hsl(target)
    match = find_closest_hue(hue, palette)
    if match is None:
        return None

    adjust = lightness_adjustment(lightness)
    colors = [match.color]
    if adjust.white and WHITE in palette:
        colors.extend([WHITE] * adjust.white)
    if adjust.black and BLACK in palette:
        colors.extend([BLACK] * adjust.black)
    return colors, match


def solve_lightness(target: RGB, options: SolverOptions, rng: RandomSource | None = None) -> SolverResult:
    """Hue anchor plus white/black correction; success iff within tolerance."""
    built = build_lightness_combination(target, options.available_colors)
    if built is None:
        log.debug("[lightness] no hue anchor in palette")
        return failure("Lightness control failed", LIGHTNESS)

    colors, match = built
    mixed = mix(colors)
    if mixed is None or rgb_distance(target, mixed) > options.tolerance:
        log.debug("[lightness] %s (hue Δ%.1f°) misses tolerance", colors, match.distance)
        return failure("Lightness control failed", LIGHTNESS)

    return combination_result(
        target,
        colors,
        mixed,
        success=True,
        strategy=LIGHTNESS,
        explanation=f"Lightness-controlled solution: {_explain(colors)}",
        describe=_describe,
    )
