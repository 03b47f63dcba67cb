# src/color_mix_solver/solver/strategies/proportional.py
from __future__ import annotations

"""
proportional.py

Does: Color-theory heuristic: split three units between the red, green and
      blue primaries in proportion to each channel's share of the target.
      Followed by the complementary-color sub-strategy, which is a stub.
Returns: SolverResult (success within tolerance, otherwise failure).
Used by: solve() as the last strategy before the best-attempt fallback.
"""

import logging
from typing import List, NamedTuple, Sequence

from color_mix_solver.color.primitives import RGB, rgb_distance, round_half_up
from color_mix_solver.solver.constants import BLUE, GREEN, PROPORTIONAL, PROPORTIONAL_UNITS, RED
from color_mix_solver.solver.results import combination_result, failure, mix
from color_mix_solver.solver.types import RandomSource, SolverOptions, SolverResult

__all__ = [
    "PrimaryContributions",
    "primary_contributions",
    "proportional_combination",
    "solve_complementary",
    "solve_proportional",
]

log = logging.getLogger(__name__)


class PrimaryContributions(NamedTuple):
    red: float
    green: float
    blue: float


def primary_contributions(rgb: RGB) -> PrimaryContributions:
    """Each channel's share of r+g+b; all zero for black."""
    total = sum(rgb)
    if total == 0:
        return PrimaryContributions(0.0, 0.0, 0.0)
    r, g, b = rgb
    return PrimaryContributions(r / total, g / total, b / total)


def proportional_combination(contrib: PrimaryContributions, palette: Sequence[str]) -> List[str]:
    """About three units of the primaries present in `palette` (rounding may give four), red first."""
    total = contrib.red + contrib.green + contrib.blue
    if total == 0:
        return []
    colors: List[str] = []
    for primary, share in ((RED, contrib.red), (GREEN, contrib.green), (BLUE, contrib.blue)):
        units = round_half_up(share / total * PROPORTIONAL_UNITS)
        if primary in palette:
            colors.extend([primary] * units)
    return colors


def _describe(color: str, index: int, total: int) -> str:
    return f"Add {color} to slot {index + 1} (color theory)"


def solve_complementary(target: RGB, options: SolverOptions) -> SolverResult:
    """Complementary-color reasoning. Not implemented: always reports failure."""
    return failure("Complementary color approach not implemented", PROPORTIONAL)


def solve_proportional(target: RGB, options: SolverOptions, rng: RandomSource | None = None) -> SolverResult:
    colors = proportional_combination(primary_contributions(target), options.available_colors)
    if colors:
        mixed = mix(colors)
        if mixed is not None and rgb_distance(target, mixed) <= options.tolerance:
            return combination_result(
                target,
                colors,
                mixed,
                success=True,
                strategy=PROPORTIONAL,
                explanation="Color theory solution: Mix based on primary color contributions.",
                describe=_describe,
            )
        log.debug("[proportional] %s misses tolerance", colors)

    return solve_complementary(target, options)
