# src/color_mix_solver/solver/strategies/fallback.py
from __future__ import annotations

"""
fallback.py

Does: Last resort. Enumerate every ordered combination with repetition of
      1..max_slots palette colors and keep the one whose blend is closest.
Returns: SolverResult with success=False always, even when the closest blend
         happens to be within tolerance; callers read accuracy/distance.
Used by: solve() when no other strategy succeeded.

Cost is palette_size ** max_slots; fine for the default 8 colors x 6 slots.
"""

import logging
import math
from typing import Iterator, List, Optional, Sequence, Tuple

from color_mix_solver.color.primitives import BLACK, RGB, rgb_distance, rgb_to_hex, round_half_up
from color_mix_solver.solver.constants import BEST_ATTEMPT
from color_mix_solver.solver.options import palette_rgbs
from color_mix_solver.solver.results import combination_result
from color_mix_solver.solver.types import RandomSource, SolverOptions, SolverResult

__all__ = ["iter_combinations", "solve_best_attempt"]

log = logging.getLogger(__name__)

# (indices, summed r, g, b)
_Frame = Tuple[Tuple[int, ...], int, int, int]


def iter_combinations(
    rgbs: Sequence[Optional[RGB]],
    max_length: int,
) -> Iterator[Tuple[Tuple[int, ...], RGB]]:
    """
    Yield (palette indices, blend) for every ordered combination with repetition
    of length 1..max_length, in depth-first pre-order:
    [0], [0,0], [0,0,0], ..., [0,1], ...

    Iterative with an explicit stack; channel sums are carried along so each
    blend is O(1). Invalid palette entries (None) are never extended.
    """
    if max_length < 1:
        return
    valid = [i for i, c in enumerate(rgbs) if c is not None]
    stack: List[_Frame] = []
    for i in reversed(valid):
        r, g, b = rgbs[i]  # type: ignore[misc]
        stack.append(((i,), r, g, b))

    while stack:
        indices, r, g, b = stack.pop()
        n = len(indices)
        yield indices, (round_half_up(r / n), round_half_up(g / n), round_half_up(b / n))
        if n >= max_length:
            continue
        for i in reversed(valid):
            cr, cg, cb = rgbs[i]  # type: ignore[misc]
            stack.append((indices + (i,), r + cr, g + cg, b + cb))


def solve_best_attempt(target: RGB, options: SolverOptions, rng: RandomSource | None = None) -> SolverResult:
    """Globally closest combination up to max_slots; never a success."""
    palette = options.available_colors
    best_indices: Tuple[int, ...] = ()
    best_mix: RGB = BLACK
    best_distance = math.inf

    for indices, mixed in iter_combinations(palette_rgbs(options), options.max_slots):
        d = rgb_distance(target, mixed)
        if d < best_distance:
            best_indices, best_mix, best_distance = indices, mixed, d

    colors: List[str] = [palette[i] for i in best_indices]
    log.debug("[best_attempt] %s → %s (d=%.2f)", colors, rgb_to_hex(best_mix), rgb_distance(target, best_mix))
    return combination_result(
        target,
        colors,
        best_mix,
        success=False,
        strategy=BEST_ATTEMPT,
        explanation=(
            f"Best attempt: Mix {', '.join(colors)} to get {rgb_to_hex(best_mix)}. "
            "This is the closest possible match with available colors."
        ),
        describe=_describe,
    )


def _describe(color: str, index: int, total: int) -> str:
    return f"Add {color} to slot {index + 1} (best attempt)"
