# src/color_mix_solver/solver/strategies/exhaustive.py
from __future__ import annotations

"""
exhaustive.py

Does: Enumerate 1-, 2- and 3-color combinations of the palette and return the
      first whose blend lies within tolerance.
Returns: SolverResult (success on first match, failure result otherwise).
Used by: solve() as the first, cheapest strategy.

Order is the tie-break: singles in palette order, then pairs (i <= j), then
triples (i <= j <= k, k < max_slots). Earlier palette entries and smaller
combinations win over later or larger ones of equal accuracy.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from color_mix_solver.color.primitives import RGB, blend, rgb_distance, rgb_to_hex
from color_mix_solver.solver.constants import EXHAUSTIVE
from color_mix_solver.solver.options import palette_rgbs
from color_mix_solver.solver.results import combination_result, failure, slot_description
from color_mix_solver.solver.types import RandomSource, SolverOptions, SolverResult

__all__ = ["solve_exhaustive", "iter_small_combinations"]

log = logging.getLogger(__name__)

_LABELS = {1: "Single-color", 2: "Two-color", 3: "Three-color"}


def iter_small_combinations(palette_size: int, max_slots: int) -> Iterator[Tuple[int, ...]]:
    """Yield palette index tuples in the exhaustive search order."""
    for i in range(palette_size):
        yield (i,)
    for i in range(palette_size):
        for j in range(i, palette_size):
            yield (i, j)
    for i in range(palette_size):
        for j in range(i, palette_size):
            for k in range(j, palette_size):
                if k >= max_slots:
                    break
                yield (i, j, k)


def _mix_indices(indices: Sequence[int], rgbs: List[Optional[RGB]]) -> Optional[RGB]:
    picked = [rgbs[i] for i in indices]
    if any(c is None for c in picked):
        return None
    return blend(picked)  # type: ignore[arg-type]


def _describe_single(color: str, index: int, total: int) -> str:
    return f"Add {color} to slot {index + 1} (perfect match!)"


def solve_exhaustive(target: RGB, options: SolverOptions, rng: RandomSource | None = None) -> SolverResult:
    """Return the first 1/2/3-color combination within tolerance, else a failure."""
    palette = options.available_colors
    rgbs = palette_rgbs(options)

    for indices in iter_small_combinations(len(palette), options.max_slots):
        mixed = _mix_indices(indices, rgbs)
        if mixed is None or rgb_distance(target, mixed) > options.tolerance:
            continue

        colors = [palette[i] for i in indices]
        final_hex = rgb_to_hex(mixed)
        if len(colors) == 1:
            explanation = f"Single color solution: {colors[0]} matches the target perfectly."
        elif len(colors) == 2:
            explanation = f"Two-color solution: Mix {colors[0]} and {colors[1]} to get {final_hex}."
        else:
            explanation = f"Three-color solution: Mix {', '.join(colors)} to get {final_hex}."
        log.debug("[exhaustive] %s match %s → %s", _LABELS[len(colors)], colors, final_hex)
        return combination_result(
            target,
            colors,
            mixed,
            success=True,
            strategy=EXHAUSTIVE,
            explanation=explanation,
            describe=_describe_single if len(colors) == 1 else slot_description,
        )

    return failure("No brute force solution found", EXHAUSTIVE)
