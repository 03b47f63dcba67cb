"""
results.py
==========

Does: Shared building blocks for strategies: mixing a combination of palette
      hexes, turning a combination into ADD steps, and packaging success /
      failure results with distance and accuracy filled in.
"""

from __future__ import annotations

from typing import Callable, Optional, Sequence

from color_mix_solver.color.primitives import (
    BLACK,
    RGB,
    accuracy,
    blend,
    hex_to_rgb,
    rgb_distance,
    rgb_to_hex,
)
from color_mix_solver.solver.types import MixingStep, SolverResult, StepAction

__all__ = [
    "Describe",
    "slot_description",
    "mix",
    "add_steps",
    "combination_result",
    "failure",
]

Describe = Callable[[str, int, int], str]  # (color, index, total) -> text


def slot_description(color: str, index: int, total: int) -> str:
    return f"Add {color} to slot {index + 1}"


def mix(colors: Sequence[str]) -> Optional[RGB]:
    """Blend palette hexes; None if any entry is not a valid hex color."""
    rgbs = []
    for c in colors:
        rgb = hex_to_rgb(c) if isinstance(c, str) else None
        if rgb is None:
            return None
        rgbs.append(rgb)
    return blend(rgbs)


def add_steps(colors: Sequence[str], describe: Describe = slot_description) -> tuple[MixingStep, ...]:
    """One ADD step per color, slots numbered from 0 in application order."""
    total = len(colors)
    return tuple(
        MixingStep(StepAction.ADD, color, i, describe(color, i, total))
        for i, color in enumerate(colors)
    )


def combination_result(
    target: RGB,
    colors: Sequence[str],
    mixed: RGB,
    *,
    success: bool,
    strategy: str,
    explanation: str,
    describe: Describe = slot_description,
) -> SolverResult:
    return SolverResult(
        success=success,
        steps=add_steps(colors, describe),
        final_color=rgb_to_hex(mixed),
        accuracy=accuracy(target, mixed),
        explanation=explanation,
        strategy=strategy,
        distance=rgb_distance(target, mixed),
    )


def failure(explanation: str, strategy: str = "") -> SolverResult:
    """A strategy's 'nothing found' outcome: no steps, black, accuracy 0."""
    return SolverResult(
        success=False,
        steps=(),
        final_color=rgb_to_hex(BLACK),
        accuracy=0.0,
        explanation=explanation,
        strategy=strategy,
    )
