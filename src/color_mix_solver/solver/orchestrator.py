# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level entry point. Validate the target, normalize options, run the
      strategies in priority order and stop at the first success; render a
      result as human-readable text.
Returns:
  - solve(target, options) -> SolverResult (never empty: the best-attempt
    result is the terminal output when nothing succeeds)
  - get_solution_text(target, options) -> str
  - format_solution(target, result) -> str
Used by: The game's hint / auto-solve flow, level validation, the CLI.
"""

import logging
import random
from typing import Optional, Sequence, Tuple

from color_mix_solver.color.primitives import hex_to_rgb
from color_mix_solver.solver.options import OptionsLike, normalize_options
from color_mix_solver.solver.results import failure
from color_mix_solver.solver.strategies import STRATEGIES
from color_mix_solver.solver.types import MixingStep, RandomSource, SolverResult, Strategy
from color_mix_solver.utils.log import debug

logger = logging.getLogger(__name__)

__all__ = [
    "solve",
    "get_solution_text",
    "format_solution",
    "format_steps",
]

INVALID_TARGET = "Invalid target color format"


# =============================================================================
# Solve
# =============================================================================


def solve(
    target_color: str,
    options: OptionsLike = None,
    *,
    rng: Optional[RandomSource] = None,
    strategies: Sequence[Tuple[str, Strategy]] = STRATEGIES,
) -> SolverResult:
    """Find mixing steps that reproduce `target_color` within tolerance.

    Args:
        target_color: '#rrggbb' (the '#' is optional, any case).
        options: SolverOptions, a mapping of option keys, or None for defaults.
        rng: Random source for the evolutionary strategy; a fresh
            random.Random() per call when omitted.
        strategies: Ordered (name, strategy) pairs; the default runs
            exhaustive → lightness → evolutionary → proportional → best_attempt.

    Returns:
        The first successful strategy result, otherwise the last strategy's
        result as-is. An invalid target returns a failure result and runs
        no strategy.
    """
    target = hex_to_rgb(target_color)
    if target is None:
        logger.debug("Rejected target %r", target_color)
        return failure(INVALID_TARGET)

    opts = normalize_options(options)
    rng = rng if rng is not None else random.Random()
    logger.debug(
        "Solving %s (palette=%s, tolerance=%s, max_slots=%d)",
        target_color,
        ", ".join(opts.available_colors),
        opts.tolerance,
        opts.max_slots,
    )

    result: Optional[SolverResult] = None
    for name, strategy in strategies:
        result = strategy(target, opts, rng)
        debug(
            f"{target_color}: {name} → success={result.success} "
            f"accuracy={result.accuracy:.1f}%",
            "solver",
        )
        if result.success:
            logger.debug("Solved %s with %s (%d steps)", target_color, name, len(result.steps))
            return result

    if result is None:
        return failure("No strategy configured")
    return result


# =============================================================================
# Text rendering
# =============================================================================


def format_steps(steps: Sequence[MixingStep]) -> str:
    return "\n".join(f"{i}. {step.description}" for i, step in enumerate(steps, start=1))


def format_solution(target_color: str, result: SolverResult) -> str:
    """Multi-line text: header, explanation, numbered steps, accuracy line."""
    final_line = f"🎨 Final color: {result.final_color} ({result.accuracy:.1f}% accurate)"
    if result.success:
        return (
            f"✅ Solution found for {target_color}!\n"
            f"📝 {result.explanation}\n"
            f"🎯 Steps:\n{format_steps(result.steps)}\n"
            f"{final_line}"
        )

    best = f"🎯 Best attempt:\n{format_steps(result.steps)}\n" if result.steps else ""
    return (
        f"❌ No exact solution found for {target_color}\n"
        f"📝 {result.explanation}\n"
        f"{best}"
        f"{final_line}"
    )


def get_solution_text(
    target_color: str,
    options: OptionsLike = None,
    *,
    rng: Optional[RandomSource] = None,
) -> str:
    return format_solution(target_color, solve(target_color, options, rng=rng))
