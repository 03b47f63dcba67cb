"""
strategies
==========

Solver strategies, in the order solve() tries them:
- exhaustive   : first 1/2/3-color combination within tolerance
- lightness    : closest hue anchor plus white/black units
- evolutionary : generational stochastic search
- proportional : primary-channel shares (+ complementary stub)
- best_attempt : closest of all combinations, never a success
"""

from typing import Tuple

from color_mix_solver.solver.constants import (
    BEST_ATTEMPT,
    EVOLUTIONARY,
    EXHAUSTIVE,
    LIGHTNESS,
    PROPORTIONAL,
)
from color_mix_solver.solver.types import Strategy

from .evolutionary import (
    crossover,
    initialize_population,
    mutate,
    select_parent,
    solve_evolutionary,
)
from .exhaustive import (
    iter_small_combinations,
    solve_exhaustive,
)
from .fallback import (
    iter_combinations,
    solve_best_attempt,
)
from .lightness import (
    find_closest_hue,
    lightness_adjustment,
    solve_lightness,
)
from .proportional import (
    primary_contributions,
    solve_complementary,
    solve_proportional,
)

# Priority order; the last entry is the guaranteed terminal result.
STRATEGIES: Tuple[Tuple[str, Strategy], ...] = (
    (EXHAUSTIVE, solve_exhaustive),
    (LIGHTNESS, solve_lightness),
    (EVOLUTIONARY, solve_evolutionary),
    (PROPORTIONAL, solve_proportional),
    (BEST_ATTEMPT, solve_best_attempt),
)

__all__ = [
    "STRATEGIES",
    # exhaustive
    "solve_exhaustive",
    "iter_small_combinations",
    # lightness
    "solve_lightness",
    "find_closest_hue",
    "lightness_adjustment",
    # evolutionary
    "solve_evolutionary",
    "initialize_population",
    "select_parent",
    "crossover",
    "mutate",
    # proportional
    "solve_proportional",
    "solve_complementary",
    "primary_contributions",
    # fallback
    "solve_best_attempt",
    "iter_combinations",
]

__docformat__ = "google"
