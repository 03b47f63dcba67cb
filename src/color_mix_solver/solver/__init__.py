"""
solver.
======

Does: Expose the color-mixing solver: solve(), text rendering, options
      normalization and the result/step value types.
Used By: Level validation, the CLI, and the game layer's hint / auto-solve.
"""

from .constants import DEFAULT_PALETTE
from .options import normalize_options, normalize_palette
from .orchestrator import (
    format_solution,
    format_steps,
    get_solution_text,
    solve,
)
from .strategies import STRATEGIES
from .types import (
    MixingStep,
    SolverOptions,
    SolverOptionsError,
    SolverResult,
    StepAction,
)

__all__ = [
    # entry points
    "solve",
    "get_solution_text",
    "format_solution",
    "format_steps",
    "STRATEGIES",
    # options
    "DEFAULT_PALETTE",
    "normalize_options",
    "normalize_palette",
    # types
    "MixingStep",
    "SolverOptions",
    "SolverOptionsError",
    "SolverResult",
    "StepAction",
]

__docformat__ = "google"
