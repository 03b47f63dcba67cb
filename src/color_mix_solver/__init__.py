"""
color_mix_solver
================

Does: Root package initializer for the color-mixing solver.
Returns: Re-exports the solver entry points (`solve`, `get_solution_text`) and
         the value types; subpackages `color`, `solver`, `utils` hold the rest.
Used by: The game layer, the `color-mix-solver` CLI, tests.
"""

from .solver import (
    MixingStep,
    SolverOptions,
    SolverResult,
    StepAction,
    get_solution_text,
    solve,
)

__all__: list[str] = [
    "solve",
    "get_solution_text",
    "MixingStep",
    "SolverOptions",
    "SolverResult",
    "StepAction",
]
__version__ = "0.1.0"
__docformat__ = "google"
