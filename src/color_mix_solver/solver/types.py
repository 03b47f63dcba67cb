# color_mix_solver/solver/types.py
from __future__ import annotations

"""
types.py.

Does: Define the solver's value types: the immutable options struct, mixing
      steps, results, and the structural Strategy / RandomSource protocols.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Protocol, Sequence, Tuple, TypeVar

from color_mix_solver.color.primitives import RGB
from color_mix_solver.solver.constants import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_MAX_SLOTS,
    DEFAULT_MAX_STEPS,
    DEFAULT_PALETTE,
    DEFAULT_TOLERANCE,
)

__all__ = [
    "StepAction",
    "MixingStep",
    "SolverOptions",
    "SolverResult",
    "SolverOptionsError",
    "RandomSource",
    "Strategy",
]

__docformat__ = "google"

_T = TypeVar("_T")


class SolverOptionsError(ValueError):
    """Raise when a solver options record has unknown keys or wrong types."""


class StepAction(str, Enum):
    ADD = "add"
    CLEAR = "clear"


@dataclass(frozen=True)
class MixingStep:
    action: StepAction
    color: Optional[str]
    slot_index: int
    description: str


@dataclass(frozen=True)
class SolverOptions:
    """Immutable configuration for one solve call.

    `max_steps` is accepted and carried but no strategy reads it.
    """

    tolerance: float = DEFAULT_TOLERANCE
    available_colors: Tuple[str, ...] = DEFAULT_PALETTE
    max_slots: int = DEFAULT_MAX_SLOTS
    max_iterations: int = DEFAULT_MAX_ITERATIONS
    max_steps: int = DEFAULT_MAX_STEPS


@dataclass(frozen=True)
class SolverResult:
    success: bool
    steps: Tuple[MixingStep, ...]
    final_color: str
    accuracy: float
    explanation: str
    strategy: str = ""
    distance: float = field(default=math.inf)

    @property
    def colors(self) -> Tuple[str, ...]:
        """Colors added, in application order."""
        return tuple(s.color for s in self.steps if s.action is StepAction.ADD and s.color)


class RandomSource(Protocol):
    """Subset of random.Random used by the evolutionary strategy."""

    def random(self) -> float: ...
    def randint(self, a: int, b: int) -> int: ...
    def choice(self, seq: Sequence[_T]) -> _T: ...


class Strategy(Protocol):
    def __call__(self, target: RGB, options: SolverOptions, rng: RandomSource) -> SolverResult: ...
