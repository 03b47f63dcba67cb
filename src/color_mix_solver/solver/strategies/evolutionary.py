# src/color_mix_solver/solver/strategies/evolutionary.py
from __future__ import annotations

"""
evolutionary.py

Does: Stochastic search over variable-length color combinations: a fixed-size
      population scored by blend distance, evolved with elitism, tournament
      selection, index-wise crossover and per-gene / structural mutation.
Returns: SolverResult for the first individual within tolerance, else the
         best individual if within tolerance at budget exhaustion, else failure.
Used by: solve() after the exhaustive and lightness strategies.

All randomness comes from the injected `rng`, so a seeded random.Random makes
runs reproducible.
"""

import logging
import math
import random
from typing import List, Optional, Sequence

from color_mix_solver.color.primitives import RGB, rgb_distance, rgb_to_hex
from color_mix_solver.solver.constants import (
    ELITE_SIZE,
    EVOLUTIONARY,
    ITERATIONS_PER_GENERATION,
    MAX_INDIVIDUAL_LENGTH,
    MUTATION_RATE,
    POPULATION_SIZE,
    TOURNAMENT_SIZE,
)
from color_mix_solver.solver.results import combination_result, failure, mix
from color_mix_solver.solver.types import RandomSource, SolverOptions, SolverResult
from color_mix_solver.utils.log import debug

__all__ = [
    "Individual",
    "generation_budget",
    "initialize_population",
    "fitness",
    "select_parent",
    "crossover",
    "mutate",
    "solve_evolutionary",
]

log = logging.getLogger(__name__)

Individual = List[str]


# ──────────────────────────────────────────────────────────────
# 1) Budget & population
# ──────────────────────────────────────────────────────────────
def generation_budget(max_iterations: int) -> int:
    """Number of generations: max_iterations / 10, a partial tenth counting as one."""
    return max(0, math.ceil(max_iterations / ITERATIONS_PER_GENERATION))


def initialize_population(
    size: int,
    palette: Sequence[str],
    max_slots: int,
    rng: RandomSource,
) -> List[Individual]:
    """`size` individuals of 1..max_slots uniformly random palette colors."""
    upper = max(1, max_slots)
    return [[rng.choice(palette) for _ in range(rng.randint(1, upper))] for _ in range(size)]


def fitness(target: RGB, individual: Sequence[str]) -> float:
    """Distance of the individual's blend to target; lower is better."""
    mixed = mix(individual)
    return math.inf if mixed is None else rgb_distance(target, mixed)


# ──────────────────────────────────────────────────────────────
# 2) Operators
# ──────────────────────────────────────────────────────────────
def select_parent(
    population: Sequence[Individual],
    scores: Sequence[float],
    rng: RandomSource,
    tournament_size: int = TOURNAMENT_SIZE,
) -> Individual:
    """Tournament with replacement: the fittest of `tournament_size` uniform draws."""
    best_index, best_score = 0, math.inf
    for _ in range(tournament_size):
        i = rng.randint(0, len(population) - 1)
        if scores[i] < best_score:
            best_index, best_score = i, scores[i]
    return list(population[best_index])


def crossover(parent1: Sequence[str], parent2: Sequence[str], rng: RandomSource) -> Individual:
    """
    Index-wise child up to the longer parent's length: a 50/50 pick where both
    parents have a color, otherwise the remaining parent's color. Never empty.
    """
    child: Individual = []
    for i in range(max(len(parent1), len(parent2))):
        in1, in2 = i < len(parent1), i < len(parent2)
        if in1 and in2:
            child.append(parent1[i] if rng.random() < 0.5 else parent2[i])
        elif in1:
            child.append(parent1[i])
        else:
            child.append(parent2[i])
    if not child:
        child = list(parent1[:1] or parent2[:1])
    return child


def mutate(
    individual: Sequence[str],
    palette: Sequence[str],
    rng: RandomSource,
    rate: float = MUTATION_RATE,
) -> Individual:
    """
    Replace each gene with probability `rate`, then with the same probability
    apply one structural change: drop the last color (coin flip, len > 1) or
    append a random one (len < MAX_INDIVIDUAL_LENGTH).
    """
    mutated = list(individual)
    for i in range(len(mutated)):
        if rng.random() < rate:
            mutated[i] = rng.choice(palette)

    if rng.random() < rate:
        if rng.random() < 0.5 and len(mutated) > 1:
            mutated.pop()
        elif len(mutated) < MAX_INDIVIDUAL_LENGTH:
            mutated.append(rng.choice(palette))
    return mutated


# ──────────────────────────────────────────────────────────────
# 3) Search loop
# ──────────────────────────────────────────────────────────────
def _solution(target: RGB, individual: Individual) -> Optional[SolverResult]:
    mixed = mix(individual) if individual else None
    if mixed is None:
        return None
    return combination_result(
        target,
        individual,
        mixed,
        success=True,
        strategy=EVOLUTIONARY,
        explanation=(
            f"Genetic algorithm solution: Mix {', '.join(individual)} "
            f"to achieve {rgb_to_hex(mixed)}."
        ),
    )


def solve_evolutionary(
    target: RGB,
    options: SolverOptions,
    rng: RandomSource | None = None,
) -> SolverResult:
    """Run the generational search; see module docstring for the contract."""
    palette = options.available_colors
    if not palette:
        return failure("Genetic algorithm failed to find solution", EVOLUTIONARY)
    rng = rng if rng is not None else random.Random()

    population = initialize_population(POPULATION_SIZE, palette, options.max_slots, rng)
    best: Individual = []
    best_score = math.inf
    generations = generation_budget(options.max_iterations)

    for generation in range(generations):
        scores: List[float] = []
        for individual in population:
            score = fitness(target, individual)
            scores.append(score)
            if score < best_score:
                best_score, best = score, list(individual)
            # checked mid-scan; returns best, which is never farther than the individual that hit
            if score <= options.tolerance:
                debug(f"generation {generation}: hit {individual} (d={score:.2f})", "evolution")
                result = _solution(target, best)
                if result is not None:
                    return result

        debug(f"generation {generation}: best d={best_score:.2f}", "evolution")

        ranked = sorted(range(len(population)), key=lambda i: scores[i])
        next_population: List[Individual] = [list(population[i]) for i in ranked[:ELITE_SIZE]]
        while len(next_population) < POPULATION_SIZE:
            parent1 = select_parent(population, scores, rng)
            parent2 = select_parent(population, scores, rng)
            next_population.append(mutate(crossover(parent1, parent2, rng), palette, rng))
        population = next_population

    log.debug("[evolutionary] budget of %d generations spent, best d=%.2f", generations, best_score)
    if best and best_score <= options.tolerance:
        result = _solution(target, best)
        if result is not None:
            return result
    return failure("Genetic algorithm failed to find solution", EVOLUTIONARY)
