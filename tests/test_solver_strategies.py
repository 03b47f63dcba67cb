# tests/test_solver_strategies.py
"""
deterministic strategy tests
============================

Does: Exercise the exhaustive, lightness, proportional and best-attempt
      strategies on hand-computed targets (blends are exact averages with
      half-up rounding, so expected hexes are known in advance).
"""

from __future__ import annotations

import math

import pytest

from color_mix_solver.color.primitives import blend, hex_to_rgb
from color_mix_solver.solver.constants import BLACK, BLUE, DEFAULT_PALETTE, GREEN, RED, WHITE, YELLOW
from color_mix_solver.solver.strategies.exhaustive import iter_small_combinations, solve_exhaustive
from color_mix_solver.solver.strategies.fallback import iter_combinations, solve_best_attempt
from color_mix_solver.solver.strategies.lightness import (
    find_closest_hue,
    hue_distance,
    lightness_adjustment,
    solve_lightness,
)
from color_mix_solver.solver.strategies.proportional import (
    PrimaryContributions,
    primary_contributions,
    proportional_combination,
    solve_complementary,
    solve_proportional,
)
from color_mix_solver.solver.types import SolverOptions, StepAction


def _opts(palette=DEFAULT_PALETTE, **kw) -> SolverOptions:
    return SolverOptions(available_colors=tuple(palette), **kw)


def _rgb(hx: str):
    return hex_to_rgb(hx)


# ──────────────────────────────────────────────────────────────────────────────
# Exhaustive
# ──────────────────────────────────────────────────────────────────────────────
def test_iter_small_combinations_order_and_triple_bound():
    assert list(iter_small_combinations(2, 6)) == [
        (0,), (1,),
        (0, 0), (0, 1), (1, 1),
        (0, 0, 0), (0, 0, 1), (0, 1, 1), (1, 1, 1),
    ]
    # third index must stay below max_slots
    assert list(iter_small_combinations(2, 1))[-1] == (0, 0, 0)
    assert len(list(iter_small_combinations(2, 1))) == 6


def test_exhaustive_single_color_match():
    res = solve_exhaustive(_rgb(RED), _opts())
    assert res.success and res.strategy == "exhaustive"
    assert res.colors == (RED,)
    assert res.steps[0].action is StepAction.ADD
    assert res.steps[0].slot_index == 0
    assert res.steps[0].description == "Add #ff0000 to slot 1 (perfect match!)"
    assert res.accuracy == 100.0
    assert res.explanation == "Single color solution: #ff0000 matches the target perfectly."


def test_exhaustive_prefers_earlier_palette_entry():
    res = solve_exhaustive(_rgb(RED), _opts(["#fe0000", RED], tolerance=5))
    assert res.colors == ("#fe0000",)


def test_exhaustive_two_color_olive():
    res = solve_exhaustive(_rgb("#808000"), _opts([RED, GREEN], tolerance=5))
    assert res.success
    assert res.colors == (RED, GREEN)
    assert [s.slot_index for s in res.steps] == [0, 1]
    assert res.final_color == "#808000"
    assert res.explanation == "Two-color solution: Mix #ff0000 and #00ff00 to get #808000."


def test_exhaustive_three_color_and_max_slots_bound():
    target = _rgb("#aa0055")  # red, red, blue
    res = solve_exhaustive(target, _opts([RED, BLUE], tolerance=1))
    assert res.success
    assert res.colors == (RED, RED, BLUE)
    assert res.explanation.startswith("Three-color solution: Mix #ff0000, #ff0000, #0000ff")

    res = solve_exhaustive(target, _opts([RED, BLUE], tolerance=1, max_slots=1))
    assert not res.success
    assert res.explanation == "No brute force solution found"
    assert res.steps == () and res.final_color == "#000000" and res.accuracy == 0.0


def test_exhaustive_skips_invalid_entries_and_empty_palette():
    res = solve_exhaustive(_rgb(RED), _opts(["nothex", RED]))
    assert res.colors == (RED,)
    assert not solve_exhaustive(_rgb(RED), _opts([])).success


# ──────────────────────────────────────────────────────────────────────────────
# Lightness
# ──────────────────────────────────────────────────────────────────────────────
def test_hue_distance_wraps():
    assert hue_distance(350, 10) == 20
    assert hue_distance(0, 180) == 180


def test_find_closest_hue():
    assert find_closest_hue(350, DEFAULT_PALETTE).color == RED
    assert find_closest_hue(30, DEFAULT_PALETTE).color == RED  # tie with yellow, red first
    assert find_closest_hue(100, DEFAULT_PALETTE).color == GREEN
    m = find_closest_hue(200, [RED])
    assert m.color == RED and m.distance == 160
    assert find_closest_hue(0, [WHITE, BLACK]) is None


@pytest.mark.parametrize(
    "lightness,expect",
    [(90, (3, 0)), (70, (2, 0)), (66, (1, 0)), (65, (0, 0)), (50, (0, 0)), (35, (0, 0)), (20, (0, 2)), (0, (0, 3))],
)
def test_lightness_adjustment(lightness, expect):
    assert tuple(lightness_adjustment(lightness)) == expect


def test_solve_lightness_lightens():
    res = solve_lightness(_rgb("#ff9696"), _opts(tolerance=30))
    assert res.success and res.strategy == "lightness"
    assert res.colors == (RED, WHITE, WHITE)
    assert res.final_color == "#ffaaaa"
    assert res.steps[0].description == "Add red (#ff0000) as base color to slot 1"
    assert res.steps[1].description == "Add white (#ffffff) to slot 2 to lighten the mixture"
    assert res.explanation == "Lightness-controlled solution: Start with red, then add 2 parts white to lighten."


def test_solve_lightness_darkens():
    res = solve_lightness(_rgb("#640000"), _opts())
    assert res.success
    assert res.colors == (RED, BLACK, BLACK)
    assert res.final_color == "#550000"
    assert res.steps[2].description == "Add black (#000000) to slot 3 to darken the mixture"
    assert res.explanation.endswith("then add 2 parts black to darken.")


def test_solve_lightness_failures():
    # anchor present but no white to lighten with
    res = solve_lightness(_rgb("#ff9696"), _opts([RED], tolerance=30))
    assert not res.success and res.explanation == "Lightness control failed"
    # no hue anchor at all
    res = solve_lightness(_rgb("#808080"), _opts([WHITE, BLACK]))
    assert not res.success and res.steps == ()


# ──────────────────────────────────────────────────────────────────────────────
# Proportional (+ complementary stub)
# ──────────────────────────────────────────────────────────────────────────────
def test_primary_contributions():
    assert primary_contributions((0, 0, 0)) == (0.0, 0.0, 0.0)
    assert primary_contributions((255, 0, 0)) == (1.0, 0.0, 0.0)
    c = primary_contributions((100, 100, 200))
    assert c.blue == pytest.approx(0.5)


def test_proportional_combination_units():
    third = 1 / 3
    assert proportional_combination(PrimaryContributions(third, third, third), DEFAULT_PALETTE) == [RED, GREEN, BLUE]
    # 1.5 units each round up to 2
    assert proportional_combination(PrimaryContributions(0.5, 0.5, 0.0), DEFAULT_PALETTE) == [RED, RED, GREEN, GREEN]
    assert proportional_combination(PrimaryContributions(0.5, 0.5, 0.0), [RED]) == [RED, RED]
    assert proportional_combination(PrimaryContributions(0.0, 0.0, 0.0), DEFAULT_PALETTE) == []


def test_solve_proportional_success():
    res = solve_proportional((85, 85, 85), _opts())
    assert res.success and res.strategy == "proportional"
    assert res.colors == (RED, GREEN, BLUE)
    assert res.final_color == "#555555"
    assert all(s.description.endswith("(color theory)") for s in res.steps)
    assert res.explanation == "Color theory solution: Mix based on primary color contributions."


@pytest.mark.parametrize("target,palette", [((0, 0, 0), DEFAULT_PALETTE), ((200, 10, 10), [WHITE]), ((255, 255, 255), [RED, GREEN])])
def test_solve_proportional_falls_through_to_complementary(target, palette):
    res = solve_proportional(target, _opts(palette, tolerance=1))
    assert not res.success
    assert res.explanation == "Complementary color approach not implemented"


def test_complementary_stub_always_fails():
    assert not solve_complementary((255, 0, 0), _opts()).success


# ──────────────────────────────────────────────────────────────────────────────
# Best attempt (fallback)
# ──────────────────────────────────────────────────────────────────────────────
def test_iter_combinations_dfs_preorder():
    out = list(iter_combinations([(255, 0, 0), (0, 0, 255)], 2))
    assert [idx for idx, _ in out] == [(0,), (0, 0), (0, 1), (1,), (1, 0), (1, 1)]
    assert out[2][1] == (128, 0, 128)
    assert list(iter_combinations([(255, 0, 0)], 0)) == []


def test_iter_combinations_skips_invalid_entries():
    out = list(iter_combinations([None, (0, 0, 255)], 2))
    assert [idx for idx, _ in out] == [(1,), (1, 1)]


def test_iter_combinations_blend_matches_direct_blend():
    rgbs = [(255, 0, 0), (0, 255, 0), (10, 20, 30)]
    for idx, mixed in iter_combinations(rgbs, 3):
        assert mixed == blend([rgbs[i] for i in idx])


def test_best_attempt_white_from_red_blue():
    res = solve_best_attempt(_rgb(WHITE), _opts([RED, BLUE], tolerance=5))
    assert res.success is False
    assert res.strategy == "best_attempt"
    assert res.final_color == "#800080"
    # first equal-count combination reached in depth-first order
    assert res.colors == (RED, RED, RED, BLUE, BLUE, BLUE)
    assert res.accuracy == pytest.approx(100 - math.sqrt(97283) / math.sqrt(195075) * 100)
    assert res.steps[0].description == "Add #ff0000 to slot 1 (best attempt)"
    assert res.explanation.endswith("This is the closest possible match with available colors.")


def test_best_attempt_never_succeeds_even_on_exact_match():
    res = solve_best_attempt(_rgb(RED), _opts([RED]))
    assert res.success is False
    assert res.accuracy == 100.0
    assert res.colors == (RED,)


@pytest.mark.parametrize("palette,max_slots", [([], 6), ([RED, YELLOW], 0)])
def test_best_attempt_degenerate_inputs(palette, max_slots):
    res = solve_best_attempt(_rgb(WHITE), _opts(palette, max_slots=max_slots))
    assert res.success is False
    assert res.steps == ()
    assert res.final_color == "#000000"
    assert res.accuracy == pytest.approx(0.0, abs=1e-9)
