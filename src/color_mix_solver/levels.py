# src/color_mix_solver/levels.py
from __future__ import annotations

"""
levels.py
=========

Does: Load the game's level catalog and the demo showcase from the packaged
      data directory, look levels up by (fuzzy) name, and run the solver over
      levels to validate that each target is reachable with its tolerance.
Returns: Level / DemoTarget dicts, SolverResult per level, LevelSummary.
Used by: The CLI (--all-levels, --level, --demo) and level authoring checks.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, TypedDict

from rapidfuzz import fuzz

from color_mix_solver.color.primitives import normalize_hex
from color_mix_solver.solver.options import OptionsLike, normalize_options
from color_mix_solver.solver.orchestrator import solve
from color_mix_solver.solver.types import RandomSource, SolverResult
from color_mix_solver.utils.load_config import load_config

logger = logging.getLogger(__name__)

__all__ = [
    "Level",
    "DemoTarget",
    "LevelCheck",
    "LevelSummary",
    "load_levels",
    "load_demo_targets",
    "demo_tolerance",
    "find_level",
    "check_level",
    "summarize_levels",
]

LEVELS_FILE = "levels"
DEMO_FILE = "demo_targets"
FUZZY_CUTOFF = 80


class Level(TypedDict):
    name: str
    target_color: str
    tolerance: int


class DemoTarget(TypedDict):
    color: str
    name: str
    description: str


class LevelCheck(TypedDict):
    level: Level
    result: SolverResult


class LevelSummary(TypedDict):
    checks: List[LevelCheck]
    solved: int
    total: int
    success_rate: float


# =============================================================================
# Loading & validation
# =============================================================================


def _require_hex(value: Any, where: str) -> str:
    hx = normalize_hex(value) if isinstance(value, str) else None
    if hx is None:
        raise ValueError(f"{where}: invalid hex color {value!r}")
    return hx


def _validate_levels(data: Dict[str, Any]) -> Dict[str, Any]:
    raw = data.get("levels")
    if not isinstance(raw, list):
        raise ValueError("'levels' must be a list")
    levels: List[Level] = []
    for i, item in enumerate(raw):
        if not isinstance(item, dict):
            raise ValueError(f"levels[{i}] must be an object")
        name = item.get("name")
        tolerance = item.get("tolerance")
        if not isinstance(name, str) or not name.strip():
            raise ValueError(f"levels[{i}]: missing name")
        if isinstance(tolerance, bool) or not isinstance(tolerance, int) or not 0 <= tolerance <= 255:
            raise ValueError(f"levels[{i}]: tolerance must be an integer in [0, 255]")
        levels.append(
            Level(
                name=name.strip(),
                target_color=_require_hex(item.get("targetColor"), f"levels[{i}]"),
                tolerance=tolerance,
            )
        )
    return {"levels": levels}


def _validate_demo(data: Dict[str, Any]) -> Dict[str, Any]:
    raw = data.get("targets")
    if not isinstance(raw, list):
        raise ValueError("'targets' must be a list")
    tolerance = data.get("tolerance", 25)
    if isinstance(tolerance, bool) or not isinstance(tolerance, int):
        raise ValueError("'tolerance' must be an integer")
    targets = [
        DemoTarget(
            color=_require_hex(t.get("color"), f"targets[{i}]"),
            name=str(t.get("name", "")),
            description=str(t.get("description", "")),
        )
        for i, t in enumerate(raw)
    ]
    return {"tolerance": tolerance, "targets": targets}


def load_levels(**kwargs: Any) -> List[Level]:
    """Levels from <data>/levels.json (comments allowed). kwargs go to load_config."""
    data = load_config(
        LEVELS_FILE, mode="validated_dict", validator=_validate_levels, allow_comments=True, **kwargs
    )
    return data["levels"]


def load_demo_targets(**kwargs: Any) -> List[DemoTarget]:
    data = load_config(
        DEMO_FILE, mode="validated_dict", validator=_validate_demo, allow_comments=True, **kwargs
    )
    return data["targets"]


def demo_tolerance(**kwargs: Any) -> int:
    data = load_config(
        DEMO_FILE, mode="validated_dict", validator=_validate_demo, allow_comments=True, **kwargs
    )
    return data["tolerance"]


# =============================================================================
# Lookup
# =============================================================================


def find_level(
    name: str,
    levels: Optional[List[Level]] = None,
    cutoff: float = FUZZY_CUTOFF,
) -> Optional[Level]:
    """
    Case-insensitive exact name match first, then the best fuzzy match
    (max of ratio / partial_ratio) scoring at least `cutoff`. First level wins ties.
    """
    pool = levels if levels is not None else load_levels()
    query = " ".join(name.lower().split())
    if not query:
        return None

    for level in pool:
        if level["name"].lower() == query:
            return level

    best: Optional[Level] = None
    best_score = float(cutoff)
    for level in pool:
        candidate = level["name"].lower()
        score = max(fuzz.ratio(query, candidate), fuzz.partial_ratio(query, candidate))
        if score > best_score or (best is None and score >= best_score):
            best, best_score = level, score
    if best is not None:
        logger.debug("Fuzzy level match %r → %r (%.1f)", name, best["name"], best_score)
    return best


# =============================================================================
# Feasibility
# =============================================================================


def check_level(
    level: Level,
    options: OptionsLike = None,
    *,
    rng: Optional[RandomSource] = None,
) -> SolverResult:
    """Solve the level's target with the level's own tolerance."""
    opts = replace(normalize_options(options), tolerance=level["tolerance"])
    return solve(level["target_color"], opts, rng=rng)


def summarize_levels(
    levels: Optional[List[Level]] = None,
    options: OptionsLike = None,
    *,
    rng: Optional[RandomSource] = None,
) -> LevelSummary:
    pool = levels if levels is not None else load_levels()
    checks = [LevelCheck(level=lv, result=check_level(lv, options, rng=rng)) for lv in pool]
    solved = sum(1 for c in checks if c["result"].success)
    total = len(checks)
    return LevelSummary(
        checks=checks,
        solved=solved,
        total=total,
        success_rate=(solved / total * 100.0) if total else 0.0,
    )
