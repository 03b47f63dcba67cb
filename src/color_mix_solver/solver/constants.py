# constants.py
# ============

"""
constants.
=========

Does: Define the solver's immutable defaults and tunables (default palette,
      hue anchors, lightness thresholds, evolutionary parameters).
Used By: Option normalization and every strategy.
Returns: Pure data only (no side effects).
"""

from typing import Tuple

# ── 1) Palette ───────────────────────────────────────────────────────────────
RED = "#ff0000"
GREEN = "#00ff00"
BLUE = "#0000ff"
WHITE = "#ffffff"
BLACK = "#000000"
YELLOW = "#ffff00"
MAGENTA = "#ff00ff"
CYAN = "#00ffff"

DEFAULT_PALETTE: Tuple[str, ...] = (RED, GREEN, BLUE, WHITE, BLACK, YELLOW, MAGENTA, CYAN)
PRIMARIES: Tuple[str, str, str] = (RED, GREEN, BLUE)

# ── 2) Option defaults ───────────────────────────────────────────────────────
DEFAULT_TOLERANCE = 25
DEFAULT_MAX_SLOTS = 6
DEFAULT_MAX_ITERATIONS = 1000
DEFAULT_MAX_STEPS = 10  # advisory

# ── 3) Lightness correction ──────────────────────────────────────────────────
# Order matters: on equal hue distance the earlier anchor wins.
HUE_ANCHORS: Tuple[Tuple[str, float], ...] = (
    (RED, 0.0),
    (YELLOW, 60.0),
    (GREEN, 120.0),
    (CYAN, 180.0),
    (BLUE, 240.0),
    (MAGENTA, 300.0),
)
BASE_LIGHTNESS = 50.0  # assumed lightness of every anchor
LIGHTNESS_MARGIN = 15.0  # lighten above 65, darken below 35
MAX_LIGHTNESS_UNITS = 3

# ── 4) Evolutionary search ───────────────────────────────────────────────────
POPULATION_SIZE = 50
ELITE_SIZE = 10
TOURNAMENT_SIZE = 3
MUTATION_RATE = 0.1
MAX_INDIVIDUAL_LENGTH = 6  # growth cap for structural mutation
ITERATIONS_PER_GENERATION = 10

# ── 5) Proportional heuristic ────────────────────────────────────────────────
PROPORTIONAL_UNITS = 3

# ── 6) Strategy names ────────────────────────────────────────────────────────
EXHAUSTIVE = "exhaustive"
LIGHTNESS = "lightness"
EVOLUTIONARY = "evolutionary"
PROPORTIONAL = "proportional"
BEST_ATTEMPT = "best_attempt"
