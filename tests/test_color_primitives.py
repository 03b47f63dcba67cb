# tests/test_color_primitives.py
"""
color primitives tests
======================

Does: Validate hex parsing/formatting, Euclidean distance, accuracy, half-up
      blending, HSL conversion, and the color naming helpers.
"""

from __future__ import annotations

import importlib

import pytest

cp = importlib.import_module("color_mix_solver.color.primitives")
vocab = importlib.import_module("color_mix_solver.color.vocab")

RED = (255, 0, 0)
BLUE = (0, 0, 255)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)


# ──────────────────────────────────────────────────────────────────────────────
# Hex <-> RGB
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "text,expect",
    [
        ("#ff8000", (255, 128, 0)),
        ("#FF8000", (255, 128, 0)),
        ("ff8000", (255, 128, 0)),
        ("#000000", (0, 0, 0)),
        ("#AbCdEf", (171, 205, 239)),
    ],
)
def test_hex_to_rgb_ok(text, expect):
    assert cp.hex_to_rgb(text) == expect


@pytest.mark.parametrize(
    "text",
    ["#fff", "red", "#ff80001", "", "#gg0000", "##ff0000", " #ff0000", "#ff0000 ", "#ff0000\n", "\tff0000", 123, None],
)
def test_hex_to_rgb_invalid_returns_none(text):
    assert cp.hex_to_rgb(text) is None


def test_rgb_to_hex_pads_and_lowercases():
    assert cp.rgb_to_hex((255, 128, 0)) == "#ff8000"
    assert cp.rgb_to_hex((1, 2, 3)) == "#010203"
    assert cp.rgb_to_hex(BLACK) == "#000000"


def test_rgb_to_hex_does_not_clamp():
    assert cp.rgb_to_hex((256, 0, 0)) == "#1000000"


def test_normalize_hex():
    assert cp.normalize_hex("FF00FF") == "#ff00ff"
    assert cp.normalize_hex("#f0f") is None


# ──────────────────────────────────────────────────────────────────────────────
# Distance & accuracy
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("c", [RED, BLUE, WHITE, BLACK, (12, 200, 99)])
def test_distance_identity(c):
    assert cp.rgb_distance(c, c) == 0.0


def test_distance_symmetry_and_max():
    a, b = (10, 20, 30), (200, 100, 0)
    assert cp.rgb_distance(a, b) == cp.rgb_distance(b, a)
    assert cp.rgb_distance(BLACK, WHITE) == pytest.approx(cp.MAX_DISTANCE)
    assert cp.MAX_DISTANCE == pytest.approx(441.67, abs=0.01)


def test_accuracy_bounds_and_monotonic():
    assert cp.accuracy(RED, RED) == 100.0
    assert cp.accuracy(BLACK, WHITE) == pytest.approx(0.0, abs=1e-9)
    near = cp.accuracy(RED, (250, 0, 0))
    far = cp.accuracy(RED, (200, 0, 0))
    assert 100.0 > near > far > 0.0


# ──────────────────────────────────────────────────────────────────────────────
# Blend
# ──────────────────────────────────────────────────────────────────────────────
def test_blend_empty_is_black_and_single_is_identity():
    assert cp.blend([]) == BLACK
    assert cp.blend([(12, 34, 56)]) == (12, 34, 56)


def test_blend_rounds_half_up():
    # 127.5 -> 128 on every channel
    assert cp.blend([WHITE, BLACK]) == (128, 128, 128)
    assert cp.blend([RED, BLUE]) == (128, 0, 128)


def test_blend_three_colors():
    assert cp.blend([RED, RED, BLUE]) == (170, 0, 85)


@pytest.mark.parametrize("value,expect", [(0.5, 1), (2.5, 3), (2.4, 2), (127.5, 128), (0.0, 0)])
def test_round_half_up(value, expect):
    assert cp.round_half_up(value) == expect


# ──────────────────────────────────────────────────────────────────────────────
# HSL
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "rgb,hue",
    [(RED, 0.0), ((255, 255, 0), 60.0), ((0, 255, 0), 120.0), ((0, 255, 255), 180.0), (BLUE, 240.0), ((255, 0, 255), 300.0)],
)
def test_rgb_to_hsl_hues(rgb, hue):
    h, s, l = cp.rgb_to_hsl(rgb)
    assert h == pytest.approx(hue)
    assert s == pytest.approx(100.0)
    assert l == pytest.approx(50.0)


def test_rgb_to_hsl_achromatic():
    assert cp.rgb_to_hsl(WHITE) == (0.0, 0.0, 100.0)
    h, s, l = cp.rgb_to_hsl((128, 128, 128))
    assert (h, s) == (0.0, 0.0)
    assert l == pytest.approx(128 / 255 * 100)


# ──────────────────────────────────────────────────────────────────────────────
# Naming
# ──────────────────────────────────────────────────────────────────────────────
def test_color_name_palette_css_and_fallback():
    assert vocab.color_name("#FF0000") == "red"
    assert vocab.color_name("#00ffff") == "cyan"
    assert vocab.color_name("#808080") in {"gray", "grey"}
    assert vocab.color_name("#123457") == "#123457"
    assert vocab.color_name("nothex") == "nothex"


def test_nearest_color_name_custom_map():
    known = {"navy": (0, 0, 128), "red": (255, 0, 0)}
    assert vocab.nearest_color_name((0, 10, 200), known_rgb_map=known) == "navy"
    assert vocab.nearest_color_name((0, 10, 200), known_rgb_map={}) is None


def test_nearest_color_name_css4_and_cache_identity():
    pytest.importorskip("matplotlib")
    assert vocab.nearest_color_name(RED) == "red"
    m1 = vocab._get_css4_color_map()
    m2 = vocab._get_css4_color_map()
    assert m1 is m2
    assert m1["red"] == (255, 0, 0)
