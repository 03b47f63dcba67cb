"""
options.py
==========

Does: Normalize caller-supplied solver options (None, SolverOptions, or a
      mapping with snake_case or camelCase keys) into a SolverOptions with
      every default filled and the palette canonicalized.
Used By: solve(), level checks, CLI.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import fields, replace
from typing import Any, Dict, List, Optional, Tuple, Union

from color_mix_solver.color.primitives import RGB, hex_to_rgb, normalize_hex
from color_mix_solver.solver.types import SolverOptions, SolverOptionsError

logger = logging.getLogger(__name__)

__all__ = ["OptionsLike", "normalize_options", "normalize_palette", "palette_rgbs"]

OptionsLike = Union[SolverOptions, Mapping[str, Any], None]

# camelCase keys used by the game's JS options record
_ALIASES: Dict[str, str] = {
    "availableColors": "available_colors",
    "maxSlots": "max_slots",
    "maxIterations": "max_iterations",
    "maxSteps": "max_steps",
}
_FIELDS = frozenset(f.name for f in fields(SolverOptions))
_INT_FIELDS = ("max_slots", "max_iterations", "max_steps")


def normalize_palette(colors: Iterable[str]) -> Tuple[str, ...]:
    """
    Canonicalize a palette: valid entries become lowercase '#rrggbb', duplicates
    are dropped (first occurrence wins), invalid entries are kept verbatim so the
    combinations using them fail instead of silently changing the palette.
    """
    if isinstance(colors, (str, bytes)) or not isinstance(colors, Iterable):
        raise SolverOptionsError(
            f"available_colors must be a sequence of hex strings, got {type(colors).__name__}"
        )
    seen: set[str] = set()
    out: List[str] = []
    for raw in colors:
        if not isinstance(raw, str):
            raise SolverOptionsError(f"palette entries must be strings, got {raw!r}")
        key = normalize_hex(raw)
        entry = key if key is not None else raw
        if key is None:
            logger.debug("Invalid palette entry kept as-is: %r", raw)
        if entry in seen:
            continue
        seen.add(entry)
        out.append(entry)
    return tuple(out)


def palette_rgbs(options: SolverOptions) -> List[Optional[RGB]]:
    """Parse each palette entry once; None marks an invalid entry."""
    return [hex_to_rgb(c) for c in options.available_colors]


def _from_mapping(raw: Mapping[str, Any]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        name = _ALIASES.get(key, key)
        if name not in _FIELDS:
            raise SolverOptionsError(f"Unknown solver option: {key!r}")
        if value is None:
            continue  # unset → default
        values[name] = value
    return values


def normalize_options(options: OptionsLike = None) -> SolverOptions:
    """Fill defaults for every unset field and validate types."""
    if options is None:
        values: Dict[str, Any] = {}
    elif isinstance(options, SolverOptions):
        values = {f: getattr(options, f) for f in _FIELDS}
    elif isinstance(options, Mapping):
        values = _from_mapping(options)
    else:
        raise SolverOptionsError(
            f"options must be a SolverOptions or a mapping, got {type(options).__name__}"
        )

    for name in _INT_FIELDS:
        if name in values and (isinstance(values[name], bool) or not isinstance(values[name], int)):
            raise SolverOptionsError(f"{name} must be an integer, got {values[name]!r}")
    if "tolerance" in values:
        tol = values["tolerance"]
        if isinstance(tol, bool) or not isinstance(tol, (int, float)):
            raise SolverOptionsError(f"tolerance must be a number, got {tol!r}")
    if "available_colors" in values:
        values["available_colors"] = normalize_palette(values["available_colors"])

    return replace(SolverOptions(), **values)
