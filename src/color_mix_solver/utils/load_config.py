# src/color_mix_solver/utils/load_config.py

"""Load JSON data files (levels, demo targets) from a <data/> directory with caching.

Modes:
- "raw"             -> return parsed JSON as-is
- "validated_dict"  -> return dict[str, Any] after an optional validator

The package ships its own `color_mix_solver/data/` directory, found by walking
up from this module. COLOR_MIX_DATA_DIR (or DATA_DIR) overrides discovery.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "validated_dict"]
__all__ = [
    "Mode",
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

DATA_DIR_ENV_VARS = ("COLOR_MIX_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing/validation fails for a data file."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# key: path, mtime, mode, encoding, allow_comments, validator
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool, Any], Any] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    """Compute candidate 'data' directories walking up from start."""
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    """Return the first existing candidate directory or raise."""
    candidates = _candidate_data_dirs(start)
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(str(p) for p in candidates)
    )


def _env_data_dir() -> Path | None:
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return None


def _resolve_path(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map `file` to <data_dir>/<file>.json and refuse anything outside data_dir."""
    if base_dir is None:
        base_dir = _env_data_dir() or _default_data_dir()
    data_dir = base_dir.resolve()

    name = os.fspath(file)
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = (data_dir / name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


def _read(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            if allow_comments:
                # comments and trailing commas
                return json5.load(f)
            return json.load(f)
    except ValueError as e:
        # json.JSONDecodeError and json5's ValueError both land here
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e


def _coerce(
    data: Any,
    mode: Mode,
    path: Path,
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None,
) -> Any:
    if mode == "raw":
        return data

    if mode == "validated_dict":
        if not isinstance(data, dict):
            raise ConfigTypeError(
                f"{path.name}: expected dict for mode 'validated_dict', got {type(data).__name__}"
            )
        if validator is None:
            return data
        try:
            return validator(data)
        except Exception as e:
            raise ConfigParseError(f"{path.name}: validator failed: {e}") from e

    raise ValueError(f"Unknown mode '{mode}'")


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: None = ...,
    allow_comments: bool = False,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["validated_dict"] = "validated_dict",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = ...,
    allow_comments: bool = False,
) -> dict[str, Any]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    validator: Callable[[dict[str, Any]], dict[str, Any]] | None = None,
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, parse, coerce by mode, and cache results.

    Validators must be pure: their output is cached per validator, and
    cached values are shared between callers, who must not mutate them.
    """
    path = _resolve_path(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments, validator)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    result = _coerce(_read(path, encoding, allow_comments), mode, path, validator)

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Temporarily set the data directory via env for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get("COLOR_MIX_DATA_DIR")
        os.environ["COLOR_MIX_DATA_DIR"] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop("COLOR_MIX_DATA_DIR", None)
        else:
            os.environ["COLOR_MIX_DATA_DIR"] = self._old
        clear_config_cache()
