# src/textshape/utils/load_config.py

"""Load input collections from JSON files in a <data/> directory, with caching.

Modes:
- "raw"   -> parsed JSON as-is
- "list"  -> tuple of the items of a JSON array (order kept)

Used by the CLI (--from-config / --inputs-config / --candidates-config) and tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from types import TracebackType
from typing import Any, Literal, overload

import json5

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "list"]
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

ENV_DATA_DIR = "TEXTSHAPE_DATA_DIR"
_ENV_FALLBACKS = (ENV_DATA_DIR, "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no data directory is configured or found walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when a config file is missing, unreadable, or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON (or JSON5)."""


class ConfigTypeError(TypeError):
    """Raise when the parsed document has the wrong shape for the mode."""


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# (path, mtime, mode, encoding, allow_comments) -> coerced result
_CONFIG_CACHE: dict[tuple[Path, float, str, str, bool], Any] = {}


def clear_config_cache() -> None:
    """Drop every cached document."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
    log.debug("Config cache cleared.")


# ─────────────────────────────────────────────────────────────────────────────
# Data directory resolution
# ─────────────────────────────────────────────────────────────────────────────

def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    origin = (start or Path(__file__)).resolve()
    return [(p / name).resolve() for p in (origin, *origin.parents) for name in ("data", "Data")]


def _default_data_dir(start: Path | None = None) -> Path:
    """First existing data/ (or Data/) directory from `start` upwards."""
    tried = _candidate_data_dirs(start)
    for cand in tried:
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\nTried:\n  " + "\n  ".join(map(str, tried))
    )


def _env_data_dir() -> Path | None:
    for var in _ENV_FALLBACKS:
        value = os.environ.get(var)
        if value:
            return Path(value).expanduser().resolve()
    return None


def _resolve_file(file: str | os.PathLike[str], base_dir: Path | None) -> Path:
    """Map a config name onto an existing .json file inside the data dir."""
    data_dir = Path(base_dir or _env_data_dir() or _default_data_dir()).resolve()
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"

    path = (data_dir / name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        )
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")
    return path


# ─────────────────────────────────────────────────────────────────────────────
# Parsing & coercion
# ─────────────────────────────────────────────────────────────────────────────

def _parse(path: Path, encoding: str, allow_comments: bool) -> Any:
    try:
        text = path.read_text(encoding=encoding)
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    try:
        # json5 accepts comments and trailing commas
        return json5.loads(text) if allow_comments else json.loads(text)
    except ValueError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e


def _coerce(data: Any, mode: Mode, path: Path) -> Any:
    if mode == "raw":
        return data
    if mode == "list":
        if not isinstance(data, list):
            raise ConfigTypeError(
                f"{path.name}: expected list for mode 'list', got {type(data).__name__}"
            )
        return tuple(data)
    raise ValueError(f"Unknown mode '{mode}'")


@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["raw"] = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    allow_comments: bool = False,
) -> Any: ...
@overload
def load_config(
    file: str | os.PathLike[str],
    mode: Literal["list"],
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    allow_comments: bool = False,
) -> tuple[Any, ...]: ...


def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: Path | None = None,
    encoding: str = "utf-8",
    allow_comments: bool = False,
) -> Any:
    """Load <data>/<file>.json, coerce it for `mode`, and cache the result.

    The data dir is `base_dir`, else $TEXTSHAPE_DATA_DIR / $DATA_DIR, else the
    nearest data/ directory above this package. Editing a file invalidates its
    cache entry through its mtime.
    """
    path = _resolve_file(file, base_dir)
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime, mode, encoding, allow_comments)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s (mode=%s)", path.name, mode)
            return _CONFIG_CACHE[cache_key]

    result = _coerce(_parse(path, encoding, allow_comments), mode, path)

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = result
    log.debug("Config cache MISS → STORED: %s (mode=%s)", path.name, mode)
    return result


# ── Context manager to temporarily override the data directory ───────────────
class temp_data_dir:
    """Point $TEXTSHAPE_DATA_DIR at `path` for the duration of the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = os.fspath(path)
        self._old: str | None = None

    def __enter__(self) -> temp_data_dir:
        self._old = os.environ.get(ENV_DATA_DIR)
        os.environ[ENV_DATA_DIR] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(ENV_DATA_DIR, None)
        else:
            os.environ[ENV_DATA_DIR] = self._old
        clear_config_cache()
