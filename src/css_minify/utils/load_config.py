# src/css_minify/utils/load_config.py

"""Load minifier settings from a JSON file with discovery, caching and typed errors.

Lookup order when no explicit path is given:
- $CSS_MINIFY_CONFIG
- the first ".css-minify.json" found walking up from the current directory
- built-in defaults

Used by the invocation adapter and the CLI.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from types import TracebackType
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "CONFIG_FILENAME",
    "Settings",
    "load_config",
    "clear_config_cache",
    "temp_config",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

CONFIG_FILENAME = ".css-minify.json"
CONFIG_ENV = "CSS_MINIFY_CONFIG"
BASE_DIR_ENV = "CSS_MINIFY_BASE_DIR"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when an explicitly requested config file cannot be read."""


class ConfigParseError(ValueError):
    """Raise when a config file is not valid JSON."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


@dataclass(frozen=True)
class Settings:
    """Options for the invocation adapter; the core itself has none."""

    base_dir: Path | None = None
    strict: bool = False
    encoding: str = "utf-8"


_FIELD_TYPES: dict[str, tuple[type, ...]] = {
    "base_dir": (str,),
    "strict": (bool,),
    "encoding": (str,),
}

# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], Settings] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def _discover(start: Path | None = None) -> Path | None:
    """Return the nearest config file walking up from start, if any."""
    start = (start or Path.cwd()).resolve()
    for p in [start, *start.parents]:
        cand = p / CONFIG_FILENAME
        if cand.is_file():
            return cand
    return None


def _coerce(data: Any, path: Path) -> Settings:
    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}"
        )
    unknown = sorted(set(data) - set(_FIELD_TYPES))
    if unknown:
        raise ConfigTypeError(f"{path.name}: unknown key(s): {', '.join(unknown)}")
    for key, value in data.items():
        if not isinstance(value, _FIELD_TYPES[key]):
            raise ConfigTypeError(
                f"{path.name}: '{key}' must be {_FIELD_TYPES[key][0].__name__}, "
                f"got {type(value).__name__}"
            )

    base_dir = None
    if "base_dir" in data:
        base_dir = Path(os.path.expanduser(data["base_dir"]))
        if not base_dir.is_absolute():
            base_dir = path.parent / base_dir
        base_dir = base_dir.resolve()
    return Settings(
        base_dir=base_dir,
        strict=data.get("strict", False),
        encoding=data.get("encoding", "utf-8"),
    )


def _apply_env(settings: Settings) -> Settings:
    v = os.environ.get(BASE_DIR_ENV)
    if v:
        return replace(settings, base_dir=Path(os.path.expanduser(v)).resolve())
    return settings


def _read(path: Path) -> Settings:
    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    settings = _coerce(data, path)
    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = settings
        log.debug("Config cache MISS → STORED: %s", path)
    return settings


def load_config(path: str | os.PathLike[str] | None = None) -> Settings:
    """Load settings from path, $CSS_MINIFY_CONFIG or discovery; defaults otherwise."""
    if path is None:
        env = os.environ.get(CONFIG_ENV)
        if env:
            path = env

    if path is not None:
        resolved = Path(os.path.expanduser(os.fspath(path))).resolve()
        if not resolved.is_file():
            raise ConfigFileNotFound(f"Config file not found: {resolved}")
    else:
        resolved = _discover()
        if resolved is None:
            log.debug("No %s found; using defaults.", CONFIG_FILENAME)
            return _apply_env(Settings())

    return _apply_env(_read(resolved))


# ── Context manager to temporarily point at another config file ──────────────
class temp_config:
    """Temporarily set $CSS_MINIFY_CONFIG for the block."""

    def __init__(self, path: os.PathLike[str] | str):
        self._new = str(path)
        self._old: str | None = None

    def __enter__(self) -> temp_config:
        self._old = os.environ.get(CONFIG_ENV)
        os.environ[CONFIG_ENV] = self._new
        clear_config_cache()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._old is None:
            os.environ.pop(CONFIG_ENV, None)
        else:
            os.environ[CONFIG_ENV] = self._old
        clear_config_cache()
