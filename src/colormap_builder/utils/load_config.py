# src/colormap_builder/utils/load_config.py

"""Resolve run settings (input/output paths, malformed-number policy).

Sources, highest precedence first:
- explicit overrides (CLI arguments)
- environment: COLORMAP_INPUT / COLORMAP_OUTPUT / COLORMAP_ON_MALFORMED
- a JSON config file (argument or COLORMAP_CONFIG)
- built-in defaults ("rawColorFile.txt" -> "colormap.csv", abort on bad numbers)

Parsed config files are cached by path + mtime; tests call clear_config_cache().
"""

from __future__ import annotations

import json
import logging
import os
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

# ── Public surface ────────────────────────────────────────────────────────────
__all__ = [
    "MALFORMED_POLICIES",
    "Settings",
    "load_settings",
    "read_config_file",
    "clear_config_cache",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

MALFORMED_POLICIES = ("abort", "skip")

DEFAULT_INPUT = "rawColorFile.txt"
DEFAULT_OUTPUT = "colormap.csv"

_ENV_KEYS = {
    "input_path": "COLORMAP_INPUT",
    "output_path": "COLORMAP_OUTPUT",
    "on_malformed": "COLORMAP_ON_MALFORMED",
}
_CONFIG_ENV = "COLORMAP_CONFIG"


# ── Exceptions ───────────────────────────────────────────────────────────────
class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested config file cannot be read or resolved."""


class ConfigParseError(ValueError):
    """Raise when JSON parsing or a setting value is invalid."""


class ConfigTypeError(TypeError):
    """Raise when the parsed JSON doesn't match the expected structure."""


@dataclass(frozen=True)
class Settings:
    input_path: str = DEFAULT_INPUT
    output_path: str = DEFAULT_OUTPUT
    on_malformed: str = "abort"


# ── Logging & cache ──────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
_CONFIG_CACHE: dict[tuple[Path, float], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory config cache (useful for pytest/hot-reload)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


def read_config_file(file: str | os.PathLike[str], *, encoding: str = "utf-8") -> dict[str, Any]:
    """Parse a JSON settings object from `file`, with mtime-keyed caching."""
    path = Path(os.path.expanduser(os.fspath(file))).resolve()
    if not path.is_file():
        raise ConfigFileNotFound(f"Config file not found: {path}")

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot stat {path}: {e}") from e

    cache_key = (path, mtime)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return dict(_CONFIG_CACHE[cache_key])

    try:
        with path.open("r", encoding=encoding, errors="strict") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{path.name}: expected a JSON object, got {type(data).__name__}"
        )
    unknown = sorted(set(data) - set(_ENV_KEYS))
    if unknown:
        raise ConfigTypeError(f"{path.name}: unknown setting(s): {', '.join(unknown)}")
    bad = [k for k, v in data.items() if not isinstance(v, str)]
    if bad:
        raise ConfigTypeError(f"{path.name}: expected string values for: {', '.join(bad)}")

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
        log.debug("Config cache MISS → STORED: %s", path.name)
    return dict(data)


def _check_policy(value: str, source: str) -> str:
    policy = value.strip().lower()
    if policy not in MALFORMED_POLICIES:
        raise ConfigParseError(
            f"{source}: on_malformed must be one of {', '.join(MALFORMED_POLICIES)}, got {value!r}"
        )
    return policy


def load_settings(
    config_file: str | os.PathLike[str] | None = None,
    **overrides: str | None,
) -> Settings:
    """Merge defaults < config file < environment < overrides into Settings.

    Overrides set to None are ignored, so argparse namespaces can be passed through.
    """
    settings = Settings()

    if config_file is None:
        config_file = os.environ.get(_CONFIG_ENV) or None
    if config_file is not None:
        file_values = read_config_file(config_file)
        if "on_malformed" in file_values:
            file_values["on_malformed"] = _check_policy(
                file_values["on_malformed"], os.fspath(config_file)
            )
        settings = replace(settings, **file_values)

    env_values = {
        field: os.environ[var] for field, var in _ENV_KEYS.items() if os.environ.get(var)
    }
    if "on_malformed" in env_values:
        env_values["on_malformed"] = _check_policy(
            env_values["on_malformed"], _ENV_KEYS["on_malformed"]
        )
    settings = replace(settings, **env_values)

    unknown = sorted(set(overrides) - set(_ENV_KEYS))
    if unknown:
        raise ConfigTypeError(f"Unknown setting override(s): {', '.join(unknown)}")
    explicit = {k: v for k, v in overrides.items() if v is not None}
    if "on_malformed" in explicit:
        explicit["on_malformed"] = _check_policy(explicit["on_malformed"], "override")
    settings = replace(settings, **explicit)

    log.debug("Resolved settings: %s", settings)
    return settings
