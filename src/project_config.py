"""Locate and read ``config.toml`` for the solver and its CLI.

The file is looked up in this order: the path named by ``SUDOKU_CONFIG``,
``config.toml`` in the working directory, then the one at the top of a source
checkout.  When none exists the solver runs on built-in defaults, so an
installed ``sudoku-solve`` works from any directory.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older Python
    import tomli as tomllib  # type: ignore[import-untyped]

_LOGGER = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SUDOKU_CONFIG"
_CONFIG_FILENAME = "config.toml"
_CHECKOUT_ROOT = Path(__file__).resolve().parents[1]
_MISSING = object()


def _config_path() -> Optional[Path]:
    explicit = os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit)
        if not path.is_file():
            raise RuntimeError(f"{CONFIG_ENV_VAR} points at '{path}', which is not a file")
        return path
    for candidate in (Path.cwd() / _CONFIG_FILENAME, _CHECKOUT_ROOT / _CONFIG_FILENAME):
        if candidate.is_file():
            return candidate
    return None


def config_dir() -> Path:
    """Directory that relative paths in the config (input, event log) resolve against."""

    path = _config_path()
    return path.parent if path is not None else Path.cwd()


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """Parsed solver configuration; empty when no ``config.toml`` is found."""
    path = _config_path()
    if path is None or not path.is_file():
        _LOGGER.debug("no %s found, using built-in defaults", _CONFIG_FILENAME)
        return {}
    with path.open("rb") as fh:
        return tomllib.load(fh)


def reload() -> None:
    get_config.cache_clear()


def get_section(path: str, default: Any = _MISSING) -> Any:
    """Look up ``solver.strategy``-style dotted keys, e.g. ``get_section("log.level")``."""

    data: Any = get_config()
    for part in path.split("."):
        if isinstance(data, dict) and part in data:
            data = data[part]
        elif default is not _MISSING:
            return default
        else:
            raise KeyError(f"Configuration path '{path}' not found")
    return data


def coerce_bool(value: Any) -> bool | None:
    """Read ``1/true/yes/on`` and ``0/false/no/off`` switches from env values."""

    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


__all__ = ["CONFIG_ENV_VAR", "coerce_bool", "config_dir", "get_config", "get_section", "reload"]
