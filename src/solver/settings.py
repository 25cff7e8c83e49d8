"""Resolve solver run settings from config, environment and CLI overrides."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping

from project_config import coerce_bool, config_dir, get_section

from .backtrack import STRATEGIES

_DEF_STRATEGY = "recursive"
_DEF_EVENTS_DIR = "logs/solve"


@dataclass(frozen=True)
class SolveSettings:
    """Finalised settings after precedence resolution."""

    strategy: str
    events_enabled: bool
    events_dir: Path
    max_bytes: int | None
    decision_source: str


def _normalise_env(env: Mapping[str, str]) -> Dict[str, str]:
    return {str(k).upper(): str(v) for k, v in env.items()}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def resolve_settings(env: Mapping[str, str] | None = None) -> SolveSettings:
    """Apply ``config.toml`` < ``SUDOKU_*`` < ``CLI_SUDOKU_*`` precedence."""

    env_map = _normalise_env(env or {})
    solver_cfg = _as_dict(get_section("solver", {}))
    log_cfg = _as_dict(get_section("log", {}))

    decision_source = "config"
    strategy = str(solver_cfg.get("strategy", _DEF_STRATEGY))
    events_enabled = bool(log_cfg.get("events_enabled", False))

    for key, source in (("SUDOKU_SOLVER_STRATEGY", "env"), ("CLI_SUDOKU_SOLVER_STRATEGY", "cli")):
        if env_map.get(key):
            strategy = env_map[key].strip().lower()
            decision_source = source

    for key in ("SUDOKU_LOG_EVENTS", "CLI_SUDOKU_LOG_EVENTS"):
        override = coerce_bool(env_map.get(key))
        if override is not None:
            events_enabled = override

    if strategy not in STRATEGIES:
        raise ValueError(
            f"Unknown solver strategy '{strategy}' from {decision_source}; "
            f"expected one of {sorted(STRATEGIES)}"
        )

    events_dir = Path(str(log_cfg.get("events_dir", _DEF_EVENTS_DIR)))
    if not events_dir.is_absolute():
        events_dir = config_dir() / events_dir
    max_bytes = log_cfg.get("max_bytes")

    return SolveSettings(
        strategy=strategy,
        events_enabled=events_enabled,
        events_dir=events_dir,
        max_bytes=int(max_bytes) if isinstance(max_bytes, int) else None,
        decision_source=decision_source,
    )


__all__ = ["SolveSettings", "resolve_settings"]
