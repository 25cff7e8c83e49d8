"""Construction of the ``SolveResult`` artifact."""

from __future__ import annotations

import hashlib
import json
from typing import Any, Dict, Optional

from grid.model import Grid

RESULT_TYPE = "SolveResult"
SCHEMA_VERSION = "1.0"
_HASHED_FIELDS = ("puzzle", "solution", "solved")


def canonicalize(obj: Dict[str, Any]) -> bytes:
    """Serialise *obj* into canonical JSON bytes (sorted keys, no whitespace)."""

    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def compute_artifact_id(obj: Dict[str, Any]) -> str:
    """Hash the fields that identify a solve, ignoring timing."""

    base = {key: obj.get(key) for key in _HASHED_FIELDS}
    digest = hashlib.sha256(canonicalize(base)).hexdigest()
    return f"sha256-{digest}"


def make_result(puzzle: Grid, solution: Optional[Grid], *, elapsed_ms: int) -> Dict[str, Any]:
    artifact: Dict[str, Any] = {
        "type": RESULT_TYPE,
        "schema_version": SCHEMA_VERSION,
        "puzzle": puzzle.to_string(),
        "solution": solution.to_string() if solution is not None else None,
        "solved": solution is not None,
        "elapsed_ms": int(elapsed_ms),
    }
    artifact["artifact_id"] = compute_artifact_id(artifact)
    return artifact


__all__ = ["RESULT_TYPE", "SCHEMA_VERSION", "canonicalize", "compute_artifact_id", "make_result"]
