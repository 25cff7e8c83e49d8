"""JSONL journal of solver runs.

Each run becomes one :class:`SolveEvent` line in
``<base_dir>/<YYYYMMDD>/solve_NN.jsonl``; a new ``NN`` is started once the
current file reaches ``max_bytes``.
"""

from __future__ import annotations

import json
import threading
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

__all__ = ["DEFAULT_MAX_BYTES", "EventLog", "SolveEvent"]

DEFAULT_MAX_BYTES = 100 * 1024 * 1024


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class SolveEvent:
    """What one run produced, keyed by the result artifact id."""

    event: str
    artifact_id: str
    puzzle: str
    solved: bool
    elapsed_ms: int
    strategy: str
    source: Optional[str] = None
    ts: str = field(default_factory=lambda: _utc_now().isoformat(timespec="milliseconds"))

    @classmethod
    def from_artifact(
        cls, artifact: Dict[str, Any], *, strategy: str, source: Optional[str] = None
    ) -> "SolveEvent":
        solved = bool(artifact["solved"])
        return cls(
            event="solve.completed" if solved else "solve.unsolvable",
            artifact_id=artifact["artifact_id"],
            puzzle=artifact["puzzle"],
            solved=solved,
            elapsed_ms=int(artifact["elapsed_ms"]),
            strategy=strategy,
            source=source,
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), sort_keys=True, ensure_ascii=False)


class EventLog:
    """Append-only, size-rotated writer for :class:`SolveEvent` records."""

    def __init__(self, base_dir: str | Path, *, max_bytes: Optional[int] = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or DEFAULT_MAX_BYTES
        self.current_path: Optional[Path] = None
        self._lock = threading.Lock()

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self) -> Path:
        day_dir = self.base_dir / _utc_now().strftime("%Y%m%d")
        if self.current_path is not None and self.current_path.parent == day_dir:
            if self._has_room(self.current_path):
                return self.current_path
        day_dir.mkdir(parents=True, exist_ok=True)
        index = 0
        while not self._has_room(day_dir / f"solve_{index:02d}.jsonl"):
            index += 1
        self.current_path = day_dir / f"solve_{index:02d}.jsonl"
        return self.current_path

    def write(self, event: SolveEvent) -> Path:
        with self._lock:
            path = self._target()
            with path.open("a", encoding="utf-8") as handle:
                handle.write(event.to_json() + "\n")
        return path

    def record(
        self, artifact: Dict[str, Any], *, strategy: str, source: Optional[str] = None
    ) -> Path:
        """Log the run described by a ``SolveResult`` artifact."""

        return self.write(SolveEvent.from_artifact(artifact, strategy=strategy, source=source))
