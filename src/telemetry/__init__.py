"""Run-event logging for solver invocations."""

from __future__ import annotations

from .log import DEFAULT_MAX_BYTES, EventLog, SolveEvent

__all__ = ["DEFAULT_MAX_BYTES", "EventLog", "SolveEvent"]
