from __future__ import annotations

import json

import pytest

from contracts import make_result
from grid import Grid, parse_grid
from solver import solved
from telemetry import EventLog, SolveEvent

CLASSIC = "53..7....\n6..195...\n.98....6.\n8...6...3\n4..8.3..1\n7...2...6\n.6....28.\n...419..5\n....8..79\n"


@pytest.fixture
def unsolvable_artifact() -> dict:
    puzzle = Grid()
    puzzle.set(0, 0, 5)
    puzzle.set(0, 1, 5)
    return make_result(puzzle, None, elapsed_ms=3)


def test_record_writes_one_jsonl_line(tmp_path) -> None:
    puzzle = parse_grid(CLASSIC)
    artifact = make_result(puzzle, solved(puzzle), elapsed_ms=7)
    log = EventLog(tmp_path)

    path = log.record(artifact, strategy="recursive", source="classic.txt")

    assert path.parent.parent == tmp_path
    assert path.name == "solve_00.jsonl"
    assert log.current_path == path
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["event"] == "solve.completed"
    assert payload["artifact_id"] == artifact["artifact_id"]
    assert payload["source"] == "classic.txt"
    assert "ts" in payload


def test_appends_to_current_file(tmp_path, unsolvable_artifact) -> None:
    log = EventLog(tmp_path)
    first = log.record(unsolvable_artifact, strategy="recursive")
    second = log.record(unsolvable_artifact, strategy="iterative")
    assert first == second
    assert len(first.read_text(encoding="utf-8").splitlines()) == 2


def test_rotation_on_size(tmp_path, unsolvable_artifact) -> None:
    log = EventLog(tmp_path, max_bytes=10)
    first = log.record(unsolvable_artifact, strategy="recursive")
    second = log.record(unsolvable_artifact, strategy="recursive")
    assert first.name == "solve_00.jsonl"
    assert second.name == "solve_01.jsonl"


def test_new_log_resumes_after_full_files(tmp_path, unsolvable_artifact) -> None:
    EventLog(tmp_path, max_bytes=10).record(unsolvable_artifact, strategy="recursive")
    path = EventLog(tmp_path, max_bytes=10).record(unsolvable_artifact, strategy="recursive")
    assert path.name == "solve_01.jsonl"


def test_event_from_unsolvable_artifact(unsolvable_artifact) -> None:
    event = SolveEvent.from_artifact(unsolvable_artifact, strategy="iterative", source="inline")

    assert event.event == "solve.unsolvable"
    assert event.solved is False
    assert event.artifact_id == unsolvable_artifact["artifact_id"]
    assert event.strategy == "iterative"
    assert event.elapsed_ms == 3
    assert json.loads(event.to_json())["puzzle"] == unsolvable_artifact["puzzle"]
