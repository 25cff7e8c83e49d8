from __future__ import annotations

import pytest

from contracts import SchemaValidationError, make_result, validate_result
from grid import parse_grid
from solver import solved

CLASSIC = "53..7....\n6..195...\n.98....6.\n8...6...3\n4..8.3..1\n7...2...6\n.6....28.\n...419..5\n....8..79\n"


def _solved_artifact(elapsed_ms: int = 12) -> dict:
    puzzle = parse_grid(CLASSIC)
    return make_result(puzzle, solved(puzzle), elapsed_ms=elapsed_ms)


def test_solved_artifact_is_valid() -> None:
    artifact = _solved_artifact()
    validate_result(artifact)
    assert artifact["solved"] is True
    assert artifact["artifact_id"].startswith("sha256-")


def test_artifact_id_ignores_timing() -> None:
    assert _solved_artifact(1)["artifact_id"] == _solved_artifact(900)["artifact_id"]


def test_unsolved_artifact_is_valid() -> None:
    puzzle = parse_grid(CLASSIC)
    artifact = make_result(puzzle, None, elapsed_ms=0)
    validate_result(artifact)
    assert artifact["solution"] is None


def test_solution_must_be_complete() -> None:
    artifact = _solved_artifact()
    artifact["solution"] = "." + artifact["solution"][1:]
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_result(artifact)
    assert excinfo.value.code == "schema-mismatch"


def test_solved_flag_must_match_solution() -> None:
    artifact = _solved_artifact()
    artifact["solved"] = False
    with pytest.raises(SchemaValidationError):
        validate_result(artifact)


def test_tampered_artifact_id() -> None:
    artifact = _solved_artifact()
    artifact["puzzle"] = artifact["solution"]
    with pytest.raises(SchemaValidationError) as excinfo:
        validate_result(artifact)
    assert excinfo.value.code == "artifact-id-mismatch"


def test_rejects_non_object() -> None:
    with pytest.raises(SchemaValidationError):
        validate_result(["not", "a", "dict"])  # type: ignore[arg-type]
