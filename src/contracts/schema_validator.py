"""JSON Schema validation for solve result artifacts."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema.exceptions import best_match

from .errors import SchemaValidationError
from .result import RESULT_TYPE, compute_artifact_id

_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
_SCHEMAS = {RESULT_TYPE: "solve_result.schema.json"}


@lru_cache(maxsize=None)
def load_schema(artifact_type: str) -> Dict[str, Any]:
    """Load the schema bound to ``artifact_type``."""

    if artifact_type not in _SCHEMAS:
        raise SchemaValidationError("schema-not-found", artifact_type)
    path = _SCHEMA_ROOT / _SCHEMAS[artifact_type]
    return json.loads(path.read_text("utf-8"))


def validate_result(obj: Dict[str, Any]) -> None:
    """Raise :class:`SchemaValidationError` unless ``obj`` is a valid result."""

    if not isinstance(obj, dict):
        raise SchemaValidationError("invalid-artifact", "artifact must be an object")

    schema = load_schema(RESULT_TYPE)
    validator = jsonschema.Draft202012Validator(schema)
    error = best_match(validator.iter_errors(obj))
    if error is not None:
        location = "/".join(str(part) for part in error.absolute_path) or "<root>"
        raise SchemaValidationError("schema-mismatch", f"{location}: {error.message}")

    if obj["artifact_id"] != compute_artifact_id(obj):
        raise SchemaValidationError("artifact-id-mismatch", obj["artifact_id"])


__all__ = ["load_schema", "validate_result"]
