"""Result artifacts and validation types for the solver."""

from __future__ import annotations

from .errors import SchemaValidationError, ValidationIssue, ValidationReport
from .result import make_result
from .schema_validator import validate_result

__all__ = [
    "SchemaValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_result",
    "validate_result",
]
