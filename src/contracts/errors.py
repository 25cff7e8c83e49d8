"""Shared error and report types for grid validation and result contracts."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import List, Optional

SEVERITY_ERROR = "ERROR"


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced while checking a grid."""

    code: str
    msg: str
    path: str
    severity: str = SEVERITY_ERROR


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating a grid."""

    ok: bool
    errors: List[ValidationIssue] = field(default_factory=list)

    @property
    def paths(self) -> List[str]:
        return [issue.path for issue in self.errors]


class SchemaValidationError(RuntimeError):
    """Exception raised when a result artifact fails validation."""

    def __init__(self, code: str, detail: Optional[str] = None) -> None:
        self.code = code
        self.detail = detail
        message = code if detail is None else f"{code}:{detail}"
        super().__init__(message)


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


__all__ = [
    "SEVERITY_ERROR",
    "SchemaValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
]
