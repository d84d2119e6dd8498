"""Shared error types for run-log contracts."""

from __future__ import annotations


from dataclasses import dataclass
from typing import List, Sequence

SEVERITY_ERROR = "ERROR"


@dataclass(frozen=True)
class ValidationIssue:
    """Single validation finding produced by a schema or invariant check."""

    code: str
    msg: str
    path: str
    severity: str


class ContractError(ValueError):
    """Raised when an event does not satisfy its schema."""

    def __init__(self, event_type: str, issues: Sequence[ValidationIssue]) -> None:
        summary = "; ".join(f"{issue.path}: {issue.msg}" for issue in issues)
        super().__init__(f"{event_type} failed validation: {summary}")
        self.event_type = event_type
        self.issues: List[ValidationIssue] = list(issues)


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


__all__ = [
    "SEVERITY_ERROR",
    "ContractError",
    "ValidationIssue",
    "make_error",
]
