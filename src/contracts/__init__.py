"""JSON Schema contracts for newdoku run-log events."""

from __future__ import annotations

from .errors import ContractError, ValidationIssue
from .validator import assert_valid, validate

__all__ = [
    "ContractError",
    "ValidationIssue",
    "assert_valid",
    "validate",
]
