"""Public facade for run-log contract validation."""

from __future__ import annotations

from typing import Any, Dict, List

from . import loader
from .errors import ContractError, ValidationIssue, make_error


def _jsonschema_path(exc: Any) -> str:
    path = getattr(exc, "absolute_path", [])
    if not path:
        return "$"
    components: List[str] = ["$"]
    for part in path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def _schema_issues(event: Dict[str, Any], event_type: str) -> List[ValidationIssue]:
    validator = loader.compile_schema(event_type)
    errors = sorted(validator.iter_errors(event), key=lambda err: list(err.absolute_path))
    return [make_error("schema.violation", err.message, _jsonschema_path(err)) for err in errors]


def _invariant_issues(event: Dict[str, Any]) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    puzzle = event.get("puzzle")
    solution = event.get("solution")
    status = event.get("status")

    if status == "solved" and solution is None:
        issues.append(make_error("invariant.missing_solution", "solved runs must carry a solution", "$.solution"))
    if status != "solved" and solution is not None:
        issues.append(make_error("invariant.unexpected_solution", "only solved runs carry a solution", "$.solution"))

    if isinstance(puzzle, str):
        givens = sum(1 for ch in puzzle if ch != ".")
        if event.get("givens") != givens:
            issues.append(make_error("invariant.givens", "givens does not match the puzzle", "$.givens"))
        if isinstance(solution, str) and len(solution) == len(puzzle):
            for index, (given, placed) in enumerate(zip(puzzle, solution)):
                if given != "." and given != placed:
                    issues.append(
                        make_error("invariant.given_changed", "solution overwrites a given digit", f"$.solution[{index}]")
                    )
                    break
    return issues


def validate(event: Dict[str, Any]) -> List[ValidationIssue]:
    """Return all issues found in *event*; an empty list means valid."""

    event_type = event.get("type")
    if not isinstance(event_type, str):
        return [make_error("type.missing", "event must declare a type", "$.type")]
    try:
        loader.get_descriptor(event_type)
    except KeyError:
        return [make_error("type.unknown", f"Unknown event type {event_type!r}", "$.type")]

    issues = _schema_issues(event, event_type)
    if not issues:
        issues.extend(_invariant_issues(event))
    return issues


def assert_valid(event: Dict[str, Any]) -> None:
    """Raise :class:`ContractError` when *event* violates its contract."""

    issues = validate(event)
    if issues:
        raise ContractError(str(event.get("type")), issues)


__all__ = ["assert_valid", "validate"]
