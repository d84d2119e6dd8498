from __future__ import annotations

import json

import pytest

import runlog
from contracts import ContractError

PUZZLE = "." * 7 + "9" + "." * 73


@pytest.fixture(autouse=True)
def configure_log(tmp_path):
    runlog.configure(tmp_path)
    return tmp_path


def _event(**overrides):
    event = runlog.make_solve_event(
        puzzle=PUZZLE,
        status="no_solution",
        solution=None,
        givens=1,
        stats={},
        elapsed_ms=3,
        solver="iterative",
    )
    event.update(overrides)
    return event


def test_record_appends_json_line(tmp_path) -> None:
    path = runlog.record(_event())

    assert path.parent.parent == tmp_path
    assert path.name == "solve_00.jsonl"
    assert runlog.current_log_path() == path
    lines = path.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    payload = json.loads(lines[0])
    assert payload["type"] == runlog.EVENT_TYPE
    assert payload["insertions"] == 0
    assert payload["solver"] == "iterative"


def test_append_event_adds_timestamp(tmp_path) -> None:
    path = runlog.append_event({"type": "custom"})
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert "ts" in payload


def test_rotation_when_file_exceeds_limit(tmp_path) -> None:
    runlog.configure(tmp_path, max_bytes=64)

    first = runlog.record(_event())
    second = runlog.record(_event())

    assert first.name == "solve_00.jsonl"
    assert second.name == "solve_01.jsonl"


def test_invalid_event_is_not_written(tmp_path) -> None:
    with pytest.raises(ContractError):
        runlog.record(_event(status="solved"))
    assert not list(tmp_path.glob("**/*.jsonl"))


def test_conflicts_field_is_optional() -> None:
    event = _event(status="invalid")
    assert "conflicts" not in event
    with_conflicts = runlog.make_solve_event(
        puzzle=PUZZLE,
        status="invalid",
        solution=None,
        givens=1,
        stats={},
        elapsed_ms=0,
        solver="recursive",
        conflicts=2,
    )
    assert with_conflicts["conflicts"] == 2
    runlog.record(with_conflicts)


def test_run_logs_rotate_independently(tmp_path) -> None:
    small = runlog.RunLog(tmp_path / "small", max_bytes=64)
    roomy = runlog.RunLog(tmp_path / "roomy")

    first = small.append({"type": "custom", "note": "x" * 80})
    second = small.append({"type": "custom"})
    other = roomy.append({"type": "custom"})

    assert (first.name, second.name) == ("solve_00.jsonl", "solve_01.jsonl")
    assert other.name == "solve_00.jsonl"
    assert other.parent.parent == tmp_path / "roomy"
    assert small.current == second
