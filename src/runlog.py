"""JSONL record of solve runs.

Records land in ``<base_dir>/<YYYYMMDD>/solve_NN.jsonl``. A file is reused
until it reaches ``max_bytes``, then the next free number is taken. The
module-level helpers share one :class:`RunLog` that the CLI points at the
configured directory.
"""

from __future__ import annotations

import json
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from contracts import validator

__all__ = [
    "EVENT_TYPE",
    "RunLog",
    "append_event",
    "configure",
    "current_log_path",
    "make_solve_event",
    "record",
]

EVENT_TYPE = "newdoku.solve_run.v1"

_DEFAULT_MAX_BYTES = 10 * 1024 * 1024


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class RunLog:
    """Append-only JSONL sink with daily directories and size rotation."""

    def __init__(self, base_dir: str | Path = "logs/solve", max_bytes: int | None = None) -> None:
        self.base_dir = Path(base_dir)
        self.max_bytes = max_bytes or _DEFAULT_MAX_BYTES
        self.current: Path | None = None
        self._lock = threading.Lock()

    def _has_room(self, path: Path) -> bool:
        return not path.exists() or path.stat().st_size < self.max_bytes

    def _target(self, day_dir: Path) -> Path:
        if self.current is not None and self.current.parent == day_dir and self.current.exists():
            if self._has_room(self.current):
                return self.current

        number = 0
        while not self._has_room(day_dir / f"solve_{number:02d}.jsonl"):
            number += 1
        self.current = day_dir / f"solve_{number:02d}.jsonl"
        return self.current

    def append(self, event: Mapping[str, Any]) -> Path:
        """Write ``event`` as one line, stamping ``ts`` when it is missing."""

        now = _utc_now()
        payload = dict(event)
        payload.setdefault("ts", now.isoformat(timespec="milliseconds"))
        line = json.dumps(payload, sort_keys=True, ensure_ascii=False)

        with self._lock:
            day_dir = self.base_dir / now.strftime("%Y%m%d")
            day_dir.mkdir(parents=True, exist_ok=True)
            path = self._target(day_dir)
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path


_ACTIVE = RunLog()


def configure(base_dir: str | Path, *, max_bytes: int | None = None) -> None:
    """Send subsequent records to ``base_dir``."""

    global _ACTIVE
    _ACTIVE = RunLog(base_dir, max_bytes)


def append_event(event: Mapping[str, Any]) -> Path:
    return _ACTIVE.append(event)


def current_log_path() -> Path | None:
    return _ACTIVE.current


def make_solve_event(
    *,
    puzzle: str,
    status: str,
    solution: Optional[str],
    givens: int,
    stats: Mapping[str, int],
    elapsed_ms: int,
    solver: str,
    conflicts: int | None = None,
) -> Dict[str, Any]:
    """Build a ``newdoku.solve_run.v1`` payload."""

    event: Dict[str, Any] = {
        "type": EVENT_TYPE,
        "ts": _utc_now().isoformat(timespec="milliseconds"),
        "puzzle": puzzle,
        "status": status,
        "solution": solution,
        "givens": int(givens),
        "insertions": int(stats.get("insertions", 0)),
        "backtracks": int(stats.get("backtracks", 0)),
        "max_depth": int(stats.get("max_depth", 0)),
        "elapsed_ms": max(0, int(elapsed_ms)),
        "solver": solver,
    }
    if conflicts is not None:
        event["conflicts"] = int(conflicts)
    return event


def record(event: Dict[str, Any]) -> Path:
    """Validate ``event`` against its contract and append it."""

    validator.assert_valid(event)
    return append_event(event)
