"""Progress observers notified by the backtracking solver.

Observers never influence the search: they receive snapshots after each
accepted placement and a notice whenever a branch is abandoned.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Protocol, Tuple

from .grid import Grid


class ProgressObserver(Protocol):
    def on_insert(self, grid: Grid, depth: int) -> None: ...

    def on_backtrack(self, grid: Grid, depth: int) -> None: ...


class NullObserver:
    def on_insert(self, grid: Grid, depth: int) -> None:
        return None

    def on_backtrack(self, grid: Grid, depth: int) -> None:
        return None


@dataclass
class SolveStats:
    """Counters accumulated over one search."""

    insertions: int = 0
    backtracks: int = 0
    max_depth: int = 0

    def on_insert(self, grid: Grid, depth: int) -> None:
        self.insertions += 1
        if depth > self.max_depth:
            self.max_depth = depth

    def on_backtrack(self, grid: Grid, depth: int) -> None:
        self.backtracks += 1

    def to_payload(self) -> dict:
        return {
            "insertions": int(self.insertions),
            "backtracks": int(self.backtracks),
            "max_depth": int(self.max_depth),
        }


@dataclass
class SinkObserver:
    """Forward every accepted snapshot to ``sink``."""

    sink: Callable[[Grid], None]

    def on_insert(self, grid: Grid, depth: int) -> None:
        self.sink(grid)

    def on_backtrack(self, grid: Grid, depth: int) -> None:
        return None


@dataclass
class CompositeObserver:
    observers: Tuple[ProgressObserver, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, observers: Iterable[ProgressObserver]) -> "CompositeObserver":
        return cls(tuple(observers))

    def on_insert(self, grid: Grid, depth: int) -> None:
        for observer in self.observers:
            observer.on_insert(grid, depth)

    def on_backtrack(self, grid: Grid, depth: int) -> None:
        for observer in self.observers:
            observer.on_backtrack(grid, depth)


@dataclass
class RecordingObserver:
    """Keep every accepted snapshot in memory."""

    snapshots: List[Grid] = field(default_factory=list)

    def on_insert(self, grid: Grid, depth: int) -> None:
        self.snapshots.append(grid)

    def on_backtrack(self, grid: Grid, depth: int) -> None:
        return None


__all__ = [
    "CompositeObserver",
    "NullObserver",
    "ProgressObserver",
    "RecordingObserver",
    "SinkObserver",
    "SolveStats",
]
