"""Depth-first backtracking search over immutable grids.

The search always branches on the first empty cell in row-major order and
tries digits in ascending order. It stops at the first complete grid; an
exhausted cell sends ``None`` back to the caller, which moves on to its own
next digit. Failed branches are simply dropped since grids are never mutated.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .errors import BlockDuplicate, ColDuplicate, RowDuplicate
from .grid import Grid
from .observers import NullObserver, ProgressObserver

_LOGGER = logging.getLogger(__name__)

_DUPLICATES = (RowDuplicate, ColDuplicate, BlockDuplicate)

SolveFn = Callable[..., Optional[Grid]]


def _pause(seconds: float) -> None:
    if seconds > 0:
        time.sleep(seconds)


def _search(grid: Grid, pause: float, observer: ProgressObserver, depth: int) -> Optional[Grid]:
    if grid.is_full():
        return grid

    x, y = grid.first_empty()  # type: ignore[misc]
    for digit in range(1, 10):
        try:
            candidate = grid.insert(x, y, digit)
        except _DUPLICATES:
            continue

        observer.on_insert(candidate, depth + 1)
        _pause(pause)

        solved = _search(candidate, pause, observer, depth + 1)
        if solved is not None:
            return solved
        observer.on_backtrack(candidate, depth + 1)

    return None


def solve(grid: Grid, delay: int = 0, observer: ProgressObserver | None = None) -> Optional[Grid]:
    """Return the first solution of ``grid`` or ``None`` when none exists.

    ``delay`` is a pause in milliseconds after each accepted placement;
    ``observer`` is notified of every placement and abandoned branch.
    """

    result = _search(grid, max(delay, 0) / 1000.0, observer or NullObserver(), 0)
    _LOGGER.debug("recursive search finished (solved=%s)", result is not None)
    return result


@dataclass
class _Frame:
    grid: Grid
    x: int
    y: int
    next_digit: int = 1

    def advance(self) -> Optional[Grid]:
        while self.next_digit <= 9:
            digit = self.next_digit
            self.next_digit += 1
            try:
                return self.grid.insert(self.x, self.y, digit)
            except _DUPLICATES:
                continue
        return None


def _open_frame(grid: Grid) -> _Frame:
    x, y = grid.first_empty()  # type: ignore[misc]
    return _Frame(grid, x, y)


def solve_iterative(
    grid: Grid, delay: int = 0, observer: ProgressObserver | None = None
) -> Optional[Grid]:
    """Explicit-stack variant of :func:`solve` with identical results.

    Each frame remembers the branching cell and the next digit to try, so the
    search visits states in exactly the order of the recursive version.
    """

    observer = observer or NullObserver()
    pause = max(delay, 0) / 1000.0
    if grid.is_full():
        return grid

    stack: List[_Frame] = [_open_frame(grid)]
    while stack:
        frame = stack[-1]
        child = frame.advance()
        if child is None:
            stack.pop()
            if stack:
                observer.on_backtrack(frame.grid, len(stack))
            continue

        observer.on_insert(child, len(stack))
        _pause(pause)

        if child.is_full():
            _LOGGER.debug("iterative search finished (solved=True)")
            return child
        stack.append(_open_frame(child))

    _LOGGER.debug("iterative search finished (solved=False)")
    return None


SOLVERS: Dict[str, SolveFn] = {
    "recursive": solve,
    "iterative": solve_iterative,
}


def get_solver(name: str) -> SolveFn:
    if name not in SOLVERS:
        raise ValueError(f"Unsupported solver: {name!r}")
    return SOLVERS[name]


__all__ = ["SOLVERS", "get_solver", "solve", "solve_iterative"]
