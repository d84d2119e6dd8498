"""Classic 9x9 Sudoku: grid model, backtracking solver and board rendering."""

from __future__ import annotations

from .errors import (
    BlockDuplicate,
    ColDuplicate,
    InsertError,
    InvalidLocation,
    InvalidNumber,
    ParseError,
    RowDuplicate,
)
from .grid import Cell, Conflict, Grid, conflicts, insert, is_full, parse
from .observers import (
    CompositeObserver,
    NullObserver,
    ProgressObserver,
    RecordingObserver,
    SinkObserver,
    SolveStats,
)
from .render import render
from .solver import SOLVERS, get_solver, solve, solve_iterative

SAMPLE_PUZZLE = (
    "xxxxxxx9xx9x7xx21xxx4x9xxxxx1xxx8xxx7xx42xxx5xx8xxxx748x1xxxx4xxxxxxxxxxxx9613xxx"
)

__all__ = [
    "BlockDuplicate",
    "Cell",
    "ColDuplicate",
    "CompositeObserver",
    "Conflict",
    "Grid",
    "InsertError",
    "InvalidLocation",
    "InvalidNumber",
    "NullObserver",
    "ParseError",
    "ProgressObserver",
    "RecordingObserver",
    "RowDuplicate",
    "SAMPLE_PUZZLE",
    "SOLVERS",
    "SinkObserver",
    "SolveStats",
    "conflicts",
    "get_solver",
    "insert",
    "is_full",
    "parse",
    "render",
    "solve",
    "solve_iterative",
]
