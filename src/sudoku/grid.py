"""Immutable 9x9 grid model with validated insertion.

Cells are stored row-major in an 81-tuple. Locations are written ``(x, y)``
where ``x`` is the column and ``y`` the row, so ``(5, 6)`` is the sixth column
of the seventh row. Every successful :meth:`Grid.insert` returns a fresh grid;
the receiver is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterator, List, NamedTuple, Optional, Tuple

from .errors import (
    BlockDuplicate,
    ColDuplicate,
    InvalidLocation,
    InvalidNumber,
    ParseError,
    RowDuplicate,
)

SIZE = 9
CELL_COUNT = SIZE * SIZE
DIGITS = "123456789"
_LINE_BREAKS = {"\n", "\r"}


@dataclass(frozen=True, slots=True, eq=False)
class Cell:
    """A filled cell.

    ``given`` marks digits from the original puzzle; search placements carry
    ``given=False``. Equality and hashing only look at the digit.
    """

    digit: int
    given: bool = False

    def __post_init__(self) -> None:
        if not 1 <= int(self.digit) <= 9:
            raise ValueError(f"digit must be in [1, 9], got {self.digit!r}")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Cell):
            return self.digit == other.digit
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.digit)

    def __str__(self) -> str:
        return str(self.digit)


CellValue = Optional[Cell]


class Conflict(NamedTuple):
    """Two cells of one unit holding the same digit."""

    unit: str
    digit: int
    first: Tuple[int, int]
    second: Tuple[int, int]


def _block_center(coord: int) -> int:
    return coord - coord % 3 + 1


def _block_indices(x: int, y: int) -> Tuple[int, ...]:
    cx, cy = _block_center(x), _block_center(y)
    return tuple((cy + dy) * SIZE + cx + dx for dy in (-1, 0, 1) for dx in (-1, 0, 1))


_ROWS = tuple(tuple(range(y * SIZE, (y + 1) * SIZE)) for y in range(SIZE))
_COLS = tuple(tuple(range(x, CELL_COUNT, SIZE)) for x in range(SIZE))
_BLOCKS = tuple(_block_indices(index % SIZE, index // SIZE) for index in range(CELL_COUNT))


@dataclass(frozen=True)
class Grid:
    cells: Tuple[CellValue, ...]

    def __post_init__(self) -> None:
        cells = tuple(self.cells)
        if len(cells) != CELL_COUNT:
            raise ValueError(f"a grid holds {CELL_COUNT} cells, got {len(cells)}")
        object.__setattr__(self, "cells", cells)

    @classmethod
    def empty(cls) -> "Grid":
        return cls((None,) * CELL_COUNT)

    def cell(self, x: int, y: int) -> CellValue:
        return self.cells[y * SIZE + x]

    def row(self, y: int) -> Tuple[CellValue, ...]:
        return self.cells[y * SIZE:(y + 1) * SIZE]

    def column(self, x: int) -> Tuple[CellValue, ...]:
        return self.cells[x::SIZE]

    def block(self, x: int, y: int) -> Tuple[CellValue, ...]:
        """Return the nine cells of the block containing ``(x, y)``."""

        return tuple(self.cells[index] for index in _BLOCKS[y * SIZE + x])

    def _holds(self, indices: Tuple[int, ...], digit: int) -> bool:
        cells = self.cells
        for index in indices:
            cell = cells[index]
            if cell is not None and cell.digit == digit:
                return True
        return False

    def insert(self, x: int, y: int, digit: int) -> "Grid":
        """Place ``digit`` at column ``x``, row ``y`` and return the new grid.

        Raises :class:`InvalidLocation` or :class:`InvalidNumber` on contract
        violations, otherwise the first failing uniqueness check in the order
        row, column, block.
        """

        if not (0 <= x < SIZE and 0 <= y < SIZE):
            raise InvalidLocation(x, y, digit)
        if not 1 <= digit <= 9:
            raise InvalidNumber(x, y, digit)

        if self._holds(_ROWS[y], digit):
            raise RowDuplicate(x, y, digit)
        if self._holds(_COLS[x], digit):
            raise ColDuplicate(x, y, digit)
        if self._holds(_BLOCKS[y * SIZE + x], digit):
            raise BlockDuplicate(x, y, digit)

        cells = list(self.cells)
        cells[y * SIZE + x] = Cell(digit)
        return replace(self, cells=tuple(cells))

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def first_empty(self) -> Optional[Tuple[int, int]]:
        """Return ``(x, y)`` of the first empty cell in row-major order."""

        for index, cell in enumerate(self.cells):
            if cell is None:
                return index % SIZE, index // SIZE
        return None

    def iter_cells(self) -> Iterator[Tuple[int, int, CellValue]]:
        """Yield ``(x, y, cell)`` triples in row-major order."""

        for index, cell in enumerate(self.cells):
            yield index % SIZE, index // SIZE, cell

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        for index, cell in enumerate(self.cells):
            if cell is None:
                yield index % SIZE, index // SIZE

    @property
    def givens(self) -> int:
        return sum(1 for cell in self.cells if cell is not None and cell.given)

    @property
    def filled(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)

    def to_string(self, blank: str = ".") -> str:
        return "".join(blank if cell is None else str(cell.digit) for cell in self.cells)

    def __str__(self) -> str:
        from .render import render

        return render(self)


def parse(text: str) -> Grid:
    """Build a grid of givens from puzzle text.

    Line breaks are dropped; ``1``-``9`` become givens and any other character
    is an empty cell.
    """

    cells: List[CellValue] = []
    for char in text:
        if char in _LINE_BREAKS:
            continue
        cells.append(Cell(int(char), given=True) if char in DIGITS else None)
    if len(cells) != CELL_COUNT:
        raise ParseError(len(cells))
    return Grid(tuple(cells))


def insert(grid: Grid, x: int, y: int, digit: int) -> Grid:
    return grid.insert(x, y, digit)


def is_full(grid: Grid) -> bool:
    return grid.is_full()


def _units() -> Iterator[Tuple[str, List[Tuple[int, int]]]]:
    for y in range(SIZE):
        yield "row", [(x, y) for x in range(SIZE)]
    for x in range(SIZE):
        yield "col", [(x, y) for y in range(SIZE)]
    for by in range(0, SIZE, 3):
        for bx in range(0, SIZE, 3):
            yield "block", [(bx + dx, by + dy) for dy in range(3) for dx in range(3)]


def conflicts(grid: Grid) -> List[Conflict]:
    """List every repeated digit per row, column and block."""

    found: List[Conflict] = []
    for unit, locations in _units():
        seen: dict[int, Tuple[int, int]] = {}
        for x, y in locations:
            cell = grid.cell(x, y)
            if cell is None:
                continue
            if cell.digit in seen:
                found.append(Conflict(unit, cell.digit, seen[cell.digit], (x, y)))
            else:
                seen[cell.digit] = (x, y)
    return found


__all__ = [
    "CELL_COUNT",
    "Cell",
    "CellValue",
    "Conflict",
    "Grid",
    "SIZE",
    "conflicts",
    "insert",
    "is_full",
    "parse",
]
