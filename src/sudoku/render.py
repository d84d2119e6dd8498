"""ASCII board rendering."""

from __future__ import annotations

from typing import Callable, List, Optional

from .grid import SIZE, Cell, Grid

SEPARATOR = "+-------+-------+-------+"
BLANK = "."

CellStyler = Callable[[Cell], str]


def plain(cell: Cell) -> str:
    return str(cell.digit)


def render(grid: Grid, styler: Optional[CellStyler] = None) -> str:
    """Render ``grid`` as a 13-line board without a trailing newline.

    ``styler`` receives each filled cell and returns the text drawn for it,
    letting display layers decorate givens and placements differently.
    """

    style = styler or plain
    lines: List[str] = []
    for y in range(SIZE):
        if y % 3 == 0:
            lines.append(SEPARATOR)
        parts = ["|"]
        for x, cell in enumerate(grid.row(y)):
            if x and x % 3 == 0:
                parts.append("|")
            parts.append(BLANK if cell is None else style(cell))
        parts.append("|")
        lines.append(" ".join(parts))
    lines.append(SEPARATOR)
    return "\n".join(lines)


def board_lines() -> int:
    """Number of terminal lines a rendered board occupies."""

    return SIZE + 4


__all__ = ["BLANK", "CellStyler", "SEPARATOR", "board_lines", "plain", "render"]
