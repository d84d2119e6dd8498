"""ANSI terminal sink for solver progress.

The board is drawn once, followed by a status banner. Progress frames move the
cursor back to the top of the board and redraw it in place, so the terminal
shows a single animated board instead of a scrolling log.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from colorama import Cursor, Fore, Style, ansi

from sudoku.grid import Cell, Grid
from sudoku.render import board_lines, render

HIDE_CURSOR = ansi.CSI + "?25l"
SHOW_CURSOR = ansi.CSI + "?25h"

SOLVING = "        Solving..."
DONE = "          Done!"
NO_SOLUTION = "    No solution found"
INVALID = "     Invalid puzzle"


def bold_givens(cell: Cell) -> str:
    if cell.given:
        return f"{Style.BRIGHT}{cell.digit}{Style.RESET_ALL}"
    return str(cell.digit)


class TerminalDisplay:
    """Render boards and banners to ``stream``.

    With ``use_ansi`` disabled nothing is styled and progress frames are
    dropped, which keeps redirected output readable.
    """

    def __init__(self, stream: Optional[TextIO] = None, *, use_ansi: bool = True) -> None:
        self.stream = stream or sys.stdout
        self.use_ansi = use_ansi
        self._frames = 0
        self._cursor_hidden = False

    @property
    def frames(self) -> int:
        return self._frames

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _board(self, grid: Grid) -> str:
        return render(grid, bold_givens if self.use_ansi else None)

    def _banner(self, text: str, colour: str) -> str:
        if not self.use_ansi:
            return text
        return f"{ansi.clear_line()}{colour}{text}{Style.RESET_ALL}"

    def _rewind(self) -> str:
        # board plus the banner line beneath it
        return Cursor.UP(board_lines() + 1) if self.use_ansi else ""

    def start(self, grid: Grid) -> None:
        text = f"{self._board(grid)}\n{self._banner(SOLVING, Fore.LIGHTRED_EX)}\n"
        if self.use_ansi:
            text = HIDE_CURSOR + text
            self._cursor_hidden = True
        self._write(text)

    def frame(self, grid: Grid) -> None:
        """Redraw ``grid`` in place of the previous board."""

        if not self.use_ansi:
            return
        self._frames += 1
        self._write(f"{self._rewind()}{self._board(grid)}\n{self._banner(SOLVING, Fore.LIGHTRED_EX)}\n")

    def finish(self, solution: Grid) -> None:
        if self.use_ansi:
            text = f"{self._rewind()}{self._board(solution)}\n{self._banner(DONE, Fore.LIGHTGREEN_EX)}\n{SHOW_CURSOR}"
            self._cursor_hidden = False
        else:
            text = f"{self._board(solution)}\n{DONE}\n"
        self._write(text)

    def no_solution(self) -> None:
        self._status(NO_SOLUTION)

    def invalid(self) -> None:
        self._status(INVALID)

    def _status(self, text: str) -> None:
        if self.use_ansi:
            self._write(f"{Cursor.UP(1)}{self._banner(text, Fore.LIGHTRED_EX)}\n{SHOW_CURSOR}")
            self._cursor_hidden = False
        else:
            self._write(f"{text}\n")

    def restore_cursor(self) -> None:
        """Show the cursor again if a run hid it and never reached a banner."""

        if self._cursor_hidden:
            self._cursor_hidden = False
            self._write(SHOW_CURSOR)


__all__ = [
    "DONE",
    "INVALID",
    "NO_SOLUTION",
    "SOLVING",
    "TerminalDisplay",
    "bold_givens",
]
