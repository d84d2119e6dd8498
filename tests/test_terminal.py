from __future__ import annotations

import io

from colorama import Style

from display import TerminalDisplay, bold_givens
from display.terminal import DONE, HIDE_CURSOR, INVALID, NO_SOLUTION, SHOW_CURSOR, SOLVING
from sudoku import SAMPLE_PUZZLE, Cell, parse


def test_bold_givens_only_emphasises_givens() -> None:
    assert bold_givens(Cell(4, given=True)) == f"{Style.BRIGHT}4{Style.RESET_ALL}"
    assert bold_givens(Cell(4)) == "4"


def test_plain_output_without_ansi() -> None:
    stream = io.StringIO()
    display = TerminalDisplay(stream, use_ansi=False)
    grid = parse(SAMPLE_PUZZLE)

    display.start(grid)
    display.frame(grid.insert(3, 2, 5))
    display.no_solution()

    output = stream.getvalue()
    assert "\x1b" not in output
    assert display.frames == 0
    assert output == f"{grid}\n{SOLVING}\n{NO_SOLUTION}\n"


def test_ansi_session_redraws_in_place() -> None:
    stream = io.StringIO()
    display = TerminalDisplay(stream, use_ansi=True)
    grid = parse(SAMPLE_PUZZLE)

    display.start(grid)
    display.frame(grid.insert(3, 2, 5))
    display.finish(grid)

    output = stream.getvalue()
    assert output.startswith(HIDE_CURSOR)
    assert output.endswith(SHOW_CURSOR)
    assert output.count("\x1b[14A") == 2
    assert DONE in output
    assert display.frames == 1


def test_invalid_banner() -> None:
    stream = io.StringIO()
    display = TerminalDisplay(stream, use_ansi=True)

    display.start(parse(SAMPLE_PUZZLE))
    display.invalid()

    assert INVALID in stream.getvalue()
    assert stream.getvalue().endswith(SHOW_CURSOR)


def test_restore_cursor_only_after_hiding_it() -> None:
    stream = io.StringIO()
    display = TerminalDisplay(stream, use_ansi=True)

    display.restore_cursor()
    assert stream.getvalue() == ""

    display.start(parse(SAMPLE_PUZZLE))
    display.restore_cursor()
    display.restore_cursor()
    assert stream.getvalue().count(SHOW_CURSOR) == 1

    plain = io.StringIO()
    quiet = TerminalDisplay(plain, use_ansi=False)
    quiet.start(parse(SAMPLE_PUZZLE))
    quiet.restore_cursor()
    assert "\x1b" not in plain.getvalue()
