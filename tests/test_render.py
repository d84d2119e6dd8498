from __future__ import annotations

from sudoku import SAMPLE_PUZZLE, Cell, Grid, parse, render
from sudoku.render import SEPARATOR, board_lines


def _cell_chars(board: str) -> str:
    return "".join(line.replace("|", "").replace(" ", "") for line in board.splitlines() if line != SEPARATOR)


def test_board_layout() -> None:
    board = render(parse(SAMPLE_PUZZLE))
    lines = board.split("\n")

    assert len(lines) == 13 == board_lines()
    assert not board.endswith("\n")
    assert [i for i, line in enumerate(lines) if line == SEPARATOR] == [0, 4, 8, 12]
    assert lines[1] == "| . . . | . . . | . 9 . |"
    assert lines[11] == "| . . . | 9 6 1 | 3 . . |"


def test_render_preserves_given_pattern() -> None:
    board = render(parse(SAMPLE_PUZZLE))
    assert _cell_chars(board) == SAMPLE_PUZZLE.replace("x", ".")


def test_empty_grid() -> None:
    assert _cell_chars(render(Grid.empty())) == "." * 81


def test_str_uses_render() -> None:
    grid = parse(SAMPLE_PUZZLE)
    assert str(grid) == render(grid)


def test_styler_only_sees_filled_cells() -> None:
    seen = []

    def styler(cell: Cell) -> str:
        seen.append(cell)
        return "*" if cell.given else str(cell.digit)

    grid = parse(SAMPLE_PUZZLE).insert(3, 2, 5)
    board = render(grid, styler)

    assert len(seen) == grid.filled
    assert "5" in board.split("\n")[3]
    assert _cell_chars(board).count("*") == grid.givens
