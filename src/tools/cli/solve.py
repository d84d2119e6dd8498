"""Command line front end: load a puzzle, solve it and animate the search."""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from colorama import just_fix_windows_console

import runlog
from display import TerminalDisplay
from project_config import ConfigError, SolverSettings, get_section, resolve_settings
from sudoku import (
    SAMPLE_PUZZLE,
    CompositeObserver,
    Grid,
    ParseError,
    SinkObserver,
    SolveStats,
    conflicts,
    get_solver,
    parse,
)

_LOGGER = logging.getLogger(__name__)

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {
        "step_ms": args.step,
        "quiet": args.quiet,
        "iterative": args.iterative,
        "strict": args.strict,
    }
    if args.log_dir is not None:
        overrides["log_dir"] = args.log_dir
        overrides["log_enabled"] = True
    return overrides


def _load_grid(parser: argparse.ArgumentParser, path: Optional[str]) -> Grid:
    if path is None:
        text = SAMPLE_PUZZLE
    else:
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            parser.error(f"cannot read puzzle file '{path}': {exc.strerror or exc}")
        except UnicodeDecodeError as exc:
            parser.error(f"cannot read puzzle file '{path}': not UTF-8 text ({exc.reason} at byte {exc.start})")
    try:
        return parse(text)
    except ParseError as exc:
        parser.error(str(exc))


def _record(settings: SolverSettings, event: Dict[str, Any]) -> None:
    if not settings.log_enabled:
        return
    max_bytes = get_section("log.max_bytes", 0)
    runlog.configure(settings.log_dir, max_bytes=int(max_bytes) or None)
    path = runlog.record(event)
    _LOGGER.info("run recorded in %s", path)


def run(grid: Grid, settings: SolverSettings, display: TerminalDisplay) -> int:
    """Solve ``grid`` with ``settings`` and report through ``display``."""

    display.start(grid)
    try:
        return _run(grid, settings, display)
    finally:
        display.restore_cursor()


def _run(grid: Grid, settings: SolverSettings, display: TerminalDisplay) -> int:
    puzzle = grid.to_string()

    if settings.strict:
        found = conflicts(grid)
        if found:
            _LOGGER.warning("puzzle has %d conflicting givens", len(found))
            display.invalid()
            _record(
                settings,
                runlog.make_solve_event(
                    puzzle=puzzle,
                    status="invalid",
                    solution=None,
                    givens=grid.givens,
                    stats={},
                    elapsed_ms=0,
                    solver=settings.solver_name,
                    conflicts=len(found),
                ),
            )
            return EXIT_NO_SOLUTION

    stats = SolveStats()
    observers: List[Any] = [stats]
    if not settings.quiet:
        observers.append(SinkObserver(display.frame))

    solver = get_solver(settings.solver_name)
    _LOGGER.debug("solving with %s solver, step=%dms", settings.solver_name, settings.step_ms)
    started = time.perf_counter()
    solution = solver(grid, settings.step_ms, CompositeObserver.of(observers))
    elapsed_ms = int((time.perf_counter() - started) * 1000)

    if solution is not None:
        display.finish(solution)
    else:
        display.no_solution()
    _LOGGER.info(
        "search finished in %dms: %d insertions, %d backtracks",
        elapsed_ms,
        stats.insertions,
        stats.backtracks,
    )

    _record(
        settings,
        runlog.make_solve_event(
            puzzle=puzzle,
            status="solved" if solution is not None else "no_solution",
            solution=None if solution is None else solution.to_string(),
            givens=grid.givens,
            stats=stats.to_payload(),
            elapsed_ms=elapsed_ms,
            solver=settings.solver_name,
        ),
    )
    return EXIT_SOLVED if solution is not None else EXIT_NO_SOLUTION


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="newdoku",
        description="Solve a 9x9 Sudoku by backtracking and animate the search in the terminal.",
    )
    parser.add_argument("-s", "--step", type=int, default=None, metavar="MILLIS", help="Wait MILLIS between inserts")
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        default=None,
        help="No output until finished solving (faster)",
    )
    parser.add_argument("-f", "--file", default=None, help="Load Sudoku from file")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject puzzles whose givens already conflict instead of searching",
    )
    parser.add_argument(
        "--iterative",
        action="store_true",
        default=None,
        help="Use the explicit-stack solver instead of recursion",
    )
    parser.add_argument("--log-dir", default=None, help="Append a JSONL record of the run under this directory")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colours and in-place animation")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = resolve_settings(os.environ, _cli_overrides(args))
    except ConfigError as exc:
        parser.error(str(exc))

    grid = _load_grid(parser, args.file)
    use_ansi = not args.no_color and sys.stdout.isatty()
    if use_ansi:
        just_fix_windows_console()
    return run(grid, settings, TerminalDisplay(sys.stdout, use_ansi=use_ansi))


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
