"""Command line entry point: read a puzzle, solve it, print the grid."""

from __future__ import annotations

import argparse
import json
import logging
import os
import time
from pathlib import Path
from typing import Dict, List

from contracts import make_result, validate_result
from grid import ParseGridError, load_grid, render_boxed, render_plain
from project_config import config_dir, get_section
from solver import resolve_settings, solved, validate
from telemetry import EventLog

_LOGGER = logging.getLogger(__name__)

_RENDERERS = {"plain": render_plain, "boxed": render_boxed}


def _build_cli_env(args: argparse.Namespace) -> Dict[str, str]:
    env: Dict[str, str] = dict(os.environ)
    if args.strategy:
        env["CLI_SUDOKU_SOLVER_STRATEGY"] = args.strategy
    if args.log_events or args.events_dir:
        env["CLI_SUDOKU_LOG_EVENTS"] = "1"
    return env


def _input_path(args: argparse.Namespace) -> Path:
    if args.path:
        return Path(args.path)
    path = Path(str(get_section("io.input_path", "input.txt")))
    return path if path.is_absolute() else config_dir() / path


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        settings = resolve_settings(_build_cli_env(args))
    except ValueError as exc:
        print(f"Error encountered while configuring: {exc}")
        return 2
    path = _input_path(args)

    try:
        puzzle = load_grid(path)
    except ParseGridError as exc:
        print(f"Error encountered while parsing: {exc}")
        return 2
    except OSError as exc:
        print(f"Error encountered while reading {path}: {exc.strerror or exc}")
        return 2

    _LOGGER.info("solving %s with %s strategy (%s)", path, settings.strategy, settings.decision_source)
    start = time.perf_counter()
    solution = solved(puzzle, settings.strategy)
    elapsed_ms = int((time.perf_counter() - start) * 1000)

    if solution is not None:
        report = validate(solution)
        if not report.ok:
            raise RuntimeError(f"solver produced an invalid grid: {report.paths}")

    artifact = make_result(puzzle, solution, elapsed_ms=elapsed_ms)
    validate_result(artifact)

    if settings.events_enabled:
        events_dir = Path(args.events_dir) if args.events_dir else settings.events_dir
        event_log = EventLog(events_dir, max_bytes=settings.max_bytes)
        event_path = event_log.record(artifact, strategy=settings.strategy, source=str(path))
        _LOGGER.info("run event appended to %s", event_path)

    if args.format == "json":
        print(json.dumps(artifact, indent=2, sort_keys=True))
        return 0 if solution is not None else 1

    if solution is None:
        print("Error encountered while solving: unsolvable")
        return 1

    print(_RENDERERS[args.format](solution), end="")
    print(f"Solved in {elapsed_ms} milliseconds")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a 9x9 Sudoku by backtracking")
    parser.add_argument("path", nargs="?", default=None, help="Puzzle file (defaults to io.input_path)")
    parser.add_argument(
        "--strategy",
        choices=["recursive", "iterative"],
        default=None,
        help="Override the configured search form",
    )
    parser.add_argument("--format", choices=["plain", "boxed", "json"], default="plain")
    parser.add_argument(
        "--log-events",
        action="store_true",
        help="Append a JSONL run event for this solve",
    )
    parser.add_argument(
        "--events-dir",
        default=None,
        help="Directory for JSONL run events (implies --log-events)",
    )
    parser.set_defaults(func=cmd_solve)
    return parser


def main(argv: List[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=str(get_section("log.level", "WARNING")).upper())
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
