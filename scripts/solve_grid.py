"""Solve a Sudoku grid from the command line and report search statistics."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Sequence

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudoku_backend.config import configure_logging
from sudoku_backend.solver.backtracking import (
    CELL_COUNT,
    GRID_LENGTH,
    is_sudoku_valid,
    render_grid,
    solve_sudoku,
)

LOGGER = logging.getLogger("solve_grid")

_EMPTY_MARKERS = ".-_"
_SEPARATORS = "|+"


def parse_puzzle(text: str) -> list[list[int]]:
    """Parse 81 cells from text.

    Digits ``1``-``9`` are givens; ``0``, ``.``, ``_`` and ``-`` are empty
    cells. Whitespace and ``|``/``+`` box separators are ignored. Any other
    character is an error.
    """
    cells: list[int] = []
    for char in text:
        if char.isspace() or char in _SEPARATORS:
            continue
        if char in _EMPTY_MARKERS:
            cells.append(0)
        elif char.isdigit():
            cells.append(int(char))
        else:
            raise ValueError(f"Unexpected character in puzzle: {char!r}")

    if len(cells) != CELL_COUNT:
        raise ValueError(
            f"Puzzle must contain exactly {CELL_COUNT} cells, got {len(cells)}"
        )
    return [cells[r * GRID_LENGTH:(r + 1) * GRID_LENGTH] for r in range(GRID_LENGTH)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a Sudoku by backtracking")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "puzzle",
        nargs="?",
        help="81 cells, use 0 . _ or - for empty cells",
    )
    source.add_argument(
        "--file",
        type=Path,
        help="Read the puzzle from a text file",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument("--debug", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging("DEBUG" if args.debug else "WARNING")

    try:
        raw = args.file.read_text(encoding="utf-8") if args.file else args.puzzle
        grid = parse_puzzle(raw)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    if not is_sudoku_valid(grid):
        LOGGER.warning("Invalid Sudoku: givens repeat a digit")

    start = time.perf_counter()
    result = solve_sudoku(grid)
    elapsed_ms = (time.perf_counter() - start) * 1000.0

    if args.json:
        payload = result.to_dict()
        payload["elapsed_ms"] = round(elapsed_ms, 3)
        print(json.dumps(payload))
    else:
        print(render_grid(result.grid))
        print()
        print(f"Success: {str(result.success).lower()}")
        print(f"Tried Permutations: {result.tries:,}")
        print(f"Time: {elapsed_ms:.2f}ms")

    return 0 if result.success else 1


if __name__ == "__main__":
    raise SystemExit(main())
