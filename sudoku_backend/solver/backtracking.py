"""Sudoku solver using backtracking algorithm."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional, Tuple
import logging


GRID_LENGTH = 9
BOX_SIZE = 3
CELL_COUNT = GRID_LENGTH * GRID_LENGTH
EMPTY_CELL = 0
CELL_MIN_VALUE = 1
CELL_MAX_VALUE = 9

Grid = List[List[int]]
GridSnapshot = Tuple[Tuple[int, ...], ...]

_LOGGER = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """Raised when a grid is not 9 rows of 9 integers in [0, 9]."""


class CellPosition(NamedTuple):
    row: int
    col: int


@dataclass(frozen=True)
class SolveResult:
    """Outcome of a single solve: final grid, success flag and tries."""

    grid: GridSnapshot
    success: bool
    tries: int

    def as_lists(self) -> Grid:
        return [list(row) for row in self.grid]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "grid": self.as_lists(),
            "success": self.success,
            "tries": self.tries,
        }


class SudokuSolver:
    """Solves Sudoku puzzles using backtracking.

    The grid is stored row-major in a flat list of 81 cells. Cells are filled
    strictly in row-major order, trying digits 1 through 9, and the whole grid
    is re-checked at the entry of every recursive call.
    """

    def __init__(self, grid: Sequence[Sequence[int]]):
        self.cells: List[int] = [value for row in grid for value in row]
        self.tries = 0

    def solve(self) -> bool:
        """
        Solve the grid in place.

        Returns:
            True if the grid now holds a complete solution, False if no
            assignment of the empty cells satisfies all constraints
        """
        if not self.is_valid():
            return False

        empty = self.first_empty_cell()
        if empty is None:
            return True

        index = empty.row * GRID_LENGTH + empty.col
        self.cells[index] = CELL_MIN_VALUE
        while True:
            self.tries += 1
            if self.solve():
                return True
            if self.cells[index] == CELL_MAX_VALUE:
                break
            self.cells[index] += 1

        self.cells[index] = EMPTY_CELL
        return False

    def valid_row(self, row: int) -> bool:
        """Check that ``row`` holds no repeated digit. Empty cells are ignored."""
        start = row * GRID_LENGTH
        return self._no_repeats(self.cells[start:start + GRID_LENGTH])

    def valid_column(self, col: int) -> bool:
        """Check that ``col`` holds no repeated digit. Empty cells are ignored."""
        return self._no_repeats(self.cells[col::GRID_LENGTH])

    def valid_box(self, box_row: int, box_col: int) -> bool:
        """
        Check that a 3x3 box holds no repeated digit.

        Args:
            box_row: Box row (0-2)
            box_col: Box column (0-2)

        Returns:
            True if the box is valid, False otherwise
        """
        top = box_row * BOX_SIZE
        left = box_col * BOX_SIZE
        values = []
        for r in range(top, top + BOX_SIZE):
            start = r * GRID_LENGTH + left
            values.extend(self.cells[start:start + BOX_SIZE])
        return self._no_repeats(values)

    def is_valid(self) -> bool:
        """Check every row, column and box of the current grid."""
        for i in range(GRID_LENGTH):
            if not self.valid_row(i) or not self.valid_column(i):
                return False

        for box_row in range(BOX_SIZE):
            for box_col in range(BOX_SIZE):
                if not self.valid_box(box_row, box_col):
                    return False

        return True

    def first_empty_cell(self) -> Optional[CellPosition]:
        """
        Find the first empty cell in row-major order.

        Returns:
            CellPosition of the cell if one is empty, None otherwise
        """
        try:
            index = self.cells.index(EMPTY_CELL)
        except ValueError:
            return None
        return CellPosition(*divmod(index, GRID_LENGTH))

    def rows(self) -> GridSnapshot:
        return tuple(
            tuple(self.cells[r * GRID_LENGTH:(r + 1) * GRID_LENGTH])
            for r in range(GRID_LENGTH)
        )

    def __str__(self) -> str:
        return render_grid(self.rows())

    @staticmethod
    def _no_repeats(values: Sequence[int]) -> bool:
        seen = [False] * (CELL_MAX_VALUE + 1)
        for value in values:
            if value == EMPTY_CELL:
                continue
            if seen[value]:
                return False
            seen[value] = True
        return True


def validate_grid(grid: Any) -> None:
    """
    Validate that a grid has correct structure and cell values.

    Args:
        grid: Candidate 9x9 grid

    Raises:
        InvalidInputError: If the grid is not 9 rows of 9 integers in [0, 9]
    """
    if isinstance(grid, (str, bytes)) or not isinstance(grid, Sequence):
        raise InvalidInputError("Grid must be a sequence of 9 rows")
    if len(grid) != GRID_LENGTH:
        raise InvalidInputError(
            f"Grid must have {GRID_LENGTH} rows, got {len(grid)}"
        )

    for r, row in enumerate(grid):
        if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
            raise InvalidInputError(f"Row {r} must be a sequence of 9 cells")
        if len(row) != GRID_LENGTH:
            raise InvalidInputError(
                f"Row {r} must have {GRID_LENGTH} cells, got {len(row)}"
            )
        for c, cell in enumerate(row):
            if isinstance(cell, bool) or not isinstance(cell, int):
                raise InvalidInputError(
                    f"Cell ({r}, {c}) must be an integer, got {cell!r}"
                )
            if cell < EMPTY_CELL or cell > CELL_MAX_VALUE:
                raise InvalidInputError(
                    f"Cell ({r}, {c}) must be between {EMPTY_CELL} and "
                    f"{CELL_MAX_VALUE}, got {cell}"
                )


def solve_sudoku(grid: Sequence[Sequence[int]]) -> SolveResult:
    """
    Solve a Sudoku grid.

    The input is copied, so the caller's grid is left untouched. When no
    solution exists the returned grid equals the input.

    Args:
        grid: 9x9 grid with 0 for empty cells

    Returns:
        SolveResult with the final grid, success flag and tries count

    Raises:
        InvalidInputError: If the grid is malformed
    """
    validate_grid(grid)
    solver = SudokuSolver(grid)
    success = solver.solve()
    _LOGGER.debug("solve finished: success=%s tries=%d", success, solver.tries)
    return SolveResult(grid=solver.rows(), success=success, tries=solver.tries)


def is_sudoku_valid(grid: Sequence[Sequence[int]]) -> bool:
    """Check a grid for repeated digits without searching."""
    validate_grid(grid)
    return SudokuSolver(grid).is_valid()


def render_grid(grid: Sequence[Sequence[int]]) -> str:
    """Render a grid one row per line, with ``_`` for empty cells."""
    lines = []
    for row in grid:
        lines.append(
            " ".join(str(cell) if cell != EMPTY_CELL else "_" for cell in row)
        )
    return "\n".join(lines)
