"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt

EXAMPLE_GRID = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    model_config = ConfigDict(json_schema_extra={"example": {"cells": EXAMPLE_GRID}})

    cells: list[list[StrictInt]] = Field(description="9x9 grid (0 for empty cells)")


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class ValidateRequest(BaseModel):
    """Request to check a Sudoku grid for conflicting digits."""

    grid: SudokuGrid = Field(description="The Sudoku grid to check")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    tries: int = Field(ge=0, description="Digit assignments attempted by the search")
    elapsed_ms: float = Field(ge=0, description="Solver wall time in milliseconds")
    message: str = Field(description="Status message")


class ValidateResponse(BaseModel):
    """Response from checking a Sudoku."""

    valid: bool = Field(description="Whether no row, column or box repeats a digit")
    message: str = Field(description="Status message")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(description="Error message")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    version: str = Field(description="Service version")
