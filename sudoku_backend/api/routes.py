"""API routes for the Sudoku solver application."""

from __future__ import annotations

import logging
import time

from fastapi import APIRouter, HTTPException

from .. import __version__
from ..models.schemas import (
    ErrorResponse,
    HealthResponse,
    SolveRequest,
    SolveResponse,
    ValidateRequest,
    ValidateResponse,
)
from ..solver.backtracking import InvalidInputError, is_sudoku_valid, solve_sudoku

router = APIRouter()
_LOGGER = logging.getLogger(__name__)

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@router.post(
    "/api/v1/sudoku:solve",
    response_model=SolveResponse,
    responses=_ERROR_RESPONSES,
    tags=["Sudoku"],
)
def solve(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    grid = request.grid.cells
    try:
        valid = is_sudoku_valid(grid)

        start = time.perf_counter()
        result = solve_sudoku(grid)
        elapsed_ms = (time.perf_counter() - start) * 1000.0
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        _LOGGER.exception("solve failed")
        raise HTTPException(status_code=500, detail=str(e))

    _LOGGER.info(
        "solve: success=%s tries=%d elapsed_ms=%.2f",
        result.success,
        result.tries,
        elapsed_ms,
    )

    if result.success:
        message = "Puzzle solved successfully"
    elif not valid:
        message = "Puzzle is invalid"
    else:
        message = "Puzzle has no solution"

    return SolveResponse(
        success=result.success,
        original=grid,
        solved=result.as_lists() if result.success else None,
        tries=result.tries,
        elapsed_ms=elapsed_ms,
        message=message,
    )


@router.post(
    "/api/v1/sudoku:validate",
    response_model=ValidateResponse,
    responses=_ERROR_RESPONSES,
    tags=["Sudoku"],
)
def validate(request: ValidateRequest):
    """Check a grid for repeated digits in any row, column or box."""
    try:
        valid = is_sudoku_valid(request.grid.cells)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if valid:
        return ValidateResponse(valid=True, message="Grid is valid")
    return ValidateResponse(
        valid=False, message="Grid repeats a digit in a row, column or box"
    )
