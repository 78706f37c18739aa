"""Sudoku backtracking solver with a small HTTP API."""

__version__ = "1.0.0"
