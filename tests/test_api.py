"""Tests for the HTTP API routes."""

import pytest
from fastapi.testclient import TestClient

from sudoku_backend import __version__
from sudoku_backend.main import app


@pytest.fixture
def client():
    return TestClient(app)


def _body(cells):
    return {"grid": {"cells": cells}}


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_solve_classic_puzzle(client, classic_puzzle, classic_solution):
    response = client.post("/api/v1/sudoku:solve", json=_body(classic_puzzle))

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is True
    assert data["original"] == classic_puzzle
    assert data["solved"] == classic_solution
    assert data["tries"] > 0
    assert data["elapsed_ms"] >= 0
    assert data["message"] == "Puzzle solved successfully"


def test_solve_conflicting_givens(client, empty_grid):
    empty_grid[0][0] = 5
    empty_grid[0][4] = 5

    response = client.post("/api/v1/sudoku:solve", json=_body(empty_grid))

    assert response.status_code == 200
    data = response.json()
    assert data["success"] is False
    assert data["solved"] is None
    assert data["tries"] == 0
    assert data["message"] == "Puzzle is invalid"


def test_solve_unsolvable_puzzle(client, empty_grid):
    empty_grid[0] = [1, 2, 3, 4, 5, 6, 7, 8, 0]
    empty_grid[1][8] = 9

    response = client.post("/api/v1/sudoku:solve", json=_body(empty_grid))

    data = response.json()
    assert data["success"] is False
    assert data["tries"] == 9
    assert data["message"] == "Puzzle has no solution"


@pytest.mark.parametrize(
    "cells",
    [
        [[0] * 9] * 8,
        [[0] * 8] * 9,
        [[10] + [0] * 8] + [[0] * 9] * 8,
        [[-3] + [0] * 8] + [[0] * 9] * 8,
    ],
)
def test_solve_rejects_malformed_grid(client, cells):
    response = client.post("/api/v1/sudoku:solve", json=_body(cells))

    assert response.status_code == 400
    assert "must" in response.json()["detail"]


def test_solve_rejects_non_integer_cells(client):
    cells = [["x"] * 9] * 9

    response = client.post("/api/v1/sudoku:solve", json=_body(cells))

    assert response.status_code == 422


def test_validate(client, classic_puzzle):
    response = client.post("/api/v1/sudoku:validate", json=_body(classic_puzzle))

    assert response.status_code == 200
    assert response.json() == {"valid": True, "message": "Grid is valid"}


def test_validate_duplicate_in_box(client, empty_grid):
    empty_grid[3][3] = 4
    empty_grid[5][5] = 4

    response = client.post("/api/v1/sudoku:validate", json=_body(empty_grid))

    assert response.status_code == 200
    assert response.json()["valid"] is False


def test_validate_rejects_malformed_grid(client):
    response = client.post("/api/v1/sudoku:validate", json=_body([[0] * 9]))

    assert response.status_code == 400


@pytest.mark.parametrize("cell", [True, 1.0, "2"], ids=["bool", "float", "string"])
@pytest.mark.parametrize("path", ["/api/v1/sudoku:solve", "/api/v1/sudoku:validate"])
def test_rejects_cells_that_are_not_json_integers(client, empty_grid, path, cell):
    empty_grid[0][0] = cell

    response = client.post(path, json=_body(empty_grid))

    assert response.status_code == 422
