"""Label empty cells with their distance from the edge or an obstacle."""

from __future__ import annotations

from collections.abc import Iterator

from bsqsolver.mapfile import Cell


def _neighbours(grid: list[list[int]], row: int, col: int) -> Iterator[int]:
    for r in range(max(row - 1, 0), min(row + 2, len(grid))):
        line = grid[r]
        for c in range(max(col - 1, 0), min(col + 2, len(line))):
            if (r, c) != (row, col):
                yield line[c]


def look_around(grid: list[list[int]], row: int, col: int, value: int) -> bool:
    """Tell whether any of the eight neighbours of a cell holds value."""
    return any(v == value for v in _neighbours(grid, row, col))


def put_corner(grid: list[list[int]]) -> None:
    """Mark every empty cell on the border with 1."""
    last_row = len(grid) - 1
    for r, line in enumerate(grid):
        last_col = len(line) - 1
        for c, value in enumerate(line):
            if value == Cell.EMPTY and (r in (0, last_row) or c in (0, last_col)):
                line[c] = 1


def put_obstacle_around(grid: list[list[int]]) -> None:
    """Mark every empty cell touching an obstacle with 1."""
    for r, line in enumerate(grid[1:], start=1):
        for c, value in enumerate(line[1:], start=1):
            if value == Cell.EMPTY and look_around(grid, r, c, Cell.OBSTACLE):
                line[c] = 1


def has_empty_cell(grid: list[list[int]]) -> bool:
    """Tell whether an unlabelled cell remains outside the first row and column."""
    return any(v == Cell.EMPTY for line in grid[1:] for v in line[1:])


def put_numbers(grid: list[list[int]]) -> None:
    """Label all empty cells in place, growing inward one ring per pass."""
    put_corner(grid)
    put_obstacle_around(grid)
    number = 2
    while has_empty_cell(grid):
        for r, line in enumerate(grid[1:-1], start=1):
            for c, value in enumerate(line[1:-1], start=1):
                if value == Cell.EMPTY and look_around(grid, r, c, number - 1):
                    line[c] = number
        number += 1