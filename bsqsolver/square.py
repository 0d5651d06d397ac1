"""Locate the largest labelled square and fill it."""

from __future__ import annotations

from bsqsolver.mapfile import Cell


def find_max(grid: list[list[int]]) -> tuple[int, tuple[int, int] | None]:
    """Return the largest label and the first cell holding it, row by row."""
    best = 0
    position: tuple[int, int] | None = None
    for r, line in enumerate(grid):
        for c, value in enumerate(line):
            if value > best:
                best, position = value, (r, c)
    return best, position


def find_even_block(grid: list[list[int]], value: int) -> tuple[int, int] | None:
    """Return the top-left corner of the first 2x2 block of value, if any."""
    for r, (top, bottom) in enumerate(zip(grid, grid[1:])):
        for c in range(len(top) - 1):
            if top[c] == top[c + 1] == bottom[c] == bottom[c + 1] == value:
                return r, c
    return None


def draw_square(grid: list[list[int]]) -> int:
    """Fill the square around the largest label in place; return its side."""
    value, centre = find_max(grid)
    if centre is None:
        return 0
    before = after = value - 1
    block = find_even_block(grid, value)
    if block is not None:
        centre = block
        after += 1
    row, col = centre
    for r in range(row - before, row + after + 1):
        for c in range(col - before, col + after + 1):
            grid[r][c] = Cell.FULL
    return before + after + 1