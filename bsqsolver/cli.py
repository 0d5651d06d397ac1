"""Command line entry point: solve each map and print it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

from bsqsolver.mapfile import Cell, GameMap, MapError, load_map, parse_map
from bsqsolver.numbering import put_numbers
from bsqsolver.square import draw_square


def remove_numbers(grid: list[list[int]]) -> None:
    """Turn every distance label back into an empty cell, in place."""
    for line in grid:
        line[:] = [Cell.EMPTY if value > 0 else value for value in line]


def format_map(game_map: GameMap) -> str:
    """Render a map as text, one line per row."""
    return "".join(
        "".join(game_map.symbol(value) for value in line) + "\n" for line in game_map.grid
    )


def solve(game_map: GameMap) -> GameMap:
    """Fill the largest square on the map in place and return the map."""
    put_numbers(game_map.grid)
    draw_square(game_map.grid)
    remove_numbers(game_map.grid)
    return game_map


def render_text(text: str) -> str:
    """Parse, solve and render the text of a map."""
    return format_map(solve(parse_map(text)))


def render_file(path: str | os.PathLike[str]) -> str:
    """Load, solve and render a map file."""
    return format_map(solve(load_map(path)))


def _render_and_print(source, renderer) -> None:
    try:
        output = renderer(source)
    except MapError:
        sys.stdout.write("map error\n")
    except OSError:
        sys.stderr.write("map error\n")
    else:
        sys.stdout.write(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve each named map, or the map given on standard input."""
    paths = list(sys.argv[1:] if argv is None else argv)
    if not paths:
        _render_and_print(sys.stdin.read(), render_text)
        return 0
    for index, path in enumerate(paths):
        if index:
            sys.stdout.write("\n")
        _render_and_print(path, render_file)
    return 0


if __name__ == "__main__":
    sys.exit(main())