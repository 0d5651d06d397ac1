"""Reading of map files: a header line followed by rows of cells."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass, field

_DIGITS = "0123456789"


class MapError(ValueError):
    """Raised when a map is malformed."""

    def __init__(self, message: str = "map error") -> None:
        super().__init__(message)


class Cell(enum.IntEnum):
    """Markers stored in a grid; positive numbers are distance labels."""

    EMPTY = -1
    OBSTACLE = -2
    FULL = -3


@dataclass
class GameMap:
    """A parsed map: its three symbols and a grid of cell values."""

    empty: str
    obstacle: str
    full: str
    grid: list[list[int]] = field(default_factory=list)

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def cols(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def symbol(self, value: int) -> str:
        """Return the character for a cell value, or "" for a number."""
        return {
            Cell.EMPTY: self.empty,
            Cell.OBSTACLE: self.obstacle,
            Cell.FULL: self.full,
        }.get(value, "")


def parse_header(line: str) -> tuple[int, str, str, str]:
    """Split a header such as "9.ox" into (rows, empty, obstacle, full)."""
    count = len(line) - len(line.lstrip(_DIGITS))
    if count == 0:
        raise MapError()
    symbols = line[count:count + 3]
    if len(symbols) < 3:
        raise MapError()
    return int(line[:count]), symbols[0], symbols[1], symbols[2]


def _printable(ch: str) -> bool:
    return 32 <= ord(ch) <= 127


def parse_map(text: str) -> GameMap:
    """Parse the full text of a map file."""
    header, _, body = text.partition("\n")
    rows, empty, obstacle, full = parse_header(header)
    # Text after the last newline is not a row and is ignored.
    lines = body.split("\n")[:-1]
    width = max((len(line) for line in lines), default=0)
    if rows == 0 or width == 0 or len(lines) != rows:
        raise MapError()

    symbols_valid = len({empty, obstacle, full}) == 3 and all(
        _printable(ch) for ch in (empty, obstacle, full)
    )
    codes = {empty: Cell.EMPTY, obstacle: Cell.OBSTACLE}
    grid: list[list[int]] = []
    for line in lines:
        if len(line) != width:
            raise MapError()
        row: list[int] = []
        for ch in line:
            if ch not in codes or not symbols_valid:
                raise MapError()
            row.append(codes[ch])
        grid.append(row)
    return GameMap(empty, obstacle, full, grid)


def load_map(path: str | os.PathLike[str]) -> GameMap:
    """Read and parse a map file; OSError propagates if it cannot be read."""
    with open(path, "rb") as handle:
        data = handle.read()
    return parse_map(data.decode("latin-1"))