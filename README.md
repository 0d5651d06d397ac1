# bsqsolver

Reads a map of empty cells and obstacles, labels every empty cell with its
distance from the border or the nearest obstacle, fills the square around the
highest label and prints the map again with that square drawn in.

## Map format

The first line gives the number of map lines and then three characters: the
one for an empty cell, the one for an obstacle and the one used to fill the
square. The map lines follow, each ended by a newline and all of the same
width.

```
9.ox
...........................
....o......................
............o..............
...........................
....o......................
...............o...........
...........................
......o..............o.....
..o.......o................
```

A map is rejected with `MapError` ("map error") when:

- the header does not start with a line count or lacks the three characters;
- the line count is zero, the lines are empty, or the number of lines does
  not match the header;
- the lines are not all of the same width;
- a line holds a character that is neither the empty nor the obstacle one;
- the three characters are not distinct printable characters.

Text after the last newline is ignored.

## Command line

Install the package, then give one or more map files:

```
bsq map1.txt map2.txt
```

The solved maps are printed one after another, separated by a blank line.
A malformed map prints `map error` on standard output; a file that cannot be
read prints `map error` on standard error. With no arguments, the map is read
from standard input:

```
bsq < map1.txt
```

## Library use

```python
from bsqsolver.mapfile import load_map, parse_map, MapError
from bsqsolver.cli import solve, format_map, render_text, render_file

game_map = load_map("map1.txt")
solve(game_map)
print(format_map(game_map), end="")
```

- `bsqsolver.mapfile`: `parse_header`, `parse_map`, `load_map`, the
  `GameMap` dataclass (`empty`, `obstacle`, `full`, `grid`, `rows`, `cols`,
  `symbol`), the `Cell` markers and `MapError`.
- `bsqsolver.numbering`: `put_numbers` and its steps (`put_corner`,
  `put_obstacle_around`, `look_around`, `has_empty_cell`), which label a grid
  in place.
- `bsqsolver.square`: `find_max`, `find_even_block` and `draw_square`, which
  fills the square on a labelled grid in place and returns its side.
- `bsqsolver.cli`: `solve`, `remove_numbers`, `format_map`, and
  `render_text(text)` / `render_file(path)`, which do the whole job in one
  call and return the text that would be printed.

## Tests

```
pip install .[test]
pytest
```