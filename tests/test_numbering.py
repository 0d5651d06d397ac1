from bsqsolver.mapfile import Cell, parse_map
from bsqsolver.numbering import (
    has_empty_cell,
    look_around,
    put_corner,
    put_numbers,
    put_obstacle_around,
)

E = Cell.EMPTY
O = Cell.OBSTACLE


def _empty(rows, cols):
    return [[E] * cols for _ in range(rows)]


def test_look_around_finds_neighbour():
    grid = [[E, E, E], [E, E, E], [E, E, O]]
    assert look_around(grid, 1, 1, O)
    assert not look_around(grid, 0, 0, O)


def test_look_around_ignores_self():
    grid = [[O]]
    assert not look_around(grid, 0, 0, O)


def test_put_corner_marks_border_only():
    grid = _empty(3, 3)
    put_corner(grid)
    border = [grid[r][c] for r in range(3) for c in range(3) if (r, c) != (1, 1)]
    assert border == [1] * 8
    assert grid[1][1] == E


def test_put_corner_keeps_obstacles():
    grid = [[O, E], [E, O]]
    put_corner(grid)
    assert grid == [[O, 1], [1, O]]


def test_put_obstacle_around():
    grid = _empty(5, 5)
    grid[2][2] = O
    put_obstacle_around(grid)
    ring = [grid[r][c] for r in range(1, 4) for c in range(1, 4) if (r, c) != (2, 2)]
    assert ring == [1] * 8
    assert grid[0][0] == E


def test_has_empty_cell():
    grid = _empty(3, 3)
    assert has_empty_cell(grid)
    put_corner(grid)
    grid[1][1] = 1
    assert not has_empty_cell(grid)


def test_has_empty_cell_ignores_first_row_and_column():
    grid = [[E, E], [E, O]]
    assert not has_empty_cell(grid)


def test_put_numbers_centre_of_square():
    grid = _empty(5, 5)
    put_numbers(grid)
    assert grid[2][2] == 3


def test_put_numbers_invariants():
    text = "6.ox\n........\n..o.....\n........\n.....o..\n........\n........\n"
    grid = parse_map(text).grid
    obstacles = {(r, c) for r, line in enumerate(grid) for c, v in enumerate(line) if v == O}
    put_numbers(grid)
    assert not any(v == E for line in grid for v in line)
    assert {(r, c) for r, line in enumerate(grid) for c, v in enumerate(line) if v == O} == obstacles
    for r, line in enumerate(grid):
        for c, v in enumerate(line):
            if v == O:
                continue
            on_border = r in (0, len(grid) - 1) or c in (0, len(line) - 1)
            if on_border or look_around(grid, r, c, O):
                assert v == 1
            else:
                assert v > 1 and look_around(grid, r, c, v - 1)
                assert not look_around(grid, r, c, O)