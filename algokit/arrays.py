"""Fill two-dimensional grids with running numbers in various shapes."""

from __future__ import annotations

from itertools import count

Grid = list[list[int]]

_HOURGLASS_SIZE = 5


def _check_dimension(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def numbered_grid(rows: int, cols: int) -> Grid:
    """Return a rows x cols grid filled row by row with 1, 2, 3, ..."""
    _check_dimension("rows", rows)
    _check_dimension("cols", cols)
    numbers = count(1)
    return [[next(numbers) for _ in range(cols)] for _ in range(rows)]


def hourglass() -> Grid:
    """Return a 5 x 5 grid with running numbers laid out as an hourglass.

    Cells outside the hourglass hold 0.
    """
    size = _HOURGLASS_SIZE
    grid = [[0] * size for _ in range(size)]
    numbers = count(1)
    for row_index, row in enumerate(grid):
        start = min(row_index, size - 1 - row_index)
        for col in range(start, size - start):
            row[col] = next(numbers)
    return grid


def snail(size: int) -> Grid:
    """Return a size x size grid filled clockwise in a spiral from the top left."""
    _check_dimension("size", size)
    grid = [[0] * size for _ in range(size)]
    numbers = count(1)
    row, col = 0, -1
    step = 1
    run = size
    while run:
        for _ in range(run):
            col += step
            grid[row][col] = next(numbers)
        run -= 1
        for _ in range(run):
            row += step
            grid[row][col] = next(numbers)
        step = -step
    return grid


def triangle(size: int) -> Grid:
    """Return a right triangle: row i holds i + 1 running numbers."""
    _check_dimension("size", size)
    numbers = count(1)
    return [[next(numbers) for _ in range(row + 1)] for row in range(size)]


def reshape_transposed(rows: int, cols: int) -> tuple[Grid, Grid]:
    """Return a rows x cols numbered grid and its values refilled into cols x rows.

    The second grid takes the values of the first in reading order, so its
    shape is swapped while the sequence of values stays the same.
    """
    source = numbered_grid(rows, cols)
    values = iter([value for row in source for value in row])
    target = [[next(values) for _ in range(rows)] for _ in range(cols)]
    return source, target


def format_grid(grid: Grid) -> str:
    """Render a grid with each value followed by a tab and each row by a newline."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in grid)