from __future__ import annotations

from pathlib import Path

import numpy as np
import pytest

from mazecam.grid import Grid, TileGrid
from mazecam.linalg import Vec3
from mazecam.maze import DEFAULT_MAZE, default_grid, find_open_cell, load_maze, parse_maze


def _rows(grid: Grid) -> list[list[int]]:
    return [[int(grid.cell_at(r, c)) for c in range(grid.width())] for r in range(grid.height())]


def test_tile_grid_lookups() -> None:
    grid = TileGrid.from_rows([[0, 1, 0], [1, 0, 0]])

    assert grid.width() == 3
    assert grid.height() == 2
    assert grid.cell_at(0, 1)
    assert grid.cell_at(1, 0)
    assert not grid.cell_at(1, 2)
    assert grid.blocked_cells() == [(0, 1), (1, 0)]
    assert _rows(grid) == [[0, 1, 0], [1, 0, 0]]


def test_tile_grid_is_read_only() -> None:
    cells = np.zeros((2, 2), dtype=np.uint8)
    grid = TileGrid(cells)
    cells[0, 0] = 1

    assert not grid.cell_at(0, 0)


@pytest.mark.parametrize(
    "rows",
    (
        [],
        [[0, 1], [0]],
        [[0, 2], [0, 0]],
        [[0, -1]],
    ),
)
def test_tile_grid_rejects_bad_rows(rows) -> None:
    with pytest.raises(ValueError):
        TileGrid.from_rows(rows)


def test_tile_grid_rejects_non_2d_array() -> None:
    with pytest.raises(ValueError):
        TileGrid(np.zeros(4, dtype=np.uint8))


def test_default_maze_is_10x10_and_walled() -> None:
    grid = default_grid()

    assert grid.width() == 10
    assert grid.height() == 10
    assert _rows(grid) == DEFAULT_MAZE
    for i in range(10):
        assert grid.cell_at(0, i)
        assert grid.cell_at(9, i)
        assert grid.cell_at(i, 0)
        assert grid.cell_at(i, 9)


def test_parse_maze_text() -> None:
    text = """
    ; a small room
    ####
    #..#   ; door goes here later
    #. #
    ####
    """
    grid = parse_maze("\n".join(line.strip() for line in text.splitlines()))

    assert _rows(grid) == [
        [1, 1, 1, 1],
        [1, 0, 0, 1],
        [1, 0, 0, 1],
        [1, 1, 1, 1],
    ]


def test_parse_maze_accepts_digits() -> None:
    grid = parse_maze("101\n000\n")

    assert _rows(grid) == [[1, 0, 1], [0, 0, 0]]


def test_parse_maze_reports_line_of_bad_character() -> None:
    with pytest.raises(ValueError, match="line 2"):
        parse_maze("###\n#x#\n###\n")


def test_parse_maze_rejects_ragged_rows() -> None:
    with pytest.raises(ValueError, match="line 2"):
        parse_maze("###\n##\n")


def test_parse_maze_rejects_empty_text() -> None:
    with pytest.raises(ValueError):
        parse_maze("; nothing\n\n")


def test_load_maze_from_file(tmp_path: Path) -> None:
    path = tmp_path / "room.txt"
    path.write_text("###\n#.#\n###\n", encoding="utf-8")
    grid = load_maze(path)

    assert grid.width() == 3
    assert grid.height() == 3
    assert not grid.cell_at(1, 1)


def test_find_open_cell_returns_cell_centre() -> None:
    spawn = find_open_cell(default_grid(), 2.0, y=1.0)

    assert spawn == Vec3(3.0, 1.0, 3.0)


def test_find_open_cell_fails_on_solid_maze() -> None:
    with pytest.raises(ValueError):
        find_open_cell(TileGrid.from_rows([[1, 1], [1, 1]]), 1.0)


class _SetGrid:
    """Grid backed by a set of blocked (row, col) pairs."""

    def __init__(self, blocked: set[tuple[int, int]], w: int, h: int):
        self.blocked = blocked
        self.w = w
        self.h = h

    def cell_at(self, row: int, col: int) -> bool:
        return (row, col) in self.blocked

    def width(self) -> int:
        return self.w

    def height(self) -> int:
        return self.h


def test_find_open_cell_accepts_any_grid() -> None:
    grid = _SetGrid({(0, 0), (0, 1), (0, 2), (1, 0)}, w=3, h=2)

    assert find_open_cell(grid, 1.0) == Vec3(1.5, 0.0, 1.5)
