from __future__ import annotations

import logging
from pathlib import Path

from .grid import BLOCKED, OPEN, Grid, TileGrid
from .linalg import Vec3

logger = logging.getLogger(__name__)

# 10x10 reference layout. Row index is Z, column index is X.
DEFAULT_MAZE = [
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1, 0, 0, 0, 0, 1],
    [1, 0, 1, 0, 1, 0, 1, 1, 0, 1],
    [1, 0, 1, 0, 0, 0, 0, 1, 0, 1],
    [1, 0, 1, 1, 1, 1, 0, 1, 0, 1],
    [1, 0, 0, 0, 0, 1, 0, 0, 0, 1],
    [1, 1, 1, 1, 0, 1, 1, 1, 0, 1],
    [1, 0, 0, 0, 0, 0, 0, 1, 0, 1],
    [1, 0, 1, 1, 1, 1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
]

_CELL_CHARS = {
    "#": BLOCKED,
    "1": BLOCKED,
    ".": OPEN,
    "0": OPEN,
    " ": OPEN,
}


def default_grid() -> TileGrid:
    return TileGrid.from_rows(DEFAULT_MAZE)


def parse_maze(text: str) -> TileGrid:
    """Parse a maze drawn as text.

    `#` or `1` is a wall, `.`, `0` or space is floor. Everything after `;`
    on a line is a comment; lines that are blank after stripping the comment
    are skipped.
    """
    rows: list[list[int]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split(";", 1)[0].rstrip()
        if not line.strip():
            continue
        row = []
        for ch in line:
            cell = _CELL_CHARS.get(ch)
            if cell is None:
                raise ValueError(f"line {lineno}: unexpected character {ch!r}")
            row.append(cell)
        if rows and len(row) != len(rows[0]):
            raise ValueError(f"line {lineno}: expected {len(rows[0])} cells, got {len(row)}")
        rows.append(row)
    if not rows:
        raise ValueError("maze is empty")
    return TileGrid.from_rows(rows)


def load_maze(path: str | Path) -> TileGrid:
    p = Path(path)
    grid = parse_maze(p.read_text(encoding="utf-8"))
    logger.info("loaded maze %s (%dx%d)", p, grid.width(), grid.height())
    return grid


def find_open_cell(grid: Grid, tile_size: float, y: float = 0.0) -> Vec3:
    """Centre of the first open cell in row-major order."""
    for row in range(grid.height()):
        for col in range(grid.width()):
            if not grid.cell_at(row, col):
                return Vec3((col + 0.5) * tile_size, y, (row + 0.5) * tile_size)
    raise ValueError("maze has no open cell")
