from __future__ import annotations

from typing import Protocol, Sequence

import numpy as np

OPEN = 0
BLOCKED = 1


class Grid(Protocol):
    """Read-only occupancy lookup used by the collision probe.

    Rows run along Z, columns along X.
    """

    def cell_at(self, row: int, col: int) -> bool: ...

    def width(self) -> int: ...

    def height(self) -> int: ...


class TileGrid:
    """Occupancy grid backed by a contiguous uint8 array (0 = open, 1 = blocked)."""

    def __init__(self, cells: np.ndarray):
        if cells.ndim != 2 or cells.size == 0:
            raise ValueError(f"grid must be a non-empty 2D array, got shape {cells.shape}")
        bad = (cells != OPEN) & (cells != BLOCKED)
        if bad.any():
            row, col = (int(i) for i in np.argwhere(bad)[0])
            raise ValueError(f"cell ({row}, {col}) must be 0 or 1, got {cells[row, col]!r}")
        self._cells = cells.astype(np.uint8)
        self._cells.flags.writeable = False

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> TileGrid:
        if not rows:
            raise ValueError("grid needs at least one row")
        w = len(rows[0])
        for i, row in enumerate(rows):
            if len(row) != w:
                raise ValueError(f"row {i} has {len(row)} cells, expected {w}")
        return cls(np.array(rows, dtype=np.int64))

    def cell_at(self, row: int, col: int) -> bool:
        return bool(self._cells[row, col] == BLOCKED)

    def width(self) -> int:
        return int(self._cells.shape[1])

    def height(self) -> int:
        return int(self._cells.shape[0])

    def blocked_cells(self) -> list[tuple[int, int]]:
        """(row, col) of every blocked cell, row-major order."""
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == BLOCKED)]
