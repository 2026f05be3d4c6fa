"""Block-matrix view of a grid where rooms and walls share one raster."""

from __future__ import annotations

import numpy as np

from orthomaze.grid.cell import Cell
from orthomaze.grid.grid import Grid

WALL = 1
PATH = 0


def to_block_array(grid: Grid) -> np.ndarray:
    """Return a ``(2 * height + 1, 2 * width + 1)`` array of ``WALL``/``PATH`` blocks.

    Cell ``(x, y)`` occupies block ``[2y + 1, 2x + 1]``. Blocks between two
    cells are walls when either side reports the wall; corner blocks are
    always walls.
    """

    blocks = np.full((2 * grid.height + 1, 2 * grid.width + 1), WALL, dtype=np.uint8)
    for y, row in enumerate(grid.rows()):
        r = 2 * y + 1
        for x, cell in enumerate(row):
            c = 2 * x + 1
            blocks[r, c] = PATH
            if not cell.has_wall(Cell.NORTH) and (y == 0 or not grid[x, y - 1].has_wall(Cell.SOUTH)):
                blocks[r - 1, c] = PATH
            if not cell.has_wall(Cell.WEST) and (x == 0 or not row[x - 1].has_wall(Cell.EAST)):
                blocks[r, c - 1] = PATH
            if y == grid.height - 1 and not cell.has_wall(Cell.SOUTH):
                blocks[r + 1, c] = PATH
            if x == grid.width - 1 and not cell.has_wall(Cell.EAST):
                blocks[r, c + 1] = PATH
    return blocks


__all__ = ["WALL", "PATH", "to_block_array"]
