"""Orthogonal maze built on a square-cell grid."""

from __future__ import annotations

import logging
from typing import Optional

from orthomaze.base import Formatter, PathLike, Saveable
from orthomaze.display import render_ascii
from orthomaze.grid.grid import Grid

logger = logging.getLogger(__name__)


class OrthogonalMaze:
    """A standard orthogonal maze where each square cell keeps up to four walls.

    The maze owns its :class:`Grid`. Carving algorithms work on the grid
    returned by :attr:`grid`; nothing else mutates it.
    """

    def __init__(self, width: int, height: int, *, grid: Optional[Grid] = None) -> None:
        if grid is None:
            grid = Grid(width, height)
        elif (grid.width, grid.height) != (width, height):
            raise ValueError(f"Grid is {grid.width}x{grid.height}, expected {width}x{height}")
        self._grid = grid

    @classmethod
    def from_grid(cls, grid: Grid) -> "OrthogonalMaze":
        return cls(grid.width, grid.height, grid=grid)

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def width(self) -> int:
        return self._grid.width

    @property
    def height(self) -> int:
        return self._grid.height

    def is_valid(self) -> bool:
        """Return ``False`` if any cell has lost all four walls.

        This is a per-cell check only. Disconnected or unreachable regions
        still count as valid.
        """

        return all(cell.wall_count() > 0 for cell in self._grid.cells())

    def save(self, path: PathLike, formatter: Formatter[Saveable]) -> str:
        """Format the grid with ``formatter`` and write the result to ``path``."""

        data = formatter.format(self._grid)
        saved = data.save(path)
        logger.info(f"Saved {self.width}x{self.height} maze to {saved}")
        return saved

    def __str__(self) -> str:
        return render_ascii(self._grid)


__all__ = ["OrthogonalMaze"]
