"""Rectangular grid of wall-flagged cells addressed by ``(x, y)``."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Optional, Tuple

from orthomaze.display import render_ascii
from orthomaze.errors import OutOfBoundsError
from orthomaze.grid.cell import Cell, as_direction, offset, opposite

logger = logging.getLogger(__name__)

Coords = Tuple[int, int]


class Grid:
    """A ``width`` x ``height`` grid of cells, origin at the top-left.

    Every cell starts fully walled. Passages are opened with
    :meth:`carve_passage`, which keeps the shared wall of two neighbours in
    agreement. :meth:`add_wall` touches a single cell only and may leave the
    grid inconsistent on purpose.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        self._width = int(width)
        self._height = int(height)
        self._cells: List[List[Cell]] = [[Cell.ALL for _ in range(self._width)] for _ in range(self._height)]

    @classmethod
    def from_cells(cls, width: int, height: int, cells: Iterable[int]) -> "Grid":
        """Rebuild a grid from row-major wall bits."""

        grid = cls(width, height)
        values = [int(value) for value in cells]
        if len(values) != grid._width * grid._height:
            raise ValueError(
                f"Expected {grid._width * grid._height} cells for a {width}x{height} grid, got {len(values)}"
            )
        for index, value in enumerate(values):
            if value < 0 or value & ~int(Cell.ALL):
                raise ValueError(f"Invalid wall bits {value} at cell index {index}")
            y, x = divmod(index, grid._width)
            grid._cells[y][x] = Cell(value)
        return grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, coords: Coords) -> bool:
        x, y = coords
        return 0 <= x < self._width and 0 <= y < self._height

    def _check_bounds(self, coords: Coords) -> Coords:
        x, y = coords
        if not self.in_bounds((x, y)):
            raise OutOfBoundsError((x, y), self._width, self._height)
        return x, y

    def __getitem__(self, coords: Coords) -> Cell:
        x, y = self._check_bounds(coords)
        return self._cells[y][x]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells row by row, left to right within a row."""

        for row in self._cells:
            yield from row

    def rows(self) -> Iterator[Tuple[Cell, ...]]:
        for row in self._cells:
            yield tuple(row)

    def neighbor(self, coords: Coords, direction: Cell) -> Optional[Coords]:
        """Return the in-bounds coordinate adjacent to ``coords``, or ``None`` at the edge."""

        x, y = coords
        dx, dy = offset(direction)
        candidate = (x + dx, y + dy)
        return candidate if self.in_bounds(candidate) else None

    def carve_passage(self, coords: Coords, direction: Cell) -> None:
        """Open the wall on ``direction`` of ``coords`` and the matching wall of its neighbour.

        Carving towards the outer edge only clears the local wall, which leaves
        an opening to the outside. Invalid input raises before any cell changes.
        """

        x, y = self._check_bounds(coords)
        direction = as_direction(direction)
        facing = opposite(direction)
        target = self.neighbor((x, y), direction)

        self._cells[y][x] = self._cells[y][x].without(direction)
        if target is not None:
            nx, ny = target
            self._cells[ny][nx] = self._cells[ny][nx].without(facing)
        logger.debug(f"Carved {direction.name} at {(x, y)} (neighbor {target})")

    def add_wall(self, coords: Coords, direction: Cell) -> None:
        """Set one wall bit on a single cell without updating its neighbour."""

        x, y = self._check_bounds(coords)
        direction = as_direction(direction)
        self._cells[y][x] = self._cells[y][x].with_wall(direction)

    def copy(self) -> "Grid":
        return Grid.from_cells(self._width, self._height, (int(cell) for cell in self.cells()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._width == other._width
            and self._height == other._height
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return f"Grid(width={self._width}, height={self._height})"

    def __str__(self) -> str:
        return render_ascii(self)


__all__ = ["Grid", "Coords"]
