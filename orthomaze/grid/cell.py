"""Wall flags for a single square cell."""

from __future__ import annotations

import enum
from typing import Dict, Tuple


class Cell(enum.IntFlag):
    """Set of walls present on the four sides of a cell."""

    NORTH = 1
    SOUTH = 2
    EAST = 4
    WEST = 8
    ALL = NORTH | SOUTH | EAST | WEST

    def has_wall(self, direction: "Cell") -> bool:
        return bool(self & direction)

    def without(self, direction: "Cell") -> "Cell":
        return Cell(self & ~direction & Cell.ALL)

    def with_wall(self, direction: "Cell") -> "Cell":
        return Cell(self | direction)

    def wall_count(self) -> int:
        return sum(1 for direction in DIRECTIONS if self.has_wall(direction))


DIRECTIONS: Tuple[Cell, ...] = (Cell.NORTH, Cell.SOUTH, Cell.EAST, Cell.WEST)

_OPPOSITES: Dict[Cell, Cell] = {
    Cell.NORTH: Cell.SOUTH,
    Cell.SOUTH: Cell.NORTH,
    Cell.EAST: Cell.WEST,
    Cell.WEST: Cell.EAST,
}

# (dx, dy) with the origin at the top-left corner
_OFFSETS: Dict[Cell, Tuple[int, int]] = {
    Cell.NORTH: (0, -1),
    Cell.SOUTH: (0, 1),
    Cell.EAST: (1, 0),
    Cell.WEST: (-1, 0),
}


def as_direction(direction: Cell) -> Cell:
    """Validate that ``direction`` names exactly one side of a cell."""

    if direction not in _OPPOSITES:
        raise ValueError(f"Expected a single cardinal direction, got {direction!r}")
    return Cell(direction)


def opposite(direction: Cell) -> Cell:
    """Return the direction facing ``direction`` across a shared wall."""

    return _OPPOSITES[as_direction(direction)]


def offset(direction: Cell) -> Tuple[int, int]:
    """Return the ``(dx, dy)`` step towards the neighbour in ``direction``."""

    return _OFFSETS[as_direction(direction)]


__all__ = ["Cell", "DIRECTIONS", "as_direction", "opposite", "offset"]
