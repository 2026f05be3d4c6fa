"""Cells, grids and carving primitives."""

__all__ = [
    "Cell",
    "DIRECTIONS",
    "opposite",
    "offset",
    "Grid",
    "Coords",
    "WALL",
    "PATH",
    "to_block_array",
]

from .cell import DIRECTIONS, Cell, offset, opposite
from .grid import Coords, Grid
from .blocks import PATH, WALL, to_block_array
