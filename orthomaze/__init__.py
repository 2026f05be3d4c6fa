"""Orthogonal maze grids with wall carving, ASCII display and pluggable output formats."""

__all__ = [
    "Cell",
    "DIRECTIONS",
    "Grid",
    "OrthogonalMaze",
    "Formatter",
    "Saveable",
    "PathLike",
    "MazeError",
    "OutOfBoundsError",
    "MazeSaveError",
    "render_ascii",
    "to_block_array",
    "AsciiFormatter",
    "TextData",
    "JsonFormatter",
    "JsonData",
    "ImageFormatter",
    "ImageData",
    "load_grid",
]

from .errors import MazeError, MazeSaveError, OutOfBoundsError
from .grid import DIRECTIONS, Cell, Grid, to_block_array
from .display import render_ascii
from .base import Formatter, PathLike, Saveable
from .maze import OrthogonalMaze
from .formatters import (
    AsciiFormatter,
    TextData,
    JsonFormatter,
    JsonData,
    ImageFormatter,
    ImageData,
    load_grid,
)
