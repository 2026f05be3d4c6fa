"""Exception types raised by the maze toolkit."""

from __future__ import annotations

from typing import Tuple


class MazeError(Exception):
    """Base class for maze errors."""


class OutOfBoundsError(MazeError, IndexError):
    """Raised when a coordinate falls outside the grid."""

    def __init__(self, coords: Tuple[int, int], width: int, height: int) -> None:
        self.coords = coords
        self.width = width
        self.height = height
        super().__init__(f"Coordinate {coords} is outside a {width}x{height} grid")


class MazeSaveError(MazeError):
    """Raised when formatted maze data cannot be written to its destination."""

    def __init__(self, path: object, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Failed to save maze to {self.path}: {reason}")


__all__ = ["MazeError", "OutOfBoundsError", "MazeSaveError"]
