"""Abstract interfaces for turning a grid into data and persisting it."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar, Union

from orthomaze.grid.grid import Grid

PathLike = Union[str, Path]
DataT = TypeVar("DataT", bound="Saveable")


class Saveable(ABC):
    """Formatted maze data that knows how to write itself to a path."""

    @abstractmethod
    def save(self, path: PathLike) -> str:
        """Write the data to ``path`` and return it as a string.

        Implementations raise :class:`~orthomaze.errors.MazeSaveError` when the
        destination cannot be written.
        """

    @staticmethod
    def prepare_path(path: PathLike) -> Path:
        """Resolve ``path`` and create its parent directory when missing."""

        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        return target


class Formatter(ABC, Generic[DataT]):
    """Converts a grid into a saveable representation."""

    @abstractmethod
    def format(self, grid: Grid) -> DataT:
        """Produce serialized data for ``grid``. Must accept any grid."""


__all__ = ["Formatter", "Saveable", "PathLike"]
