"""Plain-text formatter producing the ASCII maze picture."""

from __future__ import annotations

from dataclasses import dataclass

from orthomaze.base import Formatter, PathLike, Saveable
from orthomaze.display import render_ascii
from orthomaze.errors import MazeSaveError
from orthomaze.grid.grid import Grid


@dataclass
class TextData(Saveable):
    text: str

    def save(self, path: PathLike) -> str:
        try:
            target = self.prepare_path(path)
            target.write_text(self.text, encoding="utf-8")
        except OSError as exc:
            raise MazeSaveError(path, str(exc)) from exc
        return str(path)


class AsciiFormatter(Formatter[TextData]):
    """Formats a grid with the same picture ``str(grid)`` shows."""

    def format(self, grid: Grid) -> TextData:
        return TextData(render_ascii(grid))


__all__ = ["AsciiFormatter", "TextData"]
