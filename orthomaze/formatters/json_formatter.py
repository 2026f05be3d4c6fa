"""JSON records describing a grid's wall bits and block layout."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from orthomaze.base import Formatter, PathLike, Saveable
from orthomaze.errors import MazeSaveError
from orthomaze.grid.blocks import to_block_array
from orthomaze.grid.grid import Grid


@dataclass
class JsonData(Saveable):
    """Serializable maze record."""

    payload: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.payload)

    def save(self, path: PathLike) -> str:
        try:
            target = self.prepare_path(path)
            target.write_text(json.dumps(self.payload, indent=2), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            raise MazeSaveError(path, str(exc)) from exc
        return str(path)


class JsonFormatter(Formatter[JsonData]):
    """Records dimensions, per-cell wall bits and the block matrix."""

    def __init__(self, *, include_blocks: bool = True) -> None:
        self.include_blocks = include_blocks

    def format(self, grid: Grid) -> JsonData:
        cells: List[List[int]] = [[int(cell) for cell in row] for row in grid.rows()]
        payload: Dict[str, Any] = {
            "width": grid.width,
            "height": grid.height,
            "cells": cells,
        }
        if self.include_blocks:
            payload["maze_grid"] = to_block_array(grid).tolist()
        return JsonData(payload)


def _require_int(value: Any, what: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{what} must be an integer, got {value!r}")
    return value


def grid_from_dict(record: Dict[str, Any]) -> Grid:
    """Rebuild a grid from a record produced by :class:`JsonFormatter`."""

    if not isinstance(record, dict):
        raise ValueError("Maze record must be a JSON object")
    missing = {"width", "height", "cells"} - set(record)
    if missing:
        raise ValueError(f"Maze record is missing {sorted(missing)}")
    width = _require_int(record["width"], "Maze width")
    height = _require_int(record["height"], "Maze height")
    rows = record["cells"]
    if not isinstance(rows, list) or len(rows) != height:
        raise ValueError(f"Expected {height} rows of cells")
    flat: List[int] = []
    for row in rows:
        if not isinstance(row, list) or len(row) != width:
            raise ValueError(f"Expected {width} cells per row")
        flat.extend(_require_int(value, "Cell wall bits") for value in row)
    return Grid.from_cells(width, height, flat)


def load_grid(path: PathLike) -> Grid:
    """Read a JSON maze record from ``path``."""

    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return grid_from_dict(raw)


__all__ = ["JsonFormatter", "JsonData", "grid_from_dict", "load_grid"]
