"""ASCII rendering of a maze grid.

The picture uses underscores for horizontal walls and vertical bars for
vertical walls. Each cell takes two columns: its floor and the wall to its
east. A 2x1 grid with a single carved passage renders as::

     ___ 
    |___|
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

from orthomaze.grid.cell import Cell

if TYPE_CHECKING:
    from orthomaze.grid.grid import Grid

FLOOR = "_"
SIDE = "|"
OPEN = " "


def _top_border(width: int) -> str:
    return OPEN + FLOOR * (2 * width - 1) + OPEN


def _render_row(row: Sequence[Cell]) -> str:
    chars: List[str] = [SIDE if row[0].has_wall(Cell.WEST) else OPEN]
    last = len(row) - 1
    for x, cell in enumerate(row):
        has_floor = cell.has_wall(Cell.SOUTH)
        chars.append(FLOOR if has_floor else OPEN)
        if cell.has_wall(Cell.EAST):
            chars.append(SIDE)
        elif x < last and has_floor and row[x + 1].has_wall(Cell.SOUTH):
            # floor continues under an open side
            chars.append(FLOOR)
        else:
            chars.append(OPEN)
    return "".join(chars)


def render_ascii(grid: "Grid") -> str:
    """Render ``grid`` as ``height + 1`` newline-terminated lines."""

    lines = [_top_border(grid.width)]
    lines.extend(_render_row(row) for row in grid.rows())
    return "".join(line + "\n" for line in lines)


__all__ = ["render_ascii"]
