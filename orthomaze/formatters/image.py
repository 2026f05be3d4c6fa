"""Raster formatter drawing the block matrix with Pillow."""

from __future__ import annotations

from typing import Tuple

from PIL import Image, ImageDraw

from orthomaze.base import Formatter, PathLike, Saveable
from orthomaze.errors import MazeSaveError
from orthomaze.grid.blocks import WALL, to_block_array
from orthomaze.grid.grid import Grid

WALL_COLOR = (0, 0, 0)
PATH_COLOR = (255, 255, 255)


class ImageData(Saveable):
    """Rendered maze image; the file extension picks the encoding."""

    def __init__(self, image: Image.Image) -> None:
        self.image = image

    @property
    def size(self) -> Tuple[int, int]:
        return self.image.size

    def save(self, path: PathLike) -> str:
        try:
            target = self.prepare_path(path)
            self.image.save(target)
        except (OSError, ValueError) as exc:
            raise MazeSaveError(path, str(exc)) from exc
        return str(path)


class ImageFormatter(Formatter[ImageData]):
    """Draw each wall or path block as a filled square of ``block_size`` pixels."""

    DEFAULT_BLOCK_SIZE = 16

    def __init__(
        self,
        *,
        block_size: int = DEFAULT_BLOCK_SIZE,
        wall_color: Tuple[int, int, int] = WALL_COLOR,
        path_color: Tuple[int, int, int] = PATH_COLOR,
    ) -> None:
        if block_size <= 0:
            raise ValueError("block_size must be positive")
        self.block_size = int(block_size)
        self.wall_color = wall_color
        self.path_color = path_color

    def format(self, grid: Grid) -> ImageData:
        blocks = to_block_array(grid)
        rows, cols = blocks.shape
        canvas = Image.new("RGB", (cols * self.block_size, rows * self.block_size), self.path_color)
        draw = ImageDraw.Draw(canvas)
        for r in range(rows):
            for c in range(cols):
                if blocks[r, c] != WALL:
                    continue
                left = c * self.block_size
                top = r * self.block_size
                draw.rectangle(
                    (left, top, left + self.block_size - 1, top + self.block_size - 1),
                    fill=self.wall_color,
                )
        return ImageData(canvas)


__all__ = ["ImageFormatter", "ImageData", "WALL_COLOR", "PATH_COLOR"]
