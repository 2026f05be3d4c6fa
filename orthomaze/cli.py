"""Re-render a saved JSON maze record as ASCII, JSON or an image."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional

from orthomaze.base import Formatter, Saveable
from orthomaze.errors import MazeSaveError
from orthomaze.formatters import AsciiFormatter, ImageFormatter, JsonFormatter, load_grid
from orthomaze.maze import OrthogonalMaze

FORMATS = ("ascii", "json", "image")


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a saved orthogonal maze")
    parser.add_argument("input", type=Path, help="JSON maze record to load")
    parser.add_argument("--format", choices=FORMATS, default="ascii")
    parser.add_argument("--output", type=Path, default=None, help="Destination path; ASCII prints to stdout when omitted")
    parser.add_argument("--block-size", type=int, default=ImageFormatter.DEFAULT_BLOCK_SIZE, help="Pixels per block for image output")
    namespace = parser.parse_args(argv)
    if namespace.output is None and namespace.format != "ascii":
        parser.error(f"--output is required for --format {namespace.format}")
    return namespace


def _build_formatter(args: argparse.Namespace) -> Formatter[Saveable]:
    formatters: Dict[str, Formatter] = {
        "ascii": AsciiFormatter(),
        "json": JsonFormatter(),
        "image": ImageFormatter(block_size=args.block_size),
    }
    return formatters[args.format]


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    args = _parse_args(argv)

    try:
        grid = load_grid(args.input)
    except (OSError, ValueError) as exc:
        logging.error(f"Could not load maze from {args.input}: {exc}")
        return 1

    maze = OrthogonalMaze.from_grid(grid)
    if not maze.is_valid():
        logging.warning(f"Maze in {args.input} has cells without any walls")

    if args.output is None:
        sys.stdout.write(str(maze))
        return 0

    try:
        maze.save(args.output, _build_formatter(args))
    except (MazeSaveError, ValueError) as exc:
        logging.error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
