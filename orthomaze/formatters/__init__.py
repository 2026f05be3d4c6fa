"""Formatter and saveable implementations for common output types."""

__all__ = [
    "AsciiFormatter",
    "TextData",
    "JsonFormatter",
    "JsonData",
    "ImageFormatter",
    "ImageData",
    "grid_from_dict",
    "load_grid",
]

from .ascii import AsciiFormatter, TextData
from .json_formatter import JsonData, JsonFormatter, grid_from_dict, load_grid
from .image import ImageData, ImageFormatter
