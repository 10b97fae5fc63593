"""
colormap_builder
================

Does: Root package initializer for the color map builder.
Returns: Re-exports the load/write pipeline, the color table and the error types
         so callers can `from colormap_builder import load, write_csv`.
Used by: The `colormap-build` CLI, tests, and scripts that read the color table.
"""

from __future__ import annotations

from .errors import ColormapError, FileAccessError, MalformedNumberError
from .loader import load
from .pipeline import DEFAULT_INPUT, DEFAULT_OUTPUT, build_colormap
from .table import ColorTable, read_csv
from .types import RGB, ColorEntry, ColorMap
from .writer import write_csv

__all__: list[str] = [
    # Types
    "RGB",
    "ColorEntry",
    "ColorMap",
    # Errors
    "ColormapError",
    "FileAccessError",
    "MalformedNumberError",
    # Pipeline
    "load",
    "write_csv",
    "build_colormap",
    "DEFAULT_INPUT",
    "DEFAULT_OUTPUT",
    # Table
    "read_csv",
    "ColorTable",
]
__docformat__ = "google"
