"""
writer.py
=========

Does: Serialize a ColorMap to the `R, G, B, Name` CSV layout, one color per line.
      No header, no quoting, Unix newlines, rows sorted by name so output is
      reproducible.
Returns: write_csv(path, color_map) -> number of rows written.
Used by: pipeline.build_colormap; table.read_csv reads the same layout back.
"""

from __future__ import annotations

import logging
import os
from typing import Mapping

from colormap_builder.errors import FileAccessError
from colormap_builder.types import RGB

__all__ = ["SEPARATOR", "format_row", "write_csv"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

SEPARATOR = ", "


def format_row(name: str, rgb: RGB) -> str:
    """Does: Render one color as 'R, G, B, Name\\n'."""
    return SEPARATOR.join([*(str(v) for v in rgb), name]) + "\n"


def write_csv(path: str | os.PathLike[str], color_map: Mapping[str, RGB]) -> int:
    """
    Does: Create or truncate `path` and write every entry of `color_map`.
    Raises: FileAccessError if the file cannot be created or written; rows
            already flushed stay on disk.
    """
    count = 0
    try:
        with open(path, "w", encoding="utf-8", newline="") as f:
            for name in sorted(color_map):
                f.write(format_row(name, color_map[name]))
                count += 1
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    logger.debug("Wrote %d rows to %s", count, os.fspath(path))
    return count
