"""
pipeline.py
===========

Does: One build run: load the tab-delimited definitions, then write the CSV.
Returns: build_colormap(...) -> the ColorMap that was written.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

from colormap_builder.loader import load
from colormap_builder.types import ColorMap
from colormap_builder.utils.load_config import DEFAULT_INPUT, DEFAULT_OUTPUT
from colormap_builder.utils.log import Trace
from colormap_builder.writer import write_csv

__all__ = ["DEFAULT_INPUT", "DEFAULT_OUTPUT", "build_colormap"]

logger = logging.getLogger(__name__)


def build_colormap(
    input_path: str | os.PathLike[str] = DEFAULT_INPUT,
    output_path: str | os.PathLike[str] = DEFAULT_OUTPUT,
    *,
    on_malformed: str = "abort",
    trace: Optional[Trace] = None,
) -> ColorMap:
    """Load `input_path` and write it to `output_path`; the output is untouched if loading fails."""
    color_map = load(input_path, on_malformed=on_malformed, trace=trace)
    rows = write_csv(output_path, color_map)
    logger.info(
        "Built color map: %d colors from %s, %d rows to %s",
        len(color_map),
        os.fspath(input_path),
        rows,
        os.fspath(output_path),
    )
    return color_map
