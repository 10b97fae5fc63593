"""
table.py
========

Does: Read a written color map CSV back into memory and answer lookups on it:
      by name, by hex code, and nearest color to an RGB triplet.
Used By: Drawing tools that pick colors by name from colormap.csv.
Returns: read_csv(path) -> ColorMap; ColorTable over a ColorMap.
"""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterator, Mapping, Optional

import webcolors

from colormap_builder.errors import FileAccessError, MalformedNumberError
from colormap_builder.loader import parse_component
from colormap_builder.types import RGB, ColorEntry, ColorMap
from colormap_builder.utils.log import Trace, tracer

__all__ = ["read_csv", "ColorTable"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

_default_trace = tracer("table")


def _fold_name(name: str) -> str:
    return "".join(name.split()).lower()


def read_csv(
    path: str | os.PathLike[str],
    *,
    trace: Optional[Trace] = None,
) -> ColorMap:
    """
    Does: Parse 'R, G, B, Name' rows. Only the first three commas separate
          fields, so names may contain commas; whitespace around fields is trimmed.
    Returns: ColorMap; rows with fewer than four fields are skipped.
    Raises: FileAccessError on I/O failure, MalformedNumberError on a bad component.
    """
    trace = trace or _default_trace
    color_map: ColorMap = {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                raw = line.rstrip("\r\n")
                parts = raw.split(",", 3)
                if len(parts) < 4:
                    trace(f"line {line_no}: {raw!r} has {len(parts)} fields, skipped")
                    continue
                rgb = []
                for part in parts[:3]:
                    try:
                        rgb.append(parse_component(part))
                    except ValueError as e:
                        raise MalformedNumberError(path, line_no, raw, part.strip()) from e
                r, g, b = rgb
                color_map[parts[3].strip()] = (r, g, b)
    except UnicodeDecodeError as e:
        raise FileAccessError(path, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e
    return color_map


class ColorTable:
    """Read-only lookups over a loaded ColorMap."""

    def __init__(self, color_map: Mapping[str, RGB]):
        self._colors: Dict[str, RGB] = dict(color_map)
        self._folded: Dict[str, str] = {}
        for name in sorted(self._colors):
            self._folded.setdefault(_fold_name(name), name)

    @classmethod
    def from_csv(cls, path: str | os.PathLike[str]) -> "ColorTable":
        table = cls(read_csv(path))
        logger.debug("Color table loaded from %s (%d colors)", os.fspath(path), len(table))
        return table

    def __len__(self) -> int:
        return len(self._colors)

    def __contains__(self, name: object) -> bool:
        return name in self._colors

    def __iter__(self) -> Iterator[ColorEntry]:
        for name in sorted(self._colors):
            yield ColorEntry(name, self._colors[name])

    def get(self, name: str) -> Optional[RGB]:
        """Does: Exact name lookup, then a case/space-insensitive fallback."""
        if name in self._colors:
            return self._colors[name]
        key = self._folded.get(_fold_name(name))
        return self._colors[key] if key is not None else None

    def from_hex(self, code: str) -> Optional[ColorEntry]:
        """Does: Return the first entry (by name) whose RGB equals a '#rrggbb'/'#rgb' code."""
        target = tuple(webcolors.hex_to_rgb(code))
        for entry in self:
            if entry.rgb == target:
                return entry
        return None

    def nearest(self, rgb: RGB) -> Optional[ColorEntry]:
        """Does: Entry with the smallest Euclidean sRGB distance; ties go to name order."""
        best, best_d = None, float("inf")
        for entry in self:
            d = sum((a - b) ** 2 for a, b in zip(entry.rgb, rgb)) ** 0.5
            if d < best_d:
                best, best_d = entry, d
        return best
