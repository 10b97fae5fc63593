"""
loader.py
=========

Does: Parse a tab-delimited color definition file into a ColorMap.
      Field 1 is the color name, fields 3/4/5 are red/green/blue.
Returns: load(path) -> ColorMap (dict name -> (r, g, b)); raises FileAccessError /
         MalformedNumberError instead of returning a partial map.
Used by: pipeline.build_colormap, the CLI, tests.
"""

from __future__ import annotations

import logging
import os
import re
from typing import Iterable, List, Optional

from colormap_builder.errors import FileAccessError, MalformedNumberError
from colormap_builder.types import ColorEntry, ColorMap
from colormap_builder.utils.load_config import MALFORMED_POLICIES
from colormap_builder.utils.log import Trace, tracer

__all__ = [
    "MIN_FIELDS",
    "NAME_FIELD",
    "RGB_FIELDS",
    "split_fields",
    "is_record",
    "parse_component",
    "parse_fields",
    "parse_lines",
    "load",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

# ── Record layout ────────────────────────────────────────────────────────────
MIN_FIELDS = 4
NAME_FIELD = 1
RGB_FIELDS = (3, 4, 5)

# Optional sign, ASCII digits 0-9, no digit-group underscores.
_DECIMAL_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)

_default_trace = tracer("loader")


def parse_component(raw: str) -> int:
    """Does: Convert one RGB field (surrounding whitespace allowed) to int.
    Raises: ValueError unless the stripped text is an optionally signed run of 0-9.
    """
    text = raw.strip()
    if not _DECIMAL_RE.fullmatch(text):
        raise ValueError(f"not a decimal integer: {raw!r}")
    return int(text)


def split_fields(line: str) -> List[str]:
    """Does: Drop the line terminator and split on literal tabs."""
    return line.rstrip("\r\n").split("\t")


def is_record(fields: List[str]) -> bool:
    """Does: Tell whether a split line is a color record (at least 4 fields)."""
    return len(fields) >= MIN_FIELDS


def parse_fields(
    fields: List[str],
    *,
    path: str | os.PathLike[str] = "<input>",
    line_no: int = 0,
) -> Optional[ColorEntry]:
    """
    Does: Build a ColorEntry from a record's fields.
    Returns: None when the record stops before the blue column (4 or 5 fields).
    Raises: MalformedNumberError when an RGB field is not a decimal integer.
    """
    if len(fields) <= max(RGB_FIELDS):
        return None
    values = []
    for idx in RGB_FIELDS:
        raw = fields[idx]
        try:
            values.append(parse_component(raw))
        except ValueError as e:
            raise MalformedNumberError(path, line_no, "\t".join(fields), raw) from e
    r, g, b = values
    return ColorEntry(fields[NAME_FIELD], (r, g, b))


def parse_lines(
    lines: Iterable[str],
    *,
    path: str | os.PathLike[str] = "<input>",
    on_malformed: str = "abort",
    trace: Optional[Trace] = None,
) -> ColorMap:
    """Does: Fold an iterable of raw lines into a ColorMap (last write wins)."""
    if on_malformed not in MALFORMED_POLICIES:
        raise ValueError(
            f"on_malformed must be one of {', '.join(MALFORMED_POLICIES)}, got {on_malformed!r}"
        )
    trace = trace or _default_trace

    color_map: ColorMap = {}
    for line_no, line in enumerate(lines, start=1):
        fields = split_fields(line)
        raw = "\t".join(fields)
        trace(f"line {line_no}: {raw!r} ({len(fields)} fields)")
        if not is_record(fields):
            continue
        try:
            entry = parse_fields(fields, path=path, line_no=line_no)
        except MalformedNumberError as e:
            if on_malformed == "abort":
                raise
            logger.warning("Skipping line %d of %s: %s", line_no, e.path, e.value)
            continue
        if entry is None:
            trace(f"line {line_no}: incomplete record, skipped")
            continue
        color_map[entry.name] = entry.rgb
    return color_map


def load(
    path: str | os.PathLike[str],
    *,
    on_malformed: str = "abort",
    trace: Optional[Trace] = None,
) -> ColorMap:
    """
    Does: Read `path` as UTF-8 text and parse every line into a ColorMap.
    Args:
        path: Tab-delimited color definition file.
        on_malformed: "abort" raises on the first non-integer RGB field,
            "skip" drops that line and keeps going.
        trace: Callable receiving one diagnostic string per line; defaults to
            the "loader" debug topic (silent unless COLORMAP_DEBUG_TOPICS enables it).
    Raises:
        FileAccessError: The file cannot be opened, read or decoded.
        MalformedNumberError: A record has a non-integer RGB field and the
            policy is "abort".
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            color_map = parse_lines(f, path=path, on_malformed=on_malformed, trace=trace)
    except UnicodeDecodeError as e:
        raise FileAccessError(path, f"not valid UTF-8 text ({e.reason})") from e
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e

    logger.debug("Loaded %d colors from %s", len(color_map), os.fspath(path))
    return color_map
