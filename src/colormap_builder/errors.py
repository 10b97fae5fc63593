"""
errors.py.

Does: Error taxonomy for a build run. Every error is terminal for its phase
      (load or write); nothing here is retried.
Used by: loader, writer, table, and the CLI which reports them.
"""

from __future__ import annotations

import os

__all__ = ["ColormapError", "FileAccessError", "MalformedNumberError"]


class ColormapError(Exception):
    """Base class for color map build errors."""


class FileAccessError(ColormapError, OSError):
    """Raise when the input cannot be read or the output cannot be written."""

    def __init__(self, path: str | os.PathLike[str], reason: str):
        self.path = os.fspath(path)
        self.reason = reason
        super().__init__(f"Cannot access {self.path}: {reason}")


class MalformedNumberError(ColormapError, ValueError):
    """Raise when an RGB field of a record is not a valid integer."""

    def __init__(
        self,
        path: str | os.PathLike[str],
        line_no: int,
        line: str,
        value: str,
    ):
        self.path = os.fspath(path)
        self.line_no = line_no
        self.line = line
        self.value = value
        super().__init__(
            f"{self.path}:{line_no}: invalid RGB value {value!r} in line {line!r}"
        )
