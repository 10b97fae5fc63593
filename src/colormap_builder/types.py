# colormap_builder/types.py
from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

import webcolors

"""
types.py.

Does: Define the small value types shared by the loader, writer and table.
"""

RGB = Tuple[int, int, int]
ColorMap = Dict[str, RGB]


class ColorEntry(NamedTuple):
    name: str
    rgb: RGB

    @property
    def hex(self) -> str:
        """Does: Render the triplet as '#rrggbb' (webcolors clamps to 0..255)."""
        return webcolors.rgb_to_hex(self.rgb)


__all__ = ["RGB", "ColorMap", "ColorEntry"]

__docformat__ = "google"
