"""
palette
=======

Does: Build the fixed, ordered reference palette once at import. Each entry's
      hex and HSV are derived from its RGB here and never recomputed.
Used By: Nearest-neighbor search, classifier, CLI listing.
Returns: Frozen PaletteEntry records in a tuple (declaration order kept).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Tuple

from colorlens.detection.color.constants import PALETTE_RGB
from colorlens.detection.color.utils.conversions import HSV, RGB, rgb_to_hex, rgb_to_hsv

log = logging.getLogger(__name__)

__all__ = ["PaletteEntry", "PALETTE", "build_palette", "palette_names"]


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    """A named reference color."""

    name: str
    rgb: RGB
    hex: str
    hsv: HSV

    @classmethod
    def from_rgb(cls, name: str, rgb: RGB) -> PaletteEntry:
        r, g, b = rgb
        return cls(name=name, rgb=(r, g, b), hex=rgb_to_hex(r, g, b), hsv=rgb_to_hsv(r, g, b))


def build_palette(pairs: Iterable[Tuple[str, RGB]]) -> Tuple[PaletteEntry, ...]:
    """Does: Turn (name, rgb) pairs into palette entries; names must be unique and non-empty."""
    entries = tuple(PaletteEntry.from_rgb(name, rgb) for name, rgb in pairs)
    if not entries:
        raise ValueError("palette must not be empty")
    names = [e.name for e in entries]
    if len(set(names)) != len(names):
        dupes = sorted({n for n in names if names.count(n) > 1})
        raise ValueError(f"duplicate palette names: {dupes}")
    log.debug("Palette built with %d entries", len(entries))
    return entries


PALETTE: Tuple[PaletteEntry, ...] = build_palette(PALETTE_RGB)


def palette_names(palette: Tuple[PaletteEntry, ...] = PALETTE) -> list[str]:
    """Does: Return entry names in declaration order."""
    return [e.name for e in palette]
