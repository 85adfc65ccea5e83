"""
hsv_distance.py
===============

Does: Compute the hue-weighted HSV distance and search the palette with it.
Used By: Classifier (nearest entry) and the CLI (--rank).
Returns: Distances (float), the nearest PaletteEntry, ranked (name, distance) lists.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple

from colorlens.detection.color.utils.conversions import HSV

if TYPE_CHECKING:
    from colorlens.detection.color.palette import PaletteEntry

__all__ = ["hsv_distance", "hue_difference", "nearest_palette_entry", "rank_palette"]
__docformat__ = "google"

logger = logging.getLogger(__name__)

HUE_WEIGHT = 2.0


# =============================================================================
# 1) METRIC
# =============================================================================

def hue_difference(h1: float, h2: float) -> float:
    """Does: Circular hue gap scaled to [0, 1] (180 degrees apart -> 1)."""
    d = abs(h1 - h2)
    return min(d, 360 - d) / 180


def hsv_distance(a: HSV, b: HSV) -> float:
    """Does: sqrt(2*dh^2 + ds^2 + dv^2).

    Hue counts double. Only meaningful for ranking; the maximum exceeds 1.
    """
    dh = hue_difference(a[0], b[0])
    ds = abs(a[1] - b[1])
    dv = abs(a[2] - b[2])
    return math.sqrt(HUE_WEIGHT * dh * dh + ds * ds + dv * dv)


# =============================================================================
# 2) PALETTE SEARCH
# =============================================================================

def _default_palette() -> Sequence[PaletteEntry]:
    # palette.py imports this package, so resolve it at call time
    from colorlens.detection.color.palette import PALETTE

    return PALETTE


def nearest_palette_entry(
    hsv: HSV,
    palette: Optional[Sequence[PaletteEntry]] = None,
) -> Tuple[PaletteEntry, float]:
    """Does: Linear scan for the closest entry; the first of equal distances wins."""
    entries = _default_palette() if palette is None else palette
    best: Optional[PaletteEntry] = None
    best_d = math.inf
    for entry in entries:
        d = hsv_distance(hsv, entry.hsv)
        if d < best_d:
            best, best_d = entry, d
    if best is None:
        raise ValueError("palette must not be empty")
    logger.debug("nearest entry for %s: %s (d=%.4f)", tuple(hsv), best.name, best_d)
    return best, best_d


def rank_palette(
    hsv: HSV,
    palette: Optional[Sequence[PaletteEntry]] = None,
    top_k: Optional[int] = None,
) -> List[Tuple[str, float]]:
    """Does: Rank entries by distance, ties kept in declaration order."""
    entries = _default_palette() if palette is None else palette
    ranked = sorted(
        ((e.name, hsv_distance(hsv, e.hsv)) for e in entries),
        key=lambda item: item[1],
    )
    return ranked if top_k is None else ranked[: max(0, top_k)]
