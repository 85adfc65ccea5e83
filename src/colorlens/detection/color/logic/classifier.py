"""
classifier.py

Does:
    Map a sampled pixel (RGB or HSV) to a color name: black/white/gray
    short-circuits first, then the nearest palette entry by hue-weighted
    HSV distance (first entry wins ties, so "Green" always beats "Lime").
Returns:
    classify_from_rgb() / classify_from_hsv() → ClassificationResult;
    available_colors() → palette names; random_color() → ClassificationResult.

Notes:
    The two entry points differ in the special-case branches:
    from RGB the sampled pixel and its hex are kept, from HSV fixed neutral
    references are substituted.
"""

from __future__ import annotations

# ── Imports & Public API ──────────────────────────────────────────────────────
import logging
import random
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple

from colorlens.detection.color import (
    BLACK_MAX_VALUE,
    DARK_GRAY_MAX_VALUE,
    GRAY_MAX_SATURATION,
    LIGHT_GRAY_MIN_VALUE,
    NEUTRAL_REFERENCE_RGB,
    WHITE_MAX_SATURATION,
    WHITE_MIN_VALUE,
    palette_names,
)
from colorlens.detection.color.utils import (
    HSV,
    RGB,
    hsv_to_rgb,
    nearest_palette_entry,
    rgb_to_hex,
    rgb_to_hsv,
    validate_hsv,
)
from colorlens.detection.general.utils import debug

__all__ = [
    "ClassificationResult",
    "special_case_name",
    "classify_from_rgb",
    "classify_from_hsv",
    "available_colors",
    "random_color",
]

logger = logging.getLogger(__name__)


# ── Result type ──────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """A color label plus the display-ready sample it was computed from."""

    name: str
    hex: str
    rgb: RGB
    hsv: HSV

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["rgb"] = list(self.rgb)
        out["hsv"] = {"h": self.hsv.h, "s": self.hsv.s, "v": self.hsv.v}
        return out


# ── Helpers ──────────────────────────────────────────────────────────────────
def special_case_name(hsv: HSV) -> Optional[str]:
    """
    Does:
        Resolve the neutral short-circuits in order: Black, White, then the
        three gray tiers for low saturation.
    Returns:
        The neutral name, or None when the palette search must run.
    """
    _, s, v = hsv
    if v < BLACK_MAX_VALUE:
        return "Black"
    if v > WHITE_MIN_VALUE and s < WHITE_MAX_SATURATION:
        return "White"
    if s < GRAY_MAX_SATURATION:
        if v < DARK_GRAY_MAX_VALUE:
            return "Dark Gray"
        if v > LIGHT_GRAY_MIN_VALUE:
            return "Light Gray"
        return "Gray"
    return None


def _resolve_name(hsv: HSV) -> Tuple[str, bool]:
    """Return (name, is_special_case)."""
    shown = tuple(round(x, 4) for x in hsv)
    name = special_case_name(hsv)
    if name is not None:
        debug(f"special case {name!r} for hsv={shown}", "classify")
        return name, True
    entry, distance = nearest_palette_entry(hsv)
    debug(f"nearest {entry.name!r} d={distance:.4f} for hsv={shown}", "classify")
    return entry.name, False


# ── Core API (public) ────────────────────────────────────────────────────────
def classify_from_rgb(r: int, g: int, b: int) -> ClassificationResult:
    """
    Does:
        Classify an (averaged) RGB sample. The input RGB and its hex are kept
        in every branch, neutral ones included.
    Raises:
        ValueError: a channel is outside [0, 255].
    """
    hsv = rgb_to_hsv(r, g, b)
    name, _ = _resolve_name(hsv)
    logger.debug("classify_from_rgb(%s, %s, %s) -> %s", r, g, b, name)
    return ClassificationResult(name=name, hex=rgb_to_hex(r, g, b), rgb=(r, g, b), hsv=hsv)


def classify_from_hsv(h: float, s: float, v: float) -> ClassificationResult:
    """
    Does:
        Classify an HSV triple (e.g. produced by an external model). Neutral
        branches use the fixed reference RGB/hex; chromatic ones convert the
        input back to RGB for display.
    Raises:
        ValueError: saturation or value is outside [0, 1]. Hue wraps modulo 360.
    """
    hsv = validate_hsv(h, s, v)
    name, special = _resolve_name(hsv)
    if special:
        rgb = NEUTRAL_REFERENCE_RGB[name]
    else:
        rgb = hsv_to_rgb(*hsv)
    logger.debug("classify_from_hsv(%s, %s, %s) -> %s", h, s, v, name)
    return ClassificationResult(name=name, hex=rgb_to_hex(*rgb), rgb=rgb, hsv=hsv)


def available_colors() -> List[str]:
    """Does: List every palette name in declaration order."""
    return palette_names()


def random_color(rng: Optional[random.Random] = None) -> ClassificationResult:
    """Does: Classify a uniformly random RGB sample (handy for demos and smoke checks)."""
    rng = rng or random
    r, g, b = (rng.randrange(256) for _ in range(3))
    return classify_from_rgb(r, g, b)
