"""
conversions.py
==============

Does: Convert between RGB, HSV and hex representations and validate samples.
Used By: Palette construction, the classifier, the model adapter and the CLI.
Returns: HSV named tuples (h in degrees, s/v in [0,1]), RGB int triples,
         lowercase '#rrggbb' strings.
"""

from __future__ import annotations

import math
from typing import NamedTuple, Tuple

import webcolors

__all__ = [
    "RGB",
    "HSV",
    "round_half_up",
    "validate_rgb",
    "validate_hsv",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
]
__docformat__ = "google"

# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]


class HSV(NamedTuple):
    """Hue in degrees [0, 360), saturation and value in [0, 1]."""

    h: float
    s: float
    v: float


# =============================================================================
# 1) VALIDATION
# =============================================================================

def round_half_up(x: float) -> int:
    """Does: Round to nearest integer, halves going up (2.5 -> 3, not 2)."""
    return int(math.floor(x + 0.5))


def validate_rgb(r: float, g: float, b: float) -> None:
    """Does: Reject channels outside [0, 255] (NaN included)."""
    if not all(0 <= c <= 255 for c in (r, g, b)):
        raise ValueError(f"RGB out of bounds: {(r, g, b)}")


def validate_hsv(h: float, s: float, v: float) -> HSV:
    """Does: Wrap hue into [0, 360) and reject s/v outside [0, 1]."""
    if not (0 <= s <= 1 and 0 <= v <= 1):
        raise ValueError(f"HSV saturation/value out of bounds: {(h, s, v)}")
    if not math.isfinite(h):
        raise ValueError(f"HSV hue must be finite: {h!r}")
    h = h % 360.0
    if h >= 360.0:  # tiny negatives round up to the divisor
        h = 0.0
    return HSV(h, s, v)


# =============================================================================
# 2) RGB <-> HSV
# =============================================================================

def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    """Does: Convert 0-255 channels to HSV.

    Hue uses the six-region formula, picking the region by the channel that
    holds the maximum (red first, then green, then blue).
    """
    validate_rgb(r, g, b)
    r, g, b = r / 255.0, g / 255.0, b / 255.0

    mx = max(r, g, b)
    mn = min(r, g, b)
    diff = mx - mn

    s = 0.0 if mx == 0 else diff / mx
    v = mx

    h = 0.0
    if diff != 0:
        if mx == r:
            h = (g - b) / diff + (6 if g < b else 0)
        elif mx == g:
            h = (b - r) / diff + 2
        else:
            h = (r - g) / diff + 4
        h *= 60
    return HSV(h, s, v)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Does: Inverse of rgb_to_hsv via chroma / intermediate / match values."""
    h, s, v = validate_hsv(h, s, v)
    c = v * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = v - c

    if h < 60:
        r, g, b = c, x, 0.0
    elif h < 120:
        r, g, b = x, c, 0.0
    elif h < 180:
        r, g, b = 0.0, c, x
    elif h < 240:
        r, g, b = 0.0, x, c
    elif h < 300:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x

    return tuple(  # type: ignore[return-value]
        min(255, max(0, round_half_up((ch + m) * 255))) for ch in (r, g, b)
    )


# =============================================================================
# 3) HEX
# =============================================================================

def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Does: Format channels as lowercase '#rrggbb' (rounded half up, two digits each)."""
    return webcolors.rgb_to_hex(tuple(round_half_up(c) for c in (r, g, b)))


def hex_to_rgb(value: str) -> RGB:
    """Does: Parse '#rrggbb' or '#rgb'; raises ValueError when malformed."""
    text = value.strip()
    if not text.startswith("#"):
        text = f"#{text}"
    return tuple(webcolors.hex_to_rgb(text))  # type: ignore[return-value]
