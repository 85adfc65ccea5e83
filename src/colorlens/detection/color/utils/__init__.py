"""
utils package.
=============

Does: Provide color conversions (RGB/HSV/hex), input validation and the
      HSV distance metric with palette search helpers.
"""

from .conversions import (
    HSV,
    RGB,
    hex_to_rgb,
    hsv_to_rgb,
    rgb_to_hex,
    rgb_to_hsv,
    round_half_up,
    validate_hsv,
    validate_rgb,
)
from .hsv_distance import (
    hsv_distance,
    hue_difference,
    nearest_palette_entry,
    rank_palette,
)

__all__ = [
    "RGB",
    "HSV",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hex",
    "hex_to_rgb",
    "round_half_up",
    "validate_rgb",
    "validate_hsv",
    "hsv_distance",
    "hue_difference",
    "nearest_palette_entry",
    "rank_palette",
]

__docformat__ = "google"
