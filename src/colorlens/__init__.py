"""
colorlens
=========

Does: Root package for the color-naming core: classify a sampled pixel (RGB or
      HSV) to the nearest named palette color, with black/white/gray rules.
Returns: The two public entry points and their result type at top level.
Used by: CLI (`colorlens-demo`), camera/inference front ends, tests.
"""

from colorlens.detection.color.logic import (
    ClassificationResult,
    classify_from_hsv,
    classify_from_rgb,
)

__all__ = ["ClassificationResult", "classify_from_rgb", "classify_from_hsv"]
__docformat__ = "google"
