"""
logic
=====

Deterministic color classification.

Public API:
- classifier: ClassificationResult, classify_from_rgb, classify_from_hsv,
              special_case_name, available_colors, random_color
"""

from __future__ import annotations

from .classifier import (
    ClassificationResult,
    available_colors,
    classify_from_hsv,
    classify_from_rgb,
    random_color,
    special_case_name,
)

__all__ = [
    "ClassificationResult",
    "classify_from_rgb",
    "classify_from_hsv",
    "special_case_name",
    "available_colors",
    "random_color",
]
