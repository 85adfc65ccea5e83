"""
color.
=====

Does: Aggregate core color-domain definitions (constants & palette) shared
      across classification, the model adapter and the CLI.
Used By: Classifier, nearest-neighbor search, model adapter.
Returns: Pure data structures and accessor functions; the palette is built
         once at import and never mutated.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    BLACK_MAX_VALUE,
    DARK_GRAY_MAX_VALUE,
    DEFAULT_MODEL_LABELS,
    GRAY_MAX_SATURATION,
    LIGHT_GRAY_MIN_VALUE,
    NEUTRAL_REFERENCE_RGB,
    WHITE_MAX_SATURATION,
    WHITE_MIN_VALUE,
)

# ── Palette ──────────────────────────────────────────────────────────────────
from .palette import (
    PALETTE,
    PaletteEntry,
    palette_names,
)

__all__ = [
    # constants
    "BLACK_MAX_VALUE",
    "WHITE_MIN_VALUE",
    "WHITE_MAX_SATURATION",
    "GRAY_MAX_SATURATION",
    "DARK_GRAY_MAX_VALUE",
    "LIGHT_GRAY_MIN_VALUE",
    "NEUTRAL_REFERENCE_RGB",
    "DEFAULT_MODEL_LABELS",
    # palette
    "PALETTE",
    "PaletteEntry",
    "palette_names",
]
