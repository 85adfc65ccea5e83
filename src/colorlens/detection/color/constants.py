# constants.py
# ============

"""
constants.
=========

Does: Define global, immutable color-domain constants for classification
      (special-case thresholds, neutral reference colors, external model labels).
Used By: Classifier, palette, model adapter.
Returns: Pure data structures only (no side effects).
"""

from types import MappingProxyType

# ── 1) Special-case thresholds ───────────────────────────────────────────────

BLACK_MAX_VALUE = 0.1            # v < this      -> Black
WHITE_MIN_VALUE = 0.9            # v > this ...
WHITE_MAX_SATURATION = 0.1       # ... and s < this -> White
GRAY_MAX_SATURATION = 0.15       # s < this      -> one of the gray tiers
DARK_GRAY_MAX_VALUE = 0.3        # gray and v < this -> Dark Gray
LIGHT_GRAY_MIN_VALUE = 0.7       # gray and v > this -> Light Gray


# ── 2) Neutral reference colors ──────────────────────────────────────────────
# Substituted when classifying straight from HSV (no source pixel to keep).

NEUTRAL_REFERENCE_RGB = MappingProxyType({
    "Black": (0, 0, 0),
    "White": (255, 255, 255),
    "Dark Gray": (64, 64, 64),
    "Light Gray": (211, 211, 211),
    "Gray": (128, 128, 128),
})


# ── 3) Reference palette (declaration order decides ties) ────────────────────

PALETTE_RGB = (
    ("Red", (255, 0, 0)),
    ("Green", (0, 255, 0)),
    ("Blue", (0, 0, 255)),
    ("Yellow", (255, 255, 0)),
    ("Cyan", (0, 255, 255)),
    ("Magenta", (255, 0, 255)),
    ("White", (255, 255, 255)),
    ("Black", (0, 0, 0)),
    ("Gray", (128, 128, 128)),
    ("Orange", (255, 165, 0)),
    ("Purple", (128, 0, 128)),
    ("Pink", (255, 192, 203)),
    ("Brown", (165, 42, 42)),
    ("Lime", (0, 255, 0)),       # same HSV as Green, never wins a tie
    ("Navy", (0, 0, 128)),
    ("Teal", (0, 128, 128)),
    ("Maroon", (128, 0, 0)),
    ("Olive", (128, 128, 0)),
    ("Light Gray", (211, 211, 211)),
    ("Dark Gray", (64, 64, 64)),
)


# ── 4) External model ────────────────────────────────────────────────────────
# Output order of the pretrained HSV classifier shipped with the mobile app.

DEFAULT_MODEL_LABELS = (
    "Red",
    "Green",
    "Blue",
    "Yellow",
    "Violet",
    "Pink",
    "Orange",
    "Brown",
    "Black",
    "White",
    "Gray",
)
MODEL_INPUT_SIZE = 3  # (h/360, s, v)
MODEL_LABELS_FILE = "color_model_labels"
