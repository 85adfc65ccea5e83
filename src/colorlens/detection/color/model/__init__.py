"""
model
=====

Does: Expose the external-model adapter: feature building, score decoding,
      detection with a caller-supplied model, and model introspection.
Returns: Re-exports of stable symbols from `model_adapter` and `types`.
Example:
    result = detect_color_with_model((200, 30, 40), my_model)
"""

from __future__ import annotations

# ── Public API re-exports ─────────────────────────────────────────────────────
from .model_adapter import (
    ModelColorResult,
    ModelError,
    ModelNotLoadedError,
    ModelOutputError,
    decode_predictions,
    describe_model,
    detect_color_with_model,
    load_model_labels,
    model_features,
    self_test_model,
)
from .types import ColorModelProtocol

__all__ = [
    "ColorModelProtocol",
    "ModelColorResult",
    "ModelError",
    "ModelNotLoadedError",
    "ModelOutputError",
    "decode_predictions",
    "describe_model",
    "detect_color_with_model",
    "load_model_labels",
    "model_features",
    "self_test_model",
]

__docformat__ = "google"
