"""
model_adapter.py.
=================

Does: Prepare normalized HSV features for an external pretrained color model,
      decode its per-label scores, and wrap the outcome in the same shape as
      the deterministic classifier (plus a confidence).
Returns: ModelColorResult, (label, confidence) pairs, model info dicts.
Used by: Orchestrator (method="ai") and the CLI.

The model itself (a TFLite interpreter on device) is never loaded here:
callers pass any object with predict(features) -> scores.
"""

from __future__ import annotations

# ── Imports & Typing ─────────────────────────────────────────────────────────
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Sequence, Tuple

from colorlens.detection.color.constants import (
    DEFAULT_MODEL_LABELS,
    MODEL_INPUT_SIZE,
    MODEL_LABELS_FILE,
)
from colorlens.detection.color.model.types import ColorModelProtocol
from colorlens.detection.color.utils import (
    HSV,
    RGB,
    rgb_to_hex,
    rgb_to_hsv,
    round_half_up,
    validate_rgb,
)
from colorlens.detection.general.utils import (
    ConfigFileNotFound,
    ConfigTypeError,
    DataDirNotFound,
    debug,
    load_config,
)

# ── Logger ───────────────────────────────────────────────────────────────────
logger = logging.getLogger(__name__)

__all__ = [
    "ModelError",
    "ModelNotLoadedError",
    "ModelOutputError",
    "ModelColorResult",
    "load_model_labels",
    "model_features",
    "decode_predictions",
    "detect_color_with_model",
    "describe_model",
    "self_test_model",
]

METHOD_NAME = "AI"
PURE_RED_FEATURES = (0.0, 1.0, 1.0)


# ── Errors ───────────────────────────────────────────────────────────────────
class ModelError(RuntimeError):
    """Raise when the external model fails or cannot be used."""


class ModelNotLoadedError(ModelError):
    """Raise when detection is requested before a model was provided."""


class ModelOutputError(ModelError, ValueError):
    """Raise when the model's scores don't line up with the labels."""


# ── Result type ──────────────────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class ModelColorResult:
    """Model label for a sample, shaped like ClassificationResult plus confidence."""

    name: str
    hex: str
    rgb: RGB
    hsv: HSV
    confidence: float
    method: str = METHOD_NAME

    def to_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["rgb"] = list(self.rgb)
        out["hsv"] = {"h": self.hsv.h, "s": self.hsv.s, "v": self.hsv.v}
        return out


# ── Labels (config) ──────────────────────────────────────────────────────────
def load_model_labels(base_dir: Optional[Path] = None) -> Tuple[str, ...]:
    """Does: Read the model's label order from <data>/color_model_labels.json.

    Falls back to DEFAULT_MODEL_LABELS when no data dir or file exists.
    Raises ConfigTypeError when the list is empty or has duplicates.
    """
    try:
        labels = load_config(MODEL_LABELS_FILE, mode="list", base_dir=base_dir)
    except (DataDirNotFound, ConfigFileNotFound) as e:
        logger.debug("Model labels file unavailable (%s); using defaults", e)
        return DEFAULT_MODEL_LABELS

    if not labels:
        raise ConfigTypeError(f"{MODEL_LABELS_FILE}.json: label list is empty")
    if len(set(labels)) != len(labels):
        raise ConfigTypeError(f"{MODEL_LABELS_FILE}.json: duplicate labels in {list(labels)}")
    return labels


# ── Features & decoding ──────────────────────────────────────────────────────
def model_features(r: float, g: float, b: float) -> Tuple[float, float, float]:
    """Does: Build the model input [h/360, s, v] from 0-255 channels."""
    h, s, v = rgb_to_hsv(r, g, b)
    return h / 360.0, s, v


def decode_predictions(
    scores: Sequence[float],
    labels: Sequence[str] = DEFAULT_MODEL_LABELS,
) -> Tuple[str, float]:
    """Does: Pick the highest score (first one on ties) and its label."""
    values = [float(x) for x in scores]
    if not values:
        raise ModelOutputError("model returned no scores")
    if len(values) != len(labels):
        raise ModelOutputError(
            f"model returned {len(values)} scores for {len(labels)} labels"
        )
    best = max(range(len(values)), key=values.__getitem__)
    return labels[best], values[best]


# ── Detection ────────────────────────────────────────────────────────────────
def _run_model(model: Optional[ColorModelProtocol], features: Sequence[float]) -> Sequence[float]:
    if model is None:
        raise ModelNotLoadedError("Color model not initialized; load it before detection")
    try:
        return model.predict(list(features))
    except ModelError:
        raise
    except Exception as e:
        raise ModelError(f"Color model inference failed: {e}") from e


def detect_color_with_model(
    rgb: Sequence[float],
    model: Optional[ColorModelProtocol],
    labels: Optional[Sequence[str]] = None,
) -> ModelColorResult:
    """Does: Label an (averaged) RGB sample with the external model.

    Channels may be fractional; they are rounded half up after the range check.
    No deterministic fallback: model failures raise ModelError.
    """
    labels = tuple(labels) if labels is not None else load_model_labels()
    validate_rgb(*rgb)
    r, g, b = (round_half_up(c) for c in rgb)

    features = model_features(r, g, b)
    scores = _run_model(model, features)
    name, confidence = decode_predictions(scores, labels)

    debug(
        f"RGB({r}, {g}, {b}) -> features={tuple(round(f, 4) for f in features)} "
        f"-> {name} (conf={confidence:.3f})",
        "model",
    )
    logger.debug("model scores: %s", list(scores))
    return ModelColorResult(
        name=name,
        hex=rgb_to_hex(r, g, b),
        rgb=(r, g, b),
        hsv=rgb_to_hsv(r, g, b),
        confidence=confidence,
    )


def describe_model(
    model: Optional[ColorModelProtocol],
    labels: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Does: Summarize what the adapter knows about the model."""
    labels = tuple(labels) if labels is not None else load_model_labels()
    return {
        "loaded": model is not None,
        "input_size": MODEL_INPUT_SIZE,
        "labels": list(labels),
    }


def self_test_model(
    model: Optional[ColorModelProtocol],
    labels: Optional[Sequence[str]] = None,
) -> Dict[str, Any]:
    """Does: Feed pure red (h=0, s=1, v=1) to the model and report what it says."""
    labels = tuple(labels) if labels is not None else load_model_labels()
    scores = [float(x) for x in _run_model(model, PURE_RED_FEATURES)]
    name, confidence = decode_predictions(scores, labels)
    logger.info("Model self test: pure red -> %s (conf=%.3f)", name, confidence)
    return {
        "input": list(PURE_RED_FEATURES),
        "detected": name,
        "confidence": confidence,
        "scores": scores,
        "labels": list(labels),
    }
