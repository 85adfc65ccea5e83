# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: High-level dispatch between the deterministic HSV classifier and the
      external model, returning display-ready dicts for rendering or speech.
Returns:
  - analyze_sample(rgb, method, model) -> {
        "name": str, "hex": "#rrggbb", "rgb": [r, g, b],
        "hsv": {"h", "s", "v"}, "method": "hsv"|"AI",
        "confidence": float (AI only),
        "candidates": [{"name", "distance"}, ...] (when rank > 0, hsv only)
    }
  - analyze_hsv(h, s, v, rank) -> same shape, method "hsv"
Used by: The CLI and any camera/inference front end feeding pixel samples.
"""

import logging
import os
from typing import Any, Dict, Optional, Sequence

from colorlens.detection.color.logic import classify_from_hsv, classify_from_rgb
from colorlens.detection.color.model import ColorModelProtocol, detect_color_with_model
from colorlens.detection.color.utils import HSV, rank_palette

logger = logging.getLogger(__name__)

__all__ = ["METHODS", "default_method", "analyze_sample", "analyze_hsv"]

METHODS = ("hsv", "ai")


def default_method() -> str:
    """Does: Read COLORLENS_METHOD ('hsv' or 'ai'); defaults to 'hsv'."""
    return os.getenv("COLORLENS_METHOD", "hsv").strip().lower() or "hsv"


def _with_candidates(out: Dict[str, Any], hsv: HSV, rank: int) -> Dict[str, Any]:
    if rank > 0:
        out["candidates"] = [
            {"name": name, "distance": round(d, 6)} for name, d in rank_palette(hsv, top_k=rank)
        ]
    return out


def analyze_sample(
    rgb: Sequence[float],
    *,
    method: Optional[str] = None,
    model: Optional[ColorModelProtocol] = None,
    labels: Optional[Sequence[str]] = None,
    rank: int = 0,
) -> Dict[str, Any]:
    """Label an RGB sample with the chosen method and return a display dict."""
    method = (method or default_method()).lower()
    if method not in METHODS:
        raise ValueError(f"Unknown method {method!r}; expected one of {METHODS}")

    if method == "ai":
        result = detect_color_with_model(rgb, model, labels=labels)
        logger.debug("AI result for %s: %s", tuple(rgb), result.name)
        return result.to_dict()

    r, g, b = rgb
    res = classify_from_rgb(r, g, b)
    out = res.to_dict()
    out["method"] = "hsv"
    return _with_candidates(out, res.hsv, rank)


def analyze_hsv(h: float, s: float, v: float, *, rank: int = 0) -> Dict[str, Any]:
    """Label an HSV triple (deterministic path only) and return a display dict."""
    res = classify_from_hsv(h, s, v)
    out = res.to_dict()
    out["method"] = "hsv"
    return _with_candidates(out, res.hsv, rank)
