# colorlens/detection/__init__.py

"""
detection.
=========

Does: Group the color-detection stack: `color` (palette, conversions,
      classifier, model adapter), `general` (config + logging utils) and the
      `orchestrator` that dispatches between methods.
Returns: Nothing eagerly; import the subpackages you need.
"""
from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
