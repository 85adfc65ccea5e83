"""
types.py.

Does: Define the structural protocol for the external, pretrained color model.
Used by: model_adapter, orchestrator, tests (dummy models).
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable


@runtime_checkable
class ColorModelProtocol(Protocol):
    """
    Structural contract for any pretrained HSV color classifier.

    The model must implement:
    - predict(features): take [h/360, s, v] (three floats in [0, 1]) and
      return one score per label, in the label order the model was trained on.
    """

    def predict(self, features: Sequence[float]) -> Sequence[float]: ...
