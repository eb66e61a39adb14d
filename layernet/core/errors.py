"""Exceptions raised by the layer stack and the training loop."""

from __future__ import annotations


class LayerNetError(Exception):
    """Base class for all layernet failures."""


class TopologyError(LayerNetError, ValueError):
    """Adjacent layer dimensions disagree or the stack is too short."""


class ShapeMismatchError(LayerNetError, ValueError):
    """A layer received an input vector of the wrong length."""

    def __init__(self, expected: int, actual: int, *, layer: str = "layer") -> None:
        super().__init__(f"{layer} expects input of length {expected}, got {actual}")
        self.expected = expected
        self.actual = actual


class EmptyWeightBufferError(LayerNetError, ValueError):
    """A trainable layer was asked to initialise a zero-sized weight buffer."""


class WeightsNotInitializedError(LayerNetError, RuntimeError):
    """A trainable layer was propagated before its weights were drawn."""


__all__ = [
    "LayerNetError",
    "TopologyError",
    "ShapeMismatchError",
    "EmptyWeightBufferError",
    "WeightsNotInitializedError",
]
