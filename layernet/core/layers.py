"""Layer variants that make up a feed-forward stack.

Every layer is a :class:`Layer` value tagged with a :class:`LayerKind`.
Behaviour is dispatched on the tag:

``PASSTHROUGH``
    Input stage.  ``input_dim == output_dim`` and no weights are held; the
    forward pass returns its input unchanged.
``DENSE``
    Fully connected layer with a logistic sigmoid activation.
``DENSE_OUTPUT``
    Numerically identical to ``DENSE``.  Kept as a separate tag so that a
    loss-aware backward pass can tell the final stage apart.

Trainable weights are stored as an ``(input_dim, output_dim)`` array, so the
row-major flattening places the weight connecting input ``i`` to neuron ``j``
at ``i * output_dim + j``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .activations import sigmoid
from .errors import ShapeMismatchError, WeightsNotInitializedError
from .init import WeightInitializer
from .types import Array


class LayerKind(str, enum.Enum):
    PASSTHROUGH = "passthrough"
    DENSE = "dense"
    DENSE_OUTPUT = "dense_output"

    @property
    def trainable(self) -> bool:
        return self is not LayerKind.PASSTHROUGH


@dataclass(eq=False)
class Layer:
    """A single stage of the network."""

    kind: LayerKind
    input_dim: int
    output_dim: int
    weights: Array = field(default_factory=lambda: np.empty((0, 0)), repr=False)

    def __post_init__(self) -> None:
        self.kind = LayerKind(self.kind)
        for name in ("input_dim", "output_dim"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise ValueError(f"{name} must be an integer, got {value!r}")
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")
            setattr(self, name, int(value))
        if self.kind is LayerKind.PASSTHROUGH and self.input_dim != self.output_dim:
            raise ValueError("Passthrough layers must have input_dim == output_dim")

    @property
    def name(self) -> str:
        return f"{self.kind.value}({self.input_dim}->{self.output_dim})"

    @property
    def initialized(self) -> bool:
        if not self.kind.trainable:
            return True
        return self.weights.size == self.input_dim * self.output_dim > 0

    def initialize_weights(self, initializer: WeightInitializer) -> None:
        """Draw a fresh weight buffer for trainable layers."""

        if not self.kind.trainable:
            return
        self.weights = initializer.fill((self.input_dim, self.output_dim))

    def forward_propagate(self, inputs: Array) -> Array:
        x = np.asarray(inputs, dtype=np.float64)
        if x.ndim != 1 or x.shape[0] != self.input_dim:
            actual = x.shape[0] if x.ndim == 1 else int(x.size)
            raise ShapeMismatchError(self.input_dim, actual, layer=self.name)
        if self.kind is LayerKind.PASSTHROUGH:
            return x.copy()
        if self.kind in (LayerKind.DENSE, LayerKind.DENSE_OUTPUT):
            if not self.initialized:
                raise WeightsNotInitializedError(f"{self.name} has no weights; call initialize_weights first")
            sigma = x @ self.weights
            return sigmoid(sigma)
        raise ValueError(f"Unknown layer kind: {self.kind}")  # pragma: no cover - guardrail

    def back_propagate(self, *args: Any, **kwargs: Any) -> Array:
        """Extension point for a gradient pass.

        No loss function, learning rate or update rule is defined for this
        network, so every kind refuses to run.
        """

        if self.kind is LayerKind.DENSE_OUTPUT:
            raise NotImplementedError(
                f"{self.name}: backward pass requires a cost function, none is defined"
            )
        raise NotImplementedError(f"{self.name}: backward pass is not implemented")

    def parameter_count(self) -> int:
        if not self.kind.trainable:
            return 0
        return self.input_dim * self.output_dim


def passthrough(dim: int) -> Layer:
    return Layer(LayerKind.PASSTHROUGH, dim, dim)


def dense(input_dim: int, output_dim: int) -> Layer:
    return Layer(LayerKind.DENSE, input_dim, output_dim)


def dense_output(input_dim: int, output_dim: int) -> Layer:
    return Layer(LayerKind.DENSE_OUTPUT, input_dim, output_dim)


def make_layer(kind: str | LayerKind, input_dim: int, output_dim: int | None = None) -> Layer:
    """Build a layer from a kind name, as used by config files."""

    try:
        kind = LayerKind(kind)
    except ValueError as exc:
        available = ", ".join(k.value for k in LayerKind)
        raise KeyError(f"Unknown layer kind {kind!r}. Available kinds: {available}") from exc
    if output_dim is None:
        output_dim = input_dim
    return Layer(kind, input_dim, output_dim)


__all__ = [
    "Layer",
    "LayerKind",
    "dense",
    "dense_output",
    "make_layer",
    "passthrough",
]
