"""Ordered layer stack with a validated shape chain."""

from __future__ import annotations

import logging
from typing import Any, Iterator, List, Sequence

import numpy as np

from .errors import TopologyError
from .init import WeightInitializer
from .layers import Layer
from .types import Array, ModelDescription

logger = logging.getLogger(__name__)


class Network:
    """Feed-forward network owning an ordered list of layers."""

    def __init__(self, layers: Sequence[Layer]) -> None:
        self.layers: List[Layer] = list(layers)

    def __len__(self) -> int:
        return len(self.layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(self.layers)

    def __repr__(self) -> str:
        return f"Network([{', '.join(layer.name for layer in self.layers)}])"

    @property
    def input_dim(self) -> int:
        return self.layers[0].input_dim

    @property
    def output_dim(self) -> int:
        return self.layers[-1].output_dim

    def describe(self) -> ModelDescription:
        dims = [self.layers[0].input_dim] if self.layers else []
        dims.extend(layer.output_dim for layer in self.layers)
        return ModelDescription(
            layer_dims=dims,
            layer_kinds=[layer.kind.value for layer in self.layers],
        )

    def validate(self) -> None:
        """Check that every layer's output feeds the next layer's input."""

        if len(self.layers) < 2:
            raise TopologyError(
                f"A network needs at least two layers, got {len(self.layers)}"
            )
        prev_dim = self.layers[0].input_dim
        for idx, layer in enumerate(self.layers):
            if layer.input_dim < 1 or layer.output_dim < 1:
                raise TopologyError(f"Layer {idx} ({layer.name}) has a zero dimension")
            if layer.input_dim != prev_dim:
                raise TopologyError(
                    f"Layer {idx} ({layer.name}) expects {layer.input_dim} inputs "
                    f"but layer {idx - 1} produces {prev_dim}"
                )
            prev_dim = layer.output_dim
        logger.debug("Validated %r", self)

    def initialize_weights(self, initializer: WeightInitializer) -> None:
        for layer in self.layers:
            layer.initialize_weights(initializer)
        logger.debug(
            "Initialised %d parameters with seed %d", self.parameter_count(), initializer.seed
        )

    def forward(self, inputs: Array) -> Array:
        x = np.asarray(inputs, dtype=np.float64)
        for layer in self.layers:
            x = layer.forward_propagate(x)
        return x

    def backward(self, *args: Any, **kwargs: Any) -> Array:
        """Run the backward hooks from the output stage towards the input."""

        result = None
        for layer in reversed(self.layers):
            result = layer.back_propagate(*args, **kwargs)
        return result

    def parameter_count(self) -> int:
        return int(sum(layer.parameter_count() for layer in self.layers))


__all__ = ["Network"]
