"""Single-pass training loop driving samples through a network."""

from __future__ import annotations

import logging
from typing import Sequence

from ..core.init import WeightInitializer
from ..core.network import Network
from ..core.types import Array, Sample, TrainResult
from ..data.sources import SampleSource

logger = logging.getLogger(__name__)


class Trainer:
    """Validate a network, draw its weights once and feed it a sample source.

    Construction fails with :class:`~layernet.core.errors.TopologyError`
    before any weights are drawn when the layer dimensions do not chain.
    """

    def __init__(
        self,
        network: Network,
        source: SampleSource,
        *,
        initializer: WeightInitializer | None = None,
        callbacks: Sequence[object] | None = None,
    ) -> None:
        self.network = network
        self.source = source
        self.initializer = initializer or WeightInitializer()
        self.callbacks = list(callbacks or [])
        self.validate()
        self.initialize_weights()

    def validate(self) -> None:
        logger.info("Validating %r", self.network)
        self.network.validate()

    def initialize_weights(self) -> None:
        self.network.initialize_weights(self.initializer)

    def train(self) -> TrainResult:
        """Push every sample of the source forward once.

        Outputs are only handed to observers; no loss is computed and the
        weights stay untouched for the whole pass.
        """

        steps = 0
        while True:
            sample, found = self.source.next()
            if not found:
                break
            output = self.network.forward(sample.input)
            self._emit_step(steps, sample, output)
            steps += 1
        logger.info("Completed %d forward passes", steps)
        return TrainResult(steps=steps)

    def _emit_step(self, step: int, sample: Sample, output: Array) -> None:
        for callback in self.callbacks:
            if hasattr(callback, "on_step"):
                callback.on_step(step, sample, output)  # type: ignore[attr-defined]
            elif callable(callback):
                callback(step, sample, output)


__all__ = ["Trainer"]
