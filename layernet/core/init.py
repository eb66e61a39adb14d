"""Deterministic weight initialisation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from .errors import EmptyWeightBufferError
from .types import Array

DEFAULT_SEED = 0


@dataclass
class WeightInitializer:
    """Fill weight buffers with uniform draws from ``[low, high)``.

    The generator is seeded once at construction, so two initialisers built
    with the same seed produce identical weights for identical networks.
    """

    seed: int = DEFAULT_SEED
    low: float = 0.0
    high: float = 1.0
    rng: np.random.Generator = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.low < self.high:
            raise ValueError(f"Invalid range [{self.low}, {self.high})")
        self.reset(self.seed)

    def reset(self, seed: int) -> None:
        self.seed = seed
        self.rng = np.random.default_rng(seed)

    def fill(self, shape: tuple[int, ...]) -> Array:
        size = int(np.prod(shape, dtype=np.int64))
        if size == 0:
            raise EmptyWeightBufferError(f"Cannot initialise weight buffer of shape {shape}")
        draws = self.rng.random(size, dtype=np.float64)
        if (self.low, self.high) != (0.0, 1.0):
            draws = self.low + (self.high - self.low) * draws
        return draws.reshape(shape)


__all__ = ["DEFAULT_SEED", "WeightInitializer"]
