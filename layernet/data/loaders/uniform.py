"""Pure in-memory synthetic samples drawn from U[0, 1)."""

from __future__ import annotations

import numpy as np

from ..registry import SourceSpec, register_source
from ..sources import StaticSampleSource


def _make_samples(n_samples: int, d_in: int, d_out: int, seed: int) -> tuple[np.ndarray, np.ndarray]:
    rng = np.random.default_rng(seed)
    x = rng.random((n_samples, d_in))
    y = rng.random((n_samples, d_out))
    return x, y


def _factory(
    n_samples: int = 16,
    d_in: int = 3,
    d_out: int = 2,
    seed: int = 0,
    **_: object,
) -> SourceSpec:
    if n_samples < 0:
        raise ValueError(f"n_samples must be non-negative, got {n_samples}")
    x, y = _make_samples(int(n_samples), int(d_in), int(d_out), int(seed))
    return SourceSpec(
        name="uniform",
        source=StaticSampleSource.from_arrays(x, y),
        input_dim=int(d_in),
        target_dim=int(d_out),
        provenance={
            "type": "uniform",
            "n_samples": int(n_samples),
            "d_in": int(d_in),
            "d_out": int(d_out),
            "seed": int(seed),
        },
    )


register_source("uniform", _factory)
