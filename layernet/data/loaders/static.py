"""Sources backed by samples given inline in a config."""

from __future__ import annotations

from typing import Mapping, Sequence

from ..registry import SourceSpec, register_source
from ..sources import StaticSampleSource, make_sample


def _factory(
    samples: Sequence[Mapping[str, Sequence[float]] | Sequence[Sequence[float]]] = (),
    **_: object,
) -> SourceSpec:
    if not samples:
        raise ValueError("The static source needs at least one sample")
    built = []
    for idx, item in enumerate(samples):
        if isinstance(item, Mapping):
            if "input" not in item or "target" not in item:
                raise ValueError(f"Sample {idx} must define 'input' and 'target'")
            built.append(make_sample(item["input"], item["target"]))
        else:
            inputs, targets = item
            built.append(make_sample(inputs, targets))

    input_dim = int(built[0].input.shape[0])
    target_dim = int(built[0].target.shape[0])
    for idx, sample in enumerate(built):
        if sample.input.shape[0] != input_dim:
            raise ValueError(
                f"Sample {idx} has input length {sample.input.shape[0]}, expected {input_dim}"
            )

    return SourceSpec(
        name="static",
        source=StaticSampleSource(built),
        input_dim=input_dim,
        target_dim=target_dim,
        provenance={"type": "static", "n_samples": len(built)},
    )


register_source("static", _factory)
