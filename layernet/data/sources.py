"""Sample sources feeding the training loop."""

from __future__ import annotations

import logging
from typing import Iterator, List, Protocol, Sequence, Tuple

import numpy as np

from ..core.types import Sample

logger = logging.getLogger(__name__)


class SampleSource(Protocol):
    """Protocol implemented by anything that yields labeled samples."""

    def next(self) -> Tuple[Sample | None, bool]:
        """Return ``(sample, True)`` or ``(None, False)`` once exhausted."""


def make_sample(inputs: Sequence[float], targets: Sequence[float]) -> Sample:
    """Build a :class:`Sample` with read-only float vectors."""

    x = np.array(inputs, dtype=np.float64).reshape(-1)
    y = np.array(targets, dtype=np.float64).reshape(-1)
    x.setflags(write=False)
    y.setflags(write=False)
    return Sample(input=x, target=y)


class StaticSampleSource:
    """Cursor over a fixed, pre-loaded list of samples.

    The cursor starts at zero and only moves forward; it never wraps, so an
    exhausted source keeps reporting exhaustion.
    """

    def __init__(self, samples: Sequence[Sample]) -> None:
        self._samples: List[Sample] = [
            s if isinstance(s, Sample) else make_sample(*s) for s in samples
        ]
        self._offset = 0
        if self._samples:
            logger.debug(
                "Static source with %d samples of input length %d",
                len(self._samples),
                self._samples[0].input.shape[0],
            )
        else:
            logger.debug("Static source is empty")

    @classmethod
    def from_arrays(
        cls, inputs: Sequence[Sequence[float]], targets: Sequence[Sequence[float]]
    ) -> "StaticSampleSource":
        if len(inputs) != len(targets):
            raise ValueError(
                f"inputs and targets differ in length: {len(inputs)} != {len(targets)}"
            )
        return cls([make_sample(x, y) for x, y in zip(inputs, targets)])

    def __len__(self) -> int:
        return len(self._samples)

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._samples) - self._offset

    def next(self) -> Tuple[Sample | None, bool]:
        if self._offset < len(self._samples):
            sample = self._samples[self._offset]
            self._offset += 1
            return sample, True
        return None, False

    def __iter__(self) -> Iterator[Sample]:
        while True:
            sample, found = self.next()
            if not found:
                return
            yield sample


__all__ = ["SampleSource", "StaticSampleSource", "make_sample"]
