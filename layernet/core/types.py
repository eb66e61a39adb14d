"""Core typing contracts for layernet."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

Array = np.ndarray


@dataclass(frozen=True)
class Sample:
    """A single labeled sample."""

    input: Array
    target: Array


@dataclass(frozen=True)
class TrainResult:
    """Summary returned by :meth:`layernet.training.trainer.Trainer.train`."""

    steps: int
    outputs_path: str = ""
    manifest_path: str = ""


@dataclass(frozen=True)
class ModelDescription:
    """Description of the feed-forward network architecture."""

    layer_dims: List[int]
    layer_kinds: List[str]
