"""layernet public API."""

import logging

from .core import activations, types  # noqa: F401
from .core.errors import (
    EmptyWeightBufferError,
    LayerNetError,
    ShapeMismatchError,
    TopologyError,
    WeightsNotInitializedError,
)
from .core.init import WeightInitializer
from .core.layers import Layer, LayerKind, dense, dense_output, passthrough
from .core.network import Network
from .core.types import Sample, TrainResult
from .data import SampleSource, StaticSampleSource, get_source, make_sample
from .training.pipelines import load_preset, presets, run_pipeline
from .training.trainer import Trainer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "EmptyWeightBufferError",
    "Layer",
    "LayerKind",
    "LayerNetError",
    "Network",
    "Sample",
    "SampleSource",
    "ShapeMismatchError",
    "StaticSampleSource",
    "TopologyError",
    "TrainResult",
    "Trainer",
    "WeightInitializer",
    "WeightsNotInitializedError",
    "activations",
    "dense",
    "dense_output",
    "get_source",
    "load_preset",
    "make_sample",
    "passthrough",
    "presets",
    "run_pipeline",
    "types",
]
