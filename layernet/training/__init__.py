"""Training loop and pipeline assembly."""

from .pipelines import build_layers, build_network, load_preset, presets, run_pipeline
from .trainer import Trainer

__all__ = [
    "Trainer",
    "build_layers",
    "build_network",
    "load_preset",
    "presets",
    "run_pipeline",
]
