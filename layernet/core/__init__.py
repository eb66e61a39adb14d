"""Core numerical primitives for layernet."""

from . import activations, errors, init, layers, network, types

__all__ = ["activations", "errors", "init", "layers", "network", "types"]
