"""Sample source registry and metadata contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, MutableMapping

from .sources import StaticSampleSource


@dataclass(frozen=True)
class SourceSpec:
    """Description of a sample source registered in the system.

    Attributes
    ----------
    name:
        Registry key the source was built from.
    source:
        The ready-to-consume sample source.
    input_dim:
        Length of every sample input vector.
    target_dim:
        Length of every sample target vector.
    provenance:
        Options the source was built with, recorded in run manifests.
    """

    name: str
    source: StaticSampleSource
    input_dim: int
    target_dim: int
    provenance: Dict[str, Any] = field(default_factory=dict)


SourceFactory = Callable[..., SourceSpec]


_REGISTRY: MutableMapping[str, SourceFactory] = {}


def register_source(
    name: str | None = None,
    factory: SourceFactory | None = None,
) -> Callable[[SourceFactory], SourceFactory] | SourceFactory:
    """Register a source factory.

    ``register_source`` can be used both as a decorator::

        @register_source("uniform")
        def make_uniform(**kwargs):
            ...

    or directly::

        register_source("uniform", make_uniform)
    """

    def _decorator(func: SourceFactory) -> SourceFactory:
        _REGISTRY[str(name or func.__name__)] = func
        return func

    if factory is not None:
        return _decorator(factory)
    if name is None:
        raise TypeError("register_source requires a name when used without a decorator")
    return _decorator


def get_source(name: str, /, **options: Any) -> SourceSpec:
    """Build the :class:`SourceSpec` registered under ``name``."""

    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY))
        raise KeyError(f"Unknown source {name!r}. Available sources: {available}")
    spec = _REGISTRY[name](**options)
    _validate_spec(spec)
    return spec


def available_sources() -> Iterable[str]:
    """Return the sorted list of available source identifiers."""

    return sorted(_REGISTRY)


def _validate_spec(spec: SourceSpec) -> None:
    if spec.input_dim < 1:
        raise ValueError(f"Source {spec.name!r} has non-positive input_dim {spec.input_dim}")
    if spec.target_dim < 0:
        raise ValueError(f"Source {spec.name!r} has negative target_dim {spec.target_dim}")


__all__ = [
    "SourceSpec",
    "available_sources",
    "get_source",
    "register_source",
]
