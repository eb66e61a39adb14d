"""Sample sources and the source registry."""

# Ensure built-in sources register themselves when the package is imported.
from . import loaders as _loaders  # noqa: F401
from .registry import SourceSpec, available_sources, get_source, register_source
from .sources import SampleSource, StaticSampleSource, make_sample

__all__ = [
    "SampleSource",
    "SourceSpec",
    "StaticSampleSource",
    "available_sources",
    "get_source",
    "make_sample",
    "register_source",
]
