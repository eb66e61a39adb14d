"""Reporting helpers for layernet runs."""

from .artifacts import write_manifest
from .sinks import JsonlSink, OutputCapture

__all__ = ["JsonlSink", "OutputCapture", "write_manifest"]
