"""Trace report rendering and writing."""

from .stdout import TextReporter
from .writer import build_trace_payload, write_trace_report

__all__ = ["TextReporter", "build_trace_payload", "write_trace_report"]
