"""Core data models for gqlcontext."""

from .entities import DocumentTrace, TraceEntry, TraceResult

__all__ = ["DocumentTrace", "TraceEntry", "TraceResult"]
