"""Document tracing on top of the type context tracker."""

from .collector import TraceCollector
from .discovery import discover_documents
from .runner import load_schema, parse_document, run_trace, trace_document, trace_documents

__all__ = [
    "TraceCollector",
    "discover_documents",
    "load_schema",
    "parse_document",
    "run_trace",
    "trace_document",
    "trace_documents",
]
