"""JSON writer for trace reports."""

from __future__ import annotations

from pathlib import Path

from gqlcontext.constants.reporting import SCHEMA_VERSION, TRACE_FILENAME
from gqlcontext.io import write_json_atomic
from gqlcontext.model import TraceResult
from gqlcontext.types import JsonObject


def build_trace_payload(result: TraceResult) -> JsonObject:
    """Build the deterministic JSON payload for a trace result."""
    return {
        "schema_version": SCHEMA_VERSION,
        "schema": list(result.schema_paths),
        "document_count": len(result.documents),
        "entry_count": result.total_entries,
        "unresolved_count": result.total_unresolved,
        "documents": [document.to_dict() for document in result.documents],
    }


def write_trace_report(out_root: Path, result: TraceResult) -> Path:
    """Write ``trace.json`` under *out_root* and return its path."""
    path = out_root / TRACE_FILENAME
    write_json_atomic(path, build_trace_payload(result))
    return path
