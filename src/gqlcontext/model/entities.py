"""Trace records produced by walking documents with a type context tracker."""

from __future__ import annotations

from dataclasses import dataclass, field

from gqlcontext.types import JsonObject


@dataclass(frozen=True)
class TraceEntry:
    """Tracker state observed when entering one AST node."""

    kind: str
    name: str | None
    depth: int
    line: int | None
    column: int | None
    type: str | None
    parent_type: str | None
    input_type: str | None
    resolved: bool = True

    def to_dict(self) -> JsonObject:
        return {
            "kind": self.kind,
            "name": self.name,
            "depth": self.depth,
            "line": self.line,
            "column": self.column,
            "type": self.type,
            "parent_type": self.parent_type,
            "input_type": self.input_type,
            "resolved": self.resolved,
        }


@dataclass(frozen=True)
class DocumentTrace:
    """All trace entries recorded for a single document."""

    path: str
    entries: tuple[TraceEntry, ...]

    @property
    def unresolved(self) -> int:
        return sum(1 for entry in self.entries if not entry.resolved)

    def to_dict(self) -> JsonObject:
        return {
            "path": self.path,
            "unresolved": self.unresolved,
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass(frozen=True)
class TraceResult:
    """Outcome of tracing a set of documents against one schema."""

    schema_paths: tuple[str, ...]
    documents: tuple[DocumentTrace, ...] = field(default_factory=tuple)

    @property
    def total_entries(self) -> int:
        return sum(len(document.entries) for document in self.documents)

    @property
    def total_unresolved(self) -> int:
        return sum(document.unresolved for document in self.documents)
