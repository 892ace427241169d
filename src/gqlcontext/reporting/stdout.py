"""Plain-text stdout reporter for trace results."""

from __future__ import annotations

from gqlcontext.constants.branding import TRACE_SUMMARY_TITLE
from gqlcontext.constants.reporting import (
    ABSENT_PLACEHOLDER,
    ANSI_DIM,
    ANSI_GREEN,
    ANSI_RED,
    ANSI_RESET,
    INDENT_WIDTH,
    UNRESOLVED_MARKER,
)
from gqlcontext.model import DocumentTrace, TraceEntry, TraceResult


def _colorize(text: str, color: str) -> str:
    return f"{color}{text}{ANSI_RESET}"


class TextReporter:
    """Formats trace results as an indented, human-readable listing."""

    def __init__(self, result: TraceResult, *, color: bool = True, summary_only: bool = False) -> None:
        self._result = result
        self._color = color
        self._summary_only = summary_only

    def render(self) -> str:
        """Render the full report as a single string."""
        sections: list[str] = []
        if not self._summary_only:
            sections.extend(self._render_document(document) for document in self._result.documents)
        sections.append(self._render_summary())
        return "\n\n".join(section for section in sections if section)

    def _render_document(self, document: DocumentTrace) -> str:
        lines = [document.path]
        lines.extend(self._render_entry(entry) for entry in document.entries)
        return "\n".join(lines)

    def _render_entry(self, entry: TraceEntry) -> str:
        indent = " " * (INDENT_WIDTH * (entry.depth + 1))
        marker = UNRESOLVED_MARKER if not entry.resolved else " "
        label = f"{entry.kind} {entry.name}" if entry.name else entry.kind
        location = f"{entry.line}:{entry.column}" if entry.line is not None else ABSENT_PLACEHOLDER
        context = (
            f"type={entry.type or ABSENT_PLACEHOLDER} "
            f"parent={entry.parent_type or ABSENT_PLACEHOLDER} "
            f"input={entry.input_type or ABSENT_PLACEHOLDER}"
        )
        if self._color:
            marker = _colorize(marker, ANSI_RED) if not entry.resolved else marker
            context = _colorize(context, ANSI_DIM)
        return f"{marker}{indent}{label} [{location}] {context}"

    def _render_summary(self) -> str:
        r = self._result
        unresolved = str(r.total_unresolved)
        if self._color:
            unresolved = _colorize(unresolved, ANSI_RED if r.total_unresolved else ANSI_GREEN)
        schema = ", ".join(r.schema_paths) or ABSENT_PLACEHOLDER
        return "\n".join(
            [
                f"  {TRACE_SUMMARY_TITLE}",
                "  " + "─" * 38,
                f"  Schema      {schema}",
                f"  Documents   {len(r.documents)}",
                f"  Entries     {r.total_entries}",
                f"  Unresolved  {unresolved}",
            ]
        )
