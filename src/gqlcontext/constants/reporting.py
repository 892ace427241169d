"""Constants for report file names, atomic writing, and stdout formatting."""

from __future__ import annotations

TRACE_FILENAME: str = "trace.json"
REPORT_TEMP_PREFIX: str = ".tmp-"
REPORT_TEMP_SUFFIX: str = ".json"

SCHEMA_VERSION: str = "1.0.0"

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

ANSI_RED: str = "\033[31m"
ANSI_GREEN: str = "\033[32m"
ANSI_DIM: str = "\033[2m"
ANSI_RESET: str = "\033[0m"

INDENT_WIDTH: int = 2
UNRESOLVED_MARKER: str = "!"
ABSENT_PLACEHOLDER: str = "-"
