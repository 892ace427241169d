"""Config data model for gqlcontext traces."""

from __future__ import annotations

from dataclasses import dataclass

from gqlcontext.constants.config import (
    DEFAULT_DOCUMENT_GLOBS,
    DEFAULT_MAX_FILE_KB,
    DEFAULT_SCHEMA_PATHS,
    DEFAULT_TRACE_KINDS,
)


@dataclass(frozen=True)
class GqlContextConfig:
    """Resolved trace config."""

    schema_paths: tuple[str, ...] = DEFAULT_SCHEMA_PATHS
    document_globs: tuple[str, ...] = DEFAULT_DOCUMENT_GLOBS
    kinds: tuple[str, ...] = DEFAULT_TRACE_KINDS
    max_file_kb: int = DEFAULT_MAX_FILE_KB
    fail_on_unresolved: bool = False
