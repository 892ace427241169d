"""Configuration defaults and filenames."""

from __future__ import annotations

from gqlcontext.constants.kinds import (
    ARGUMENT,
    DIRECTIVE,
    FIELD,
    FRAGMENT_DEFINITION,
    INLINE_FRAGMENT,
    OPERATION_DEFINITION,
    VARIABLE_DEFINITION,
)

CONFIG_FILENAME: str = "gqlcontext.yaml"

DEFAULT_SCHEMA_PATHS: tuple[str, ...] = ("schema.graphql",)
DEFAULT_DOCUMENT_GLOBS: tuple[str, ...] = ("**/*.graphql", "**/*.gql")
DEFAULT_MAX_FILE_KB: int = 512

DEFAULT_TRACE_KINDS: tuple[str, ...] = (
    OPERATION_DEFINITION,
    FRAGMENT_DEFINITION,
    VARIABLE_DEFINITION,
    INLINE_FRAGMENT,
    FIELD,
    DIRECTIVE,
    ARGUMENT,
)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "schema",
        "documents",
        "kinds",
        "max_file_kb",
        "fail_on_unresolved",
    }
)
