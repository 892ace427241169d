"""Document discovery constants."""

from __future__ import annotations

DOCUMENT_SUFFIXES: frozenset[str] = frozenset({".graphql", ".gql"})
