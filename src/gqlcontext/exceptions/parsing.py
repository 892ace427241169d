"""Schema and document loading exceptions."""

from __future__ import annotations

from gqlcontext.exceptions.base import GqlContextError


class SchemaLoadError(GqlContextError, ValueError):
    """Raised when schema SDL cannot be read or built."""


class DocumentParseError(GqlContextError, ValueError):
    """Raised when a GraphQL document cannot be read or parsed."""
