"""Root exception for gqlcontext."""

from __future__ import annotations


class GqlContextError(Exception):
    """Base class for errors raised by gqlcontext."""
