"""Shared exception hierarchy for gqlcontext."""

from __future__ import annotations

from .base import GqlContextError
from .config import ConfigError
from .parsing import DocumentParseError, SchemaLoadError

__all__ = [
    "ConfigError",
    "DocumentParseError",
    "GqlContextError",
    "SchemaLoadError",
]
