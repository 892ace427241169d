"""Configuration-related exceptions."""

from __future__ import annotations

from gqlcontext.exceptions.base import GqlContextError


class ConfigError(GqlContextError, ValueError):
    """Raised when trace configuration is invalid."""
