"""Configuration loading, validation, and normalization for gqlcontext."""

from __future__ import annotations

from gqlcontext.config.loader import load_config
from gqlcontext.config.model import GqlContextConfig

__all__ = ["GqlContextConfig", "load_config"]
