"""Shared type aliases for gqlcontext."""

from .common import JsonObject, JsonScalar, JsonValue

__all__ = ["JsonObject", "JsonScalar", "JsonValue"]
