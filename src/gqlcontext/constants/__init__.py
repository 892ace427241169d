"""Shared constants for gqlcontext."""
