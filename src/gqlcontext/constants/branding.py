"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "gqlcontext"
CLI_DESCRIPTION: str = f"{BRAND_NAME}: trace GraphQL type context through query documents"
TRACE_SUMMARY_TITLE: str = "Trace summary"
