"""Command-line interface for gqlcontext."""
