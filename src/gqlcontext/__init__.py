"""gqlcontext: GraphQL type context tracking for document traversal."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

from gqlcontext.context import TypeContextTracker, TypeContextVisitor, get_field_def

__all__ = ["TypeContextTracker", "TypeContextVisitor", "__version__", "get_field_def"]

try:
    __version__ = version("gqlcontext")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
