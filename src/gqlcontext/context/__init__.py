"""Type context tracking over GraphQL document traversal."""

from .field_resolver import FieldDefResolver, get_field_def
from .tracker import TypeContextTracker
from .visitor import TypeContextVisitor

__all__ = ["FieldDefResolver", "TypeContextTracker", "TypeContextVisitor", "get_field_def"]
