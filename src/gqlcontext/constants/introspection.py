"""Names of the introspection meta-fields injected by the type system."""

from __future__ import annotations

SCHEMA_META_FIELD_NAME: str = "__schema"
TYPE_META_FIELD_NAME: str = "__type"
TYPE_NAME_META_FIELD_NAME: str = "__typename"
