"""Static field definition lookup for a parent composite type.

Unlike execution-time lookup, a document being traversed does not always
select on a concrete object type, so interfaces and unions are handled too.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeAlias

from graphql import (
    FieldNode,
    GraphQLCompositeType,
    GraphQLField,
    GraphQLSchema,
    SchemaMetaFieldDef,
    TypeMetaFieldDef,
    TypeNameMetaFieldDef,
    is_interface_type,
    is_object_type,
    is_union_type,
)

from gqlcontext.constants.introspection import (
    SCHEMA_META_FIELD_NAME,
    TYPE_META_FIELD_NAME,
    TYPE_NAME_META_FIELD_NAME,
)

FieldDefResolver: TypeAlias = Callable[[GraphQLSchema, GraphQLCompositeType, FieldNode], GraphQLField | None]


def get_field_def(
    schema: GraphQLSchema,
    parent_type: GraphQLCompositeType,
    field_node: FieldNode,
) -> GraphQLField | None:
    """Resolve the field definition selected by *field_node* on *parent_type*."""
    name = field_node.name.value
    if name == SCHEMA_META_FIELD_NAME and schema.query_type is parent_type:
        return SchemaMetaFieldDef
    if name == TYPE_META_FIELD_NAME and schema.query_type is parent_type:
        return TypeMetaFieldDef
    if name == TYPE_NAME_META_FIELD_NAME and (
        is_object_type(parent_type) or is_interface_type(parent_type) or is_union_type(parent_type)
    ):
        return TypeNameMetaFieldDef
    if is_object_type(parent_type) or is_interface_type(parent_type):
        return parent_type.fields.get(name)
    return None
