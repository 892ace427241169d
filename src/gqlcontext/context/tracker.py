"""Type context tracking for recursive-descent traversal of a GraphQL document.

A ``TypeContextTracker`` is driven by a traversal that calls ``enter(node)``
and ``leave(node)`` in matched pairs, depth-first and in document order.
Between those calls, consumers read the innermost output type, parent
composite type, input type, field definition, directive and argument that
apply to the node being visited.

Lookups that fail never raise: an unknown field, directive, argument or type
condition is recorded as ``None`` and traversal continues.
"""

from __future__ import annotations

from graphql import (
    GraphQLArgument,
    GraphQLCompositeType,
    GraphQLDirective,
    GraphQLField,
    GraphQLInputType,
    GraphQLOutputType,
    GraphQLSchema,
    Node,
    get_named_type,
    get_nullable_type,
    is_composite_type,
    is_input_object_type,
    is_list_type,
)
from graphql.utilities import type_from_ast

from gqlcontext.constants.kinds import (
    ARGUMENT,
    DIRECTIVE,
    FIELD,
    FRAGMENT_DEFINITION,
    INLINE_FRAGMENT,
    LIST_VALUE,
    OBJECT_FIELD,
    OPERATION_DEFINITION,
    OPERATION_MUTATION,
    OPERATION_QUERY,
    OPERATION_SUBSCRIPTION,
    SELECTION_SET,
    VARIABLE_DEFINITION,
)
from gqlcontext.context.field_resolver import FieldDefResolver, get_field_def


class TypeContextTracker:
    """Track type and definition context while a document is traversed."""

    def __init__(
        self,
        schema: GraphQLSchema,
        get_field_def_fn: FieldDefResolver | None = None,
    ) -> None:
        """Bind the tracker to *schema*.

        *get_field_def_fn* replaces the default field lookup. It exists for
        schemas that resolve fields in a non-standard way and should rarely
        be needed.
        """
        self._schema = schema
        self._type_stack: list[GraphQLOutputType | None] = []
        self._parent_type_stack: list[GraphQLCompositeType | None] = []
        self._input_type_stack: list[GraphQLInputType | None] = []
        self._field_def_stack: list[GraphQLField | None] = []
        self._directive: GraphQLDirective | None = None
        self._argument: GraphQLArgument | None = None
        self._get_field_def = get_field_def_fn or get_field_def

    @property
    def schema(self) -> GraphQLSchema:
        return self._schema

    def get_type(self) -> GraphQLOutputType | None:
        if self._type_stack:
            return self._type_stack[-1]
        return None

    def get_parent_type(self) -> GraphQLCompositeType | None:
        if self._parent_type_stack:
            return self._parent_type_stack[-1]
        return None

    def get_input_type(self) -> GraphQLInputType | None:
        if self._input_type_stack:
            return self._input_type_stack[-1]
        return None

    def get_field_def(self) -> GraphQLField | None:
        if self._field_def_stack:
            return self._field_def_stack[-1]
        return None

    def get_directive(self) -> GraphQLDirective | None:
        return self._directive

    def get_argument(self) -> GraphQLArgument | None:
        return self._argument

    def enter(self, node: Node) -> None:
        """Push the context introduced by *node*. Unknown kinds are ignored."""
        kind = node.kind
        if kind == SELECTION_SET:
            self._enter_selection_set()
        elif kind == FIELD:
            self._enter_field(node)
        elif kind == DIRECTIVE:
            self._directive = self._schema.get_directive(node.name.value)
        elif kind == OPERATION_DEFINITION:
            self._type_stack.append(self._root_type(node.operation.value))
        elif kind in (INLINE_FRAGMENT, FRAGMENT_DEFINITION):
            type_condition = node.type_condition
            if type_condition is not None:
                output_type = type_from_ast(self._schema, type_condition)
            else:
                output_type = self.get_type()
            self._type_stack.append(output_type)
        elif kind == VARIABLE_DEFINITION:
            self._input_type_stack.append(type_from_ast(self._schema, node.type))
        elif kind == ARGUMENT:
            self._enter_argument(node)
        elif kind == LIST_VALUE:
            list_type = get_nullable_type(self.get_input_type())
            self._input_type_stack.append(list_type.of_type if is_list_type(list_type) else None)
        elif kind == OBJECT_FIELD:
            self._enter_object_field(node)

    def leave(self, node: Node) -> None:
        """Undo exactly what ``enter`` did for a node of the same kind."""
        kind = node.kind
        if kind == SELECTION_SET:
            self._parent_type_stack.pop()
        elif kind == FIELD:
            self._field_def_stack.pop()
            self._type_stack.pop()
        elif kind == DIRECTIVE:
            self._directive = None
        elif kind in (OPERATION_DEFINITION, INLINE_FRAGMENT, FRAGMENT_DEFINITION):
            self._type_stack.pop()
        elif kind == VARIABLE_DEFINITION:
            self._input_type_stack.pop()
        elif kind == ARGUMENT:
            self._argument = None
            self._input_type_stack.pop()
        elif kind in (LIST_VALUE, OBJECT_FIELD):
            self._input_type_stack.pop()

    def _enter_selection_set(self) -> None:
        named_type = get_named_type(self.get_type())
        self._parent_type_stack.append(named_type if is_composite_type(named_type) else None)

    def _enter_field(self, node: Node) -> None:
        parent_type = self.get_parent_type()
        field_def = None
        if parent_type is not None:
            field_def = self._get_field_def(self._schema, parent_type, node)
        self._field_def_stack.append(field_def)
        self._type_stack.append(field_def.type if field_def is not None else None)

    def _enter_argument(self, node: Node) -> None:
        # A directive's arguments take precedence over the enclosing field's.
        owner = self.get_directive() or self.get_field_def()
        arg_def = None
        if owner is not None:
            arg_def = owner.args.get(node.name.value)
        self._argument = arg_def
        self._input_type_stack.append(arg_def.type if arg_def is not None else None)

    def _enter_object_field(self, node: Node) -> None:
        object_type = get_named_type(self.get_input_type())
        field_type = None
        if is_input_object_type(object_type):
            input_field = object_type.fields.get(node.name.value)
            field_type = input_field.type if input_field is not None else None
        self._input_type_stack.append(field_type)

    def _root_type(self, operation: str) -> GraphQLOutputType | None:
        if operation == OPERATION_QUERY:
            return self._schema.query_type
        if operation == OPERATION_MUTATION:
            return self._schema.mutation_type
        if operation == OPERATION_SUBSCRIPTION:
            return self._schema.subscription_type
        return None
