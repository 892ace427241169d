"""AST node kind names consumed by the type context tracker."""

from __future__ import annotations

SELECTION_SET: str = "selection_set"
FIELD: str = "field"
DIRECTIVE: str = "directive"
OPERATION_DEFINITION: str = "operation_definition"
INLINE_FRAGMENT: str = "inline_fragment"
FRAGMENT_DEFINITION: str = "fragment_definition"
VARIABLE_DEFINITION: str = "variable_definition"
ARGUMENT: str = "argument"
LIST_VALUE: str = "list_value"
OBJECT_FIELD: str = "object_field"

TRACKED_KINDS: frozenset[str] = frozenset(
    {
        SELECTION_SET,
        FIELD,
        DIRECTIVE,
        OPERATION_DEFINITION,
        INLINE_FRAGMENT,
        FRAGMENT_DEFINITION,
        VARIABLE_DEFINITION,
        ARGUMENT,
        LIST_VALUE,
        OBJECT_FIELD,
    }
)

OPERATION_QUERY: str = "query"
OPERATION_MUTATION: str = "mutation"
OPERATION_SUBSCRIPTION: str = "subscription"
