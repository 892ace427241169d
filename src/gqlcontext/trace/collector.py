"""Visitor that records type context tracker state at each traced node."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from graphql import GraphQLType, Node, Visitor
from graphql.language import get_location

from gqlcontext.constants.kinds import (
    ARGUMENT,
    DIRECTIVE,
    FIELD,
    FRAGMENT_DEFINITION,
    INLINE_FRAGMENT,
    OBJECT_FIELD,
    OPERATION_DEFINITION,
    VARIABLE_DEFINITION,
)
from gqlcontext.context import TypeContextTracker
from gqlcontext.model import TraceEntry


class TraceCollector(Visitor):
    """Collect a ``TraceEntry`` for every entered node whose kind is traced.

    Must run inside a ``TypeContextVisitor`` bound to the same tracker, so the
    tracker already reflects the node when ``enter`` is called.
    """

    def __init__(self, tracker: TypeContextTracker, kinds: Iterable[str]) -> None:
        super().__init__()
        self.tracker = tracker
        self.kinds = frozenset(kinds)
        self.entries: list[TraceEntry] = []
        self._depth = 0

    def enter(self, node: Node, *_args: Any) -> None:
        if node.kind not in self.kinds:
            return
        line, column = _node_location(node)
        tracker = self.tracker
        self.entries.append(
            TraceEntry(
                kind=node.kind,
                name=_node_name(node),
                depth=self._depth,
                line=line,
                column=column,
                type=_type_str(tracker.get_type()),
                parent_type=_type_str(tracker.get_parent_type()),
                input_type=_type_str(tracker.get_input_type()),
                resolved=_is_resolved(node, tracker),
            )
        )
        self._depth += 1

    def leave(self, node: Node, *_args: Any) -> None:
        if node.kind in self.kinds:
            self._depth -= 1


def _is_resolved(node: Node, tracker: TypeContextTracker) -> bool:
    """Return False when *node* names a schema reference the tracker could not find."""
    kind = node.kind
    if kind == FIELD:
        return tracker.get_field_def() is not None
    if kind == DIRECTIVE:
        return tracker.get_directive() is not None
    if kind == ARGUMENT:
        return tracker.get_argument() is not None
    if kind in (OPERATION_DEFINITION, FRAGMENT_DEFINITION):
        return tracker.get_type() is not None
    if kind == INLINE_FRAGMENT:
        return node.type_condition is None or tracker.get_type() is not None
    if kind in (VARIABLE_DEFINITION, OBJECT_FIELD):
        return tracker.get_input_type() is not None
    return True


def _node_name(node: Node) -> str | None:
    if node.kind == VARIABLE_DEFINITION:
        return node.variable.name.value
    if node.kind == INLINE_FRAGMENT:
        return node.type_condition.name.value if node.type_condition else None
    name = getattr(node, "name", None)
    return name.value if name is not None else None


def _node_location(node: Node) -> tuple[int | None, int | None]:
    loc = node.loc
    if loc is None or loc.source is None:
        return None, None
    location = get_location(loc.source, loc.start)
    return location.line, location.column


def _type_str(type_: GraphQLType | None) -> str | None:
    return str(type_) if type_ is not None else None
