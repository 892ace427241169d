"""Shared helpers for type context tracker tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from graphql import (
    GraphQLArgument,
    GraphQLDirective,
    GraphQLField,
    GraphQLSchema,
    Node,
    Visitor,
    parse,
    visit,
)

from gqlcontext.context import FieldDefResolver, TypeContextTracker, TypeContextVisitor


@dataclass(frozen=True)
class Snapshot:
    """Tracker state observed on entering one node."""

    kind: str
    name: str | None
    type: str | None
    parent_type: str | None
    input_type: str | None
    field_def: GraphQLField | None
    directive: GraphQLDirective | None
    argument: GraphQLArgument | None


class SnapshotVisitor(Visitor):
    """Record a snapshot of the tracker on every node entered."""

    def __init__(self, tracker: TypeContextTracker) -> None:
        super().__init__()
        self.tracker = tracker
        self.snapshots: list[Snapshot] = []

    def enter(self, node: Node, *_args: Any) -> None:
        tracker = self.tracker
        name = getattr(node, "name", None)
        self.snapshots.append(
            Snapshot(
                kind=node.kind,
                name=name.value if name is not None else None,
                type=_str_or_none(tracker.get_type()),
                parent_type=_str_or_none(tracker.get_parent_type()),
                input_type=_str_or_none(tracker.get_input_type()),
                field_def=tracker.get_field_def(),
                directive=tracker.get_directive(),
                argument=tracker.get_argument(),
            )
        )

    def find(self, kind: str, name: str | None = None, index: int = 0) -> Snapshot:
        """Return the *index*-th snapshot matching *kind* (and *name* when given)."""
        matches = [s for s in self.snapshots if s.kind == kind and (name is None or s.name == name)]
        return matches[index]


def _str_or_none(value: object) -> str | None:
    return str(value) if value is not None else None


def _walk(
    schema: GraphQLSchema,
    source: str,
    get_field_def_fn: FieldDefResolver | None = None,
) -> tuple[TypeContextTracker, SnapshotVisitor]:
    """Parse *source*, visit it with a tracker, and return tracker plus snapshots."""
    tracker = TypeContextTracker(schema, get_field_def_fn)
    recorder = SnapshotVisitor(tracker)
    visit(parse(source), TypeContextVisitor(tracker, recorder))
    return tracker, recorder


def _assert_empty(tracker: TypeContextTracker) -> None:
    """Assert every stack and slot is back to its initial state."""
    assert tracker._type_stack == []
    assert tracker._parent_type_stack == []
    assert tracker._input_type_stack == []
    assert tracker._field_def_stack == []
    assert tracker.get_directive() is None
    assert tracker.get_argument() is None
