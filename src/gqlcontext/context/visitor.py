"""Visitor adapter that drives a type context tracker during ``graphql.visit``."""

from __future__ import annotations

from typing import Any

from graphql import Node, Visitor

from gqlcontext.context.tracker import TypeContextTracker


class TypeContextVisitor(Visitor):
    """Wrap *visitor* so *tracker* is entered before and left after each node.

    The inner visitor sees tracker state for the node it is visiting. When it
    skips a subtree, stops traversal or replaces a node, the tracker is left
    immediately so its stacks stay balanced with the traversal.
    """

    def __init__(self, tracker: TypeContextTracker, visitor: Visitor) -> None:
        super().__init__()
        self.tracker = tracker
        self.visitor = visitor

    def enter(self, node: Node, *args: Any) -> Any:
        self.tracker.enter(node)
        enter_fn = self.visitor.get_enter_leave_for_kind(node.kind).enter
        if enter_fn is None:
            return None
        result = enter_fn(node, *args)
        if result is not None:
            self.tracker.leave(node)
            if isinstance(result, Node):
                self.tracker.enter(result)
        return result

    def leave(self, node: Node, *args: Any) -> Any:
        leave_fn = self.visitor.get_enter_leave_for_kind(node.kind).leave
        result = leave_fn(node, *args) if leave_fn is not None else None
        self.tracker.leave(node)
        return result
