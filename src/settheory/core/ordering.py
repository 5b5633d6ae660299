"""
The canonical total order over SetTheory objects.

This order is the single definition of equality: two objects are the same
exactly when neither orders before the other. Rules, in priority order:

1. Every atom orders before every set.
2. Atoms compare lexicographically by name.
3. Sets compare by cardinality first (fewer elements first). Sets of the
   same size compare their elements pairwise in canonical order, and the
   first non-equivalent pair decides. If every pair is equivalent, the sets
   are equivalent, however they were built.

Each step descends strictly into children, and trees are finite and
acyclic, so comparison always terminates. Pairs wait on an explicit stack,
so deep nesting does not hit the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from settheory.core.nodes import Node, NodeKind

if TYPE_CHECKING:
    from settheory.core.handle import Object


def compare_nodes(a: Node, b: Node) -> int:
    """
    Compare two nodes in canonical order.

    Args:
        a: Left node
        b: Right node

    Returns:
        -1 if a orders first, 1 if b orders first, 0 if they are equivalent
    """
    pending: list[tuple[Node, Node]] = [(a, b)]

    while pending:
        left, right = pending.pop()

        # A shared node is trivially equivalent to itself
        if left is right:
            continue

        if left.kind is not right.kind:
            return -1 if left.kind is NodeKind.ATOM else 1

        if left.kind is NodeKind.ATOM:
            if left.name != right.name:
                return -1 if left.name < right.name else 1
            continue

        left_size = len(left.children)
        right_size = len(right.children)
        if left_size != right_size:
            return -1 if left_size < right_size else 1

        # Pushed in reverse so the first pair is popped first
        for x, y in zip(reversed(left.children), reversed(right.children)):
            pending.append((x._node, y._node))

    return 0


def compare(a: Object, b: Object) -> int:
    """Compare two objects in canonical order; see ``compare_nodes``."""
    return compare_nodes(a._node, b._node)
