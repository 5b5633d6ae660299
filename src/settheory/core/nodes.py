"""
Node representation for SetTheory objects.

Every object is a node in a finite, acyclic tree. A node is exactly one of
two variants, discriminated by ``NodeKind``:

- ``Atom``: a named non-set object with no children
- ``SetNode``: a set whose children are its elements

Nodes are immutable once built. A ``SetNode`` stores its children already
sorted in canonical order with equivalent duplicates removed; only the
construction helpers in ``settheory.core.construction`` create one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, ClassVar, Union

from settheory.utils.errors import TypeMismatchError

if TYPE_CHECKING:
    from settheory.core.handle import Object, ObjectSet


class NodeKind(Enum):
    """Discriminant for the two node variants."""

    ATOM = auto()
    SET = auto()


@dataclass(frozen=True, slots=True, eq=False, weakref_slot=True)
class Atom:
    """
    An honest-to-goodness non-set object.

    Attributes:
        name: The atom's name, also its rendering
    """

    kind: ClassVar[NodeKind] = NodeKind.ATOM

    name: str

    def is_set(self) -> bool:
        return False

    def as_set(self) -> ObjectSet:
        raise TypeMismatchError("set", self.name, "as_set")

    def to_string(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class SetNode:
    """
    A set of objects.

    Attributes:
        children: Element handles in canonical order, no two equivalent
    """

    kind: ClassVar[NodeKind] = NodeKind.SET

    children: tuple[Object, ...] = ()

    def is_set(self) -> bool:
        return True

    def as_set(self) -> ObjectSet:
        from settheory.core.handle import ObjectSet

        return ObjectSet.from_canonical(self.children)

    def to_string(self) -> str:
        return render_node(self)


Node = Union[Atom, SetNode]


def render_node(node: Node) -> str:
    """
    Render a node as a single line, e.g. ``{1, {2, 3}}``.

    Children appear in canonical order, so equivalent sets render
    identically. Works from an explicit stack of pending pieces.
    """
    out: list[str] = []
    pending: list[Union[str, Node]] = [node]

    while pending:
        item = pending.pop()
        if isinstance(item, str):
            out.append(item)
        elif item.kind is NodeKind.ATOM:
            out.append(item.name)
        else:
            pending.append("}")
            children = item.children
            for i in range(len(children) - 1, -1, -1):
                pending.append(children[i]._node)
                if i:
                    pending.append(", ")
            pending.append("{")

    return "".join(out)


def node_height(node: Node) -> int:
    """Return the nesting depth of a node (atoms and the empty set are 0)."""
    height = 0
    pending: list[tuple[Node, int]] = [(node, 0)]

    while pending:
        current, depth = pending.pop()
        if current.kind is NodeKind.SET and current.children:
            height = max(height, depth + 1)
            pending.extend((child._node, depth + 1) for child in current.children)

    return height
