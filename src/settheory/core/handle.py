"""
Opaque handles over SetTheory nodes.

An ``Object`` shares one immutable node; many handles may share the same
node. Handles expose only the canonical order. ``==`` is deliberately not
offered, so calling code cannot confuse allocation identity with
extensional equality. Use ``equivalent(a, b)`` from ``settheory.core.view``.

``ObjectSet`` is an immutable, canonically sorted, duplicate-free sequence
of handles: the value returned by ``as_set``.
"""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from settheory.core.nodes import Node
from settheory.core.ordering import compare_nodes

_NO_EQUALITY = (
    "SetTheory objects cannot be compared with == or !=; "
    "use equivalent(a, b) to test whether two objects are the same"
)


@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Object:
    """
    An opaque handle representing an object, either a set or an atom.

    Build handles with ``make_atom``, ``make_set`` or ``parse_object``
    rather than directly.
    """

    _node: Node

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return compare_nodes(self._node, other._node) < 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return compare_nodes(self._node, other._node) > 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return compare_nodes(self._node, other._node) <= 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Object):
            return NotImplemented
        return compare_nodes(self._node, other._node) >= 0

    def __eq__(self, other: object) -> bool:
        raise TypeError(_NO_EQUALITY)

    def __ne__(self, other: object) -> bool:
        raise TypeError(_NO_EQUALITY)

    def __copy__(self) -> Object:
        return self

    def __deepcopy__(self, memo: dict) -> Object:
        return self

    def __str__(self) -> str:
        return self._node.to_string()

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"Object({self})"


class ObjectSet:
    """
    An immutable set of objects kept in canonical order.

    Equivalent objects are collapsed on construction, keeping the first one
    seen. Iteration and indexing follow canonical order; membership uses a
    binary search over that order.

    Usage:
        for x in as_set(obj):
            ...
    """

    __slots__ = ("_items",)

    def __init__(self, items: Iterable[Object] = ()) -> None:
        collected = list(items)
        for item in collected:
            if not isinstance(item, Object):
                raise TypeError(
                    f"ObjectSet elements must be Objects, got {type(item).__name__}"
                )
        self._items: tuple[Object, ...] = _canonicalize(collected)

    @classmethod
    def from_canonical(cls, items: tuple[Object, ...]) -> ObjectSet:
        """Wrap handles that are already sorted and duplicate-free."""
        result = cls.__new__(cls)
        result._items = items
        return result

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Object]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Object]:
        return reversed(self._items)

    @overload
    def __getitem__(self, index: int) -> Object: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Object, ...]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        if not isinstance(item, Object):
            return False
        i = bisect_left(self._items, item)
        return i < len(self._items) and compare_nodes(self._items[i]._node, item._node) == 0

    def __bool__(self) -> bool:
        return bool(self._items)

    def __eq__(self, other: object) -> bool:
        raise TypeError(_NO_EQUALITY)

    def __ne__(self, other: object) -> bool:
        raise TypeError(_NO_EQUALITY)

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "{" + ", ".join(str(item) for item in self._items) + "}"

    def __repr__(self) -> str:
        return f"ObjectSet({self})"

    def index(self, item: Object) -> int:
        """Return the canonical position of item, or raise ValueError."""
        i = bisect_left(self._items, item)
        if i < len(self._items) and compare_nodes(self._items[i]._node, item._node) == 0:
            return i
        raise ValueError(f"{item} is not in the set")


def _canonicalize(items: list[Object]) -> tuple[Object, ...]:
    """Sort handles canonically and drop any equivalent to its predecessor."""
    ordered = sorted(items)
    result: list[Object] = []
    for item in ordered:
        if result and compare_nodes(result[-1]._node, item._node) == 0:
            continue
        result.append(item)
    return tuple(result)
