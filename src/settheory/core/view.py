"""
Accessors for inspecting SetTheory objects.

These functions are the sanctioned way to look inside an ``Object``.
``as_set`` is the single validated entry point into a set's elements;
guard it with ``is_set`` when the kind is not already known:

    if is_set(obj):
        for x in as_set(obj):
            ...
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from settheory.core.handle import Object, ObjectSet
from settheory.core.nodes import Node, NodeKind, node_height
from settheory.core.ordering import compare_nodes
from settheory.utils.errors import TypeMismatchError


def _node_of(obj: Object) -> Node:
    if not isinstance(obj, Object):
        raise TypeError(f"expected an Object, got {type(obj).__name__}")
    return obj._node


def is_set(obj: Object) -> bool:
    """
    Return whether an object is a set.

    Given an object representing the atom 1 this returns False; given
    one representing {1, 2, 3} it returns True.
    """
    return _node_of(obj).is_set()


def is_atom(obj: Object) -> bool:
    """Return whether an object is an atom."""
    return not _node_of(obj).is_set()


def as_set(obj: Object) -> ObjectSet:
    """
    View a set object as its elements, in canonical order.

    Args:
        obj: An object known to be a set

    Returns:
        An immutable ObjectSet of the elements

    Raises:
        TypeMismatchError: If obj is an atom
    """
    return _node_of(obj).as_set()


def atom_name(obj: Object) -> str:
    """
    Return the name of an atom.

    Raises:
        TypeMismatchError: If obj is a set
    """
    node = _node_of(obj)
    if node.kind is not NodeKind.ATOM:
        raise TypeMismatchError("atom", node.to_string(), "atom_name")
    return node.name


def to_string(obj: Object) -> str:
    """Render an object on one line, elements in canonical order."""
    return _node_of(obj).to_string()


def print_object(obj: Object, file: Optional[TextIO] = None) -> None:
    """Write an object's rendering and a newline to file (default stdout)."""
    out = file if file is not None else sys.stdout
    out.write(to_string(obj) + "\n")


def equivalent(a: Object, b: Object) -> bool:
    """
    Return whether two objects are the same object in the set-theoretic sense.

    This holds exactly when neither orders before the other, regardless of
    how or when either was built.
    """
    return compare_nodes(_node_of(a), _node_of(b)) == 0


def height(obj: Object) -> int:
    """Return how deeply sets nest inside obj (0 for atoms and the empty set)."""
    return node_height(_node_of(obj))
