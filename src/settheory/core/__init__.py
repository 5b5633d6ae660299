"""
SetTheory Core Package.

- nodes: the Atom / SetNode representation
- ordering: the canonical total order
- handle: Object handles and ObjectSet
- view: is_set, as_set, to_string and friends
- construction: make_atom, make_set, make_object
"""

from settheory.core.construction import EMPTY_SET, make_atom, make_object, make_set
from settheory.core.handle import Object, ObjectSet
from settheory.core.nodes import Atom, Node, NodeKind, SetNode
from settheory.core.ordering import compare, compare_nodes
from settheory.core.view import (
    as_set,
    atom_name,
    equivalent,
    height,
    is_atom,
    is_set,
    print_object,
    to_string,
)

__all__ = [
    "Atom",
    "Node",
    "NodeKind",
    "SetNode",
    "Object",
    "ObjectSet",
    "compare",
    "compare_nodes",
    "is_set",
    "is_atom",
    "as_set",
    "atom_name",
    "to_string",
    "print_object",
    "equivalent",
    "height",
    "make_atom",
    "make_set",
    "make_object",
    "EMPTY_SET",
]
