"""
SetTheory - finite sets from axiomatic set theory as immutable values.

Every object is either an atom or a set of objects, modelled as a finite,
acyclic tree. Objects compare by one canonical total order, and two objects
are the same exactly when neither orders before the other.
"""

from settheory.core import (
    EMPTY_SET,
    Object,
    ObjectSet,
    as_set,
    atom_name,
    compare,
    equivalent,
    is_atom,
    is_set,
    make_atom,
    make_object,
    make_set,
    print_object,
    to_string,
)
from settheory.syntax import parse_object, parse_objects
from settheory.utils.errors import SetTheoryError, TypeMismatchError

__version__ = "0.1.0"
__all__ = [
    "Object",
    "ObjectSet",
    "EMPTY_SET",
    "make_atom",
    "make_set",
    "make_object",
    "is_set",
    "is_atom",
    "as_set",
    "atom_name",
    "to_string",
    "print_object",
    "equivalent",
    "compare",
    "parse_object",
    "parse_objects",
    "SetTheoryError",
    "TypeMismatchError",
]
