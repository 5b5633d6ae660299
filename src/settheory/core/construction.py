"""
Construction primitives for SetTheory objects.

Objects are built bottom-up: every element exists as an ``Object`` before
the set containing it is made, and no node is changed afterwards. This is
what keeps every tree finite and acyclic.

Atom nodes are interned by name, so the atom 1 appearing in many sets is
one shared node.
"""

from __future__ import annotations

import logging
import threading
import weakref
from collections.abc import Iterable
from typing import Any

from settheory.core.handle import Object, ObjectSet
from settheory.core.nodes import Atom, SetNode

logger = logging.getLogger(__name__)

_atoms: weakref.WeakValueDictionary[str, Atom] = weakref.WeakValueDictionary()
_atoms_lock = threading.Lock()


def make_atom(name: str) -> Object:
    """
    Create an atom with the given name.

    Args:
        name: The atom's name

    Returns:
        An Object sharing the interned node for that name

    Raises:
        TypeError: If name is not a string
    """
    if not isinstance(name, str):
        raise TypeError(f"atom names must be strings, got {type(name).__name__}")

    with _atoms_lock:
        node = _atoms.get(name)
        if node is None:
            node = Atom(name)
            _atoms[name] = node

    return Object(node)


def make_set(elements: Iterable[Object] = ()) -> Object:
    """
    Create a set from already-built objects.

    Elements are sorted canonically and equivalent duplicates collapse,
    so ``make_set([b, a, a])`` is the same set as ``make_set([a, b])``.

    Raises:
        TypeError: If any element is not an Object
    """
    members = ObjectSet(elements)
    if not members:
        return EMPTY_SET
    logger.debug("built set of %d element(s)", len(members))
    return Object(SetNode(tuple(members)))


def make_object(value: Any) -> Object:
    """
    Convert a Python value into an object.

    - Object: returned as is
    - str: atom with that name
    - int: atom named by its decimal text
    - set, frozenset, list, tuple: set of the converted elements

    Examples:
        >>> print(make_object({1, 2}))
        {1, 2}
        >>> print(make_object([1, [2, "x"], []]))
        {1, {}, {2, x}}

    Raises:
        TypeError: If value (or a nested value) has no object form
    """
    if isinstance(value, Object):
        return value
    if isinstance(value, str):
        return make_atom(value)
    if isinstance(value, bool):
        raise TypeError("cannot convert bool to an object")
    if isinstance(value, int):
        return make_atom(str(value))
    if isinstance(value, (set, frozenset, list, tuple)):
        return make_set(make_object(item) for item in value)
    raise TypeError(f"cannot convert {type(value).__name__} to an object")


EMPTY_SET = Object(SetNode(()))
