"""
Set operations on SetTheory objects.

These are built only on the core primitives: ``is_set``, ``as_set``,
``make_set`` and the canonical order. Any operand that must be a set
raises ``TypeMismatchError`` when it is an atom.
"""

from __future__ import annotations

from itertools import compress, product

from settheory.core.construction import make_set
from settheory.core.handle import Object, ObjectSet
from settheory.core.view import as_set, is_set, to_string
from settheory.utils.errors import TypeMismatchError


def _elements(obj: Object, operation: str) -> ObjectSet:
    """
    Return the elements of a set operand.

    Raises:
        TypeMismatchError: If obj is an atom, naming the operation
    """
    if not is_set(obj):
        raise TypeMismatchError("set", to_string(obj), operation)
    return as_set(obj)


def cardinality(s: Object) -> int:
    """Return the number of elements of a set (|S|)."""
    return len(_elements(s, "cardinality"))


def is_empty(s: Object) -> bool:
    """Check if a set is the empty set (S = ∅)."""
    return not _elements(s, "is_empty")


def is_element_of(x: Object, s: Object) -> bool:
    """
    Check if an object is an element of a set (x ∈ S).

    Args:
        x: The object to look for; may be an atom or a set
        s: The set to look in

    Returns:
        True if some element of s is the same object as x

    Examples:
        >>> is_element_of(parse_object("{1}"), parse_object("{1, {1}}"))
        True
        >>> is_element_of(parse_object("2"), parse_object("{1, {2}}"))
        False
    """
    return x in _elements(s, "is_element_of")


def is_subset(a: Object, b: Object) -> bool:
    """
    Check if A is a subset of B (A ⊆ B).

    A is a subset of B if every element of A is also in B.
    Note: A set is always a subset of itself (A ⊆ A).

    Args:
        a: The potential subset
        b: The potential superset

    Returns:
        True if a is a subset of b
    """
    a_elems = _elements(a, "is_subset")
    b_elems = _elements(b, "is_subset")
    if len(a_elems) > len(b_elems):
        return False
    return all(x in b_elems for x in a_elems)


def is_superset(a: Object, b: Object) -> bool:
    """Check if A is a superset of B (A ⊇ B)."""
    return is_subset(b, a)


def is_proper_subset(a: Object, b: Object) -> bool:
    """
    Check if A is a proper subset of B (A ⊂ B).

    A is a proper subset of B if A ⊆ B and A ≠ B.
    """
    return is_subset(a, b) and cardinality(a) < cardinality(b)


def is_proper_superset(a: Object, b: Object) -> bool:
    """Check if A is a proper superset of B (A ⊃ B)."""
    return is_proper_subset(b, a)


def are_disjoint(a: Object, b: Object) -> bool:
    """Check if A and B have no element in common (A ∩ B = ∅)."""
    b_elems = _elements(b, "are_disjoint")
    return not any(x in b_elems for x in _elements(a, "are_disjoint"))


def union(a: Object, b: Object) -> Object:
    """
    Compute the union of two sets (A ∪ B).

    Examples:
        >>> print(union(parse_object("{1, 2}"), parse_object("{2, {3}}")))
        {1, 2, {3}}
    """
    return make_set([*_elements(a, "union"), *_elements(b, "union")])


def intersection(a: Object, b: Object) -> Object:
    """Compute the intersection of two sets (A ∩ B)."""
    b_elems = _elements(b, "intersection")
    return make_set(x for x in _elements(a, "intersection") if x in b_elems)


def difference(a: Object, b: Object) -> Object:
    """
    Compute the set difference (A ∖ B).

    Returns a set containing the elements of a that are not in b.
    """
    b_elems = _elements(b, "difference")
    return make_set(x for x in _elements(a, "difference") if x not in b_elems)


def symmetric_difference(a: Object, b: Object) -> Object:
    """
    Compute the symmetric difference of two sets (A △ B).

    The symmetric difference contains elements in A or B but not both.
    """
    a_elems = _elements(a, "symmetric_difference")
    b_elems = _elements(b, "symmetric_difference")
    return make_set(
        [x for x in a_elems if x not in b_elems] + [x for x in b_elems if x not in a_elems]
    )


def power_set(s: Object) -> Object:
    """
    Compute the power set of a set (℘(S)).

    Examples:
        >>> print(power_set(parse_object("{1, 2}")))
        {{}, {1}, {2}, {1, 2}}

    Note:
        The power set of a set with n elements has 2^n elements.
        Be cautious with large sets!
    """
    elements = tuple(_elements(s, "power_set"))
    subsets = [
        make_set(compress(elements, mask))
        for mask in product((False, True), repeat=len(elements))
    ]
    return make_set(subsets)


def ordered_pair(a: Object, b: Object) -> Object:
    """
    Build the Kuratowski ordered pair (a, b) = {{a}, {a, b}}.

    When a and b are the same object this is {{a}}.
    """
    return make_set([make_set([a]), make_set([a, b])])


def cartesian_product(a: Object, b: Object) -> Object:
    """
    Compute the Cartesian product of two sets (A × B).

    The result is the set of Kuratowski pairs (x, y) for x ∈ A and y ∈ B.
    """
    b_elems = _elements(b, "cartesian_product")
    return make_set(
        ordered_pair(x, y) for x in _elements(a, "cartesian_product") for y in b_elems
    )


def is_singleton_of(x: Object, s: Object) -> bool:
    """Check if S is exactly {x}. Atoms are never singletons."""
    if not is_set(s):
        return False
    elems = as_set(s)
    return len(elems) == 1 and x in elems


def is_element_of_power_set(x: Object, s: Object) -> bool:
    """
    Check if x ∈ ℘(S), that is, x is a set and x ⊆ S.

    Raises:
        TypeMismatchError: If s is an atom
    """
    _elements(s, "is_element_of_power_set")
    return is_set(x) and is_subset(x, s)


def is_subset_of_power_set(x: Object, s: Object) -> bool:
    """
    Check if x ⊆ ℘(S), that is, every element of x is a subset of S.

    Raises:
        TypeMismatchError: If s is an atom
    """
    _elements(s, "is_subset_of_power_set")
    if not is_set(x):
        return False
    return all(is_set(y) and is_subset(y, s) for y in as_set(x))
