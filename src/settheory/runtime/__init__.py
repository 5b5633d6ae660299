"""
SetTheory Runtime Package.

Higher-level set operations built on the core primitives.
"""

from settheory.runtime.set_ops import (
    are_disjoint,
    cardinality,
    cartesian_product,
    difference,
    intersection,
    is_element_of,
    is_element_of_power_set,
    is_empty,
    is_proper_subset,
    is_proper_superset,
    is_singleton_of,
    is_subset,
    is_subset_of_power_set,
    is_superset,
    ordered_pair,
    power_set,
    symmetric_difference,
    union,
)

__all__ = [
    "cardinality",
    "is_empty",
    "is_element_of",
    "is_subset",
    "is_superset",
    "is_proper_subset",
    "is_proper_superset",
    "are_disjoint",
    "union",
    "intersection",
    "difference",
    "symmetric_difference",
    "power_set",
    "ordered_pair",
    "cartesian_product",
    "is_singleton_of",
    "is_element_of_power_set",
    "is_subset_of_power_set",
]
