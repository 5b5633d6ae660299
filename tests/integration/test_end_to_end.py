"""
End-to-end tests: build objects several ways and check they agree.

Covers the concrete scenarios the library promises, plus the ordering
properties over a generated universe of small sets.
"""

import itertools
import random
import threading

import pytest

from settheory import (
    EMPTY_SET,
    TypeMismatchError,
    as_set,
    equivalent,
    is_set,
    make_atom,
    make_object,
    make_set,
    parse_object,
    to_string,
)
from settheory.runtime.set_ops import cardinality, power_set


def _universe():
    """Atoms 1 and 2, the nonempty subsets of {1, 2}, and every set in ℘(℘({1, 2}))."""
    first = power_set(parse_object("{1, 2}"))
    second = power_set(first)
    # as_set(first)[0] is ∅, which second already contains
    return [make_atom("1"), make_atom("2"), *as_set(first)[1:], *as_set(second)]


class TestScenarios:
    """The six documented scenarios."""

    def test_atoms_order_by_name(self):
        assert make_atom("1") < make_atom("2")

    def test_atom_before_set(self):
        assert make_atom("1") < make_object({1, 2})

    def test_separate_constructions_equivalent(self):
        a = make_set([make_atom("1"), make_atom("2")])
        b = parse_object("{2, 1}")
        assert not a < b and not b < a

    def test_size_rule(self):
        assert parse_object("{1, 2}") < parse_object("{1, 2, 3}")

    def test_as_set_on_atom_fails(self):
        with pytest.raises(TypeMismatchError):
            as_set(make_atom("1"))

    def test_duplicates_render_once(self):
        assert to_string(parse_object("{2, 1, 1}")) == "{1, 2}"


class TestConstructionRoutesAgree:
    """Parser, make_object and make_set produce the same objects."""

    @pytest.mark.parametrize(
        "source,value",
        [
            ("{}", []),
            ("{1, {2}}", [1, [2]]),
            ("{{}, {{}}}", [[], [[]]]),
            ("{a, {a, {a}}}", ["a", ["a", ["a"]]]),
        ],
    )
    def test_parser_matches_make_object(self, source, value):
        assert equivalent(parse_object(source), make_object(value))

    def test_rendering_parses_back(self):
        for obj in _universe():
            assert equivalent(parse_object(to_string(obj)), obj)


class TestOrderingOverUniverse:
    """Ordering properties over ℘(℘({1, 2})) and friends."""

    def test_universe_is_distinct(self):
        universe = _universe()
        assert len(universe) == 2 + 3 + 16
        for a, b in itertools.combinations(universe, 2):
            assert not equivalent(a, b)

    def test_strict_weak_ordering(self):
        universe = _universe()
        for a, b in itertools.product(universe, repeat=2):
            assert [a < b, b < a, equivalent(a, b)].count(True) == 1
        for a, b, c in itertools.product(universe, repeat=3):
            if a < b and b < c:
                assert a < c

    def test_kind_precedence(self):
        universe = _universe()
        atoms = [x for x in universe if not is_set(x)]
        sets = [x for x in universe if is_set(x)]
        for atom, s in itertools.product(atoms, sets):
            assert atom < s

    def test_size_first(self):
        sets = [x for x in _universe() if is_set(x)]
        for a, b in itertools.product(sets, repeat=2):
            if cardinality(a) < cardinality(b):
                assert a < b

    def test_shuffled_construction_equivalent(self):
        rng = random.Random(103)
        for obj in _universe():
            if not is_set(obj):
                continue
            elements = list(as_set(obj))
            rng.shuffle(elements)
            rebuilt = make_set(elements + elements[:1])
            assert equivalent(rebuilt, obj)
            assert to_string(rebuilt) == to_string(obj)


def test_concurrent_readers():
    """Threads can compare and render shared objects without coordination."""
    universe = _universe()
    expected = [to_string(x) for x in sorted(universe)]
    results = []

    def worker(seed):
        rng = random.Random(seed)
        shuffled = universe[:]
        rng.shuffle(shuffled)
        results.append([to_string(x) for x in sorted(shuffled)])

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 8
    assert all(result == expected for result in results)


def test_empty_set_is_least_set():
    sets = [x for x in _universe() if is_set(x)]
    assert all(not x < EMPTY_SET for x in sets)
