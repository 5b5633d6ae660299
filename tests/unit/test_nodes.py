"""
Unit tests for the Atom / SetNode representation.
"""

import dataclasses

import pytest

from settheory.core.nodes import Atom, NodeKind, SetNode, node_height, render_node
from settheory.core import make_atom, make_set
from settheory.utils.errors import TypeMismatchError


class TestAtom:
    """Tests for atom nodes."""

    def test_kind(self):
        assert Atom("x").kind is NodeKind.ATOM

    def test_is_not_set(self):
        assert Atom("x").is_set() is False

    def test_as_set_fails(self):
        """Atoms have no elements; as_set must not return an empty set."""
        with pytest.raises(TypeMismatchError) as exc_info:
            Atom("x").as_set()
        assert exc_info.value.expected == "set"
        assert exc_info.value.rendering == "x"

    def test_renders_name_verbatim(self):
        assert Atom("hello world").to_string() == "hello world"

    def test_immutable(self):
        node = Atom("x")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.name = "y"


class TestSetNode:
    """Tests for set nodes."""

    def test_kind(self):
        assert SetNode().kind is NodeKind.SET

    def test_is_set(self):
        assert SetNode().is_set() is True

    def test_empty_renders_braces(self):
        assert SetNode().to_string() == "{}"

    def test_as_set_returns_children(self):
        node = make_set([make_atom("b"), make_atom("a")])._node
        members = node.as_set()
        assert [str(x) for x in members] == ["a", "b"]

    def test_render_nested(self, parse):
        assert render_node(parse("{{2, 1}, 0, {}}")._node) == "{0, {}, {1, 2}}"

    def test_immutable(self):
        node = SetNode()
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.children = ()


class TestNodeHeight:
    """Tests for nesting depth."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("1", 0),
            ("{}", 0),
            ("{1}", 1),
            ("{{}}", 1),
            ("{1, {2, {3}}}", 3),
        ],
    )
    def test_height(self, parse, source, expected):
        assert node_height(parse(source)._node) == expected
