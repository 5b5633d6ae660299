"""
Pytest configuration and shared fixtures for SetTheory tests.
"""

import pytest

from settheory.core import Object, make_object
from settheory.syntax.lexer import Lexer
from settheory.syntax.parser import Parser
from settheory.syntax.tokens import Token


@pytest.fixture
def lexer_factory():
    """Factory fixture for creating lexers."""

    def _create_lexer(source: str, filename: str = "test.set") -> Lexer:
        return Lexer(source, filename)

    return _create_lexer


@pytest.fixture
def parser_factory(lexer_factory):
    """Factory fixture for creating parsers from source."""

    def _create_parser(source: str) -> Parser:
        lexer = lexer_factory(source)
        tokens = lexer.tokenize()
        return Parser(tokens, source)

    return _create_parser


@pytest.fixture
def tokenize(lexer_factory):
    """Fixture to tokenize a set literal."""

    def _tokenize(source: str) -> list[Token]:
        lexer = lexer_factory(source)
        return lexer.tokenize()

    return _tokenize


@pytest.fixture
def parse(parser_factory):
    """Fixture to parse a single set literal into an Object."""

    def _parse(source: str) -> Object:
        parser = parser_factory(source)
        return parser.parse()

    return _parse


@pytest.fixture
def parse_all(parser_factory):
    """Fixture to parse several comma- or newline-separated objects."""

    def _parse_all(source: str) -> list[Object]:
        parser = parser_factory(source)
        return parser.parse_all()

    return _parse_all


@pytest.fixture
def obj():
    """Fixture converting Python literals to Objects, e.g. obj({1, 2})."""
    return make_object


@pytest.fixture
def sample_objects(parse):
    """A varied pool of objects: atoms, empty and nested sets, duplicates."""
    sources = [
        "1",
        "2",
        "10",
        "a",
        "b",
        "{}",
        "{}",
        "{1}",
        "{2}",
        "{{}}",
        "{1, 2}",
        "{2, 1}",
        "{1, {}}",
        "{1, {1}}",
        "{{1}, 1}",
        "{{1}, {2}}",
        "{1, 2, 3}",
        "{3, 2, 1, 1}",
        "{a, b, {a, b}}",
        "{{{}}}",
        "{{{}}, {}}",
    ]
    return [parse(source) for source in sources]
