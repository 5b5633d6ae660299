"""
Parser for set literals.

Grammar:
    object  := atom | set
    set     := "{" [object ("," object)* [","]] "}" | "∅"
    atom    := NAME | NUMBER | STRING

Newlines inside braces are ignored. At top level, ``parse_objects`` accepts
several objects separated by commas or newlines.
"""

from __future__ import annotations

import logging
from typing import Optional

from settheory.core.construction import EMPTY_SET, make_atom, make_set
from settheory.core.handle import Object
from settheory.syntax.lexer import Lexer
from settheory.syntax.tokens import Token, TokenType
from settheory.utils.errors import ParserError, SourceLocation

logger = logging.getLogger(__name__)


class Parser:
    """
    Parser that builds objects from set-literal tokens.

    Nested sets are tracked on an explicit stack of open braces, so deep
    nesting is not limited by the interpreter's recursion limit.

    Usage:
        parser = Parser(tokens)
        obj = parser.parse()
    """

    def __init__(self, tokens: list[Token], source: str = "") -> None:
        """
        Initialize the parser.

        Args:
            tokens: List of tokens from the lexer
            source: Optional source text, quoted in error messages
        """
        self.tokens = tokens
        self.pos = 0
        self._source_lines: list[str] = source.splitlines() if source else []

    @property
    def _current(self) -> Token:
        """Get the current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # EOF
        return self.tokens[self.pos]

    def _is_at_end(self) -> bool:
        return self._current.type == TokenType.EOF

    def _check(self, *types: TokenType) -> bool:
        """Check if the current token is one of the given types."""
        return self._current.type in types

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self._current
        if not self._is_at_end():
            self.pos += 1
        return token

    def _match(self, *types: TokenType) -> bool:
        """Consume current token if it matches one of the given types."""
        if self._check(*types):
            self._advance()
            return True
        return False

    def _skip_newlines(self) -> None:
        while self._match(TokenType.NEWLINE):
            pass

    def _line_text(self, location: SourceLocation) -> Optional[str]:
        if 0 < location.line <= len(self._source_lines):
            return self._source_lines[location.line - 1]
        return None

    def _error(self, message: str, location: Optional[SourceLocation] = None) -> ParserError:
        """Create a parser error pointing at location (default: current token)."""
        location = location or self._current.location
        return ParserError(message, location, self._line_text(location))

    @staticmethod
    def _describe(token: Token) -> str:
        if token.type == TokenType.EOF:
            return "end of input"
        if token.type == TokenType.NEWLINE:
            return "newline"
        return repr(token.value)

    def parse(self) -> Object:
        """
        Parse exactly one object.

        Raises:
            ParserError: If the input is empty, malformed, or has trailing text
        """
        self._skip_newlines()
        obj = self._parse_object()
        self._skip_newlines()
        if not self._is_at_end():
            raise self._error(f"Unexpected {self._describe(self._current)} after object")
        return obj

    def parse_all(self) -> list[Object]:
        """Parse a sequence of objects separated by commas or newlines."""
        objects: list[Object] = []
        self._skip_newlines()

        while not self._is_at_end():
            objects.append(self._parse_object())
            if self._is_at_end():
                break
            if not self._match(TokenType.COMMA, TokenType.NEWLINE):
                raise self._error(
                    f"Expected ',' or newline between objects, got {self._describe(self._current)}"
                )
            self._skip_newlines()

        logger.debug("parsed %d object(s)", len(objects))
        return objects

    def _parse_object(self) -> Object:
        """Parse one object, which may be arbitrarily nested."""
        # Open sets: the "{" token and the elements read so far
        frames: list[tuple[Token, list[Object]]] = []

        while True:
            if frames:
                self._skip_newlines()
            token = self._current

            if token.type == TokenType.LBRACE:
                self._advance()
                self._skip_newlines()
                if not self._match(TokenType.RBRACE):
                    frames.append((token, []))
                    continue
                value = EMPTY_SET
            elif token.is_atom:
                self._advance()
                value = make_atom(token.value)
            elif token.type == TokenType.EMPTY_SET:
                self._advance()
                value = EMPTY_SET
            elif token.type == TokenType.EOF and frames:
                raise self._error("Unclosed '{'", frames[-1][0].location)
            else:
                raise self._error(f"Expected an object, got {self._describe(token)}")

            # Attach the finished value, closing any sets it completes
            while True:
                if not frames:
                    return value
                frames[-1][1].append(value)

                self._skip_newlines()
                if self._match(TokenType.COMMA):
                    self._skip_newlines()
                    if not self._check(TokenType.RBRACE):
                        break

                if not self._check(TokenType.RBRACE):
                    if self._is_at_end():
                        raise self._error("Unclosed '{'", frames[-1][0].location)
                    raise self._error(
                        f"Expected ',' or '}}', got {self._describe(self._current)}"
                    )
                self._advance()
                _, elements = frames.pop()
                value = make_set(elements)


def parse_object(source: str, filename: Optional[str] = None) -> Object:
    """
    Parse text such as ``{1, {2, 3}}`` into an object.

    Raises:
        LexerError: On invalid characters or strings
        ParserError: On malformed literals
    """
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, source).parse()


def parse_objects(source: str, filename: Optional[str] = None) -> list[Object]:
    """Parse several objects separated by commas or newlines."""
    tokens = Lexer(source, filename).tokenize()
    return Parser(tokens, source).parse_all()
