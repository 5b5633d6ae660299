"""
Token definitions for set literals.

A set literal is written with braces and commas, e.g. ``{1, {2, 3}, ∅}``.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any

from settheory.utils.errors import SourceLocation


class TokenType(Enum):
    """Enumeration of all token types in a set literal."""

    # End of input
    EOF = auto()

    # Atoms
    NAME = auto()
    NUMBER = auto()
    STRING = auto()

    # Punctuation
    LBRACE = auto()
    RBRACE = auto()
    COMMA = auto()
    NEWLINE = auto()

    # ∅
    EMPTY_SET = auto()


SINGLE_CHAR_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ",": TokenType.COMMA,
    "∅": TokenType.EMPTY_SET,
}

ATOM_TOKENS = frozenset({TokenType.NAME, TokenType.NUMBER, TokenType.STRING})


@dataclass(slots=True)
class Token:
    """
    Represents a single token from a set literal.

    Attributes:
        type: The type of this token
        value: The atom name (for atoms) or lexeme text
        location: Source location of this token
    """

    type: TokenType
    value: Any
    location: SourceLocation

    def __repr__(self) -> str:
        if self.value is not None:
            return f"Token({self.type.name}, {self.value!r}, {self.location})"
        return f"Token({self.type.name}, {self.location})"

    @property
    def is_atom(self) -> bool:
        """Check if this token names an atom."""
        return self.type in ATOM_TOKENS
