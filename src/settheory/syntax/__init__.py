"""
SetTheory Syntax Package.

Reads set literals such as ``{1, {2, 3}, ∅}``:
- Lexer: tokenizes literal text
- Parser: builds objects from tokens
"""

from settheory.syntax.lexer import Lexer, tokenize
from settheory.syntax.parser import Parser, parse_object, parse_objects
from settheory.syntax.tokens import Token, TokenType

__all__ = [
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "tokenize",
    "parse_object",
    "parse_objects",
]
