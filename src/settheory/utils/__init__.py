"""
SetTheory Utilities Package.

Error types and source locations.
"""

from settheory.utils.errors import (
    LexerError,
    ParserError,
    SetTheoryError,
    SourceLocation,
    TypeMismatchError,
)

__all__ = [
    "SetTheoryError",
    "TypeMismatchError",
    "LexerError",
    "ParserError",
    "SourceLocation",
]
