"""
Error types and source location tracking for SetTheory.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """
    Represents a location in a set literal.

    Attributes:
        line: 1-indexed line number
        column: 1-indexed column number
        offset: 0-indexed character offset from start of source
        filename: Optional filename for error reporting
    """

    line: int
    column: int
    offset: int = 0
    filename: Optional[str] = None

    def __str__(self) -> str:
        if self.filename:
            return f"{self.filename}:{self.line}:{self.column}"
        return f"{self.line}:{self.column}"


class SetTheoryError(Exception):
    """Base exception for all SetTheory errors."""

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ) -> None:
        self.message = message
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []

        if self.location:
            parts.append(f"[{self.location}]")

        parts.append(self.message)

        if self.source_line and self.location:
            parts.append(f"\n    {self.source_line}")
            # Caret under the offending column
            padding = " " * (4 + self.location.column - 1)
            parts.append(f"\n{padding}^")

        return " ".join(parts) if not self.source_line else parts[0] + " " + "".join(parts[1:])


class TypeMismatchError(SetTheoryError):
    """
    Raised when an operation needs a set but got an atom, or the reverse.

    This signals a precondition violation in the calling code. It is never
    caught inside the library.

    Attributes:
        expected: "set" or "atom"
        rendering: debug rendering of the offending object
    """

    def __init__(self, expected: str, rendering: str, operation: Optional[str] = None) -> None:
        self.expected = expected
        self.rendering = rendering
        self.operation = operation
        actual = "atom" if expected == "set" else "set"
        where = f"{operation}: " if operation else ""
        super().__init__(f"{where}expected a {expected}, got {actual} {rendering}")


class LexerError(SetTheoryError):
    """Raised when the lexer encounters an invalid character or literal."""

    pass


class ParserError(SetTheoryError):
    """Raised when a set literal is malformed."""

    pass
