"""
Lexer (tokenizer) for set literals.

Turns text such as ``{1, {2, "two"}, ∅}`` into a stream of tokens.
"""

from typing import Iterator, Optional

from settheory.syntax.tokens import SINGLE_CHAR_TOKENS, Token, TokenType
from settheory.utils.errors import LexerError, SourceLocation


class Lexer:
    """
    Tokenizer for set literals.

    The lexer supports:
    - Names: letters, digits, underscores and primes, not starting with a digit
    - Numbers: optionally negative runs of digits
    - Quoted strings (single or double) with backslash escapes
    - Braces, commas and the empty-set symbol ∅
    - Comments (# to end of line)

    Usage:
        lexer = Lexer(source)
        tokens = lexer.tokenize()
    """

    def __init__(self, source: str, filename: Optional[str] = None) -> None:
        """
        Initialize the lexer with source text.

        Args:
            source: The text to tokenize
            filename: Optional filename for error reporting
        """
        self.source = source
        self.filename = filename
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: list[Token] = []

        self._line_start = 0

    @property
    def _current_char(self) -> Optional[str]:
        """Return the current character or None if at end."""
        if self.pos >= len(self.source):
            return None
        return self.source[self.pos]

    @property
    def _peek_char(self) -> Optional[str]:
        """Return the next character without consuming it."""
        peek_pos = self.pos + 1
        if peek_pos >= len(self.source):
            return None
        return self.source[peek_pos]

    def _location(self) -> SourceLocation:
        """Create a SourceLocation for the current position."""
        return SourceLocation(
            line=self.line,
            column=self.column,
            offset=self.pos,
            filename=self.filename,
        )

    def _current_line_text(self) -> str:
        """Extract the current line of source for error messages."""
        end = self.source.find("\n", self._line_start)
        if end == -1:
            end = len(self.source)
        return self.source[self._line_start:end]

    def _advance(self) -> str:
        """Consume and return the current character."""
        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self._line_start = self.pos
        else:
            self.column += 1

        return char

    def _skip_whitespace(self) -> None:
        """Skip whitespace characters except newlines."""
        while self._current_char is not None and self._current_char in " \t\r":
            self._advance()

    def _skip_comment(self) -> None:
        """Skip comments starting with #."""
        if self._current_char == "#":
            while self._current_char is not None and self._current_char != "\n":
                self._advance()

    def _read_string(self, quote_char: str) -> Token:
        """
        Read a quoted atom name.

        Args:
            quote_char: The opening quote character (' or ")

        Returns:
            A STRING token whose value is the unquoted name.
        """
        start_loc = self._location()
        self._advance()  # consume opening quote

        value_chars: list[str] = []
        escape_sequences = {
            "n": "\n",
            "t": "\t",
            "\\": "\\",
            "'": "'",
            '"': '"',
        }

        while True:
            if self._current_char is None:
                raise LexerError(
                    "Unterminated string literal",
                    start_loc,
                    self._current_line_text(),
                )

            if self._current_char == "\n":
                raise LexerError(
                    "Newline in string literal (use \\n for newlines)",
                    self._location(),
                    self._current_line_text(),
                )

            if self._current_char == quote_char:
                self._advance()  # consume closing quote
                break

            if self._current_char == "\\":
                self._advance()
                if self._current_char is None:
                    raise LexerError(
                        "Unterminated escape sequence",
                        self._location(),
                        self._current_line_text(),
                    )
                escaped = escape_sequences.get(self._current_char)
                if escaped is None:
                    raise LexerError(
                        f"Invalid escape sequence: \\{self._current_char}",
                        self._location(),
                        self._current_line_text(),
                    )
                value_chars.append(escaped)
                self._advance()
            else:
                value_chars.append(self._current_char)
                self._advance()

        return Token(TokenType.STRING, "".join(value_chars), start_loc)

    def _read_number(self) -> Token:
        """
        Read an integer atom such as 42 or -7.

        The atom name is the text as written, so 007 and 7 are different atoms.
        """
        start_loc = self._location()
        num_chars: list[str] = []

        if self._current_char == "-":
            num_chars.append(self._advance())

        while self._current_char is not None and self._current_char.isdigit():
            num_chars.append(self._advance())

        if self._current_char is not None and (
            self._current_char.isalpha() or self._current_char == "_"
        ):
            raise LexerError(
                f"Invalid number: {''.join(num_chars)}{self._current_char}",
                self._location(),
                self._current_line_text(),
            )

        return Token(TokenType.NUMBER, "".join(num_chars), start_loc)

    def _read_name(self) -> Token:
        """Read an unquoted atom name."""
        start_loc = self._location()
        name_chars: list[str] = []

        while self._current_char is not None and (
            self._current_char.isalnum() or self._current_char in "_'"
        ):
            name_chars.append(self._advance())

        return Token(TokenType.NAME, "".join(name_chars), start_loc)

    def _next_token(self) -> Token:
        """
        Extract the next token from the source.

        Returns:
            The next token, EOF once the source is exhausted.
        """
        while True:
            self._skip_whitespace()
            if self._current_char == "#":
                self._skip_comment()
                continue
            break

        if self._current_char is None:
            return Token(TokenType.EOF, None, self._location())

        if self._current_char == "\n":
            loc = self._location()
            self._advance()
            return Token(TokenType.NEWLINE, "\n", loc)

        if self._current_char in "\"'":
            return self._read_string(self._current_char)

        if self._current_char.isdigit() or (
            self._current_char == "-"
            and self._peek_char is not None
            and self._peek_char.isdigit()
        ):
            return self._read_number()

        if self._current_char in SINGLE_CHAR_TOKENS:
            char = self._current_char
            loc = self._location()
            self._advance()
            return Token(SINGLE_CHAR_TOKENS[char], char, loc)

        if self._current_char.isalpha() or self._current_char == "_":
            return self._read_name()

        raise LexerError(
            f"Unexpected character: {self._current_char!r}",
            self._location(),
            self._current_line_text(),
        )

    def tokenize(self) -> list[Token]:
        """
        Tokenize the entire source.

        Returns:
            A list of all tokens including the final EOF token.
        """
        self.tokens = []
        self.pos = 0
        self.line = 1
        self.column = 1
        self._line_start = 0

        while True:
            token = self._next_token()
            self.tokens.append(token)
            if token.type == TokenType.EOF:
                break

        return self.tokens

    def __iter__(self) -> Iterator[Token]:
        """Iterate over tokens (tokenizes if necessary)."""
        if not self.tokens:
            self.tokenize()
        return iter(self.tokens)


def tokenize(source: str, filename: Optional[str] = None) -> list[Token]:
    """
    Convenience function to tokenize a set literal.

    Args:
        source: Text to tokenize
        filename: Optional filename for error reporting

    Returns:
        List of tokens
    """
    return Lexer(source, filename).tokenize()
