"""
Lexer for annotation group text.

Converts text such as ``representation = "class", exposedName = "FfiFoo"``
into tokens with line and column tracking.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .errors import make_parse_error


class TokenType(Enum):
    """Token types of the annotation surface."""

    IDENTIFIER = "IDENTIFIER"
    STRING = "STRING"
    EQUALS = "="
    COMMA = ","
    EOF = "EOF"


@dataclass
class Token:
    """
    A single token of annotation text.

    Attributes:
        type: Type of token
        value: String value of the token
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    type: TokenType
    value: str
    line: int
    column: int

    def __repr__(self) -> str:
        return f"Token({self.type.value}, {self.value!r}, {self.line}:{self.column})"


class AnnotationLexer:
    """Lexer for one annotation group."""

    def __init__(self, text: str, file: Path, line: int = 1, column: int = 1):
        """
        Initialize lexer.

        Args:
            text: Annotation group text
            file: Source file path (for error reporting)
            line: Line where the text starts in the file
            column: Column where the text starts on that line
        """
        self.text = text
        self.file = file
        self.pos = 0
        self.start_line = line
        self.start_column = column
        self.line = line
        self.column = column
        self.tokens: list[Token] = []

    def snippet(self, line: int) -> str:
        """Source line for error messages."""
        return source_snippet(self.text, self.start_line, self.start_column, line)

    def current_char(self) -> str | None:
        """Get current character without advancing."""
        if self.pos >= len(self.text):
            return None
        return self.text[self.pos]

    def advance(self) -> None:
        """Move to next character, updating line and column."""
        if self.pos < len(self.text):
            if self.text[self.pos] == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def skip_whitespace(self) -> None:
        """Skip spaces, tabs and newlines."""
        while self.current_char() in (" ", "\t", "\r", "\n"):
            self.advance()

    def read_string(self) -> str:
        """Read a double-quoted string."""
        start_line = self.line
        start_col = self.column
        self.advance()  # skip opening quote

        chars = []
        while True:
            current = self.current_char()
            if not current or current == '"' or current == "\n":
                break

            if current == "\\":
                self.advance()
                escape_char = self.current_char()
                if escape_char == "n":
                    chars.append("\n")
                elif escape_char == "t":
                    chars.append("\t")
                elif escape_char:
                    chars.append(escape_char)
                self.advance()
            else:
                chars.append(current)
                self.advance()

        if self.current_char() != '"':
            raise make_parse_error(
                "Unterminated string literal",
                self.file,
                start_line,
                start_col,
                self.snippet(start_line),
            )

        self.advance()  # skip closing quote
        return "".join(chars)

    def read_identifier(self) -> str:
        """Read an identifier."""
        chars = []
        while True:
            current = self.current_char()
            if current is None or not (current.isalnum() or current == "_"):
                break
            chars.append(current)
            self.advance()
        return "".join(chars)

    def tokenize(self) -> list[Token]:
        """
        Tokenize the annotation text.

        Returns:
            List of tokens ending with EOF

        Raises:
            ParseError: On characters outside the annotation surface
        """
        while True:
            self.skip_whitespace()
            char = self.current_char()
            if char is None:
                break

            line, column = self.line, self.column

            if char == '"':
                value = self.read_string()
                self.tokens.append(Token(TokenType.STRING, value, line, column))
            elif char.isalpha() or char == "_":
                value = self.read_identifier()
                self.tokens.append(Token(TokenType.IDENTIFIER, value, line, column))
            elif char == "=":
                self.advance()
                self.tokens.append(Token(TokenType.EQUALS, "=", line, column))
            elif char == ",":
                self.advance()
                self.tokens.append(Token(TokenType.COMMA, ",", line, column))
            else:
                raise make_parse_error(
                    f"Unexpected character {char!r} in annotation",
                    self.file,
                    line,
                    column,
                    self.snippet(line),
                )

        self.tokens.append(Token(TokenType.EOF, "", self.line, self.column))
        return self.tokens


def tokenize(text: str, file: Path, line: int = 1, column: int = 1) -> list[Token]:
    """
    Convenience function to tokenize annotation text.

    Args:
        text: Annotation group text
        file: Source file path
        line: Starting line of the text
        column: Starting column of the text

    Returns:
        List of tokens
    """
    lexer = AnnotationLexer(text, file, line, column)
    return lexer.tokenize()


def source_snippet(text: str, start_line: int, start_column: int, line: int) -> str:
    """
    Get one line of annotation text, aligned to file columns.

    The first line is padded so that an error marker placed at a file column
    lands under the right character.
    """
    lines = text.split("\n")
    index = line - start_line
    if index < 0 or index >= len(lines):
        return ""
    if index == 0:
        return " " * (start_column - 1) + lines[0]
    return lines[index]
