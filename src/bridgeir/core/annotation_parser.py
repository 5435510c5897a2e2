"""
Annotation parsing for bridgeir.

Two layers:

- ``read_annotation_group`` turns annotation text into an ``ir.AnnotationGroup``.
  Malformed text raises ``ParseError``; this is a structural failure.
- ``parse_annotation`` turns one ``key = "literal"`` entry into exactly one
  ``ir.AnnotationResult``. Unknown keys and bad values become error
  placeholders instead of exceptions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from . import ir
from .annotation_lexer import Token, TokenType, source_snippet, tokenize
from .errors import make_parse_error

logger = logging.getLogger(__name__)

_REPRESENTATION_VALUES = {
    "class": ir.Representation.CLASS,
    "struct": ir.Representation.VALUE_STRUCT,
}


def parse_annotation(annotation: ir.RawAnnotation) -> ir.AnnotationResult:
    """
    Parse a single annotation entry.

    The match on the literal is exact: case-sensitive and without trimming.

    Args:
        annotation: Raw ``key = "literal"`` entry

    Returns:
        A recognized setting or an error placeholder
    """
    literal = annotation.literal

    if annotation.key == ir.AnnotationKey.REPRESENTATION.value:
        representation = _REPRESENTATION_VALUES.get(literal.value)
        if representation is None:
            return ir.InvalidRepresentationValue(literal=literal)
        return ir.RepresentationSetting(representation=representation, literal=literal)

    if annotation.key == ir.AnnotationKey.EXPOSED_NAME.value:
        return ir.ExposedNameSetting(literal=literal)

    return ir.UnknownAnnotationKeyValue(
        key=annotation.key,
        literal=literal,
        location=annotation.location,
    )


def parse_annotation_group(group: ir.AnnotationGroup) -> list[ir.AnnotationResult]:
    """Parse every entry of a group, one result per entry, in order."""
    return [parse_annotation(a) for a in group.annotations]


class AnnotationGroupParser:
    """
    Recursive descent reader for annotation group text.

    Grammar::

        group := [ entry ( "," entry )* [ "," ] ]
        entry := IDENTIFIER "=" STRING
    """

    def __init__(
        self, tokens: list[Token], file: Path, text: str = "", line: int = 1, column: int = 1
    ):
        self.tokens = tokens
        self.file = file
        self.pos = 0
        self.text = text
        self.start_line = line
        self.start_column = column

    def current_token(self) -> Token:
        """Get current token."""
        if self.pos >= len(self.tokens):
            return self.tokens[-1]  # Return EOF
        return self.tokens[self.pos]

    def advance(self) -> Token:
        """Consume and return current token."""
        token = self.current_token()
        if token.type != TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *token_types: TokenType) -> bool:
        """Check if current token matches any of the given types."""
        return self.current_token().type in token_types

    def expect(self, token_type: TokenType, what: str) -> Token:
        """
        Expect a specific token type and consume it.

        Raises:
            ParseError: If token doesn't match
        """
        token = self.current_token()
        if token.type != token_type:
            found = "end of annotation" if token.type == TokenType.EOF else repr(token.value)
            raise make_parse_error(
                f"Expected {what}, found {found}",
                self.file,
                token.line,
                token.column,
                source_snippet(self.text, self.start_line, self.start_column, token.line),
            )
        return self.advance()

    def _location(self, token: Token) -> ir.SourceLocation:
        return ir.SourceLocation(file=str(self.file), line=token.line, column=token.column)

    def parse_entry(self) -> ir.RawAnnotation:
        """Parse ``IDENTIFIER = STRING``."""
        key = self.expect(TokenType.IDENTIFIER, "annotation key")
        self.expect(TokenType.EQUALS, "'=' after annotation key")
        value = self.expect(TokenType.STRING, "string literal")
        return ir.RawAnnotation(
            key=key.value,
            literal=ir.StringLiteral(value=value.value, location=self._location(value)),
            location=self._location(key),
        )

    def parse(self) -> ir.AnnotationGroup:
        """Parse the whole group."""
        entries: list[ir.RawAnnotation] = []

        while not self.match(TokenType.EOF):
            entries.append(self.parse_entry())
            if self.match(TokenType.EOF):
                break
            self.expect(TokenType.COMMA, "',' between annotations")

        return ir.AnnotationGroup(annotations=entries)


def read_annotation_group(
    text: str,
    file: Path | str = "<annotation>",
    line: int = 1,
    column: int = 1,
) -> ir.AnnotationGroup:
    """
    Read annotation group text into raw entries.

    Args:
        text: Text between the annotation's parentheses
        file: Source file (for locations and errors)
        line: Line where the text starts
        column: Column where the text starts

    Returns:
        AnnotationGroup with one RawAnnotation per entry

    Raises:
        ParseError: If the text is not a valid annotation group
    """
    path = Path(file)
    tokens = tokenize(text, path, line, column)
    group = AnnotationGroupParser(tokens, path, text, line, column).parse()
    logger.debug("Read %d annotation(s) from %s:%d", len(group.annotations), path, line)
    return group
