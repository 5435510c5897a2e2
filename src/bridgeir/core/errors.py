"""
Error types for bridgeir annotation parsing and configuration loading.

Rule violations found while resolving declarations are never raised; they are
collected as ``ir.Diagnostic`` values. The exceptions here cover structural
failures only.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class BridgeIRError(Exception):
    """Base exception for all bridgeir errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(BridgeIRError):
    """
    Raised when annotation group text cannot be read.

    Examples:
    - Missing ``=`` between key and literal
    - Unterminated or unquoted string literal
    - Missing ``,`` between entries
    """

    pass


class ConfigError(BridgeIRError):
    """
    Raised when a configuration file is invalid.

    Examples:
    - Malformed TOML
    - Wrong value type for a known setting
    - Unknown logging level
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file where error occurred
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line showing the error location
    """

    file: Path
    line: int
    column: int
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "ffi.rs:10:5"
        """
        location = f"{self.file}:{self.line}:{self.column}"
        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet line with an error marker under the column."""
        if not self.snippet:
            return ""

        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^^^"
        return f"{prefix}{self.snippet}\n{marker}"


def make_parse_error(
    message: str,
    file: Path,
    line: int,
    column: int,
    snippet: str | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        file: Source file path
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source line

    Returns:
        ParseError with context attached
    """
    context = ErrorContext(file=file, line=line, column=column, snippet=snippet)
    return ParseError(message, context)


def make_config_error(message: str, file: Path | None = None) -> ConfigError:
    """
    Helper to create a ConfigError, prefixed with the config file when known.

    Args:
        message: Error description
        file: Optional config file path

    Returns:
        ConfigError
    """
    if file is not None:
        return ConfigError(f"{file}: {message}")
    return ConfigError(message)
