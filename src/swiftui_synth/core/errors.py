"""
Error types for example parsing, layout synthesis, and configuration.
"""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path
from typing import Optional


class ParseErrorKind(StrEnum):
    """Closed set of reasons an example string can be rejected."""

    MALFORMED_ENVELOPE = "malformed_envelope"
    EMPTY_INPUT = "empty_input"
    UNBALANCED_PARENS = "unbalanced_parens"
    MISSING_SEPARATOR = "missing_separator"
    SEPARATOR_BEFORE_DIMENSIONS = "separator_before_dimensions"
    MALFORMED_DIMENSIONS = "malformed_dimensions"
    NESTED_PARENS = "nested_parens"
    UNKNOWN_DIMENSION_KEY = "unknown_dimension_key"
    INVALID_DIMENSION_VALUE = "invalid_dimension_value"
    MISSING_DIMENSION = "missing_dimension"
    MALFORMED_HSTACK = "malformed_hstack"
    UNQUOTED_HSTACK_CHILD = "unquoted_hstack_child"
    MALFORMED_ELEMENTS = "malformed_elements"
    UNKNOWN_ELEMENT_KEY = "unknown_element_key"
    MISSING_ELEMENT_VALUE = "missing_element_value"
    UNQUOTED_VALUE = "unquoted_value"
    SYNTHESIS_FAILED = "synthesis_failed"

    @property
    def is_parenthesis_error(self) -> bool:
        """Whether this kind reports a parenthesis balance problem."""
        return self in (ParseErrorKind.UNBALANCED_PARENS, ParseErrorKind.NESTED_PARENS)


class SynthError(Exception):
    """Base exception for all swiftui-synth errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(SynthError):
    """
    Raised when an example string cannot be parsed.

    Examples:
    - Missing outer braces
    - Unbalanced parentheses in the dimensions block
    - Unsupported element keys
    - Unquoted element values
    """

    def __init__(
        self,
        kind: ParseErrorKind,
        message: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.kind = kind
        super().__init__(message, context)


class SynthesisError(SynthError):
    """Raised when no layout could be synthesized from the given examples."""

    kind = ParseErrorKind.SYNTHESIS_FAILED


class ConfigError(SynthError):
    """
    Raised when a configuration file cannot be loaded.

    Examples:
    - Explicitly requested file does not exist
    - Invalid TOML syntax
    - Wrong value types (e.g. a string indent)
    """

    pass


@dataclass
class ErrorContext:
    """
    Location of an error inside the example text.

    Attributes:
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        file: Optional path of the examples file
        snippet: Optional source line showing the error location
    """

    line: int
    column: int
    file: Path | None = None
    snippet: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "examples.txt:1:17"
        """
        location = f"{self.file or '<examples>'}:{self.line}:{self.column}"
        if self.snippet is not None:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format the snippet line with a line number and error marker."""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^"
        return f"{prefix}{self.snippet}\n{marker}"


def locate(text: str, offset: int, file: Path | None = None) -> ErrorContext:
    """
    Build an ErrorContext for a character offset into ``text``.

    Args:
        text: The full example text
        offset: 0-based character offset of the offending character
        file: Optional source file path

    Returns:
        ErrorContext with 1-indexed line/column and the offending line
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset) + 1
    line_start = text.rfind("\n", 0, offset) + 1
    line_end = text.find("\n", offset)
    if line_end == -1:
        line_end = len(text)
    return ErrorContext(
        line=line,
        column=offset - line_start + 1,
        file=file,
        snippet=text[line_start:line_end],
    )


def make_parse_error(
    kind: ParseErrorKind,
    message: str,
    text: str | None = None,
    offset: int | None = None,
    file: Path | None = None,
) -> ParseError:
    """
    Helper to create a ParseError with optional location context.

    Args:
        kind: Failure kind
        message: Error description
        text: Full example text the offset refers to
        offset: Optional 0-based offset of the offending character
        file: Optional source file path

    Returns:
        ParseError with context attached when a location is known
    """
    if text is not None and offset is not None:
        return ParseError(kind, message, locate(text, offset, file))
    return ParseError(kind, message)
