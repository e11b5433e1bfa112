"""
Error types for FUSION lexing, parsing, evaluation, and configuration.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from fusion.core.ir.tokens import TextSpan


class FusionError(Exception):
    """Base exception for all FUSION errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(FusionError):
    """
    Raised when an expression cannot be parsed.

    Examples:
    - Unexpected token where an operand was expected
    - Unrecognized character
    - Missing closing parenthesis
    """

    def __init__(
        self,
        message: str,
        context: Optional["ErrorContext"] = None,
        span: Optional["TextSpan"] = None,
    ):
        self.span = span
        super().__init__(message, context)


class EvaluationError(FusionError):
    """
    Raised when a parsed expression cannot be evaluated.

    Examples:
    - Division by zero
    - Unknown expression node
    """

    pass


class ConfigError(FusionError):
    """Raised when fusion.toml cannot be read or validated."""

    pass


@dataclass
class ErrorContext:
    """
    Source location of an error.

    Attributes:
        offset: Character offset of the error in the source
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        length: Width of the marker drawn under the error
        source: Optional full source text, used to render the offending line
    """

    offset: int
    line: int
    column: int
    length: int = 1
    source: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "1:5" followed by the marked source line
        """
        location = f"{self.line}:{self.column}"
        if self.source is not None:
            return f"{location}\n{self._format_snippet(self.source)}"
        return location

    def _format_snippet(self, source: str) -> str:
        """Format the offending source line with an error marker."""
        lines = source.split("\n")
        text = lines[self.line - 1] if self.line - 1 < len(lines) else ""
        prefix = f"{self.line:4d} | "
        marker = " " * (len(prefix) + self.column - 1) + "^" * max(1, self.length)
        return f"{prefix}{text}\n{marker}"


def locate(source: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-indexed (line, column) pair."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def make_parse_error(message: str, source: str, span: "TextSpan") -> ParseError:
    """
    Helper to create a ParseError with context.

    Args:
        message: Error description
        source: Full source text that was being parsed
        span: Span of the offending token

    Returns:
        ParseError with context attached
    """
    line, column = locate(source, span.start)
    context = ErrorContext(
        offset=span.start,
        line=line,
        column=column,
        length=span.length,
        source=source,
    )
    return ParseError(message, context, span=span)
