"""
Token types for the FUSION IR.

Tokens are produced by the tokenizer and referenced from the AST (each
binary operator keeps the token it was parsed from).
"""

from __future__ import annotations

from enum import StrEnum, auto

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

EOF_LITERAL = "\0"


def wrap_i64(value: int) -> int:
    """Wrap an integer into the signed 64-bit range (two's complement)."""
    value &= 0xFFFF_FFFF_FFFF_FFFF
    if value > I64_MAX:
        value -= 2**64
    return value


class TokenKind(StrEnum):
    """Token types for the expression language."""

    # Literals
    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    SLASH = auto()

    # Punctuation
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()

    # Trivia and sentinels
    WHITESPACE = auto()
    BAD = auto()
    EOF = auto()


class TextSpan:
    """A half-open character range ``[start, end)`` and the text it covers."""

    __slots__ = ("start", "end", "literal")

    def __init__(self, start: int, end: int, literal: str) -> None:
        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "literal", literal)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"TextSpan is immutable (cannot set {name!r})")

    @property
    def length(self) -> int:
        return self.end - self.start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TextSpan):
            return NotImplemented
        return (self.start, self.end, self.literal) == (other.start, other.end, other.literal)

    def __hash__(self) -> int:
        return hash((self.start, self.end, self.literal))

    def __repr__(self) -> str:
        return f"TextSpan({self.start}, {self.end}, {self.literal!r})"


class Token:
    """A single token from the expression tokenizer.

    ``value`` holds the exact integer written by a NUMBER token (no
    64-bit wrapping is applied here) and is ``None`` for every other kind.
    Tokens are immutable.
    """

    __slots__ = ("kind", "span", "value")

    def __init__(self, kind: TokenKind, span: TextSpan, value: int | None = None) -> None:
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "span", span)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Token is immutable (cannot set {name!r})")

    @property
    def pos(self) -> int:
        return self.span.start

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.kind, self.span, self.value) == (other.kind, other.span, other.value)

    def __hash__(self) -> int:
        return hash((self.kind, self.span, self.value))

    def __repr__(self) -> str:
        if self.kind == TokenKind.NUMBER:
            return f"Token({self.kind}({self.value}), {self.span.literal!r}, pos={self.pos})"
        return f"Token({self.kind}, {self.span.literal!r}, pos={self.pos})"
