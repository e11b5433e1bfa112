"""
Tokenizer for the FUSION expression language.

Converts an expression string into a sequence of typed tokens. Every
character of the input ends up in exactly one token: whitespace and
unrecognized characters are emitted as tokens too, so the stream can be
reassembled into the source text.
"""

from __future__ import annotations

import logging

from fusion.core.ir.tokens import EOF_LITERAL, TextSpan, Token, TokenKind

logger = logging.getLogger(__name__)

_DIGITS = "0123456789"

# str.isspace also accepts the ASCII information separators; these lex as Bad.
_NOT_WHITESPACE = "\x1c\x1d\x1e\x1f"

_PUNCTUATION: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
}


class Lexer:
    """Character-at-a-time lexer with a single forward-only cursor."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    @property
    def exhausted(self) -> bool:
        """True once the EOF token has been handed out."""
        return self.pos > len(self.source)

    def next_token(self) -> Token | None:
        """Return the next token, or None once EOF has already been emitted."""
        n = len(self.source)
        if self.pos > n:
            return None

        if self.pos == n:
            self.pos += 1
            return Token(TokenKind.EOF, TextSpan(n, n, EOF_LITERAL))

        start = self.pos
        c = self.source[start]
        value: int | None = None

        if c in _DIGITS:
            value = self._consume_number()
            kind = TokenKind.NUMBER
        elif c.isspace() and c not in _NOT_WHITESPACE:
            self.pos += 1
            kind = TokenKind.WHITESPACE
        else:
            self.pos += 1
            kind = _PUNCTUATION.get(c, TokenKind.BAD)

        return Token(kind, TextSpan(start, self.pos, self.source[start : self.pos]), value)

    def _consume_number(self) -> int:
        """Consume the maximal run of digits and return its exact value.

        No 64-bit wrapping happens here; the evaluator applies the configured
        overflow mode to literals.
        """
        number = 0
        while self.pos < len(self.source) and self.source[self.pos] in _DIGITS:
            number = number * 10 + (ord(self.source[self.pos]) - ord("0"))
            self.pos += 1
        return number

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        tok = self.next_token()
        if tok is None:
            raise StopIteration
        return tok


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens ending with EOF."""
    tokens = list(Lexer(source))
    logger.debug("Tokenized %d characters into %d tokens", len(source), len(tokens))
    return tokens
