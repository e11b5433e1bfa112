"""
Precedence-climbing parser for the FUSION expression language.

Grammar:
    program     → statement* EOF
    statement   → expr
    expr        → binary(0)
    binary(p)   → primary (op binary(prec(op) + 1))*    where prec(op) >= p
    primary     → NUMBER | "(" expr ")"
    op          → "+" | "-"          (precedence 1)
                | "*" | "/"          (precedence 2)

Operators of equal precedence group to the left: ``8 - 3 - 2`` parses as
``(8 - 3) - 2``. An operator that binds too loosely for the current level
is left in the stream for the enclosing level to pick up.
"""

from __future__ import annotations

import logging

from fusion.core.errors import ParseError, make_parse_error
from fusion.core.expression_lang.tokenizer import tokenize
from fusion.core.ir.expressions import (
    Ast,
    BinaryExpr,
    BinaryOperator,
    BinaryOperatorKind,
    Expr,
    ExpressionStatement,
    NumberExpr,
    ParenthesizedExpr,
)
from fusion.core.ir.tokens import EOF_LITERAL, TextSpan, Token, TokenKind

logger = logging.getLogger(__name__)

_BINARY_OPERATORS: dict[TokenKind, BinaryOperatorKind] = {
    TokenKind.PLUS: BinaryOperatorKind.PLUS,
    TokenKind.MINUS: BinaryOperatorKind.MINUS,
    TokenKind.ASTERISK: BinaryOperatorKind.MULTIPLY,
    TokenKind.SLASH: BinaryOperatorKind.DIVIDE,
}


class Parser:
    """Builds one statement per call from a token stream.

    Whitespace tokens are dropped up front. ``source`` is only used to
    render diagnostics; when omitted it is rebuilt from the token literals.
    """

    def __init__(self, tokens: list[Token], source: str | None = None) -> None:
        if source is None:
            source = "".join(t.span.literal for t in tokens if t.kind != TokenKind.EOF)
        self.source = source
        self.tokens = [t for t in tokens if t.kind != TokenKind.WHITESPACE]
        if not self.tokens or self.tokens[-1].kind != TokenKind.EOF:
            end = len(source)
            self.tokens.append(Token(TokenKind.EOF, TextSpan(end, end, EOF_LITERAL)))
        self.pos = 0

    @classmethod
    def from_source(cls, source: str) -> Parser:
        return cls(tokenize(source), source)

    @property
    def current(self) -> Token:
        return self.tokens[self.pos]

    def advance(self) -> Token:
        tok = self.tokens[self.pos]
        if self.pos < len(self.tokens) - 1:
            self.pos += 1
        return tok

    def expect(self, kind: TokenKind, message: str) -> Token:
        if self.current.kind != kind:
            raise self._error(message, self.current)
        return self.advance()

    # -- Statements --

    def next_statement(self) -> ExpressionStatement | None:
        """Parse the next statement, or return None at end of input.

        Raises:
            ParseError: If the remaining tokens do not start with a valid
                expression, or nest parentheses deeper than the
                interpreter stack allows.
        """
        if self.current.kind == TokenKind.EOF:
            return None
        try:
            expression = self.parse_expression()
        except RecursionError as e:
            raise self._error("Expression nested too deeply", self.current) from e
        statement = ExpressionStatement(expression=expression)
        logger.debug("Parsed statement: %s", statement)
        return statement

    def parse(self) -> Ast:
        """Parse every remaining statement into an Ast."""
        ast = Ast()
        while (statement := self.next_statement()) is not None:
            ast.add_statement(statement)
        return ast

    # -- Expressions --

    def parse_expression(self) -> Expr:
        return self.parse_binary_expression(0)

    def parse_binary_expression(self, min_precedence: int) -> Expr:
        left = self.parse_primary_expression()

        while True:
            operator = self.parse_binary_operator()
            if operator is None or operator.precedence < min_precedence:
                break
            self.advance()
            right = self.parse_binary_expression(operator.precedence + 1)
            left = BinaryExpr(operator=operator, left=left, right=right)

        return left

    def parse_binary_operator(self) -> BinaryOperator | None:
        """Peek at the current token and map it to an operator, if it is one."""
        tok = self.current
        kind = _BINARY_OPERATORS.get(tok.kind)
        if kind is None:
            return None
        return BinaryOperator(kind=kind, token=tok)

    def parse_primary_expression(self) -> Expr:
        """NUMBER | '(' expr ')'"""
        tok = self.current

        if tok.kind == TokenKind.NUMBER:
            if tok.value is None:
                raise self._error("Number token has no value", tok)
            self.advance()
            return NumberExpr(number=tok.value)

        if tok.kind == TokenKind.LEFT_PAREN:
            self.advance()
            expr = self.parse_expression()
            self.expect(
                TokenKind.RIGHT_PAREN,
                f"Expected ')' to close '(' at offset {tok.pos}, got {_describe(self.current)}",
            )
            return ParenthesizedExpr(expression=expr)

        if tok.kind == TokenKind.BAD:
            raise self._error(f"Unexpected character: {tok.span.literal!r}", tok)

        raise self._error(f"Expected a number or '(', got {_describe(tok)}", tok)

    def _error(self, message: str, tok: Token) -> ParseError:
        return make_parse_error(message, self.source, tok.span)


def _describe(tok: Token) -> str:
    if tok.kind == TokenKind.EOF:
        return "end of input"
    return repr(tok.span.literal)


def parse(source: str) -> Ast:
    """Parse an expression string into an Ast.

    Args:
        source: Expression text (e.g., "(7 + 8) * 8 / 2")

    Returns:
        Ast with one statement per top-level expression.

    Raises:
        ParseError: If the text is not a sequence of valid expressions.
    """
    return Parser.from_source(source).parse()
