"""
FUSION Intermediate Representation (IR) types.

Token and syntax-tree types shared by the tokenizer, parser, and every
tree visitor.
"""

from .expressions import (
    Ast,
    BinaryExpr,
    BinaryOperator,
    BinaryOperatorKind,
    Expr,
    ExpressionStatement,
    NumberExpr,
    ParenthesizedExpr,
    Statement,
    left_spine,
)
from .tokens import I64_MAX, I64_MIN, TextSpan, Token, TokenKind, wrap_i64

__all__ = [
    # Tokens
    "I64_MAX",
    "I64_MIN",
    "TextSpan",
    "Token",
    "TokenKind",
    "wrap_i64",
    # Expressions
    "Ast",
    "BinaryExpr",
    "BinaryOperator",
    "BinaryOperatorKind",
    "Expr",
    "ExpressionStatement",
    "NumberExpr",
    "ParenthesizedExpr",
    "Statement",
    "left_spine",
]
