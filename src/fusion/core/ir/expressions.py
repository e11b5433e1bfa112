"""
Expression types for the FUSION IR.

This module defines the abstract syntax tree produced by the parser:

- Number literals: 42
- Binary expressions: left op right, for +, -, *, /
- Parenthesized expressions: ( expr )
- Statements: currently a single expression each
- Ast: the ordered list of top-level statements

Nodes are frozen once built; each node exclusively owns its children.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

from fusion.core.ir.tokens import Token

if TYPE_CHECKING:
    from fusion.core.expression_lang.visitor import ASTVisitor

# ---------------------------------------------------------------------------
# Operators
# ---------------------------------------------------------------------------


class BinaryOperatorKind(StrEnum):
    """Binary arithmetic operators."""

    PLUS = "+"
    MINUS = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @property
    def precedence(self) -> int:
        """Binding strength; higher binds tighter."""
        return _PRECEDENCE[self]


_PRECEDENCE: dict[BinaryOperatorKind, int] = {
    BinaryOperatorKind.PLUS: 1,
    BinaryOperatorKind.MINUS: 1,
    BinaryOperatorKind.MULTIPLY: 2,
    BinaryOperatorKind.DIVIDE: 2,
}


class BinaryOperator(BaseModel):
    """An operator together with the token it was parsed from."""

    kind: BinaryOperatorKind
    token: Token = Field(description="Originating operator token")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    def precedence(self) -> int:
        return self.kind.precedence

    def __str__(self) -> str:
        return self.kind.value


# ---------------------------------------------------------------------------
# AST node types
# ---------------------------------------------------------------------------


class NumberExpr(BaseModel):
    """An integer literal."""

    number: int = Field(description="Literal value as written")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.number)


class BinaryExpr(BaseModel):
    """Binary operation: left op right."""

    operator: BinaryOperator
    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        spine = left_spine(self)
        parts = ["(" * len(spine), str(spine[-1].left)]
        for node in reversed(spine):
            parts.append(f" {node.operator} {node.right})")
        return "".join(parts)


class ParenthesizedExpr(BaseModel):
    """An expression written inside parentheses."""

    expression: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"({self.expression})"


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = NumberExpr | BinaryExpr | ParenthesizedExpr

# Rebuild models for recursive forward references
BinaryExpr.model_rebuild()
ParenthesizedExpr.model_rebuild()


def left_spine(expr: BinaryExpr) -> list[BinaryExpr]:
    """Binary nodes reached by following `left` from `expr`, outermost first.

    Same-precedence chains such as `1 + 2 + 3 + ...` nest to the left, one
    level per operator; consumers fold this list in a loop instead of
    recursing once per term.
    """
    spine = [expr]
    while isinstance(spine[-1].left, BinaryExpr):
        spine.append(spine[-1].left)
    return spine


# ---------------------------------------------------------------------------
# Statements
# ---------------------------------------------------------------------------


class ExpressionStatement(BaseModel):
    """A statement consisting of exactly one expression."""

    expression: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.expression)


Statement = ExpressionStatement


class Ast(BaseModel):
    """
    Ordered sequence of top-level statements.

    Statements are appended in source order while parsing and only read
    afterwards.
    """

    statements: list[Statement] = Field(default_factory=list)

    def add_statement(self, statement: Statement) -> None:
        self.statements.append(statement)

    def visit(self, visitor: ASTVisitor[Any]) -> list[Any]:
        """Dispatch every statement, in order, to ``visitor``."""
        return [visitor.visit_statement(statement) for statement in self.statements]

    def __len__(self) -> int:
        return len(self.statements)

    def __str__(self) -> str:
        return "\n".join(str(s) for s in self.statements)
