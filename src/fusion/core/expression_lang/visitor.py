"""
Visitor base class for walking FUSION expression trees.

Subclasses implement one method per concrete node kind and get generic
dispatch for free. Parenthesized expressions carry no semantics of their
own, so the default dispatch unwraps them and visits the inner expression.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from fusion.core.ir.expressions import (
    Ast,
    BinaryExpr,
    Expr,
    ExpressionStatement,
    NumberExpr,
    ParenthesizedExpr,
    Statement,
)

T = TypeVar("T")


class ASTVisitor(ABC, Generic[T]):
    """Structural recursion over an :class:`Ast`, one result per node."""

    def visit_ast(self, ast: Ast) -> list[T]:
        return ast.visit(self)

    def visit_statement(self, statement: Statement) -> T:
        if isinstance(statement, ExpressionStatement):
            return self.visit_expression(statement.expression)
        raise TypeError(f"Unknown statement type: {type(statement).__name__}")

    def visit_expression(self, expr: Expr) -> T:
        """Dispatch to the handler for the concrete expression type."""
        if isinstance(expr, NumberExpr):
            return self.visit_number(expr)

        if isinstance(expr, BinaryExpr):
            return self.visit_binary_expression(expr)

        if isinstance(expr, ParenthesizedExpr):
            return self.visit_expression(expr.expression)

        raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    @abstractmethod
    def visit_number(self, number: NumberExpr) -> T: ...

    @abstractmethod
    def visit_binary_expression(self, expr: BinaryExpr) -> T: ...
