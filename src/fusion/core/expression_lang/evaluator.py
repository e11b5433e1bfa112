"""
Expression evaluator for the FUSION expression language.

A tree-walking interpreter over the integer AST. Each visit returns its
value directly; nothing is threaded through shared state between sibling
visits. Arithmetic follows signed 64-bit semantics: results wrap on
overflow and division truncates toward zero.
"""

from __future__ import annotations

import logging

from fusion.core.config import OverflowMode
from fusion.core.errors import EvaluationError
from fusion.core.expression_lang.parser import parse
from fusion.core.expression_lang.visitor import ASTVisitor
from fusion.core.ir.expressions import (
    Ast,
    BinaryExpr,
    BinaryOperatorKind,
    Expr,
    NumberExpr,
    Statement,
    left_spine,
)
from fusion.core.ir.tokens import wrap_i64

logger = logging.getLogger(__name__)


class Evaluator(ASTVisitor[int]):
    """Folds statements to integers.

    ``last_value`` holds the result of the most recently evaluated
    statement, or None before the first one.
    """

    def __init__(self, overflow: OverflowMode = OverflowMode.WRAP) -> None:
        self.overflow = overflow
        self.last_value: int | None = None

    def visit_statement(self, statement: Statement) -> int:
        value = super().visit_statement(statement)
        self.last_value = value
        logger.debug("Evaluated %s = %d", statement, value)
        return value

    def visit_number(self, number: NumberExpr) -> int:
        return self._coerce(number.number)

    def visit_binary_expression(self, expr: BinaryExpr) -> int:
        spine = left_spine(expr)
        value = self.visit_expression(spine[-1].left)
        for node in reversed(spine):
            value = self._apply(node, value, self.visit_expression(node.right))
        return value

    def _apply(self, expr: BinaryExpr, left: int, right: int) -> int:
        kind = expr.operator.kind

        if kind == BinaryOperatorKind.PLUS:
            result = left + right
        elif kind == BinaryOperatorKind.MINUS:
            result = left - right
        elif kind == BinaryOperatorKind.MULTIPLY:
            result = left * right
        elif kind == BinaryOperatorKind.DIVIDE:
            if right == 0:
                raise EvaluationError(
                    f"Division by zero at offset {expr.operator.token.pos}: {expr}"
                )
            result = _truncating_div(left, right)
        else:
            raise EvaluationError(f"Unknown binary operator: {kind}")

        return self._coerce(result)

    def _coerce(self, value: int) -> int:
        if self.overflow == OverflowMode.WRAP:
            return wrap_i64(value)
        return value


def _truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (Python's // floors)."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


def evaluate(node: Ast | Expr, overflow: OverflowMode = OverflowMode.WRAP) -> int | None:
    """Evaluate an Ast or a single expression.

    For an Ast, returns the value of its last statement, or None when it
    has no statements.
    """
    evaluator = Evaluator(overflow)
    if isinstance(node, Ast):
        evaluator.visit_ast(node)
        return evaluator.last_value
    return evaluator.visit_expression(node)


def evaluate_source(source: str, overflow: OverflowMode = OverflowMode.WRAP) -> list[int]:
    """Parse and evaluate ``source``, returning one result per statement.

    Raises:
        ParseError: If the source cannot be parsed.
        EvaluationError: If evaluation fails (e.g. division by zero).
    """
    ast = parse(source)
    return Evaluator(overflow).visit_ast(ast)
