"""
Tree-dump visitor for FUSION syntax trees.

Renders an Ast as a rich Tree, one branch per node. Unlike the evaluator,
the printer shows parenthesized expressions as nodes of their own.
"""

from __future__ import annotations

from rich.tree import Tree

from fusion.core.expression_lang.visitor import ASTVisitor
from fusion.core.ir.expressions import (
    Ast,
    BinaryExpr,
    Expr,
    NumberExpr,
    ParenthesizedExpr,
    left_spine,
)


class ASTPrinter(ASTVisitor[Tree]):
    """Builds a rich Tree mirroring the shape of the AST."""

    def render(self, ast: Ast) -> Tree:
        root = Tree("[bold]Ast[/bold]")
        for index, branch in enumerate(self.visit_ast(ast)):
            statement = root.add(f"[bold]Statement[/bold] #{index}")
            statement.children.append(branch)
        return root

    def visit_expression(self, expr: Expr) -> Tree:
        if isinstance(expr, ParenthesizedExpr):
            node = Tree("[cyan]Parenthesized[/cyan]")
            node.children.append(self.visit_expression(expr.expression))
            return node
        return super().visit_expression(expr)

    def visit_number(self, number: NumberExpr) -> Tree:
        return Tree(f"[green]Number[/green] {number.number}")

    def visit_binary_expression(self, expr: BinaryExpr) -> Tree:
        spine = left_spine(expr)
        nodes = [
            Tree(f"[yellow]Binary[/yellow] {node.operator.kind.name} '{node.operator}'")
            for node in spine
        ]
        nodes.append(self.visit_expression(spine[-1].left))
        for index in reversed(range(len(spine))):
            nodes[index].children.append(nodes[index + 1])
            nodes[index].children.append(self.visit_expression(spine[index].right))
        return nodes[0]
