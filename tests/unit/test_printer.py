"""Tests for the visitor base class and the tree printer."""

from __future__ import annotations

import pytest
from rich.console import Console

from fusion.core.expression_lang.parser import parse
from fusion.core.expression_lang.printer import ASTPrinter
from fusion.core.expression_lang.visitor import ASTVisitor
from fusion.core.ir.expressions import BinaryExpr, NumberExpr


class _NumberCollector(ASTVisitor[list[int]]):
    """Collects literals left to right."""

    def visit_number(self, number: NumberExpr) -> list[int]:
        return [number.number]

    def visit_binary_expression(self, expr: BinaryExpr) -> list[int]:
        return self.visit_expression(expr.left) + self.visit_expression(expr.right)


def _render(source: str) -> str:
    console = Console(record=True, width=100)
    console.print(ASTPrinter().render(parse(source)))
    return console.export_text()


class TestVisitor:
    def test_dispatch_reaches_every_leaf(self) -> None:
        assert _NumberCollector().visit_ast(parse("(1 + 2) * 3 4")) == [[1, 2, 3], [4]]

    def test_parentheses_are_transparent_by_default(self) -> None:
        assert _NumberCollector().visit_ast(parse("((9))")) == [[9]]

    def test_visitor_must_handle_every_node_kind(self) -> None:
        class Incomplete(ASTVisitor[int]):
            def visit_number(self, number: NumberExpr) -> int:
                return number.number

        with pytest.raises(TypeError):
            Incomplete()  # type: ignore[abstract]


class TestASTPrinter:
    def test_tree_shape(self) -> None:
        tree = ASTPrinter().render(parse("(1 + 2) * 3"))
        statement = tree.children[0]
        binary = statement.children[0]
        assert "Binary" in str(binary.label)
        assert "Parenthesized" in str(binary.children[0].label)
        assert "Number" in str(binary.children[1].label)

    def test_one_branch_per_statement(self) -> None:
        tree = ASTPrinter().render(parse("1 2 3"))
        assert len(tree.children) == 3

    def test_rendered_text(self, worked_example: str) -> None:
        text = _render(worked_example)
        assert "Statement #0" in text
        assert "DIVIDE '/'" in text
        assert "MULTIPLY '*'" in text
        assert "PLUS '+'" in text
        assert "Parenthesized" in text
        assert "Number 8" in text

    def test_long_chain_builds_tree(self) -> None:
        tree = ASTPrinter().render(parse(" - ".join(["1"] * 2000)))
        node = tree.children[0].children[0]
        depth = 0
        while "Binary" in str(node.label):
            assert "MINUS '-'" in str(node.label)
            assert "Number 1" in str(node.children[1].label)
            node = node.children[0]
            depth += 1
        assert depth == 1999
        assert "Number 1" in str(node.label)
