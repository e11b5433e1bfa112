"""Tests for the FUSION evaluator.

Covers:
- Arithmetic, precedence, and associativity end to end
- Truncating division and division by zero
- 64-bit wraparound and the unbounded overflow mode
- Per-statement results and last_value bookkeeping
"""

from __future__ import annotations

import pytest

from fusion.core.config import OverflowMode
from fusion.core.errors import EvaluationError
from fusion.core.expression_lang.evaluator import Evaluator, evaluate, evaluate_source
from fusion.core.expression_lang.parser import parse
from fusion.core.ir import I64_MAX, I64_MIN, Ast


class TestEvaluatorArithmetic:
    """Evaluation of single statements."""

    @pytest.mark.parametrize(
        ("source", "expected"),
        [
            ("42", 42),
            ("1 + 2 * 3", 7),
            ("(1 + 2) * 3", 9),
            ("8 - 3 - 2", 3),
            ("64 / 4 / 2", 8),
            ("1 * 2 + 3", 5),
            ("7 / 2", 3),
            ("((((5))))", 5),
            ("2 * (3 + 4) - 10 / 5", 12),
        ],
    )
    def test_expressions(self, source: str, expected: int) -> None:
        assert evaluate_source(source) == [expected]

    def test_worked_example(self, worked_example: str) -> None:
        assert evaluate_source(worked_example) == [60]

    def test_worked_example_ast(self, worked_example_ast: Ast) -> None:
        assert evaluate(worked_example_ast) == 60


class TestEvaluatorDivision:
    def test_truncates_toward_zero(self) -> None:
        assert evaluate_source("(0 - 7) / 2") == [-3]
        assert evaluate_source("7 / (0 - 2)") == [-3]
        assert evaluate_source("(0 - 7) / (0 - 2)") == [3]

    def test_division_by_zero(self) -> None:
        with pytest.raises(EvaluationError, match="Division by zero"):
            evaluate_source("1 / (2 - 2)")


class TestEvaluatorOverflow:
    def test_addition_wraps(self) -> None:
        assert evaluate_source(f"{I64_MAX} + 1") == [I64_MIN]

    def test_subtraction_wraps(self) -> None:
        assert evaluate_source(f"0 - {I64_MAX} - 2") == [I64_MAX]

    def test_multiplication_wraps(self) -> None:
        assert evaluate_source("4294967296 * 4294967296") == [0]

    def test_min_divided_by_minus_one_wraps(self) -> None:
        assert evaluate_source(f"(0 - {I64_MAX} - 1) / (0 - 1)") == [I64_MIN]

    def test_unbounded_mode(self) -> None:
        results = evaluate_source(f"{I64_MAX} + 1", overflow=OverflowMode.UNBOUNDED)
        assert results == [I64_MAX + 1]

    def test_oversized_literal_wraps(self) -> None:
        assert evaluate_source("9223372036854775808") == [I64_MIN]
        assert evaluate_source("18446744073709551617") == [1]

    def test_oversized_literal_is_exact_when_unbounded(self) -> None:
        results = evaluate_source("9223372036854775808 + 1", overflow=OverflowMode.UNBOUNDED)
        assert results == [2**63 + 1]


class TestEvaluatorLongChains:
    """Same-precedence chains nest one level per operator."""

    @pytest.mark.parametrize("terms", [1000, 5000])
    def test_long_addition_chain(self, terms: int) -> None:
        assert evaluate_source(" + ".join(["1"] * terms)) == [terms]

    def test_long_subtraction_chain(self) -> None:
        assert evaluate_source("0" + " - 1" * 3000) == [-3000]

    def test_long_mixed_chain(self) -> None:
        assert evaluate_source(" + ".join(["2 * 3"] * 2000)) == [12000]

    def test_long_division_chain(self) -> None:
        source = "1000000" + " / 1" * 2000 + " / 10"
        assert evaluate_source(source) == [100000]

    def test_division_by_zero_at_end_of_long_chain(self) -> None:
        with pytest.raises(EvaluationError, match="Division by zero"):
            evaluate_source("1" + " + 1" * 2000 + " / 0")


class TestEvaluatorStatements:
    def test_one_result_per_statement(self) -> None:
        assert evaluate_source("1 2 * 3 (4)") == [1, 6, 4]

    def test_empty_source(self) -> None:
        assert evaluate_source("") == []
        assert evaluate(parse("")) is None

    def test_last_value_tracks_latest_statement(self) -> None:
        evaluator = Evaluator()
        assert evaluator.last_value is None
        results = evaluator.visit_ast(parse("10 20 + 1"))
        assert results == [10, 21]
        assert evaluator.last_value == 21

    def test_evaluate_returns_last_statement(self) -> None:
        assert evaluate(parse("1 2 3")) == 3

    def test_evaluate_single_expression(self) -> None:
        expr = parse("6 * 7").statements[0].expression
        assert evaluate(expr) == 42

    def test_unknown_node_rejected(self) -> None:
        with pytest.raises(TypeError, match="Unknown expression type"):
            Evaluator().visit_expression("1 + 1")  # type: ignore[arg-type]
