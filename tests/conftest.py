"""Shared pytest fixtures for FUSION tests."""

from __future__ import annotations

import pytest

from fusion.core.expression_lang import parse
from fusion.core.ir import Ast

WORKED_EXAMPLE = "( 7  + 8) * 8 / 2"


@pytest.fixture
def worked_example() -> str:
    """Return the reference expression, which evaluates to 60."""
    return WORKED_EXAMPLE


@pytest.fixture
def worked_example_ast(worked_example: str) -> Ast:
    """Return the parsed reference expression."""
    return parse(worked_example)
