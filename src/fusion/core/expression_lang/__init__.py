"""
FUSION integer expression language.

Tokenizer, parser, evaluator, and tree printer for arithmetic over signed
64-bit integers.

Usage:
    from fusion.core.expression_lang import evaluate_source

    evaluate_source("(7 + 8) * 8 / 2")
    # [60]
"""

from fusion.core.expression_lang.evaluator import Evaluator, evaluate, evaluate_source
from fusion.core.expression_lang.parser import Parser, parse
from fusion.core.expression_lang.printer import ASTPrinter
from fusion.core.expression_lang.tokenizer import Lexer, tokenize
from fusion.core.expression_lang.visitor import ASTVisitor

__all__ = [
    "ASTPrinter",
    "ASTVisitor",
    "Evaluator",
    "Lexer",
    "Parser",
    "evaluate",
    "evaluate_source",
    "parse",
    "tokenize",
]
