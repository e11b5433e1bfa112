"""
FUSION - a small integer expression compiler front end.

Lexes, parses, and evaluates arithmetic expressions over signed 64-bit
integers.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import ConfigError, EvaluationError, FusionError, ParseError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ConfigError",
    "EvaluationError",
    "FusionError",
    "ParseError",
]
