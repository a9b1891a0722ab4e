"""
sigfig — движок семантики числовых строк

Значащие цифры, знаки после точки, округление по правилам распространения
точности и безопасное вычисление арифметических выражений.

Все функции чистые: без I/O, без общего изменяемого состояния.
"""

from sigfig.arithmetic import InvalidOperandError, combine
from sigfig.config import DEFAULT_CONFIG, PrecisionConfig
from sigfig.core.domain import (
    CombineResult,
    CountBranch,
    CountExplanation,
    Operation,
    PropagationRule,
    RoundedResult,
    RoundingStatus,
)
from sigfig.core.math import (
    count_significant_figures,
    decimal_places,
    explain_count,
    format_decimal_places,
    format_number,
    format_significant_figures,
    is_valid_float,
    round_decimal_places,
    round_to_decimal_places,
    round_to_significant_figures,
)
from sigfig.core.sanitizer import is_valid_number, parse_number, sanitize
from sigfig.expression import (
    EmptyExpressionError,
    ExpressionError,
    InvalidExpressionError,
    MismatchedParenthesesError,
    UnknownOperatorError,
    evaluate_expression,
)
from sigfig.logging_utils import get_logger

__version__ = "1.0.0"

__all__ = [
    # Config
    "DEFAULT_CONFIG",
    "PrecisionConfig",
    # Sanitizer
    "sanitize",
    "is_valid_number",
    "parse_number",
    # Counting
    "count_significant_figures",
    "decimal_places",
    "explain_count",
    # Rounding
    "round_to_significant_figures",
    "format_significant_figures",
    "round_to_decimal_places",
    "format_decimal_places",
    "round_decimal_places",
    "format_number",
    "is_valid_float",
    # Expression
    "evaluate_expression",
    "ExpressionError",
    "EmptyExpressionError",
    "MismatchedParenthesesError",
    "InvalidExpressionError",
    "UnknownOperatorError",
    # Arithmetic
    "combine",
    "InvalidOperandError",
    # Results
    "CombineResult",
    "CountBranch",
    "CountExplanation",
    "Operation",
    "PropagationRule",
    "RoundedResult",
    "RoundingStatus",
    # Logging
    "get_logger",
]
