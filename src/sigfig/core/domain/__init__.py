"""
Domain models и value objects.

Tagged variant числовой строки (PlainDecimal / Scientific) и результаты,
которые движок отдаёт потребителям.
"""

from sigfig.core.domain.numerals import (
    Numeral,
    PlainDecimal,
    Scientific,
    parse_numeral,
)
from sigfig.core.domain.results import (
    CombineResult,
    CountBranch,
    CountExplanation,
    Operation,
    PropagationRule,
    RoundedResult,
    RoundingStatus,
)

__all__ = [
    # Numerals
    "Numeral",
    "PlainDecimal",
    "Scientific",
    "parse_numeral",
    # Results
    "CombineResult",
    "CountBranch",
    "CountExplanation",
    "Operation",
    "PropagationRule",
    "RoundedResult",
    "RoundingStatus",
]
