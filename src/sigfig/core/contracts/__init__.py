"""
Contract Validation Module

Валидация JSON-payload'ов движка против JSON Schema контрактов.
"""

from .validators import (
    CombineResultValidator,
    ContractValidator,
    CountResultValidator,
    SchemaLoader,
    validate_combine_result,
    validate_count_result,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "CombineResultValidator",
    "CountResultValidator",
    # Functions
    "validate_combine_result",
    "validate_count_result",
]
