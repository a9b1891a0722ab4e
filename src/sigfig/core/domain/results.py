"""
Results — value objects, которые движок отдаёт внешним потребителям

- RoundedResult: результат округления (число + канонический текст + статус)
- CountExplanation: пошаговое объяснение подсчёта значащих цифр
- CombineResult: результат арифметики двух операндов с правилом распространения точности

Все модели immutable (frozen=True) и сериализуются в JSON-payload,
соответствующий схемам из sigfig/core/contracts/schema/.
"""

import math
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# =============================================================================
# ENUMS
# =============================================================================


class RoundingStatus(str, Enum):
    """Исход округления"""

    ROUNDED = "ROUNDED"
    NON_FINITE = "NON_FINITE"  # inf/nan: значение возвращено как есть
    INVALID_PRECISION = "INVALID_PRECISION"  # n вне допустимого диапазона


class CountBranch(str, Enum):
    """Ветка алгоритма подсчёта значащих цифр"""

    SCIENTIFIC = "SCIENTIFIC"
    ZERO_WITH_DECIMAL = "ZERO_WITH_DECIMAL"
    DECIMAL = "DECIMAL"
    ZERO_INTEGER = "ZERO_INTEGER"
    INTEGER_TRAILING_ZEROS = "INTEGER_TRAILING_ZEROS"
    INTEGER = "INTEGER"
    INVALID = "INVALID"


class Operation(str, Enum):
    """Бинарная операция Arithmetic Rule Engine"""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"

    @property
    def is_additive(self) -> bool:
        return self in (Operation.ADD, Operation.SUB)


class PropagationRule(str, Enum):
    """Правило распространения точности"""

    DECIMAL_PLACES = "DECIMAL_PLACES"  # сложение / вычитание
    SIGNIFICANT_FIGURES = "SIGNIFICANT_FIGURES"  # умножение / деление


# =============================================================================
# ROUNDING
# =============================================================================


class RoundedResult(BaseModel):
    """
    Результат округления.

    text сохраняет завершающие нули, заданные точностью
    (округление до 3 знаков после точки всегда даёт 3 цифры после точки).
    """

    value: float = Field(..., allow_inf_nan=True, description="Округлённое значение")
    text: str = Field(..., min_length=1, description="Каноническое текстовое представление")
    status: RoundingStatus = Field(RoundingStatus.ROUNDED, description="Исход округления")

    model_config = {"frozen": True}

    @property
    def is_rounded(self) -> bool:
        return self.status == RoundingStatus.ROUNDED

    def __str__(self) -> str:
        return self.text


# =============================================================================
# COUNT EXPLANATION
# =============================================================================


class CountExplanation(BaseModel):
    """
    Пошаговое объяснение подсчёта значащих цифр ("show work").

    steps — обычный текст, разметка остаётся на стороне UI.
    """

    input: str = Field(..., description="Исходный ввод")
    normalized: str = Field(..., description="Ввод после sanitize без знака")
    branch: CountBranch = Field(..., description="Сработавшая ветка алгоритма")
    count: int = Field(..., ge=0, description="Число значащих цифр")
    coefficient: Optional[str] = Field(None, description="Мантисса (научная запись)")
    exponent: Optional[int] = Field(None, description="Экспонента (научная запись)")
    integer_part: Optional[str] = Field(None, description="Цифры до точки")
    fraction_part: Optional[str] = Field(None, description="Цифры после точки")
    counted_digits: Optional[str] = Field(None, description="Цифры, признанные значащими")
    steps: List[str] = Field(default_factory=list, description="Шаги объяснения")

    model_config = {"frozen": True}

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict (см. схему count_result)."""
        return self.model_dump(mode="json")


# =============================================================================
# COMBINE
# =============================================================================


class CombineResult(BaseModel):
    """
    Результат операции над двумя операндами с учётом точности.

    unrounded отдаётся рядом с rounded, чтобы потребитель мог показать
    промежуточные вычисления.
    """

    a: str = Field(..., description="Левый операнд (как введён)")
    b: str = Field(..., description="Правый операнд (как введён)")
    operation: Operation = Field(..., description="Операция")
    rule: PropagationRule = Field(..., description="Применённое правило точности")
    unrounded: float = Field(..., allow_inf_nan=True, description="Результат без округления")
    rounded: str = Field(..., min_length=1, description="Округлённый результат (текст)")
    rounded_value: float = Field(..., allow_inf_nan=True, description="Округлённый результат (число)")
    status: RoundingStatus = Field(..., description="Исход округления")
    target: int = Field(..., description="Цель округления (знаки после точки или значащие цифры)")
    sig_figs_a: int = Field(..., ge=0)
    sig_figs_b: int = Field(..., ge=0)
    decimal_places_a: int
    decimal_places_b: int
    steps: List[str] = Field(default_factory=list, description="Шаги объяснения")

    model_config = {"frozen": True}

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict (см. схему combine_result)."""
        payload = self.model_dump(mode="json")
        # JSON не знает inf/nan: нефинитные значения уходят строкой
        for key in ("unrounded", "rounded_value"):
            value = getattr(self, key)
            if not math.isfinite(value):
                payload[key] = str(value)
        return payload
