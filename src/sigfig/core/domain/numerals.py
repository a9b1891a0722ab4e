"""
Numerals — разбор числовой строки в tagged variant

Грамматика (после sanitize):

    numeral     := [sign] coefficient [exponent]
    coefficient := digits ["." [digits]] | "." digits
    exponent    := ("e" | "E") [sign] digits

Результат разбора:
- PlainDecimal{integer_part, fraction_part} — обычная десятичная запись
- Scientific{coefficient, exponent} — научная запись, coefficient всегда PlainDecimal

fraction_part is None  → точка не написана ("100")
fraction_part == ""    → голая завершающая точка ("100.")
integer_part == ""     → ведущая точка (".50")

Immutable Pydantic модели; parse_numeral никогда не бросает исключений.
"""

import re
from typing import Final, Optional, Union

from pydantic import BaseModel, Field


NUMERAL_RE: Final = re.compile(
    r"^(?P<sign>[+-]?)"
    r"(?P<integer>[0-9]*)"
    r"(?:(?P<point>\.)(?P<fraction>[0-9]*))?"
    r"(?:[eE](?P<exponent>[+-]?[0-9]+))?$"
)


# =============================================================================
# MODELS
# =============================================================================


class PlainDecimal(BaseModel):
    """
    Число в обычной десятичной записи.

    Знак хранится отдельно от цифр; цифры хранятся ровно так, как написаны
    (ведущие и завершающие нули сохраняются — они важны для подсчёта).
    """

    negative: bool = Field(False, description="Ведущий знак минус")
    integer_part: str = Field(..., pattern=r"^[0-9]*$", description="Цифры до точки")
    fraction_part: Optional[str] = Field(
        None, pattern=r"^[0-9]*$", description="Цифры после точки (None — точки нет)"
    )

    model_config = {"frozen": True}

    @property
    def has_point(self) -> bool:
        return self.fraction_part is not None

    @property
    def fraction_digits(self) -> str:
        return self.fraction_part or ""

    @property
    def digits(self) -> str:
        """Все написанные цифры подряд (без точки и знака)."""
        return self.integer_part + self.fraction_digits

    def is_zero(self) -> bool:
        """Все написанные цифры — нули."""
        return set(self.digits) <= {"0"}

    def to_text(self) -> str:
        sign = "-" if self.negative else ""
        if self.fraction_part is None:
            return f"{sign}{self.integer_part}"
        return f"{sign}{self.integer_part}.{self.fraction_part}"


class Scientific(BaseModel):
    """
    Число в научной записи: coefficient × 10^exponent.

    coefficient хранится без знака; знак числа — в поле negative.
    """

    negative: bool = Field(False, description="Ведущий знак минус")
    coefficient: PlainDecimal = Field(..., description="Мантисса (без знака)")
    exponent: int = Field(..., description="Степень десяти")

    model_config = {"frozen": True}

    def expand(self) -> PlainDecimal:
        """
        Раскрытие в обычную десятичную запись без потери написанных цифр.

        Examples:
            1.20e3   → 1200
            1.5e-3   → 0.0015
            1.2345e2 → 123.45
        """
        digits = self.coefficient.digits
        point = len(self.coefficient.integer_part) + self.exponent

        if point <= 0:
            integer_part = "0"
            fraction_part: Optional[str] = "0" * (-point) + digits
        elif point >= len(digits):
            integer_part = digits + "0" * (point - len(digits))
            fraction_part = None
        else:
            integer_part = digits[:point]
            fraction_part = digits[point:]

        stripped = integer_part.lstrip("0")
        integer_part = stripped if stripped else "0"

        return PlainDecimal(
            negative=self.negative,
            integer_part=integer_part,
            fraction_part=fraction_part,
        )

    def to_text(self) -> str:
        sign = "-" if self.negative else ""
        return f"{sign}{self.coefficient.to_text()}e{self.exponent}"


Numeral = Union[PlainDecimal, Scientific]


# =============================================================================
# PARSING
# =============================================================================


def parse_numeral(text: str) -> Optional[Numeral]:
    """
    Разбор санитизированной строки.

    Args:
        text: Строка после sanitize()

    Returns:
        PlainDecimal или Scientific; None если строка не соответствует грамматике

    Examples:
        >>> parse_numeral("100.")
        PlainDecimal(negative=False, integer_part='100', fraction_part='')
        >>> parse_numeral("-1.20e3").exponent
        3
        >>> parse_numeral("1.2.3") is None
        True
    """
    match = NUMERAL_RE.match(text)
    if match is None:
        return None

    integer_part = match.group("integer")
    fraction_part = match.group("fraction") if match.group("point") else None

    # Хотя бы одна цифра в мантиссе обязательна ("." и "e5" не числа)
    if not integer_part and not fraction_part:
        return None

    negative = match.group("sign") == "-"
    exponent = match.group("exponent")

    if exponent is None:
        return PlainDecimal(
            negative=negative,
            integer_part=integer_part,
            fraction_part=fraction_part,
        )

    return Scientific(
        negative=negative,
        coefficient=PlainDecimal(integer_part=integer_part, fraction_part=fraction_part),
        exponent=int(exponent),
    )
