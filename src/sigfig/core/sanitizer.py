"""
Sanitizer — нормализация сырого текстового ввода

Первый шаг любого пайплайна: trim, удаление разделителей тысяч (",")
и любых пробельных символов внутри строки.

Sanitizer ничего не проверяет и никогда не бросает исключений: пустой
результат означает "ввода нет", валидность проверяет is_valid_number.
"""

import math
import re
from typing import Final, Optional

from sigfig.core.domain.numerals import parse_numeral


_WHITESPACE_RE: Final = re.compile(r"\s+")

THOUSANDS_SEPARATOR: Final[str] = ","


def sanitize(raw: Optional[str]) -> str:
    """
    Нормализация сырого ввода.

    Args:
        raw: Текст от пользователя (None допускается и даёт "")

    Returns:
        Строка без внешних/внутренних пробелов и разделителей тысяч

    Examples:
        >>> sanitize("  1,234.50 ")
        '1234.50'
        >>> sanitize(" . 0050")
        '.0050'
        >>> sanitize(None)
        ''
    """
    if raw is None:
        return ""
    text = str(raw).strip().replace(THOUSANDS_SEPARATOR, "")
    return _WHITESPACE_RE.sub("", text)


def is_valid_number(raw: Optional[str]) -> bool:
    """
    Предикат валидности числовой строки.

    Строка валидна, если после sanitize она непуста, соответствует грамматике
    числа (знак, цифры, не более одной точки, опциональная экспонента)
    и её значение конечно (не переполняется в inf).

    Args:
        raw: Сырой ввод

    Returns:
        True если ввод — корректное конечное число
    """
    text = sanitize(raw)
    if not text:
        return False
    if parse_numeral(text) is None:
        return False
    return math.isfinite(float(text))


def parse_number(raw: Optional[str]) -> Optional[float]:
    """
    Значение числовой строки как float.

    Returns:
        float для валидного ввода, None иначе
    """
    if not is_valid_number(raw):
        return None
    return float(sanitize(raw))
