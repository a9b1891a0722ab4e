"""
Significant Figures — подсчёт значащих цифр и знаков после точки

Правила (конвенция научных измерений):
- знак и экспонента никогда не влияют на число значащих цифр
- ведущие нули — заполнители, не значащие
- при наличии точки все цифры после первой ненулевой значащие
  (включая завершающие нули: "1.20" → 3, "100." → 3)
- без точки завершающие нули целого числа — заполнители ("1000" → 1)
- ноль с точкой: значащих столько, сколько цифр написано после точки ("0.00" → 2)
- ноль без точки: 1 значащая цифра

Decimal places для научной записи: after - exponent (может быть отрицательным).

ИНВАРИАНТЫ:
1. Функции никогда не бросают исключений: невалидный ввод → 0 / None
2. Результат для валидного нуля никогда не равен 0
"""

import logging
from typing import Optional, Tuple

from sigfig.core.domain.numerals import PlainDecimal, Scientific, parse_numeral
from sigfig.core.domain.results import CountBranch, CountExplanation
from sigfig.core.sanitizer import sanitize

logger = logging.getLogger(__name__)


# =============================================================================
# КЛАССИФИКАЦИЯ МАНТИССЫ
# =============================================================================


def _classify_coefficient(coefficient: PlainDecimal) -> Tuple[CountBranch, int, str]:
    """
    Подсчёт значащих цифр в мантиссе (без знака и экспоненты).

    Returns:
        (ветка алгоритма, число значащих цифр, значащие цифры)
    """
    # Ведущая точка анализируется как "0."
    integer_part = coefficient.integer_part or "0"

    if coefficient.has_point:
        fraction = coefficient.fraction_digits

        if coefficient.is_zero():
            # "0." без дробных цифр всё равно валидный ноль → 1
            return CountBranch.ZERO_WITH_DECIMAL, max(len(fraction), 1), fraction or "0"

        counted = (integer_part + fraction).lstrip("0")
        return CountBranch.DECIMAL, len(counted) or len(fraction), counted

    no_leading = integer_part.lstrip("0")
    if not no_leading:
        return CountBranch.ZERO_INTEGER, 1, "0"

    stripped = no_leading.rstrip("0")
    if len(stripped) < len(no_leading):
        return CountBranch.INTEGER_TRAILING_ZEROS, len(stripped), stripped

    return CountBranch.INTEGER, len(stripped), stripped


# =============================================================================
# PUBLIC API
# =============================================================================


def count_significant_figures(raw: Optional[str]) -> int:
    """
    Число значащих цифр числовой строки.

    Args:
        raw: Сырой ввод (санитизируется внутри)

    Returns:
        Число значащих цифр; 0 если ввод пуст или не является числом

    Examples:
        >>> count_significant_figures("0.004560")
        4
        >>> count_significant_figures("100")
        1
        >>> count_significant_figures("100.")
        3
        >>> count_significant_figures("1.20e3")
        3
    """
    numeral = parse_numeral(sanitize(raw))
    if numeral is None:
        return 0

    coefficient = numeral.coefficient if isinstance(numeral, Scientific) else numeral
    _, count, _ = _classify_coefficient(coefficient)
    return count


def decimal_places(raw: Optional[str]) -> Optional[int]:
    """
    Число знаков после десятичной точки с учётом научной записи.

    Для научной записи: after - exponent, где after — цифры после точки
    в мантиссе. Положительная экспонента может дать отрицательный результат:
    эффективная точка лежит правее всех написанных цифр.

    Args:
        raw: Сырой ввод

    Returns:
        Число знаков (может быть < 0); None если ввод не является числом

    Examples:
        >>> decimal_places("3.450")
        3
        >>> decimal_places("1.2e3")
        -2
        >>> decimal_places("1.5e-3")
        4
        >>> decimal_places("") is None
        True
    """
    numeral = parse_numeral(sanitize(raw))
    if numeral is None:
        return None

    if isinstance(numeral, Scientific):
        return len(numeral.coefficient.fraction_digits) - numeral.exponent

    return len(numeral.fraction_digits)


def explain_count(raw: Optional[str]) -> CountExplanation:
    """
    Пошаговое объяснение подсчёта значащих цифр.

    Args:
        raw: Сырой ввод

    Returns:
        CountExplanation; для невалидного ввода branch=INVALID, count=0
    """
    text = sanitize(raw)
    numeral = parse_numeral(text)
    raw_text = "" if raw is None else str(raw)

    if numeral is None:
        return CountExplanation(
            input=raw_text,
            normalized=text,
            branch=CountBranch.INVALID,
            count=0,
            steps=["Invalid input."],
        )

    normalized = text.lstrip("+-")
    steps = [f"Input: {raw_text}", f"Normalized: {normalized}"]

    if isinstance(numeral, Scientific):
        coefficient_text = numeral.coefficient.to_text()
        _, count, counted = _classify_coefficient(numeral.coefficient)
        steps.extend(
            [
                "Detected scientific notation.",
                f"Coefficient: {coefficient_text}, Exponent: {numeral.exponent}.",
                "Count significant figures in the coefficient only (ignore exponent).",
                f"Result: {count} significant figure(s).",
            ]
        )
        return CountExplanation(
            input=raw_text,
            normalized=normalized,
            branch=CountBranch.SCIENTIFIC,
            count=count,
            coefficient=coefficient_text,
            exponent=numeral.exponent,
            counted_digits=counted,
            steps=steps,
        )

    branch, count, counted = _classify_coefficient(numeral)

    if numeral.has_point:
        steps.append("Number contains a decimal point.")
        steps.append(
            f"Integer part: {numeral.integer_part}, Fractional part: {numeral.fraction_digits}."
        )
        if branch == CountBranch.ZERO_WITH_DECIMAL:
            steps.append(
                "All digits are zeros. Convention: the number of sig figs equals "
                "digits after the decimal."
            )
        else:
            steps.append(
                "Remove leading zeros (placeholders). Count remaining digits (all are significant)."
            )
            steps.append(f"Digits counted: {counted}.")
    else:
        steps.append("Integer without a decimal point.")
        if branch == CountBranch.ZERO_INTEGER:
            steps.append('All digits are zeros (e.g., "0"). Convention: count as 1 sig fig.')
        elif branch == CountBranch.INTEGER_TRAILING_ZEROS:
            steps.append(
                "Remove leading zeros, then remove trailing zeros: trailing zeros in "
                "integers without a decimal are not counted."
            )
            steps.append(
                'If you intend them as significant, write a decimal (e.g., "1000.") '
                'or use scientific notation (e.g., "1.000e3").'
            )
            steps.append(f"Digits counted: {counted}.")
        else:
            steps.append("Remove leading zeros. All remaining digits are significant.")
            steps.append(f"Digits counted: {counted}.")

    steps.append(f"Result: {count} significant figure(s).")
    logger.debug("explain_count(%r): branch=%s count=%d", raw_text, branch.value, count)

    return CountExplanation(
        input=raw_text,
        normalized=normalized,
        branch=branch,
        count=count,
        integer_part=numeral.integer_part,
        fraction_part=numeral.fraction_part,
        counted_digits=counted,
        steps=steps,
    )
