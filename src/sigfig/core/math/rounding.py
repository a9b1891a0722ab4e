"""
Precision Rounder — округление до значащих цифр и до знаков после точки

Два правила:
- round_to_significant_figures: ровно n значащих цифр (умножение/деление)
- round_to_decimal_places: dp знаков после точки (сложение/вычитание),
  dp < 0 — округление до ближайшего кратного 10^(-dp)

Округление выполняется над ТОЧНЫМ двоичным значением float (Decimal(value)),
half-up: результат совпадает с классическим форматированием toPrecision/toFixed.

Текстовое представление сохраняет завершающие нули, заданные точностью.
Отказы (inf/nan на входе, n вне диапазона) возвращаются типизированным
статусом RoundedResult.status, а не исключением.
"""

import logging
import math
import sys
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Tuple

from sigfig.config import DEFAULT_CONFIG, PrecisionConfig
from sigfig.core.domain.results import RoundedResult, RoundingStatus
from sigfig.core.math.numerical_safeguards import is_valid_float, round_half_up_to_step

logger = logging.getLogger(__name__)


# =============================================================================
# ТЕКСТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def _layout(negative: bool, digits: str, exponent: int, plain: bool) -> str:
    """
    Раскладка цифр d1 d2 ... dk с десятичной экспонентой первой цифры.

    plain=False → d1.d2...dke±X
    """
    sign = "-" if negative else ""

    if not plain:
        mantissa = digits[0] + ("." + digits[1:] if len(digits) > 1 else "")
        exponent_sign = "+" if exponent >= 0 else "-"
        return f"{sign}{mantissa}e{exponent_sign}{abs(exponent)}"

    if exponent < 0:
        return f"{sign}0.{'0' * (-exponent - 1)}{digits}"

    if exponent >= len(digits) - 1:
        return f"{sign}{digits}{'0' * (exponent - len(digits) + 1)}"

    return f"{sign}{digits[:exponent + 1]}.{digits[exponent + 1:]}"


def format_number(value: float, config: PrecisionConfig = DEFAULT_CONFIG) -> str:
    """
    Кратчайшее текстовое представление float.

    Цифры — кратчайшие, однозначно восстанавливающие значение (repr),
    раскладка — без лишнего ".0" и с экспонентой только вне диапазона
    [plain_min_exponent, plain_max_exponent].

    Examples:
        >>> format_number(1200.0)
        '1200'
        >>> format_number(4.65)
        '4.65'
        >>> format_number(1e-7)
        '1e-7'
        >>> format_number(1e21)
        '1e+21'
        >>> format_number(float("inf"))
        'Infinity'
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    shortest = Decimal(repr(value))
    exponent = shortest.adjusted()
    digits = "".join(str(d) for d in shortest.as_tuple().digits).rstrip("0")

    plain = config.plain_min_exponent <= exponent <= config.plain_max_exponent
    return _layout(value < 0, digits, exponent, plain)


# =============================================================================
# ЗНАЧАЩИЕ ЦИФРЫ
# =============================================================================


def _significant_digits(value: float, n: int) -> Tuple[str, int]:
    """
    Ровно n значащих цифр value (half-up) и десятичная экспонента первой цифры.

    Returns:
        (цифры длины n, экспонента)
    """
    exact = Decimal(value)
    if exact.is_zero():
        return "0" * n, 0

    exponent = exact.adjusted()
    with localcontext() as ctx:
        ctx.prec = n + 2
        rounded = exact.quantize(Decimal(1).scaleb(exponent - n + 1), rounding=ROUND_HALF_UP)
        # Перенос разряда при округлении: 9.99 → 10.0
        if rounded.adjusted() > exponent:
            exponent += 1
            rounded = exact.quantize(Decimal(1).scaleb(exponent - n + 1), rounding=ROUND_HALF_UP)

    digits = "".join(str(d) for d in rounded.as_tuple().digits)
    return digits, exponent


def round_to_significant_figures(
    value: float,
    n: int,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> RoundedResult:
    """
    Округление до n значащих цифр.

    Экспоненциальная запись используется, когда экспонента первой цифры
    < plain_min_exponent или >= n (иначе завершающие нули целой части
    выглядели бы незначащими).

    Args:
        value: Значение
        n: Число значащих цифр (1..config.max_significant_figures)
        config: Конфигурация точности

    Returns:
        RoundedResult:
        - ROUNDED: text содержит ровно n значащих цифр
        - NON_FINITE: value inf/nan, text — value как есть
        - INVALID_PRECISION: n вне диапазона, text — value как есть

    Examples:
        >>> round_to_significant_figures(9.450000000000001, 2).text
        '9.5'
        >>> round_to_significant_figures(0.0, 3).text
        '0.00'
        >>> round_to_significant_figures(1234.5, 2).text
        '1.2e+3'
    """
    if not is_valid_float(value):
        logger.warning("round_to_significant_figures: non-finite value %r returned as-is", value)
        return RoundedResult(value=value, text=format_number(value, config), status=RoundingStatus.NON_FINITE)

    if n < 1 or n > config.max_significant_figures:
        logger.warning(
            "round_to_significant_figures: precision %r outside 1..%d",
            n,
            config.max_significant_figures,
        )
        return RoundedResult(
            value=value,
            text=format_number(value, config),
            status=RoundingStatus.INVALID_PRECISION,
        )

    digits, exponent = _significant_digits(value, n)
    plain = config.plain_min_exponent <= exponent < n
    # -0.0 печатается без знака
    text = _layout(value < 0, digits, exponent, plain)

    return RoundedResult(value=float(text), text=text)


def format_significant_figures(
    value: float,
    n: int,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> str:
    """Текст округления до n значащих цифр (см. round_to_significant_figures)."""
    return round_to_significant_figures(value, n, config).text


# =============================================================================
# ЗНАКИ ПОСЛЕ ТОЧКИ
# =============================================================================


def _quantize_decimal_places(value: float, dp: int) -> Decimal:
    """Точное значение value, округлённое half-up до dp >= 0 знаков."""
    exact = Decimal(value)
    with localcontext() as ctx:
        ctx.prec = max(28, max(exact.adjusted(), 0) + dp + 2)
        return exact.quantize(Decimal(1).scaleb(-dp), rounding=ROUND_HALF_UP)


def round_to_decimal_places(value: float, dp: int) -> float:
    """
    Округление до dp знаков после точки.

    Args:
        value: Значение
        dp: Знаки после точки; dp < 0 — до ближайшего кратного 10^(-dp)

    Returns:
        Округлённое значение (нефинитный value возвращается как есть)

    Examples:
        >>> round_to_decimal_places(4.65, 1)
        4.7
        >>> round_to_decimal_places(1234.5, -2)
        1200.0
    """
    if not is_valid_float(value):
        return value

    if dp >= 0:
        return float(_quantize_decimal_places(value, dp))

    # Шаг 10^(-dp) не представим во float: ближайшее кратное для любого конечного value равно 0
    if -dp > sys.float_info.max_10_exp:
        return 0.0

    return round_half_up_to_step(value, 10.0 ** (-dp))


def format_decimal_places(
    value: float,
    dp: int,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> str:
    """
    Текст округления до dp знаков после точки.

    dp >= 0 → ровно dp цифр после точки (дополняется нулями);
    dp < 0 → кратчайшая запись без принудительной дробной части.

    Examples:
        >>> format_decimal_places(2.5, 3)
        '2.500'
        >>> format_decimal_places(1234.5, -2)
        '1200'
    """
    if not is_valid_float(value):
        return format_number(value, config)

    if dp >= 0:
        return f"{_quantize_decimal_places(value, dp):f}"

    return format_number(round_to_decimal_places(value, dp), config)


def round_decimal_places(
    value: float,
    dp: int,
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> RoundedResult:
    """
    Округление до dp знаков после точки: число и текст вместе.

    Returns:
        RoundedResult со статусом ROUNDED или NON_FINITE
    """
    if not is_valid_float(value):
        logger.warning("round_decimal_places: non-finite value %r returned as-is", value)
        return RoundedResult(value=value, text=format_number(value, config), status=RoundingStatus.NON_FINITE)

    return RoundedResult(
        value=round_to_decimal_places(value, dp),
        text=format_decimal_places(value, dp, config),
    )
