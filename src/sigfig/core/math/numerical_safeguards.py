"""
Numerical Safeguards — численные примитивы движка

Модуль фиксирует поведение float-операций на границах области определения:
- Проверка конечности (NaN/Inf никогда не маскируются, только детектируются)
- Деление и возведение в степень по IEEE-754: вместо исключений Python
  (ZeroDivisionError, OverflowError, complex-результат) возвращаются inf/-inf/nan
- Округление к ближайшему кратному шага (half-up, к +inf на половине)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Арифметика никогда не бросает исключений: результат всегда float
2. Нефинитный результат возвращается как есть — проверка на стороне вызывающего
3. Все операции детерминированы и воспроизводимы
"""

import math


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что значение конечное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")


# =============================================================================
# IEEE-754 АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    if denominator == 0.0:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        # Знак нуля в знаменателе учитывается (-0.0)
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == math.floor(value) and math.fmod(value, 2.0) != 0.0


def ieee_power(base: float, exponent: float) -> float:
    """
    Возведение в степень с семантикой IEEE-754 (pow).

    - переполнение → ±inf (знак по нечётности целой степени)
    - 0 в отрицательной степени → ±inf
    - отрицательное основание в дробной степени → nan
    - nan в показателе и ±1 в степени ±inf → nan (math.pow даёт 1.0)

    Examples:
        >>> ieee_power(2.0, 10.0)
        1024.0
        >>> ieee_power(0.0, -1.0)
        inf
        >>> ieee_power(-8.0, 1.0 / 3.0)
        nan
    """
    if math.isnan(exponent) or (math.isinf(exponent) and abs(base) == 1.0):
        return math.nan

    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # math.pow: domain error (0 ** отрицательная, отрицательное ** дробная)
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_up_to_step(value: float, step: float) -> float:
    """
    Округление значения до ближайшего кратного step.

    На половине шага округляет в сторону +inf (floor(ratio + 0.5)):
    125 → 130 при шаге 10, -125 → -120 при шаге 10.

    Args:
        value: Значение для округления
        step: Шаг квантования (> 0)

    Returns:
        Округлённое значение (нефинитный value возвращается как есть)

    Raises:
        ValueError: Если step <= 0

    Examples:
        >>> round_half_up_to_step(1234.5, 100.0)
        1200.0
        >>> round_half_up_to_step(125.0, 10.0)
        130.0
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")

    if not is_valid_float(value):
        return value

    steps = math.floor(value / step + 0.5)
    return steps * step
