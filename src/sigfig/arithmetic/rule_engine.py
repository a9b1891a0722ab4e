"""
Arithmetic Rule Engine — операция над двумя измерениями с распространением точности

Правила:
- Сложение / вычитание: результат округляется до МИНИМАЛЬНОГО числа знаков
  после точки среди операндов (decimal-place rule)
- Умножение / деление: результат округляется до МИНИМАЛЬНОГО числа значащих
  цифр среди операндов (sig-fig rule)

Арифметика выполняется во float; округляется только итог.
Неокруглённое значение возвращается рядом с округлённым.
"""

import logging
from typing import Dict, Final, List, Union

from sigfig.config import DEFAULT_CONFIG, PrecisionConfig
from sigfig.core.domain.results import CombineResult, Operation, PropagationRule, RoundedResult
from sigfig.core.math.numerical_safeguards import ieee_divide
from sigfig.core.math.rounding import (
    format_number,
    round_decimal_places,
    round_to_significant_figures,
)
from sigfig.core.math.significant_figures import count_significant_figures, decimal_places
from sigfig.core.sanitizer import parse_number
from sigfig.expression.errors import UnknownOperatorError

logger = logging.getLogger(__name__)


class InvalidOperandError(ValueError):
    """Операнд не является корректной конечной числовой строкой."""

    def __init__(self, name: str, raw: object):
        self.name = name
        self.raw = raw
        super().__init__(f"Operand {name} is not a valid number: {raw!r}")


OPERATION_ALIASES: Final[Dict[str, Operation]] = {
    "+": Operation.ADD,
    "add": Operation.ADD,
    "-": Operation.SUB,
    "−": Operation.SUB,  # знак минус
    "sub": Operation.SUB,
    "*": Operation.MUL,
    "×": Operation.MUL,
    "mul": Operation.MUL,
    "/": Operation.DIV,
    "÷": Operation.DIV,
    "div": Operation.DIV,
}


def resolve_operation(op: Union[str, Operation]) -> Operation:
    """
    Нормализация обозначения операции.

    Raises:
        UnknownOperatorError: Обозначение не распознано
    """
    if isinstance(op, Operation):
        return op
    operation = OPERATION_ALIASES.get(str(op).strip().lower())
    if operation is None:
        raise UnknownOperatorError(str(op))
    return operation


def _apply(operation: Operation, a: float, b: float) -> float:
    if operation == Operation.ADD:
        return a + b
    if operation == Operation.SUB:
        return a - b
    if operation == Operation.MUL:
        return a * b
    return ieee_divide(a, b)


def combine(
    a: str,
    b: str,
    op: Union[str, Operation],
    config: PrecisionConfig = DEFAULT_CONFIG,
) -> CombineResult:
    """
    Операция над двумя числовыми строками с округлением по правилу точности.

    Args:
        a: Левый операнд (сырой текст)
        b: Правый операнд (сырой текст)
        op: "+", "-", "*", "/" (или Operation, или алиасы add/sub/mul/div, ×, ÷)
        config: Конфигурация точности

    Returns:
        CombineResult с rounded (текст) и unrounded (float)

    Raises:
        InvalidOperandError: Операнд не является корректным конечным числом
        UnknownOperatorError: Операция не распознана

    Examples:
        >>> combine("1.2", "3.45", "+").rounded
        '4.7'
        >>> combine("4.5", "2.10", "*").rounded
        '9.5'
    """
    operation = resolve_operation(op)

    a_value = parse_number(a)
    if a_value is None:
        raise InvalidOperandError("A", a)
    b_value = parse_number(b)
    if b_value is None:
        raise InvalidOperandError("B", b)

    sig_figs_a = count_significant_figures(a)
    sig_figs_b = count_significant_figures(b)
    # Для валидных операндов decimal_places никогда не None
    decimal_places_a = decimal_places(a)
    decimal_places_b = decimal_places(b)

    unrounded = _apply(operation, a_value, b_value)

    steps: List[str] = []
    rounded: RoundedResult
    if operation.is_additive:
        rule = PropagationRule.DECIMAL_PLACES
        target = min(decimal_places_a, decimal_places_b)
        rounded = round_decimal_places(unrounded, target, config)
        steps.append(
            f"A = {a} (decimal places: {decimal_places_a}), "
            f"B = {b} (decimal places: {decimal_places_b})."
        )
        steps.append(f"Unrounded result: {format_number(unrounded, config)}.")
        steps.append(
            f"Least decimal places among operands = {target}. "
            f"Round unrounded result to {target} decimal place(s)."
        )
    else:
        rule = PropagationRule.SIGNIFICANT_FIGURES
        target = min(sig_figs_a, sig_figs_b)
        rounded = round_to_significant_figures(unrounded, target, config)
        steps.append(f"A = {a} ({sig_figs_a} sig fig(s)), B = {b} ({sig_figs_b} sig fig(s)).")
        steps.append(f"Unrounded result: {format_number(unrounded, config)}.")
        steps.append(
            f"Least sig figs among operands = {target}. "
            f"Round result to {target} significant figure(s)."
        )
    steps.append(f"Final (rounded): {rounded.text}.")

    logger.debug(
        "combine(%r %s %r): rule=%s target=%d unrounded=%r rounded=%s",
        a,
        operation.value,
        b,
        rule.value,
        target,
        unrounded,
        rounded.text,
    )

    return CombineResult(
        a=str(a),
        b=str(b),
        operation=operation,
        rule=rule,
        unrounded=unrounded,
        rounded=rounded.text,
        rounded_value=rounded.value,
        status=rounded.status,
        target=target,
        sig_figs_a=sig_figs_a,
        sig_figs_b=sig_figs_b,
        decimal_places_a=decimal_places_a,
        decimal_places_b=decimal_places_b,
        steps=steps,
    )
