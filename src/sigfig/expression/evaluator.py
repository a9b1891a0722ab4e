"""
Evaluator — вычисление RPN программы и публичная точка evaluate_expression

Пайплайн: filter → tokenize → to_rpn (shunting-yard) → evaluate_rpn.

Защиты от деления на ноль здесь нет: a/0 и переполнение степени дают
inf/-inf/nan (IEEE-754). Вызывающий обязан проверить конечность результата
(is_valid_float) перед использованием.
"""

import logging
from typing import Callable, Dict, Final, List, Sequence

from sigfig.core.math.numerical_safeguards import ieee_divide, ieee_power
from sigfig.expression.errors import (
    EmptyExpressionError,
    InvalidExpressionError,
    UnknownOperatorError,
)
from sigfig.expression.parser import to_rpn
from sigfig.expression.tokenizer import NEG, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)


BINARY_OPERATIONS: Final[Dict[str, Callable[[float, float], float]]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": ieee_divide,
    "^": ieee_power,
}


def evaluate_rpn(program: Sequence[Token]) -> float:
    """
    Вычисление постфиксной программы на стеке значений.

    Для бинарного оператора второй снятый со стека операнд — левый.

    Args:
        program: Токены в RPN порядке

    Returns:
        Единственное значение, оставшееся на стеке

    Raises:
        InvalidExpressionError: Не хватает операндов или на стеке != 1 значения
        UnknownOperatorError: Токен вне словаря evaluator'а
    """
    stack: List[float] = []

    for token in program:
        if token.kind == TokenKind.NUMBER:
            stack.append(float(token.text))
            continue

        if token == NEG:
            if not stack:
                raise InvalidExpressionError("Invalid expression: missing operand for unary '-'")
            stack.append(-stack.pop())
            continue

        operation = BINARY_OPERATIONS.get(token.text) if token.kind == TokenKind.OPERATOR else None
        if operation is None:
            raise UnknownOperatorError(token.text)

        if len(stack) < 2:
            raise InvalidExpressionError(f"Invalid expression: missing operand for '{token.text}'")

        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))

    if len(stack) != 1:
        raise InvalidExpressionError()

    return stack[0]


def evaluate_expression(expr: str) -> float:
    """
    Вычисление арифметического выражения, набранного пользователем.

    Грамматика: числа (включая научную запись), + - * / ^, скобки,
    префиксный знак. Посторонние символы отбрасываются.

    Args:
        expr: Текст выражения

    Returns:
        Результат (может быть inf/nan — проверка на стороне вызывающего)

    Raises:
        EmptyExpressionError: Нет ни одного токена
        MismatchedParenthesesError: Непарные скобки
        InvalidExpressionError: Структурно некорректное выражение
        UnknownOperatorError: Неизвестный оператор

    Examples:
        >>> evaluate_expression("2+3*4")
        14.0
        >>> evaluate_expression("2^3^2")
        512.0
    """
    tokens = tokenize(expr)
    if not tokens:
        raise EmptyExpressionError()

    logger.debug("tokens: %s", " ".join(t.text for t in tokens))
    result = evaluate_rpn(to_rpn(tokens))
    logger.debug("evaluate_expression(%r) = %r", expr, result)
    return result
