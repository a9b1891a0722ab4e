"""
Ошибки Expression Evaluator.

Evaluator — единственный компонент движка, бросающий исключения:
у некорректного выражения нет осмысленного числового значения по умолчанию.
Сообщения непустые и различимые — UI показывает их пользователю как есть.
"""


class ExpressionError(ValueError):
    """Базовая ошибка разбора/вычисления выражения."""

    pass


class EmptyExpressionError(ExpressionError):
    """В выражении не найдено ни одного токена."""

    def __init__(self, message: str = "Empty expression"):
        super().__init__(message)


class MismatchedParenthesesError(ExpressionError):
    """Непарная скобка: ")" без "(" или "(" без ")"."""

    def __init__(self, message: str = "Mismatched parentheses"):
        super().__init__(message)


class InvalidExpressionError(ExpressionError):
    """
    Нарушение стековой дисциплины RPN.

    Не хватает операндов для оператора, или после вычисления на стеке
    осталось не ровно одно значение.
    """

    def __init__(self, message: str = "Invalid expression"):
        super().__init__(message)


class UnknownOperatorError(ExpressionError):
    """Токен-оператор вне словаря evaluator'а."""

    def __init__(self, operator: str):
        self.operator = operator
        super().__init__(f"Unknown operator {operator!r}")
