"""Expression Evaluator — tokenize → shunting-yard → RPN → число.

- tokenizer: фильтр символов и лексический разбор
- parser: shunting-yard, префиксный минус → NEG
- evaluator: стековое вычисление RPN, evaluate_expression
- errors: иерархия ExpressionError
"""

from .errors import (
    EmptyExpressionError,
    ExpressionError,
    InvalidExpressionError,
    MismatchedParenthesesError,
    UnknownOperatorError,
)
from .evaluator import evaluate_expression, evaluate_rpn
from .parser import to_rpn
from .tokenizer import NEG, Token, TokenKind, filter_expression, tokenize

__all__ = [
    "EmptyExpressionError",
    "ExpressionError",
    "InvalidExpressionError",
    "MismatchedParenthesesError",
    "UnknownOperatorError",
    "evaluate_expression",
    "evaluate_rpn",
    "to_rpn",
    "NEG",
    "Token",
    "TokenKind",
    "filter_expression",
    "tokenize",
]
