"""
Parser — shunting-yard: инфиксные токены → RPN программа

Приоритеты:
- "+", "-"       : 1 (левоассоциативные)
- "*", "/"       : 2 (левоассоциативные)
- "^"            : 3 (правоассоциативный)
- префиксный "-" : 3 (правоассоциативный, опкод NEG)

Префиксная позиция: начало выражения, после "(" и после другого оператора.
Префиксный "-" превращается в NEG, префиксный "+" отбрасывается.
Так "-2^2" = -(2^2) = -4, "2^-2" = 0.25, "-(2+3)" = -5, "2*-3" = -6.

Оператор со стека выталкивается в выход, пока у вершины строго больший
приоритет, либо равный и текущий оператор левоассоциативен.
"""

import logging
from typing import Dict, Final, FrozenSet, List, Sequence, Tuple

from sigfig.expression.errors import MismatchedParenthesesError
from sigfig.expression.tokenizer import NEG, Token, TokenKind

logger = logging.getLogger(__name__)


PRECEDENCE: Final[Dict[str, int]] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "^": 3,
    NEG.text: 3,
}

RIGHT_ASSOCIATIVE: Final[FrozenSet[str]] = frozenset({"^", NEG.text})

RPNProgram = Tuple[Token, ...]


def _should_pop(top: Token, incoming: Token) -> bool:
    if top.kind not in (TokenKind.OPERATOR, TokenKind.UNARY_OPERATOR):
        return False
    top_precedence = PRECEDENCE[top.text]
    incoming_precedence = PRECEDENCE[incoming.text]
    if top_precedence > incoming_precedence:
        return True
    return top_precedence == incoming_precedence and incoming.text not in RIGHT_ASSOCIATIVE


def to_rpn(tokens: Sequence[Token]) -> RPNProgram:
    """
    Преобразование инфиксной последовательности токенов в RPN.

    Args:
        tokens: Токены из tokenize()

    Returns:
        Кортеж токенов в постфиксном порядке (без скобок)

    Raises:
        MismatchedParenthesesError: ")" без открывающей или "(" без закрывающей

    Examples:
        >>> [t.text for t in to_rpn(tokenize("2+3*4"))]
        ['2', '3', '4', '*', '+']
        >>> [t.text for t in to_rpn(tokenize("-(2+3)"))]
        ['2', '3', '+', 'neg']
    """
    output: List[Token] = []
    stack: List[Token] = []
    expect_operand = True

    for token in tokens:
        if token.kind == TokenKind.NUMBER:
            output.append(token)
            expect_operand = False

        elif token.kind == TokenKind.OPERATOR:
            if expect_operand and token.text in ("+", "-"):
                # Префиксный знак: операнда слева нет, со стека ничего не выталкиваем
                if token.text == "-":
                    stack.append(NEG)
                continue

            while stack and _should_pop(stack[-1], token):
                output.append(stack.pop())
            stack.append(token)
            expect_operand = True

        elif token.kind == TokenKind.LEFT_PAREN:
            stack.append(token)
            expect_operand = True

        elif token.kind == TokenKind.RIGHT_PAREN:
            while stack and stack[-1].kind != TokenKind.LEFT_PAREN:
                output.append(stack.pop())
            if not stack:
                raise MismatchedParenthesesError("Mismatched parentheses: unexpected ')'")
            stack.pop()
            expect_operand = False

    while stack:
        token = stack.pop()
        if token.kind in (TokenKind.LEFT_PAREN, TokenKind.RIGHT_PAREN):
            raise MismatchedParenthesesError("Mismatched parentheses: unclosed '('")
        output.append(token)

    program = tuple(output)
    logger.debug("RPN program: %s", " ".join(t.text for t in program))
    return program
