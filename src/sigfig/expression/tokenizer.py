"""
Tokenizer — лексический разбор арифметического выражения

Шаги:
1. Фильтр: удаляются все символы вне множества 0-9 e E + - * / ^ ( ) . и пробелов
2. Сканирование слева направо: жадный числовой литерал
   (digits[.digits][exponent] | .digits[exponent]) либо односимвольный
   оператор/скобка. Нераспознанные фрагменты молча пропускаются.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final, List


# =============================================================================
# ГРАММАТИКА
# =============================================================================

_DISALLOWED_CHARS_RE: Final = re.compile(r"[^0-9eE+\-*/^().\s]")

_TOKEN_RE: Final = re.compile(
    r"(?P<number>(?:[0-9]+(?:\.[0-9]+)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
    r"|(?P<operator>[-+*/^])"
    r"|(?P<left_paren>\()"
    r"|(?P<right_paren>\))"
)


# =============================================================================
# ТИПЫ
# =============================================================================


class TokenKind(str, Enum):
    """Вид лексической единицы"""

    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"  # бинарный + - * / ^
    UNARY_OPERATOR = "UNARY_OPERATOR"  # префиксный минус (производит только parser)
    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"


@dataclass(frozen=True)
class Token:
    """Лексическая единица выражения."""

    kind: TokenKind
    text: str

    @property
    def is_number(self) -> bool:
        return self.kind == TokenKind.NUMBER

    def __str__(self) -> str:
        return self.text


# Префиксный минус: в исходном тексте не встречается, его выдаёт parser
NEG: Final[Token] = Token(TokenKind.UNARY_OPERATOR, "neg")


# =============================================================================
# PUBLIC API
# =============================================================================


def filter_expression(expr: str) -> str:
    """Удаление символов вне разрешённого множества."""
    return _DISALLOWED_CHARS_RE.sub("", str(expr))


def tokenize(expr: str) -> List[Token]:
    """
    Разбиение выражения на токены.

    Args:
        expr: Сырой текст выражения

    Returns:
        Список токенов (может быть пустым)

    Examples:
        >>> [t.text for t in tokenize("2.5e3*(x+.5)")]
        ['2.5e3', '*', '(', '+', '.5', ')']
    """
    tokens: List[Token] = []
    for match in _TOKEN_RE.finditer(filter_expression(expr)):
        kind = TokenKind(match.lastgroup.upper())
        tokens.append(Token(kind, match.group()))
    return tokens
