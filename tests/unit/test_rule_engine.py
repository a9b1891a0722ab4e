"""Unit тесты для Arithmetic Rule Engine.

Coverage:
- Сложение/вычитание: правило минимального числа знаков после точки
- Умножение/деление: правило минимального числа значащих цифр
- Неокруглённое значение рядом с округлённым
- Алиасы операций
- Невалидные операнды и операции
- Нефинитный результат (деление на ноль)
"""

import math

import pytest

from sigfig.arithmetic import InvalidOperandError, combine, resolve_operation
from sigfig.core.domain import Operation, PropagationRule, RoundingStatus
from sigfig.expression import UnknownOperatorError


# =============================================================================
# ADDITION / SUBTRACTION
# =============================================================================


class TestDecimalPlaceRule:
    """Сложение и вычитание"""

    def test_addition_rounds_to_least_decimal_places(self) -> None:
        """1.2 + 3.45 → 1 знак после точки → 4.7"""
        result = combine("1.2", "3.45", "+")
        assert result.rounded == "4.7"
        assert result.rule == PropagationRule.DECIMAL_PLACES
        assert result.target == 1
        assert result.decimal_places_a == 1
        assert result.decimal_places_b == 2
        assert result.unrounded == pytest.approx(4.65)
        assert result.rounded_value == 4.7

    def test_subtraction(self) -> None:
        result = combine("12.11", "0.3", "-")
        assert result.rounded == "11.8"
        assert result.operation == Operation.SUB

    def test_integer_operand_gives_zero_places(self) -> None:
        result = combine("100", "0.456", "+")
        assert result.target == 0
        assert result.rounded == "100"

    def test_trailing_zeros_preserved(self) -> None:
        result = combine("1.50", "2.50", "+")
        assert result.rounded == "4.00"

    def test_negative_target_from_scientific_notation(self) -> None:
        """1.2e3 несёт -2 знака → округление до сотен"""
        result = combine("1.2e3", "45.6", "+")
        assert result.target == -2
        assert result.rounded == "1200"
        assert result.unrounded == pytest.approx(1245.6)

    def test_target_beyond_float_range_rounds_to_zero(self) -> None:
        """0e400 несёт -400 знаков: шаг 10^400 не представим во float"""
        result = combine("0e400", "1", "+")
        assert result.target == -400
        assert result.unrounded == 1.0
        assert result.rounded == "0"
        assert result.rounded_value == 0.0
        assert result.status == RoundingStatus.ROUNDED


# =============================================================================
# MULTIPLICATION / DIVISION
# =============================================================================


class TestSignificantFigureRule:
    """Умножение и деление"""

    def test_multiplication_rounds_to_least_sig_figs(self) -> None:
        """4.5 × 2.10 → 2 значащие цифры → 9.5"""
        result = combine("4.5", "2.10", "*")
        assert result.rounded == "9.5"
        assert result.rule == PropagationRule.SIGNIFICANT_FIGURES
        assert result.sig_figs_a == 2
        assert result.sig_figs_b == 3
        assert result.target == 2
        assert result.unrounded == pytest.approx(9.45)

    def test_division(self) -> None:
        assert combine("10.0", "3", "/").rounded == "3"
        assert combine("6.0", "3.00", "/").rounded == "2.0"

    def test_exponential_result(self) -> None:
        result = combine("1,200", "3", "*")
        assert result.unrounded == 3600.0
        assert result.rounded == "4e+3"

    def test_division_by_zero_is_non_finite(self) -> None:
        result = combine("1", "0", "/")
        assert result.unrounded == math.inf
        assert result.status == RoundingStatus.NON_FINITE
        assert result.rounded == "Infinity"


# =============================================================================
# OPERATIONS & ERRORS
# =============================================================================


class TestOperations:
    """Обозначения операций"""

    @pytest.mark.parametrize(
        "op,expected",
        [
            ("+", Operation.ADD),
            ("add", Operation.ADD),
            ("sub", Operation.SUB),
            ("−", Operation.SUB),
            ("×", Operation.MUL),
            ("MUL", Operation.MUL),
            ("÷", Operation.DIV),
            (Operation.DIV, Operation.DIV),
        ],
    )
    def test_resolve_operation(self, op, expected: Operation) -> None:
        assert resolve_operation(op) == expected

    def test_unknown_operation(self) -> None:
        with pytest.raises(UnknownOperatorError, match="Unknown operator"):
            combine("1", "2", "%")

    def test_enum_operation_accepted(self) -> None:
        assert combine("4.5", "2.10", Operation.MUL).rounded == "9.5"


class TestInvalidOperands:
    """Невалидные операнды"""

    def test_invalid_left_operand(self) -> None:
        with pytest.raises(InvalidOperandError, match="Operand A"):
            combine("abc", "1", "+")

    def test_invalid_right_operand(self) -> None:
        with pytest.raises(InvalidOperandError, match="Operand B"):
            combine("1", "", "*")

    def test_overflowing_operand_is_invalid(self) -> None:
        with pytest.raises(InvalidOperandError):
            combine("1e999", "1", "+")

    def test_non_ascii_digits_are_invalid(self) -> None:
        with pytest.raises(InvalidOperandError, match="Operand A"):
            combine("\u0661\u0662\u0663", "1", "+")


# =============================================================================
# SHOW WORK
# =============================================================================


class TestSteps:
    """Пошаговое объяснение"""

    def test_additive_steps(self) -> None:
        steps = combine("1.2", "3.45", "+").steps
        assert steps[0] == "A = 1.2 (decimal places: 1), B = 3.45 (decimal places: 2)."
        assert steps[-1] == "Final (rounded): 4.7."

    def test_multiplicative_steps(self) -> None:
        steps = combine("4.5", "2.10", "*").steps
        assert steps[0] == "A = 4.5 (2 sig fig(s)), B = 2.10 (3 sig fig(s))."
        assert "Least sig figs among operands = 2." in steps[2]
