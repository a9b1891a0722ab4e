"""
Тесты для модуля Significant Figures

Проверяет:
1. Таблицу сценариев подсчёта значащих цифр
2. Инвариантность к знаку, пробелам и разделителям тысяч
3. Невалидный ввод → 0 без исключений
4. Decimal places, включая отрицательные для научной записи
5. Пошаговое объяснение подсчёта
"""

import pytest

from sigfig.core.domain import CountBranch, parse_numeral
from sigfig.core.math.significant_figures import (
    count_significant_figures,
    decimal_places,
    explain_count,
)
from sigfig.core.sanitizer import sanitize

SCENARIO_TABLE = [
    ("0.004560", 4),
    ("1234", 4),
    ("0.00", 2),
    ("0", 1),
    ("100", 1),
    ("100.", 3),
    ("1.20e3", 3),
    ("1.200E-2", 4),
    (" .0050", 2),
    ("405", 3),
    ("1020", 3),
    ("1000.", 4),
    ("-0.0030", 2),
]


# =============================================================================
# ПОДСЧЁТ ЗНАЧАЩИХ ЦИФР
# =============================================================================


class TestCountSignificantFigures:
    """Тесты для count_significant_figures"""

    @pytest.mark.parametrize("raw,expected", SCENARIO_TABLE)
    def test_scenario_table(self, raw: str, expected: int) -> None:
        """Таблица сценариев"""
        assert count_significant_figures(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1.20", 3),
            ("10.05", 4),
            ("007", 1),
            ("0.0", 1),
            (".0", 1),
            ("12.", 2),
            ("6.02e23", 3),
            ("6.020E+23", 4),
            ("0e5", 1),
            ("0.00e3", 2),
        ],
    )
    def test_additional_cases(self, raw: str, expected: int) -> None:
        """Дополнительные случаи: ведущие нули, научная запись, нули с точкой"""
        assert count_significant_figures(raw) == expected

    def test_zero_with_bare_point_is_never_zero(self) -> None:
        """Валидный ноль "0." даёт 1, а не 0"""
        assert count_significant_figures("0.") == 1

    def test_exponent_never_contributes(self) -> None:
        """Экспонента не влияет на подсчёт"""
        assert count_significant_figures("4.5e1") == count_significant_figures("4.5e100")
        assert count_significant_figures("4.5e-7") == 2

    @pytest.mark.parametrize("raw,expected", SCENARIO_TABLE)
    def test_sign_invariance(self, raw: str, expected: int) -> None:
        """Ведущий знак не влияет на результат"""
        unsigned = sanitize(raw).lstrip("+-")
        assert count_significant_figures("+" + unsigned) == expected
        assert count_significant_figures("-" + unsigned) == expected

    def test_whitespace_and_thousands_separator_invariance(self) -> None:
        """Пробелы и разделители тысяч удаляются до подсчёта"""
        assert count_significant_figures("1,234") == count_significant_figures("1234")
        assert count_significant_figures("  1 234 ") == 4
        assert count_significant_figures("1,000") == 1
        assert count_significant_figures("1,000.0") == 5

    @pytest.mark.parametrize("raw", ["12", "405", "0012", "987654321", "7"])
    def test_integer_without_trailing_zeros_counts_all_digits(self, raw: str) -> None:
        """Целое без точки и завершающих нулей: длина без ведущих нулей"""
        assert count_significant_figures(raw) == len(raw.lstrip("0"))

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", None, "abc", "1.2.3", ".", "e5", "12e", "--1", "0x10", "\u0661\u0662\u0663", "1e\u0665", "\uff11\uff12"],
    )
    def test_invalid_input_returns_zero(self, raw) -> None:
        """Невалидный ввод → 0 без исключений (цифры только ASCII 0-9)"""
        assert count_significant_figures(raw) == 0

    def test_deterministic(self) -> None:
        """Повторные вызовы дают одинаковый результат"""
        results = {count_significant_figures("0.004560") for _ in range(50)}
        assert results == {4}


# =============================================================================
# DECIMAL PLACES
# =============================================================================


class TestDecimalPlaces:
    """Тесты для decimal_places"""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("3.450", 3),
            ("100", 0),
            ("100.", 0),
            ("-0.0030", 4),
            (".5", 1),
            ("1,234.56", 2),
        ],
    )
    def test_plain_decimal(self, raw: str, expected: int) -> None:
        """Обычная запись: цифры после точки"""
        assert decimal_places(raw) == expected

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("1.2e3", -2),
            ("1.5e-3", 4),
            ("1.20E+1", 1),
            ("5e2", -2),
            ("2.50e0", 2),
        ],
    )
    def test_scientific_notation(self, raw: str, expected: int) -> None:
        """Научная запись: after - exponent (может быть отрицательным)"""
        assert decimal_places(raw) == expected

    @pytest.mark.parametrize("raw", ["3.450", "100", "7", "0.0030", "12."])
    def test_non_negative_without_exponent(self, raw: str) -> None:
        """Без экспоненты результат всегда >= 0"""
        assert decimal_places(raw) >= 0

    @pytest.mark.parametrize("raw", ["1.2345e2", "1.5e-3", "1.20e1", "4.5e0", "3.0e-1"])
    def test_matches_expanded_form(self, raw: str) -> None:
        """decimal_places(x) == decimal_places(expand(x))

        Только входы с decimal_places >= 0: обычная запись не выражает
        отрицательное число знаков, поэтому для "1.2e3" (-2) свойство не выполняется.
        """
        expanded = parse_numeral(raw).expand().to_text()
        assert decimal_places(raw) == decimal_places(expanded)

    @pytest.mark.parametrize("raw", ["", "   ", None, "abc", "1.2.3", "\u0661.\u0665"])
    def test_unparseable_returns_none(self, raw) -> None:
        """Не число → None"""
        assert decimal_places(raw) is None


# =============================================================================
# EXPLAIN COUNT
# =============================================================================


class TestExplainCount:
    """Тесты для explain_count"""

    @pytest.mark.parametrize("raw,expected", SCENARIO_TABLE)
    def test_count_matches_counter(self, raw: str, expected: int) -> None:
        """Объяснение согласовано с count_significant_figures"""
        assert explain_count(raw).count == expected

    def test_scientific_branch(self) -> None:
        """Научная запись: мантисса и экспонента в объяснении"""
        explanation = explain_count("1.20e3")
        assert explanation.branch == CountBranch.SCIENTIFIC
        assert explanation.coefficient == "1.20"
        assert explanation.exponent == 3
        assert explanation.counted_digits == "120"
        assert "Detected scientific notation." in explanation.steps
        assert explanation.steps[-1] == "Result: 3 significant figure(s)."

    def test_decimal_branch(self) -> None:
        """Ведущие нули дробной части не считаются"""
        explanation = explain_count("0.004560")
        assert explanation.branch == CountBranch.DECIMAL
        assert explanation.integer_part == "0"
        assert explanation.fraction_part == "004560"
        assert explanation.counted_digits == "4560"

    def test_zero_with_decimal_branch(self) -> None:
        explanation = explain_count("0.00")
        assert explanation.branch == CountBranch.ZERO_WITH_DECIMAL
        assert explanation.count == 2

    def test_integer_branches(self) -> None:
        """Ветки целых чисел без точки"""
        assert explain_count("0").branch == CountBranch.ZERO_INTEGER
        assert explain_count("405").branch == CountBranch.INTEGER

        trailing = explain_count("1000")
        assert trailing.branch == CountBranch.INTEGER_TRAILING_ZEROS
        assert trailing.counted_digits == "1"
        assert any('"1000."' in step for step in trailing.steps)

    def test_normalized_strips_sign(self) -> None:
        explanation = explain_count(" -0.0030 ")
        assert explanation.input == " -0.0030 "
        assert explanation.normalized == "0.0030"

    def test_invalid_input(self) -> None:
        """Невалидный ввод → INVALID, count 0, одна строка"""
        explanation = explain_count("xyz")
        assert explanation.branch == CountBranch.INVALID
        assert explanation.count == 0
        assert explanation.steps == ["Invalid input."]
