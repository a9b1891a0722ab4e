"""
Core math modules для sigfig

Подсчёт значащих цифр, округление и численные примитивы с детерминированным
поведением на границах (inf/nan, деление на ноль).
"""

# Numerical Safeguards
from sigfig.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_power,
    is_valid_float,
    round_half_up_to_step,
    validate_finite,
)

# Significant Figures
from sigfig.core.math.significant_figures import (
    count_significant_figures,
    decimal_places,
    explain_count,
)

# Rounding
from sigfig.core.math.rounding import (
    format_decimal_places,
    format_number,
    format_significant_figures,
    round_decimal_places,
    round_to_decimal_places,
    round_to_significant_figures,
)

__all__ = [
    # Numerical Safeguards
    "ieee_divide",
    "ieee_power",
    "is_valid_float",
    "round_half_up_to_step",
    "validate_finite",
    # Significant Figures
    "count_significant_figures",
    "decimal_places",
    "explain_count",
    # Rounding
    "format_decimal_places",
    "format_number",
    "format_significant_figures",
    "round_decimal_places",
    "round_to_decimal_places",
    "round_to_significant_figures",
]
