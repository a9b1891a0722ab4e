"""
PrecisionConfig — параметры форматирования и округления

Единственный источник констант, влияющих на текстовое представление чисел:
- допустимый диапазон точности для округления до значащих цифр
- границы экспоненты, внутри которых число пишется в обычной (plain) записи

Конфигурация immutable; функции принимают её явным аргументом.
"""

from dataclasses import dataclass
from typing import Final


# =============================================================================
# ГРАНИЦЫ (значения по умолчанию)
# =============================================================================

# Максимальная точность (число значащих цифр), как у классического toPrecision
MAX_SIGNIFICANT_FIGURES: Final[int] = 100

# Десятичные экспоненты в [PLAIN_MIN_EXPONENT, PLAIN_MAX_EXPONENT] пишутся без "e"
PLAIN_MIN_EXPONENT: Final[int] = -6
PLAIN_MAX_EXPONENT: Final[int] = 20


@dataclass(frozen=True)
class PrecisionConfig:
    """Конфигурация точности и раскладки чисел.

    - max_significant_figures: верхняя граница n для round_to_significant_figures
    - plain_min_exponent: экспонента ниже этой → экспоненциальная запись
    - plain_max_exponent: экспонента выше этой → экспоненциальная запись
      (только format_number; округление до n значащих цифр переключается
      на экспоненту при exponent >= n)
    """

    max_significant_figures: int = MAX_SIGNIFICANT_FIGURES
    plain_min_exponent: int = PLAIN_MIN_EXPONENT
    plain_max_exponent: int = PLAIN_MAX_EXPONENT

    def __post_init__(self) -> None:
        if self.max_significant_figures < 1:
            raise ValueError(
                f"max_significant_figures must be >= 1, got {self.max_significant_figures}"
            )
        if self.plain_min_exponent > 0:
            raise ValueError(
                f"plain_min_exponent must be <= 0, got {self.plain_min_exponent}"
            )
        if self.plain_max_exponent < 0:
            raise ValueError(
                f"plain_max_exponent must be >= 0, got {self.plain_max_exponent}"
            )


# Глобальный экземпляр по умолчанию (не мутируется)
DEFAULT_CONFIG: Final[PrecisionConfig] = PrecisionConfig()
