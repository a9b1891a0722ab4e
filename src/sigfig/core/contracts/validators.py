"""
JSON Schema Contract Validators

Модуль для валидации JSON-payload'ов, которые движок отдаёт внешним
потребителям (UI, история вычислений). Использует библиотеку jsonschema.

Схемы (sigfig/core/contracts/schema/):
- combine_result.json — CombineResult.to_payload()
- count_result.json — CountExplanation.to_payload()
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path = Path(__file__).parent / "schema"):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'combine_result')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class CombineResultValidator(ContractValidator):
    """Валидатор для combine_result контракта."""

    def __init__(self):
        super().__init__("combine_result")


class CountResultValidator(ContractValidator):
    """Валидатор для count_result контракта."""

    def __init__(self):
        super().__init__("count_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_combine_result(data: Dict[str, Any]) -> None:
    """
    Валидация payload'а результата combine.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    CombineResultValidator().validate(data)


def validate_count_result(data: Dict[str, Any]) -> None:
    """
    Валидация payload'а объяснения подсчёта значащих цифр.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют схеме
    """
    CountResultValidator().validate(data)
