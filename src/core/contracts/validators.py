"""
JSON Schema Contract Validators

Модуль для валидации данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- polynomial_input.json (входная строка полинома)
- factoring_result.json (сериализованный результат факторизации)
"""

import json
from importlib import resources
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в src/core/contracts/schema/ (package data) и читаются
    через importlib.resources.
    """

    def __init__(self):
        self._schema_dir = resources.files(__package__).joinpath("schema")
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'polynomial_input')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir.joinpath(f"{schema_name}.json")
        if not schema_path.is_file():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        schema = json.loads(schema_path.read_text(encoding="utf-8"))

        # Meta-validation самой схемы
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

    def validate(self, data: Any) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Any):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class PolynomialInputValidator(ContractValidator):
    """Валидатор входной строки полинома (длина и набор символов)."""

    def __init__(self):
        super().__init__("polynomial_input")


class FactoringResultValidator(ContractValidator):
    """Валидатор сериализованного FactoringResult."""

    def __init__(self):
        super().__init__("factoring_result")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_polynomial_input(data: str) -> None:
    """
    Валидация входной строки полинома.

    Raises:
        ValidationError: Если строка не соответствует схеме
    """
    PolynomialInputValidator().validate(data)


def validate_factoring_result(data: Dict[str, Any]) -> None:
    """
    Валидация результата факторизации.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    FactoringResultValidator().validate(data)
