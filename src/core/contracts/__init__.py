"""
Contract Validation Module

Модуль для валидации JSON контрактов: входная строка полинома
и сериализованный результат факторизации.
"""

from .validators import (
    ContractValidator,
    FactoringResultValidator,
    PolynomialInputValidator,
    SchemaLoader,
    validate_factoring_result,
    validate_polynomial_input,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PolynomialInputValidator",
    "FactoringResultValidator",
    # Functions
    "validate_polynomial_input",
    "validate_factoring_result",
]
