"""Input Gate: допуск строки полинома к разбору

Проверяет входную строку до вызова парсера, в фиксированном порядке:
1. ASCII
2. Длина <= 100 символов
3. Только символы {0-9, +, -, ^, ., x, пробел, табуляция}

Проверки 2-3 выполняются контрактом polynomial_input.json (jsonschema).
Парсер полагается на эти инварианты и не перепроверяет их.
"""

import logging
from dataclasses import dataclass
from typing import Final

from src.core.contracts import PolynomialInputValidator

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_POLYNOMIAL_LENGTH: Final[int] = 100

ALLOWED_CHARACTERS: Final[frozenset[str]] = frozenset("0123456789+-^.x \t")

# block_reason → сообщение для пользователя
BLOCK_MESSAGES: Final[dict[str, str]] = {
    "polynomial_not_ascii": "Polynomial not ASCII.",
    "polynomial_too_long": "Polynomial too long.",
    "polynomial_unsupported_characters": (
        "Polynomial has unsupported characters or is not basic."
    ),
}

# Ключевое слово jsonschema → block_reason, в порядке приоритета
_SCHEMA_BLOCK_REASONS: Final[tuple[tuple[str, str], ...]] = (
    ("maxLength", "polynomial_too_long"),
    ("not", "polynomial_unsupported_characters"),
)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class InputGateResult:
    """Результат Input Gate."""

    accepted: bool
    block_reason: str

    # Детали
    details: str


# =============================================================================
# INPUT GATE
# =============================================================================


class InputGate:
    """Input Gate: валидация строки полинома.

    Порядок проверок:
    1. ASCII (до схемы: JSON Schema считает code points, а не байты)
    2. Контракт polynomial_input (maxLength, затем запрещённые символы)
    """

    def __init__(self, validator: PolynomialInputValidator | None = None):
        self._validator = validator or PolynomialInputValidator()

    def evaluate(self, polynomial_str: str) -> InputGateResult:
        """Оценка входной строки.

        Args:
            polynomial_str: Строка полинома как её ввёл пользователь

        Returns:
            InputGateResult с решением о допуске
        """
        if not polynomial_str.isascii():
            return self._block("polynomial_not_ascii")

        failed_keywords = {error.validator for error in self._validator.iter_errors(polynomial_str)}
        for keyword, block_reason in _SCHEMA_BLOCK_REASONS:
            if keyword in failed_keywords:
                return self._block(block_reason)

        return InputGateResult(
            accepted=True,
            block_reason="",
            details="PASS",
        )

    @staticmethod
    def _block(block_reason: str) -> InputGateResult:
        logger.debug("Polynomial rejected: %s", block_reason)
        return InputGateResult(
            accepted=False,
            block_reason=block_reason,
            details=BLOCK_MESSAGES[block_reason],
        )
