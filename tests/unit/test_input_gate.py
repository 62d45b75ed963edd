"""Тесты для Input Gate

Покрытие:
- Допуск корректных строк
- ASCII / длина / набор символов
- Приоритет проверок
"""

import pytest

from src.factoring.input_gate import (
    ALLOWED_CHARACTERS,
    BLOCK_MESSAGES,
    MAX_POLYNOMIAL_LENGTH,
    InputGate,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def gate():
    """Input Gate instance."""
    return InputGate()


# =============================================================================
# PASS
# =============================================================================


class TestInputGatePass:
    """Корректные строки допускаются"""

    @pytest.mark.parametrize(
        "polynomial_str",
        [
            "x^2 + 4x + 4",
            "x^2 + -0.5x + -2.5x + 2.5x + 0.5x + 4x + 8x - 4x -+-4x + 4 + 12 --+-8         -4",
            "\t3x^2-x",
            "",
            "9" * MAX_POLYNOMIAL_LENGTH,
        ],
    )
    def test_accepted(self, gate: InputGate, polynomial_str: str) -> None:
        """Строка из допустимых символов не длиннее 100"""
        result = gate.evaluate(polynomial_str)

        assert result.accepted
        assert result.block_reason == ""
        assert result.details == "PASS"

    def test_every_allowed_character(self, gate: InputGate) -> None:
        """Все символы набора допускаются"""
        assert gate.evaluate("".join(sorted(ALLOWED_CHARACTERS))).accepted


# =============================================================================
# BLOCK
# =============================================================================


class TestInputGateBlock:
    """Некорректные строки блокируются с понятной причиной"""

    def test_not_ascii(self, gate: InputGate) -> None:
        """Не-ASCII символ"""
        result = gate.evaluate("x² + 1")

        assert not result.accepted
        assert result.block_reason == "polynomial_not_ascii"
        assert result.details == "Polynomial not ASCII."

    def test_too_long(self, gate: InputGate) -> None:
        """Более 100 символов"""
        result = gate.evaluate("9" * (MAX_POLYNOMIAL_LENGTH + 1))

        assert not result.accepted
        assert result.block_reason == "polynomial_too_long"
        assert result.details == "Polynomial too long."

    @pytest.mark.parametrize("polynomial_str", ["y^2", "2*x", "x^2 = 4", "1e5", "x\n"])
    def test_unsupported_characters(self, gate: InputGate, polynomial_str: str) -> None:
        """Символы вне набора"""
        result = gate.evaluate(polynomial_str)

        assert not result.accepted
        assert result.block_reason == "polynomial_unsupported_characters"
        assert result.details == "Polynomial has unsupported characters or is not basic."


# =============================================================================
# PRIORITY
# =============================================================================


class TestInputGatePriority:
    """Порядок проверок: ASCII → длина → символы"""

    def test_ascii_before_length(self, gate: InputGate) -> None:
        """Длинная не-ASCII строка → not ascii"""
        result = gate.evaluate("é" * 200)

        assert result.block_reason == "polynomial_not_ascii"

    def test_length_before_charset(self, gate: InputGate) -> None:
        """Длинная строка с недопустимыми символами → too long"""
        result = gate.evaluate("y" * 200)

        assert result.block_reason == "polynomial_too_long"

    def test_block_messages_cover_reasons(self) -> None:
        """У каждой причины блокировки есть сообщение"""
        assert set(BLOCK_MESSAGES) == {
            "polynomial_not_ascii",
            "polynomial_too_long",
            "polynomial_unsupported_characters",
        }
