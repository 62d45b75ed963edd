"""Factoring Pipeline: строка → корни

Порядок:
1. Input Gate (ASCII, длина, набор символов)
2. Parser (strip → tokenize → build)
3. Quadratic Solver

Ошибки допуска и PolynomialParseError не выходят за пределы pipeline:
они фиксируются в FactoringResult, чтобы вызывающий код отличал
некорректный ввод от штатного исхода "imaginary".
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from src.core.domain.polynomial import Polynomial, RootPair
from src.core.math.numerical_safeguards import is_valid_float
from src.core.math.quadratic import roots as solve_roots
from src.factoring.input_gate import InputGate
from src.parser.builder import parse_polynomial
from src.parser.tokenizer import PolynomialParseError

logger = logging.getLogger(__name__)


def _json_float(value: float) -> Optional[float]:
    # JSON не поддерживает NaN/Inf
    return value if is_valid_float(value) else None


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class FactoringResult:
    """Результат факторизации полинома."""

    polynomial_str: str
    accepted: bool
    block_reason: str

    polynomial: Optional[Polynomial] = None
    roots: Optional[RootPair] = None
    parse_error: Optional[str] = None

    @property
    def is_real(self) -> bool:
        """True если полином разобран и оба корня finite"""
        return self.roots is not None and self.roots.is_real

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация по контракту factoring_result.json"""
        polynomial = None
        if self.polynomial is not None:
            polynomial = {
                "a": _json_float(self.polynomial.a),
                "b": _json_float(self.polynomial.b),
                "c": _json_float(self.polynomial.c),
            }

        roots = None
        if self.roots is not None:
            roots = {
                "root1": _json_float(self.roots.root1),
                "root2": _json_float(self.roots.root2),
                "is_real": self.roots.is_real,
            }

        return {
            "polynomial_str": self.polynomial_str,
            "accepted": self.accepted,
            "block_reason": self.block_reason,
            "polynomial": polynomial,
            "roots": roots,
            "parse_error": self.parse_error,
        }


# =============================================================================
# PIPELINE
# =============================================================================


def factor(polynomial_str: str, gate: InputGate | None = None) -> FactoringResult:
    """
    Полный цикл: допуск → разбор → корни.

    Args:
        polynomial_str: Строка полинома, например "x^2 + 4x + 4"
        gate: Input Gate (по умолчанию создаётся новый)

    Returns:
        FactoringResult; при accepted=False поля polynomial/roots пусты
    """
    gate_result = (gate or InputGate()).evaluate(polynomial_str)
    if not gate_result.accepted:
        return FactoringResult(
            polynomial_str=polynomial_str,
            accepted=False,
            block_reason=gate_result.block_reason,
        )

    try:
        polynomial = parse_polynomial(polynomial_str)
    except PolynomialParseError as e:
        logger.debug("Failed to parse %r: %s", polynomial_str, e)
        return FactoringResult(
            polynomial_str=polynomial_str,
            accepted=False,
            block_reason="polynomial_parse_error",
            parse_error=str(e),
        )

    result = FactoringResult(
        polynomial_str=polynomial_str,
        accepted=True,
        block_reason="",
        polynomial=polynomial,
        roots=solve_roots(polynomial),
    )
    logger.debug("Factored %r: %s -> %s", polynomial_str, polynomial, result.roots)
    return result
