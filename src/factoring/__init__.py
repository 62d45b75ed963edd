"""Factoring — допуск ввода, pipeline и вывод результата.

- Input Gate: ASCII / длина / набор символов
- Pipeline: Input Gate → Parser → Quadratic Solver
- Formatter: "Factors of (...) are ..."
- CLI: factoring <POLYNOMIAL>
"""

from .formatter import ROOT_DECIMALS, FormatterConfig, format_roots
from .input_gate import (
    ALLOWED_CHARACTERS,
    BLOCK_MESSAGES,
    MAX_POLYNOMIAL_LENGTH,
    InputGate,
    InputGateResult,
)
from .pipeline import FactoringResult, factor

__all__ = [
    "ALLOWED_CHARACTERS",
    "BLOCK_MESSAGES",
    "MAX_POLYNOMIAL_LENGTH",
    "InputGate",
    "InputGateResult",
    "ROOT_DECIMALS",
    "FormatterConfig",
    "format_roots",
    "FactoringResult",
    "factor",
]
