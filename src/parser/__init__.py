"""
Parser — разбор текстового полинома в Polynomial.

Поток данных: строка → strip_whitespace → tokenize → build → Polynomial
"""

from src.parser.builder import build, parse_polynomial
from src.parser.tokenizer import (
    SIGN_CHARACTERS,
    STRIPPED_CHARACTERS,
    PolynomialParseError,
    parse_term,
    strip_whitespace,
    tokenize,
)

__all__ = [
    # Constants
    "SIGN_CHARACTERS",
    "STRIPPED_CHARACTERS",
    # Exceptions
    "PolynomialParseError",
    # Tokenizer
    "strip_whitespace",
    "tokenize",
    "parse_term",
    # Builder
    "build",
    "parse_polynomial",
]
