"""
Polynomial Builder — агрегация членов по степеням

ФОРМУЛЫ:
    a = Σ coefficient (degree == 2)
    b = Σ coefficient (degree == 1)
    c = Σ coefficient (degree == 0)

Члены неподдерживаемой степени (например, "x^3") не входят ни в один
bucket и молча отбрасываются: вход не отклоняется, полином строится
из оставшихся членов.
"""

import logging
from collections.abc import Iterable

from src.core.domain.polynomial import Polynomial
from src.core.domain.term import Term
from src.parser.tokenizer import strip_whitespace, tokenize

logger = logging.getLogger(__name__)


def build(terms: Iterable[Term]) -> Polynomial:
    """
    Сборка Polynomial из последовательности членов.

    Args:
        terms: Члены в любом порядке

    Returns:
        Polynomial(a, b, c) с суммами коэффициентов по степеням 2, 1, 0
    """
    buckets = {2: 0.0, 1: 0.0, 0: 0.0}

    for term in terms:
        if not term.is_supported:
            logger.debug("Dropping term of unsupported degree: %s", term)
            continue
        buckets[term.degree] += term.coefficient

    return Polynomial(a=buckets[2], b=buckets[1], c=buckets[0])


def parse_polynomial(polynomial_str: str) -> Polynomial:
    """
    Полный разбор строки: очистка → токенизация → агрегация.

    Args:
        polynomial_str: Исходная строка, например "x^2 + 4x + 4"

    Returns:
        Нормализованный Polynomial

    Raises:
        PolynomialParseError: Если какой-либо член не разбирается
    """
    return build(tokenize(strip_whitespace(polynomial_str)))
