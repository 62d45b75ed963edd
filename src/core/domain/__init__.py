"""
Domain models and value objects.

Contains fundamental domain entities: Term, Polynomial, RootPair.
"""

from src.core.domain.polynomial import Polynomial, RootPair
from src.core.domain.term import DEGREE_MAX, SUPPORTED_DEGREES, Term

__all__ = [
    # Term model
    "DEGREE_MAX",
    "SUPPORTED_DEGREES",
    "Term",
    # Polynomial model
    "Polynomial",
    "RootPair",
]
