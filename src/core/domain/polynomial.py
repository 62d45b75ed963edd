"""
Polynomial — Нормализованный квадратный полином Ax^2 + Bx + C

Immutable Pydantic модель с тремя агрегированными коэффициентами
и пара корней RootPair, вычисляемая QuadraticSolver.
"""

from typing import NamedTuple

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# POLYNOMIAL MODEL
# =============================================================================


class Polynomial(BaseModel):
    """
    Полином вида Ax^2 + Bx + C.

    Инвариант: a, b, c — суммы коэффициентов всех членов степени 2, 1 и 0
    соответственно. Члены других степеней в полином не входят.
    """

    a: float = Field(0.0, description="Коэффициент при x^2")
    b: float = Field(0.0, description="Коэффициент при x")
    c: float = Field(0.0, description="Свободный член")

    model_config = {"frozen": True}

    def coefficients(self) -> tuple[float, float, float]:
        """Коэффициенты в порядке (a, b, c)"""
        return (self.a, self.b, self.c)


# =============================================================================
# ROOT PAIR
# =============================================================================


class RootPair(NamedTuple):
    """Пара корней квадратного уравнения (могут быть NaN/Inf)."""

    root1: float
    root2: float

    @property
    def is_real(self) -> bool:
        """True если оба корня finite (иначе корни считаются imaginary)"""
        return is_valid_float(self.root1) and is_valid_float(self.root2)
