"""
Quadratic Solver — корни Ax^2 + Bx + C по формуле дискриминанта

ФОРМУЛЫ:
    D = b^2 - 4ac
    root1 = (-b + sqrt(D)) / 2a
    root2 = (-b - sqrt(D)) / 2a

Non-finite результат является штатным сигналом, а не ошибкой:
- D < 0  → sqrt(D) = NaN → оба корня NaN ("imaginary")
- a == 0 → деление на ноль → ±Inf/NaN

Случай a == 0 ("не квадратный полином") намеренно не отличается от D < 0:
оба дают RootPair.is_real == False.
"""

from src.core.domain.polynomial import Polynomial, RootPair
from src.core.math.numerical_safeguards import ieee_divide, ieee_sqrt


def discriminant(polynomial: Polynomial) -> float:
    """
    Дискриминант b^2 - 4ac.

    Args:
        polynomial: Нормализованный полином

    Returns:
        Дискриминант (может быть NaN/Inf при non-finite коэффициентах)
    """
    a, b, c = polynomial.coefficients()
    return b * b - 4.0 * a * c


def roots(polynomial: Polynomial) -> RootPair:
    """
    Корни полинома по формуле дискриминанта.

    Args:
        polynomial: Нормализованный полином

    Returns:
        RootPair(root1, root2); хотя бы один компонент non-finite,
        если действительных корней нет или a == 0

    Examples:
        >>> roots(Polynomial(a=1.0, b=4.0, c=4.0))
        RootPair(root1=-2.0, root2=-2.0)
    """
    a, b, _ = polynomial.coefficients()
    sqrt_d = ieee_sqrt(discriminant(polynomial))
    denominator = 2.0 * a

    return RootPair(
        root1=ieee_divide(-b + sqrt_d, denominator),
        root2=ieee_divide(-b - sqrt_d, denominator),
    )
