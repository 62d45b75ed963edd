"""
Core math modules

Численные примитивы с IEEE-754 семантикой. Решатель квадратного уравнения
импортируется напрямую из src.core.math.quadratic (он зависит от доменных
моделей, которые сами используют эти примитивы).
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    ieee_divide,
    ieee_sqrt,
    is_valid_float,
)

__all__ = [
    # Numerical Safeguards — IEEE operations
    "ieee_divide",
    "ieee_sqrt",
    # Numerical Safeguards — Checks
    "is_valid_float",
]
