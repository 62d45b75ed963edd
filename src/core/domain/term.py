"""
Term — Модель одночлена coefficient * x^degree

Immutable Pydantic модель, представляющая один член полинома,
извлечённый из входной строки токенизатором.
"""

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Степени, для которых существует bucket (c, b, a)
SUPPORTED_DEGREES: Final[tuple[int, ...]] = (0, 1, 2)

# Степень парсится как беззнаковое 8-битное целое
DEGREE_MAX: Final[int] = 255


# =============================================================================
# TERM MODEL
# =============================================================================


class Term(BaseModel):
    """
    Одночлен coefficient * x^degree.

    Immutable модель (frozen=True). Коэффициент может быть NaN/Inf
    (например, из входа "inf"), степень ограничена диапазоном u8.
    """

    coefficient: float = Field(..., description="Коэффициент (со знаком)")
    degree: int = Field(..., ge=0, le=DEGREE_MAX, description="Степень x")

    model_config = {"frozen": True}

    @property
    def is_supported(self) -> bool:
        """Попадает ли член в один из degree bucket (0, 1, 2)"""
        return self.degree in SUPPORTED_DEGREES
