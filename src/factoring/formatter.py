"""
Output Formatter — текстовое представление корней

Формат:
    Factors of (<строка>) are <root1>, and <root2>   — оба корня finite
    Factors of (<строка>) are imaginary              — иначе
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.polynomial import RootPair

# Количество знаков после запятой в выводе корней
ROOT_DECIMALS: Final[int] = 4


@dataclass(frozen=True)
class FormatterConfig:
    """Конфигурация форматирования вывода."""

    decimals: int = ROOT_DECIMALS


def format_roots(
    polynomial_str: str,
    roots: RootPair,
    config: FormatterConfig = FormatterConfig(),
) -> str:
    """
    Форматирование результата для пользователя.

    Args:
        polynomial_str: Исходная строка (выводится как есть, с пробелами)
        roots: Пара корней
        config: Параметры форматирования

    Returns:
        Строка результата

    Examples:
        >>> format_roots("x^2 + 4x + 4", RootPair(-2.0, -2.0))
        'Factors of (x^2 + 4x + 4) are -2.0000, and -2.0000'
    """
    if not roots.is_real:
        return f"Factors of ({polynomial_str}) are imaginary"

    precision = config.decimals
    return (
        f"Factors of ({polynomial_str}) are "
        f"{roots.root1:.{precision}f}, and {roots.root2:.{precision}f}"
    )
