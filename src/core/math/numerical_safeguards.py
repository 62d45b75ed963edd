"""
Numerical Safeguards — IEEE-754 примитивы

Модуль обеспечивает IEEE-семантику для операций, где стандартный Python
бросает исключение вместо возврата non-finite значения:
- sqrt отрицательного числа → NaN (math.sqrt бросает ValueError)
- деление на ноль → ±Inf или NaN (оператор / бросает ZeroDivisionError)
- проверка finite/non-finite

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция не бросает исключение на NaN/Inf входах
2. NaN/Inf пропагируют так же, как в IEEE-754 (это сигнал, а не ошибка)
3. Все операции детерминированы и воспроизводимы
"""

import math

# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite, False если NaN или Inf
    """
    return math.isfinite(value)


# =============================================================================
# IEEE-754 ОПЕРАЦИИ
# =============================================================================


def ieee_sqrt(value: float) -> float:
    """
    Квадратный корень с IEEE-семантикой.

    Args:
        value: Подкоренное значение

    Returns:
        - NaN для отрицательных значений и NaN
        - +Inf для +Inf
        - math.sqrt(value) иначе

    Examples:
        >>> ieee_sqrt(16.0)
        4.0
        >>> math.isnan(ieee_sqrt(-64.0))
        True
    """
    if math.isnan(value) or value < 0:
        return math.nan
    return math.sqrt(value)


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-семантикой для нулевого знаменателя.

    Знак нуля в знаменателе учитывается: 1.0 / -0.0 == -Inf.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        - numerator / denominator если denominator != 0
        - NaN если числитель 0 или NaN, а знаменатель 0
        - ±Inf иначе (знак = sign(numerator) * sign(denominator))

    Examples:
        >>> ieee_divide(10.0, 2.0)
        5.0
        >>> ieee_divide(-4.0, 0.0)
        -inf
        >>> ieee_divide(4.0, -0.0)
        -inf
        >>> math.isnan(ieee_divide(0.0, 0.0))
        True
    """
    if denominator != 0.0:
        return numerator / denominator

    if numerator == 0.0 or math.isnan(numerator):
        return math.nan

    sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
    return math.copysign(math.inf, sign)

