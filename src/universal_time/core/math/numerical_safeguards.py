"""
Numerical Safeguards — защитные примитивы для полей времени

Модуль обеспечивает численную устойчивость операций над тройкой
(days, seconds, nanoseconds):
- Проверка конечности float (NaN/Inf не допускаются в nanoseconds)
- Проверка целочисленности days/seconds (int или float без дробной части)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не пропагируют в нормализованную тройку
2. Float сравнения всегда учитывают машинную точность
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Абсолютная толерантность для сравнения наносекунд.
# Spacing float64 около 1e9 равен ~1.2e-7, поэтому 1e-6 нс покрывает
# ошибку округления одного сложения.
EPS_NANOSECONDS_ABS: Final[float] = 1e-6

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def as_integral(value: object) -> int | None:
    """
    Приведение значения к int, если оно целочисленное.

    bool не считается числом.

    Examples:
        >>> as_integral(5)
        5
        >>> as_integral(2.0)
        2
        >>> as_integral(1.5) is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and is_valid_float(value) and value.is_integer():
        return int(value)
    return None


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def compare_with_tolerance(
    a: float,
    b: float,
    tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Сравнение двух float с учётом толерантности.

    Returns:
        -1 если a < b (с учётом tol)
         0 если a ≈ b (в пределах tol)
        +1 если a > b (с учётом tol)

    Examples:
        >>> compare_with_tolerance(1.0, 2.0)
        -1
        >>> compare_with_tolerance(1.0, 1.0 + 1e-13)
        0
    """
    diff = a - b

    if abs(diff) <= tol:
        return 0
    elif diff < 0:
        return -1
    else:
        return 1
