"""
Numerical Safeguards — IEEE-семантика для вырожденных результатов

Python бросает ZeroDivisionError / OverflowError там, где IEEE 754
возвращает inf или nan. Toolkit сохраняет вырожденные результаты как значения,
поэтому арифметика на границах домена идёт через этот модуль.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль возвращает ±inf или nan, не бросает exception
2. Переполнение exp возвращает inf
3. NaN/Inf распространяются дальше без замены на fallback
4. Ошибки caller-функций здесь не перехватываются
"""

import math


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение finite
    """
    return math.isfinite(value)


def is_degenerate(value: float) -> bool:
    """Вырожденный численный результат: NaN или ±Inf."""
    return not math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация, что параметр конечен.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a finite float (not NaN/Inf), got {value}")


def validate_count(value: int, name: str) -> None:
    """
    Валидация неотрицательного целого счётчика.

    Raises:
        ValueError: Если value не int или отрицательный
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


# =============================================================================
# IEEE-АРИФМЕТИКА
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE 754 семантикой для нулевого знаменателя.

    В отличие от safe-деления, fallback не подставляется: результат
    остаётся вырожденным и виден вызывающему коду.

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        numerator / denominator, либо:
        - ±inf если denominator == 0 и numerator != 0 (знак по IEEE)
        - nan если numerator == 0 или nan и denominator == 0

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        # Знак результата = знак числителя * знак нуля
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def safe_exp(x: float) -> float:
    """
    e**x с переполнением в inf вместо OverflowError.

    Examples:
        >>> safe_exp(0.0)
        1.0
        >>> safe_exp(1000.0)
        inf
    """
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf
