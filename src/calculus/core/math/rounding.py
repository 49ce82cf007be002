"""
Rounding — округление half-up до N десятичных знаков

Схема: floor(value * 10**places + 0.5) / 10**places

Половина округляется к +inf для всех знаков:
    2.5  → 3
    -2.5 → -2   (не "half away from zero")
"""

import math

from calculus.core.math.safeguards import is_valid_float, validate_count


def round_half_up(value: float, places: int) -> float:
    """
    Округление до places знаков после запятой, половина к +inf.

    Args:
        value: Значение для округления
        places: Количество знаков (неотрицательное целое)

    Returns:
        Округлённое значение. NaN/Inf, значения, которые переполняются при
        масштабировании, и любое value при places > 308 возвращаются без
        изменений.

    Raises:
        ValueError: Если places отрицательный или не int

    Examples:
        >>> round_half_up(2.5, 0)
        3.0
        >>> round_half_up(-2.5, 0)
        -2.0
        >>> round_half_up(0.33349, 3)
        0.333
    """
    validate_count(places, "places")

    if not is_valid_float(value):
        return value

    try:
        scale = 10.0**places
    except OverflowError:
        # places > 308: масштаб не представим во float
        return value

    scaled = value * scale + 0.5
    if not is_valid_float(scaled):
        return value

    return math.floor(scaled) / scale
