"""
Integration — численное интегрирование (left Riemann sum, фиксированный шаг)

Определённый интеграл:
    sum(fx(i) * SMALL)  для i = lower, lower + SMALL, ... пока i <= |upper|
    результат * (-1) если upper < 0, затем round(..., ACCURACY)

Неопределённый интеграл:
    F(x) = integral_definite(fx, valid_value, x)
    (отличается от первообразной на константу, зависящую от valid_value)

ИЗВЕСТНАЯ АНОМАЛИЯ:
Верхняя граница цикла — |upper| независимо от знака lower. Для lower > 0 и
upper < 0 результат не равен стандартному знаковому интегралу
(например lower=5, upper=-10 даёт -∫[5, 10]). Поведение сохранено для
совместимости.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from calculus.core.config import CalculusConfig, resolve_config
from calculus.core.types import Func
from calculus.core.math.rounding import round_half_up
from calculus.core.math.safeguards import validate_finite

logger = logging.getLogger(__name__)


# =============================================================================
# ОПРЕДЕЛЁННЫЙ ИНТЕГРАЛ
# =============================================================================


def integral_definite(
    fx: Func,
    lower: float,
    upper: float,
    *,
    config: Optional[CalculusConfig] = None,
) -> float:
    """
    Определённый интеграл fx от lower до upper.

    Args:
        fx: Интегрируемая функция
        lower: Нижняя граница
        upper: Верхняя граница (цикл идёт до |upper|, знак результата по upper)
        config: Численное разрешение (default: глобальная конфигурация)

    Returns:
        Сумма, округлённая до config.accuracy знаков.
        0.0 для нулевой ширины (lower == upper) и для lower > |upper|.

    Raises:
        ValueError: Если lower или upper NaN/Inf (цикл не завершится)

    Examples:
        >>> integral_definite(lambda x: 1.0, 0.0, 2.0)
        2.0
        >>> integral_definite(lambda x: x, 3.0, 3.0)
        0.0
    """
    validate_finite(lower, "lower")
    validate_finite(upper, "upper")

    if lower == upper:
        return 0.0

    cfg = resolve_config(config)
    step = cfg.small
    bound = abs(upper)

    total = 0.0
    i = lower
    while i <= bound:
        total += fx(i) * step
        i += step

    sign = -1 if upper < 0 else 1
    return round_half_up(total * sign, cfg.accuracy)


# =============================================================================
# НЕОПРЕДЕЛЁННЫЙ ИНТЕГРАЛ
# =============================================================================


@dataclass(frozen=True)
class Integral:
    """Накопленный интеграл fx от valid_value до x (сам является Func)."""

    fx: Func
    valid_value: float
    config: CalculusConfig

    def __call__(self, x: float) -> float:
        return integral_definite(self.fx, self.valid_value, x, config=self.config)


def integral(
    fx: Func,
    valid_value: float = 0.0,
    *,
    config: Optional[CalculusConfig] = None,
) -> Integral:
    """
    Неопределённый интеграл fx как вызываемая функция.

    Args:
        fx: Интегрируемая функция
        valid_value: Точка внутри домена fx, от которой ведётся накопление.
                     Смена valid_value сдвигает результат на константу.
        config: Численное разрешение (default: глобальная конфигурация)

    Returns:
        Integral, вызываемый для любого x

    Raises:
        ValueError: Если valid_value NaN/Inf
    """
    validate_finite(valid_value, "valid_value")
    cfg = resolve_config(config)
    logger.debug("Building integral from %s with step %s", valid_value, cfg.small)
    return Integral(fx=fx, valid_value=valid_value, config=cfg)
