"""
Differentiation — производная через forward finite difference

    d(x) = round((fx(x + SMALL) - fx(x)) * LARGE, ACCURACY)

Точность падает для функций с большой кривизной или разрывом в пределах
SMALL от x. Ошибки fx (вне домена функции) пробрасываются без обёртки.
"""

from dataclasses import dataclass
from typing import Optional

from calculus.core.config import CalculusConfig, resolve_config
from calculus.core.types import Func
from calculus.core.math.rounding import round_half_up


@dataclass(frozen=True)
class Derivative:
    """Численная производная функции fx (сама является Func)."""

    fx: Func
    config: CalculusConfig

    def __call__(self, x: float) -> float:
        cfg = self.config
        return round_half_up((self.fx(x + cfg.small) - self.fx(x)) * cfg.large, cfg.accuracy)


def derivative(fx: Func, *, config: Optional[CalculusConfig] = None) -> Derivative:
    """
    Производная fx как вызываемая функция.

    Args:
        fx: Дифференцируемая функция
        config: Численное разрешение (default: глобальная конфигурация)

    Returns:
        Derivative, вызываемый для любого x

    Examples:
        >>> derivative(lambda x: x * x)(3.0)
        6.0
    """
    return Derivative(fx=fx, config=resolve_config(config))
