"""
Root Finding — метод Ньютона и Lambert W

    x_{n+1} = x_n - fx(x_n) / fx'(x_n)

Выполняется ровно iterations шагов без проверки сходимости. Производная
строится заново на каждом шаге (без memoization).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. iterations == 0 → возвращается initial
2. fx'(x_n) == 0 → шаг даёт ±inf/nan, значение проходит через оставшиеся
   шаги и возвращается (без clamp и без exception)
3. Ошибки fx пробрасываются без обёртки

Lambert W (обратная к x * e**x):
    lambert_w(v) = roots(x * e**x - v, initial=v, iterations=150)
Для v < -1/e вещественного решения нет, результат не имеет смысла.
"""

import logging
from dataclasses import dataclass
from typing import Final, Optional

from calculus.core.config import CalculusConfig, resolve_config
from calculus.core.types import Func
from calculus.core.math.differentiation import derivative
from calculus.core.math.safeguards import ieee_divide, is_degenerate, safe_exp, validate_count

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

ROOTS_ITERATIONS_DEFAULT: Final[int] = 100

LAMBERT_W_ITERATIONS: Final[int] = 150


# =============================================================================
# NEWTON
# =============================================================================


@dataclass(frozen=True)
class NewtonResult:
    """Результат метода Ньютона с явным индикатором вырожденности."""

    root: float
    iterations: int
    trajectory: tuple[float, ...]

    # True если root NaN/Inf (например, производная обнулилась)
    is_degenerate: bool


def _newton_step(fx: Func, x: float, config: CalculusConfig) -> float:
    slope = derivative(fx, config=config)(x)
    if slope == 0:
        logger.debug("Derivative vanished at x=%s, step is degenerate", x)
    return x - ieee_divide(fx(x), slope)


def newton_trajectory(
    fx: Func,
    initial: float = 0.0,
    iterations: int = ROOTS_ITERATIONS_DEFAULT,
    *,
    config: Optional[CalculusConfig] = None,
) -> list[float]:
    """
    Все приближения метода Ньютона.

    Args:
        fx: Функция, корень которой ищется
        initial: Начальное приближение
        iterations: Количество шагов (неотрицательное целое)
        config: Численное разрешение (default: глобальная конфигурация)

    Returns:
        [x_0, x_1, ..., x_N] длины iterations + 1

    Raises:
        ValueError: Если iterations отрицательный или не int
    """
    validate_count(iterations, "iterations")
    cfg = resolve_config(config)

    trajectory = [initial]
    x = initial
    for _ in range(iterations):
        x = _newton_step(fx, x, cfg)
        trajectory.append(x)

    return trajectory


def roots(
    fx: Func,
    initial: float = 0.0,
    iterations: int = ROOTS_ITERATIONS_DEFAULT,
    *,
    config: Optional[CalculusConfig] = None,
) -> float:
    """
    Приближение ближайшего корня fx методом Ньютона.

    Args:
        fx: Функция, корень которой ищется
        initial: Начальное приближение. Чем ближе к корню, тем меньше шагов нужно.
        iterations: Количество шагов (неотрицательное целое)
        config: Численное разрешение (default: глобальная конфигурация)

    Returns:
        x_N после iterations шагов (может быть NaN/Inf)

    Raises:
        ValueError: Если iterations отрицательный или не int

    Examples:
        >>> roots(lambda x: x - 5)
        5.0
        >>> roots(lambda x: x - 5, initial=3.0, iterations=0)
        3.0
    """
    validate_count(iterations, "iterations")
    cfg = resolve_config(config)

    x = initial
    for _ in range(iterations):
        x = _newton_step(fx, x, cfg)

    return x


def find_root(
    fx: Func,
    initial: float = 0.0,
    iterations: int = ROOTS_ITERATIONS_DEFAULT,
    *,
    config: Optional[CalculusConfig] = None,
) -> NewtonResult:
    """
    Как roots(), но с траекторией и флагом вырожденного результата.

    Returns:
        NewtonResult(root, iterations, trajectory, is_degenerate)
    """
    trajectory = newton_trajectory(fx, initial, iterations, config=config)
    root = trajectory[-1]
    return NewtonResult(
        root=root,
        iterations=iterations,
        trajectory=tuple(trajectory),
        is_degenerate=is_degenerate(root),
    )


# =============================================================================
# LAMBERT W
# =============================================================================


def lambert_w(value: float, *, config: Optional[CalculusConfig] = None) -> float:
    """
    Приближение Lambert W: решение x * e**x = value.

    Начальное приближение — сам value, 150 шагов Ньютона.

    Args:
        value: Вход
        config: Численное разрешение (default: глобальная конфигурация)

    Returns:
        x такой, что x * e**x ≈ value (без валидации домена)

    Examples:
        >>> lambert_w(0.0)
        0.0
    """

    def shifted(x: float) -> float:
        return x * safe_exp(x) - value

    return roots(shifted, value, LAMBERT_W_ITERATIONS, config=config)
