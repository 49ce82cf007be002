"""
Iteration — многократная композиция функции с собой

    iterate(fx, times, v) = fx(fx(...fx(v)...))

times — вещественное число: fx применяется, пока times > 0, с уменьшением
times на 1 после каждого применения. Для дробного times это ceil(times)
применений, для times <= 0 — тождество.
"""

from dataclasses import dataclass
from typing import Final

from calculus.core.math.safeguards import validate_finite
from calculus.core.types import Func

# С 2**53 шаг float больше 1: times - 1 округляется обратно и цикл не завершается
TIMES_MAX: Final[float] = 2.0**53


def _validate_times(times: float) -> None:
    """
    Счётчик должен уменьшаться на каждом шаге, иначе цикл не завершится.

    Raises:
        ValueError: Если times NaN/Inf или times >= TIMES_MAX
    """
    validate_finite(times, "times")

    if times >= TIMES_MAX:
        raise ValueError(f"times is too large to count down by one, got {times}")


def iterate(fx: Func, times: float, value: float) -> float:
    """
    Применение fx к value times раз.

    Args:
        fx: Итерируемая функция
        times: Количество применений (вещественное, см. модуль)
        value: Начальное значение

    Returns:
        Результат композиции

    Raises:
        ValueError: Если times NaN/Inf или times >= 2**53

    Examples:
        >>> iterate(lambda x: x + 1, 5, 0)
        5
        >>> iterate(lambda x: x * 2, 2.5, 1)
        8
    """
    _validate_times(times)

    remaining = times
    while remaining > 0:
        value = fx(value)
        remaining -= 1

    return value


@dataclass(frozen=True)
class Iterated:
    """fx, применённая к себе times раз (сама является Func)."""

    fx: Func
    times: float

    def __call__(self, x: float) -> float:
        return iterate(self.fx, self.times, x)


def iterated(fx: Func, times: float) -> Iterated:
    """
    Как iterate(), но возвращает функцию для любого начального значения.

    Raises:
        ValueError: Если times NaN/Inf или times >= 2**53
    """
    _validate_times(times)
    return Iterated(fx=fx, times=times)
