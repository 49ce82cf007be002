"""
calculus — численные методы для функций одной вещественной переменной.

Содержит:
- calculus.core.config   : LARGE / SMALL / ACCURACY и логирование
- calculus.core.math     : производная, интегралы, Ньютон, Lambert W, итерация
- calculus.plotting      : ASCII графики в терминале
"""

from calculus.core.config import ACCURACY, DEFAULT_CONFIG, LARGE, SMALL, CalculusConfig
from calculus.core.math import (
    Derivative,
    Func,
    Integral,
    Iterated,
    NewtonResult,
    derivative,
    find_root,
    integral,
    integral_definite,
    iterate,
    iterated,
    lambert_w,
    newton_trajectory,
    round_half_up,
    roots,
)
from calculus.plotting import Grapher, GraphSettings

__all__ = [
    # Configuration
    "ACCURACY",
    "DEFAULT_CONFIG",
    "LARGE",
    "SMALL",
    "CalculusConfig",
    # Math
    "Func",
    "Derivative",
    "Integral",
    "Iterated",
    "NewtonResult",
    "derivative",
    "find_root",
    "integral",
    "integral_definite",
    "iterate",
    "iterated",
    "lambert_w",
    "newton_trajectory",
    "round_half_up",
    "roots",
    # Plotting
    "Grapher",
    "GraphSettings",
]
