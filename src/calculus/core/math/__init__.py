"""
Core math modules для calculus toolkit

Численное дифференцирование, интегрирование, метод Ньютона и итерация
функций одной вещественной переменной.
"""

# Numerical Safeguards
from calculus.core.math.safeguards import (
    ieee_divide,
    is_degenerate,
    is_valid_float,
    safe_exp,
    validate_count,
    validate_finite,
)

# Rounding
from calculus.core.math.rounding import round_half_up

# Differentiation
from calculus.core.math.differentiation import Derivative, derivative
from calculus.core.types import Func

# Integration
from calculus.core.math.integration import Integral, integral, integral_definite

# Root Finding
from calculus.core.math.roots import (
    LAMBERT_W_ITERATIONS,
    ROOTS_ITERATIONS_DEFAULT,
    NewtonResult,
    find_root,
    lambert_w,
    newton_trajectory,
    roots,
)

# Iteration
from calculus.core.math.iteration import Iterated, iterate, iterated

__all__ = [
    # Numerical Safeguards
    "ieee_divide",
    "is_degenerate",
    "is_valid_float",
    "safe_exp",
    "validate_count",
    "validate_finite",
    # Rounding
    "round_half_up",
    # Differentiation
    "Func",
    "Derivative",
    "derivative",
    # Integration
    "Integral",
    "integral",
    "integral_definite",
    # Root Finding — Constants
    "LAMBERT_W_ITERATIONS",
    "ROOTS_ITERATIONS_DEFAULT",
    # Root Finding — Types
    "NewtonResult",
    # Root Finding — Functions
    "find_root",
    "lambert_w",
    "newton_trajectory",
    "roots",
    # Iteration
    "Iterated",
    "iterate",
    "iterated",
]
