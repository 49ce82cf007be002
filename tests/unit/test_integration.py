"""
Тесты для Integration — left Riemann sum

Проверяемые инварианты:
1. integral(x**2)(x) ≈ x**3 / 3
2. Нулевая ширина интервала → 0
3. upper < 0 → знак результата меняется, цикл идёт до |upper|
4. lower > |upper| → 0
5. valid_value сдвигает результат на константу
"""

import dataclasses
import math

import pytest

from calculus.core.config import CalculusConfig
from calculus.core.math.integration import Integral, integral, integral_definite


def square(x):
    return x * x


# =============================================================================
# ТЕСТЫ: Определённый интеграл
# =============================================================================


class TestIntegralDefinite:
    """Тесты integral_definite."""

    def test_constant(self):
        assert integral_definite(lambda x: 2.0, 0.0, 1.0) == pytest.approx(2.0, abs=1e-3)

    def test_linear(self):
        assert integral_definite(lambda x: x, 0.0, 4.0) == pytest.approx(8.0, abs=1e-2)

    def test_shifted_interval(self):
        # ∫[1, 3] x**2 = 26/3
        assert integral_definite(square, 1.0, 3.0) == pytest.approx(26 / 3, abs=2e-3)

    @pytest.mark.parametrize("a", [-3.0, -0.5, 0.0, 2.5, 7.0])
    def test_zero_width_interval(self, a):
        """integral_definite(fx, a, a) == 0 для любого a."""
        assert integral_definite(square, a, a) == 0.0

    def test_negative_upper_flips_sign(self):
        """Цикл идёт до |upper|, результат со знаком минус."""
        assert integral_definite(square, 0.0, -1.0) == pytest.approx(-0.333, abs=1e-3)

    def test_abs_upper_anomaly_preserved(self):
        """lower=5, upper=-10 → -∫[5, 10], а не стандартный знаковый интеграл."""
        assert integral_definite(lambda x: 1.0, 5.0, -10.0) == pytest.approx(-5.0, abs=1e-3)

    def test_lower_above_abs_upper_is_zero(self):
        """Ноль итераций цикла → 0."""
        assert integral_definite(square, 5.0, 3.0) == 0.0
        assert integral_definite(square, 5.0, -3.0) == 0.0

    def test_result_rounded_to_accuracy(self):
        value = integral_definite(math.sin, 0.0, 1.0)
        assert value == round(value, 3)
        assert value == pytest.approx(1 - math.cos(1.0), abs=1e-3)

    def test_custom_config(self):
        """LARGE=100: шаг 0.01, 1 знак: 0.338 → 0.3."""
        cfg = CalculusConfig(large=100.0)
        assert integral_definite(square, 0.0, 1.0, config=cfg) == pytest.approx(0.3)

    def test_step_count(self):
        """Фиксированный шаг: ~(|upper| - lower) / SMALL вызовов fx."""
        calls = []

        def recorder(x):
            calls.append(x)
            return 0.0

        integral_definite(recorder, 0.0, 1.0)
        assert 10000 <= len(calls) <= 10001
        assert calls[0] == 0.0

    def test_function_error_propagates(self):
        """Ошибка fx (log(0)) пробрасывается без обёртки."""
        with pytest.raises(ValueError):
            integral_definite(math.log, 0.0, 1.0)

    @pytest.mark.parametrize("bounds", [(0.0, math.inf), (-math.inf, 1.0), (math.nan, 1.0), (0.0, math.nan)])
    def test_non_finite_bounds_raise(self, bounds):
        with pytest.raises(ValueError, match="must be a finite float"):
            integral_definite(square, *bounds)


# =============================================================================
# ТЕСТЫ: Неопределённый интеграл
# =============================================================================


class TestIntegral:
    """Тесты integral()."""

    @pytest.mark.parametrize(
        "x,expected",
        [(1.0, 0.333), (3.0, 9.0), (9.0, 243.0)],
    )
    def test_square_documented_values(self, x, expected):
        """integral(x**2)(x) ≈ x**3 / 3."""
        assert integral(square)(x) == pytest.approx(expected, abs=1e-2)

    def test_at_reference_point_is_zero(self):
        assert integral(square)(0.0) == 0.0
        assert integral(square, 2.0)(2.0) == 0.0

    def test_valid_value_shifts_by_constant(self):
        """Смена valid_value сдвигает результат на ∫[0, valid_value]."""
        from_zero = integral(square)(3.0)
        from_one = integral(square, 1.0)(3.0)
        assert from_zero - from_one == pytest.approx(1 / 3, abs=2e-3)

    def test_non_finite_valid_value_raises(self):
        with pytest.raises(ValueError, match="valid_value must be a finite float"):
            integral(square, math.inf)

    def test_integral_object(self):
        F = integral(square, 1.5)
        assert isinstance(F, Integral)
        assert F.fx is square
        assert F.valid_value == 1.5

        with pytest.raises(dataclasses.FrozenInstanceError):
            F.valid_value = 0.0
