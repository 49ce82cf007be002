"""Grapher — ASCII графики функций прямо в терминале.

Прямоугольное окно функционального пространства (domain × range)
отображается на сетку символов width × height:
- Сначала оси: '|' в колонке x=0, затем '-' в строке y=0 (если в пределах сетки)
- Затем каждая функция своим glyph, колонка за колонкой
- Соседние точки соединяются вертикальной линией, чтобы крутые участки
  не рвались
- Точки вне range, NaN/Inf и ArithmeticError из fx пропускаются молча
- ValueError из fx (math-домен, например sqrt(-1)) пропускается с WARNING
  один раз на функцию за рендер; остальные ошибки fx пробрасываются
"""

import logging
import math
import sys
from typing import List, Optional, TextIO, Tuple

from pydantic import BaseModel, Field, model_validator

from calculus.core.types import Func

logger = logging.getLogger(__name__)

# Арифметические сбои fx (деление на ноль, переполнение): точка не определена
UNDEFINED_POINT_ERRORS = (ArithmeticError,)

DEFAULT_GLYPH = "#"
AXIS_VERTICAL = "|"
AXIS_HORIZONTAL = "-"


# =============================================================================
# НАСТРОЙКИ
# =============================================================================


class Window(BaseModel):
    """Отрезок [lower, upper] функционального пространства."""

    lower: float = Field(..., allow_inf_nan=False)
    upper: float = Field(..., allow_inf_nan=False)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_order(self) -> "Window":
        if self.lower >= self.upper:
            raise ValueError(
                f"window lower must be < upper, got [{self.lower}, {self.upper}]"
            )
        return self


class GraphSettings(BaseModel):
    """
    Размер сетки и окно отображения.

    Значения по умолчанию: 80x24 символа, domain и range [-10, 10].
    """

    width: int = Field(default=80, ge=2, description="Ширина сетки (символы)")
    height: int = Field(default=24, ge=1, description="Высота сетки (символы)")
    domain: Window = Field(default=Window(lower=-10.0, upper=10.0))
    value_range: Window = Field(default=Window(lower=-10.0, upper=10.0))

    model_config = {"frozen": True}


def _map(value: float, lower: float, upper: float, new_lower: float, new_upper: float) -> float:
    """Линейное отображение value из [lower, upper] в [new_lower, new_upper]."""
    return (value - lower) * (new_upper - new_lower) / (upper - lower) + new_lower


# =============================================================================
# GRAPHER
# =============================================================================


class Grapher:
    """ASCII-рендер одной или нескольких функций на фиксированной сетке.

    Экземпляр хранит изменяемую конфигурацию (список функций, окно) и
    рассчитан на одного владельца.

    Example:
        >>> g = Grapher()
        >>> g.set_output_dimensions(60, 20)
        >>> g.set_domain(-20, 20)
        >>> g.set_range(-20, 20)
        >>> g.add_function(lambda x: x * x, "*")
        >>> g.display()  # doctest: +SKIP
    """

    def __init__(self, settings: Optional[GraphSettings] = None):
        """
        Args:
            settings: начальные настройки (default: 80x24, [-10, 10] × [-10, 10])
        """
        self._settings = settings or GraphSettings()
        self._functions: List[Tuple[Func, str]] = []

    @property
    def settings(self) -> GraphSettings:
        return self._settings

    @property
    def functions(self) -> Tuple[Tuple[Func, str], ...]:
        return tuple(self._functions)

    # -------------------------------------------------------------------------
    # Конфигурация
    # -------------------------------------------------------------------------

    def _update(self, **changes) -> None:
        self._settings = GraphSettings.model_validate(
            {**self._settings.model_dump(), **changes}
        )

    def set_output_dimensions(self, width: int, height: int) -> None:
        """Размер выводимого графика в символах."""
        self._update(width=width, height=height)

    def set_domain(self, lower: float, upper: float) -> None:
        """Левая и правая границы по x."""
        self._update(domain={"lower": lower, "upper": upper})

    def set_range(self, lower: float, upper: float) -> None:
        """Нижняя и верхняя границы по y."""
        self._update(value_range={"lower": lower, "upper": upper})

    def add_function(self, fx: Func, glyph: str = DEFAULT_GLYPH) -> None:
        """
        Добавление функции для отрисовки в display().

        Args:
            fx: функция для отрисовки
            glyph: один символ, которым рисуется функция

        Raises:
            TypeError: если fx не вызываемый
            ValueError: если glyph не один символ
        """
        if not callable(fx):
            raise TypeError(f"fx must be callable, got {type(fx).__name__}")
        if not isinstance(glyph, str) or len(glyph) != 1:
            raise ValueError(f"glyph must be a single character, got {glyph!r}")

        self._functions.append((fx, glyph))

    def clear_functions(self) -> None:
        """Сброс всех добавленных функций."""
        self._functions.clear()

    # -------------------------------------------------------------------------
    # Рендер
    # -------------------------------------------------------------------------

    def render(self) -> str:
        """Построение графика как строки (height строк по width символов)."""
        s = self._settings
        width, height = s.width, s.height
        domain, value_range = s.domain, s.value_range

        screen = [[" "] * width for _ in range(height)]

        def pixel_to_x(column: int) -> float:
            return _map(column, 0, width - 1, domain.lower, domain.upper)

        def x_to_pixel(x: float) -> int:
            return int(_map(x, domain.lower, domain.upper, 0, width))

        def y_to_pixel(y: float) -> int:
            return int(_map(y, value_range.lower, value_range.upper, height, 0))

        # Оси: x_axis — строка оси X, y_axis — колонка оси Y
        x_axis = y_to_pixel(0.0)
        y_axis = x_to_pixel(0.0)
        if 0 <= y_axis < width:
            for row in screen:
                row[y_axis] = AXIS_VERTICAL
        if 0 <= x_axis < height:
            screen[x_axis] = [AXIS_HORIZONTAL] * width

        for fx, glyph in self._functions:
            last_row: Optional[int] = None
            warned = False

            for column in range(width):
                x = pixel_to_x(column)
                try:
                    y = self._sample(fx, x)
                except ValueError as e:
                    if not warned:
                        logger.warning(
                            "Function %r (glyph %r) failed at x=%s, skipping such points: %s",
                            fx, glyph, x, e,
                        )
                        warned = True
                    continue

                if y is None or y < value_range.lower or y > value_range.upper:
                    continue

                row = y_to_pixel(y)
                # y == value_range.lower отображается в строку height
                if not 0 <= row < height:
                    continue

                # Соединяем с предыдущей точкой вертикальной линией
                if last_row is not None and last_row != row:
                    step = -1 if last_row > row else 1
                    for j in range(last_row, row, step):
                        screen[j][column] = glyph

                last_row = row
                screen[row][column] = glyph

        return "".join("".join(row) + "\n" for row in screen)

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Вывод графика в stream (default: stdout) одной записью."""
        (stream or sys.stdout).write(self.render())

    @staticmethod
    def _sample(fx: Func, x: float) -> Optional[float]:
        try:
            y = fx(x)
        except UNDEFINED_POINT_ERRORS as e:
            logger.debug("Skipping undefined point x=%s: %s", x, e)
            return None

        if not math.isfinite(y):
            return None
        return y
