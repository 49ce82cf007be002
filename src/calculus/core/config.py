"""
Configuration — численное разрешение toolkit и настройка логирования

Единственный настраиваемый параметр — LARGE ("бесконечность" для шага
дифференцирования и интегрирования). Остальное выводится из него:

    SMALL    = 1 / LARGE
    ACCURACY = floor(log10(LARGE)) - 1

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. SMALL и ACCURACY всегда вычисляются из LARGE, никогда не задаются отдельно
2. Конфигурация immutable (frozen), создаётся один раз при импорте
3. LARGE можно переопределить только через env CALCULUS_LARGE до импорта
"""

import logging
import math
import os
from typing import Final, Optional

from pydantic import BaseModel, Field, computed_field

logger = logging.getLogger(__name__)


# =============================================================================
# ПАРАМЕТРЫ ПО УМОЛЧАНИЮ
# =============================================================================

# "Бесконечность" по умолчанию: шаг 1e-4, точность 3 знака
DEFAULT_LARGE: Final[float] = 10000.0

# Минимум LARGE, при котором ACCURACY >= 0
LARGE_MIN: Final[float] = 10.0

LARGE_ENV_VAR: Final[str] = "CALCULUS_LARGE"
LOG_LEVEL_ENV_VAR: Final[str] = "CALCULUS_LOG_LEVEL"


# =============================================================================
# МОДЕЛЬ КОНФИГУРАЦИИ
# =============================================================================


class CalculusConfig(BaseModel):
    """
    Численное разрешение всех операций toolkit.

    Attributes:
        large: "Бесконечность", обратная величина шага (единственный tunable)
        small: Шаг конечных разностей и интегрирования (= 1 / large)
        accuracy: Количество десятичных знаков округления результатов

    Examples:
        >>> cfg = CalculusConfig(large=1000.0)
        >>> cfg.small
        0.001
        >>> cfg.accuracy
        2
    """

    large: float = Field(
        default=DEFAULT_LARGE,
        ge=LARGE_MIN,
        allow_inf_nan=False,
        description="Обратная величина шага (>= 10)",
    )

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def small(self) -> float:
        return 1 / self.large

    @computed_field  # type: ignore[prop-decorator]
    @property
    def accuracy(self) -> int:
        return math.floor(math.log10(self.large)) - 1


def load_config() -> CalculusConfig:
    """
    Построение конфигурации из окружения.

    Если задан CALCULUS_LARGE, он используется как large; иначе DEFAULT_LARGE.

    Raises:
        ValueError: Если CALCULUS_LARGE не число
        pydantic.ValidationError: Если large < 10 или не finite
    """
    raw = os.environ.get(LARGE_ENV_VAR)
    if raw is None:
        return CalculusConfig()

    try:
        large = float(raw)
    except ValueError:
        raise ValueError(f"{LARGE_ENV_VAR} must be a number, got {raw!r}")

    logger.debug("Using %s=%s", LARGE_ENV_VAR, large)
    return CalculusConfig(large=large)


# Глобальная конфигурация процесса (read-only после импорта)
DEFAULT_CONFIG: Final[CalculusConfig] = load_config()

LARGE: Final[float] = DEFAULT_CONFIG.large
SMALL: Final[float] = DEFAULT_CONFIG.small
ACCURACY: Final[int] = DEFAULT_CONFIG.accuracy


def resolve_config(config: Optional[CalculusConfig] = None) -> CalculusConfig:
    """Явно переданная конфигурация или глобальная DEFAULT_CONFIG."""
    return config if config is not None else DEFAULT_CONFIG


# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================


def configure_logging(level: Optional[str] = None) -> int:
    """
    Настройка корневого логгера для entry points.

    Библиотечный код только пишет в logging.getLogger(__name__) и не
    вызывает эту функцию сам.

    Args:
        level: Имя уровня (DEBUG/INFO/...). По умолчанию env CALCULUS_LOG_LEVEL
               или WARNING.

    Returns:
        Числовой уровень, который был применён
    """
    name = (level or os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")).upper()
    numeric = getattr(logging, name, logging.WARNING)
    if not isinstance(numeric, int):
        numeric = logging.WARNING

    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return numeric
