"""Plotting — ASCII рендер функций в терминале."""

from .grapher import (
    DEFAULT_GLYPH,
    GraphSettings,
    Grapher,
    Window,
)

__all__ = [
    "DEFAULT_GLYPH",
    "GraphSettings",
    "Grapher",
    "Window",
]
