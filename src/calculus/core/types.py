"""Общие типы toolkit."""

from typing import Callable

# Функция одной вещественной переменной: единица композиции во всём toolkit
Func = Callable[[float], float]
