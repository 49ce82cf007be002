"""
Тесты для общих типов

Func объявлен один раз и переиспользуется всеми модулями.
"""

import importlib

import pytest

import calculus
from calculus.core import math as core_math
from calculus.core.math import differentiation, integration, iteration

# calculus.core.math re-exports the roots() function, which shadows the submodule
roots = importlib.import_module("calculus.core.math.roots")
from calculus.core.types import Func
from calculus.plotting import grapher


class TestFunc:
    """Единственное объявление Func"""

    @pytest.mark.parametrize(
        "module",
        [calculus, core_math, differentiation, integration, iteration, roots, grapher],
    )
    def test_same_alias_everywhere(self, module):
        assert module.Func is Func
