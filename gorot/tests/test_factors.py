# -*- coding: utf-8 -*-
"""
test_factors.py
"""

import numpy as np

import gorot
from gorot import factors
from gorot.analysis import rotation


def test_two_level_imports():
    assert factors.rotate is rotation.rotate
    assert factors.get_criterion is rotation.get_criterion
    for name in factors.__all__:
        assert getattr(factors, name) is getattr(gorot, name)


def test_package_level_rotation():
    F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])
    L, T = gorot.rotate(F, gorot.get_criterion("quartimin"))
    np.testing.assert_allclose(np.diag(gorot.factor_correlation(T)), 1.0)
    assert isinstance(gorot.__version__, str)
