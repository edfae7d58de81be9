# -*- coding: utf-8 -*-
#   License: BSD-3-Clause

"""
Provides the factor rotation API in two-level import form, so that
``from gorot.factors import rotate`` can replace the three-level path
``gorot.analysis.rotation``.

Example Usage:
    >>> import numpy as np
    >>> from gorot.factors import rotate, Varimax, factor_correlation
    >>> F = np.array([[0.8, 0.1],
    ...               [0.1, 0.8],
    ...               [0.6, 0.6]])
    >>> L, T = rotate(F, Varimax())
    >>> phi = factor_correlation(T)

Available Names:
  * rotate
  * get_criterion
  * crawford_ferguson_kappa
  * factor_correlation
  * CrawfordFerguson, Varimax, Quartimax, MinimumEntropy
  * Oblimin, Quartimin
  * RotationMethod
"""

from gorot.analysis.rotation import rotate, get_criterion
from gorot.analysis.rotation import crawford_ferguson_kappa, factor_correlation
from gorot.analysis.criteria import CrawfordFerguson, Varimax, Quartimax
from gorot.analysis.criteria import MinimumEntropy, Oblimin, Quartimin
from gorot.analysis.criteria import RotationMethod

__all__ = [
    "rotate",
    "get_criterion",
    "crawford_ferguson_kappa",
    "factor_correlation",
    "CrawfordFerguson",
    "Varimax",
    "Quartimax",
    "MinimumEntropy",
    "Oblimin",
    "Quartimin",
    "RotationMethod",
]
