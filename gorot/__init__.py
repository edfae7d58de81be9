# -*- coding: utf-8 -*-
# License: BSD-3-Clause

"""
GoRot: Gradient Projection Factor Rotation
==========================================

:code:`gorot` rotates factor loadings toward simple structure by
minimizing a rotation criterion under an orthogonal or an oblique
constraint with the gradient projection algorithm.
"""
import logging

# Configure basic logging
logging.basicConfig(level=logging.WARNING)

# Define the version
try:
    from ._version import version as __version__
except ImportError:
    __version__ = "0.1.0"

# Setup logging configuration
from ._util import initialize_logging
initialize_logging()

from .analysis.criteria import (
    RotationMethod,
    CrawfordFerguson,
    Varimax,
    Quartimax,
    MinimumEntropy,
    Oblimin,
    Quartimin,
)
from .analysis.rotation import (
    rotate,
    get_criterion,
    crawford_ferguson_kappa,
    factor_correlation,
)
from .exceptions import ConvergenceError, InvalidParameterError

__all__ = [
    "rotate",
    "get_criterion",
    "crawford_ferguson_kappa",
    "factor_correlation",
    "RotationMethod",
    "CrawfordFerguson",
    "Varimax",
    "Quartimax",
    "MinimumEntropy",
    "Oblimin",
    "Quartimin",
    "ConvergenceError",
    "InvalidParameterError",
    "__version__",
]
