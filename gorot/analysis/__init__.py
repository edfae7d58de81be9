"""
Analysis sub-package gathers the rotation criteria
(:mod:`~gorot.analysis.criteria`), the constraint manifolds of the rotation
matrix (:mod:`~gorot.analysis.manifolds`), the gradient projection
optimizers (:mod:`~gorot.analysis.gpa`) and the public rotation API
(:mod:`~gorot.analysis.rotation`).
"""
from .criteria import (
    RotationMethod,
    RotationCriterion,
    CrawfordFerguson,
    Varimax,
    Quartimax,
    MinimumEntropy,
    Oblimin,
    Quartimin,
    )
from .gpa import gpa_orthogonal, gpa_oblique
from .rotation import (
    rotate,
    get_criterion,
    crawford_ferguson_kappa,
    factor_correlation,
    )

__all__= [
    "RotationMethod",
    "RotationCriterion",
    "CrawfordFerguson",
    "Varimax",
    "Quartimax",
    "MinimumEntropy",
    "Oblimin",
    "Quartimin",
    "gpa_orthogonal",
    "gpa_oblique",
    "rotate",
    "get_criterion",
    "crawford_ferguson_kappa",
    "factor_correlation",
    ]
