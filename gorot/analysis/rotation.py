# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""
Factor Rotation
===============

Public entry point of the package. :func:`rotate` hands a loading matrix
and a rotation criterion to the gradient projection optimizer matching the
criterion's rotation method. Helpers build criteria from their usual names
and derive the factor correlation matrix of a rotation.
"""

from numbers import Integral, Real

import pandas as pd

from ..api.docstring import _core_docs
from ..api.types import NDArray, DataFrame, Union
from ..compat.sklearn import validate_params, Interval, StrOptions, HasMethods
from ..compat.sklearn import InvalidParameterError
from ..exceptions import RotationMethodError
from ..tools.validator import check_loadings, restore_labels
from .._gorotlog import gorotlog
from .criteria import (
    RotationMethod,
    CrawfordFerguson,
    Varimax,
    Quartimax,
    MinimumEntropy,
    Oblimin,
    Quartimin,
)
from .gpa import gpa_orthogonal, gpa_oblique

logger = gorotlog.get_gorot_logger(__name__)

__all__ = [
    "rotate",
    "get_criterion",
    "crawford_ferguson_kappa",
    "factor_correlation",
]

_OPTIMIZERS = {
    RotationMethod.ORTHOGONAL: gpa_orthogonal,
    RotationMethod.OBLIQUE: gpa_oblique,
}

_CF_FAMILY = {"quartimax", "varimax", "equamax", "parsimax", "factor_parsimony"}

_ALIASES = {
    "entropy": "minimum_entropy",
    "minimumentropy": "minimum_entropy",
    "cf": "crawford_ferguson",
    "crawfordferguson": "crawford_ferguson",
    "factorparsimony": "factor_parsimony",
}


@validate_params(
    {
        "criterion": [HasMethods(["evaluate"])],
        "normalizerows": ["boolean"],
        "randominit": ["boolean"],
        "maxiter": [Interval(Integral, 0, None, closed="left")],
        "lsiter": [Interval(Integral, 1, None, closed="left")],
        "tol": [Interval(Real, 0, None, closed="neither")],
        "random_state": ["random_state"],
        "callback": [callable, None],
    }
)
def rotate(
    loadings,
    criterion,
    normalizerows=False,
    randominit=False,
    maxiter=1000,
    lsiter=10,
    tol=1e-6,
    *,
    random_state=None,
    callback=None,
):
    _, labels = check_loadings(loadings, copy=False)
    try:
        optimizer = _OPTIMIZERS[RotationMethod(criterion.method)]
    except (KeyError, ValueError, AttributeError):
        raise RotationMethodError(
            f"No rotation algorithm for the method of {criterion!r}."
        ) from None

    L, T = optimizer(
        loadings,
        criterion,
        normalizerows=normalizerows,
        randominit=randominit,
        maxiter=maxiter,
        lsiter=lsiter,
        tol=tol,
        random_state=random_state,
        callback=callback,
    )
    return restore_labels(L, T, labels)

rotate.__doc__ = """\
Rotate a loading matrix toward simple structure.

The criterion's ``method`` tag selects the optimizer:
:func:`~gorot.analysis.gpa.gpa_orthogonal` for orthogonal criteria and
:func:`~gorot.analysis.gpa.gpa_oblique` for oblique ones. All options are
passed through unchanged.

Parameters
----------
{params.loadings}
{params.criterion}
{params.normalizerows}
{params.randominit}
{params.maxiter}
{params.lsiter}
{params.tol}
{params.random_state}
{params.callback}

Returns
-------
{returns.L}
    A :class:`pandas.DataFrame` with the index and columns of `loadings`
    when `loadings` is a DataFrame.
{returns.T}
    A :class:`pandas.DataFrame` indexed and labelled by the columns of
    `loadings` when `loadings` is a DataFrame.

Raises
------
ConvergenceError
    If the rotation does not converge within `maxiter` iterations.
InvalidParameterError
    If an option is out of range, e.g. ``lsiter=0`` or ``tol=0``.
RotationMethodError
    If no optimizer handles the criterion's method.
ValueError
    If `loadings` is not a finite 2-D numeric matrix.

See Also
--------
get_criterion : Build a criterion from its name.
factor_correlation : Correlations among the rotated factors.

Examples
--------
>>> import numpy as np
>>> from gorot.analysis.criteria import Varimax, Oblimin
>>> from gorot.analysis.rotation import rotate
>>> F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])
>>> L, T = rotate(F, Varimax())
>>> L, T = rotate(F, Oblimin(gamma=0.5), normalizerows=True)
""".format(params=_core_docs["params"], returns=_core_docs["returns"])


@validate_params(
    {
        "name": [StrOptions(_CF_FAMILY)],
        "n_variables": [Interval(Integral, 1, None, closed="left")],
        "n_factors": [Interval(Integral, 1, None, closed="left")],
    }
)
def crawford_ferguson_kappa(name, n_variables, n_factors):
    r"""
    Shape parameter of a named member of the Crawford-Ferguson family.

    Parameters
    ----------
    name : {'quartimax', 'varimax', 'equamax', 'parsimax', 'factor_parsimony'}
        Member of the family.
    n_variables : int
        Number of observed variables ``d`` (rows of the loadings).
    n_factors : int
        Number of factors ``p`` (columns of the loadings).

    Returns
    -------
    kappa : float
        ``0`` (quartimax), ``1/d`` (varimax), ``p/(2d)`` (equamax),
        ``(p-1)/(d+p-2)`` (parsimax) or ``1`` (factor parsimony).

    Raises
    ------
    InvalidParameterError
        For parsimax when ``d + p - 2 == 0``.

    Examples
    --------
    >>> from gorot.analysis.rotation import crawford_ferguson_kappa
    >>> crawford_ferguson_kappa("equamax", 10, 3)
    0.15
    """
    d, p = n_variables, n_factors
    if name == "quartimax":
        return 0.0
    if name == "varimax":
        return 1.0 / d
    if name == "equamax":
        return p / (2.0 * d)
    if name == "parsimax":
        if d + p - 2 == 0:
            raise InvalidParameterError(
                "Parsimax is undefined for a single variable and a single"
                " factor (d + p - 2 == 0)."
            )
        return (p - 1.0) / (d + p - 2.0)
    return 1.0


@validate_params(
    {
        "name": [str],
        "n_variables": [Interval(Integral, 1, None, closed="left"), None],
        "n_factors": [Interval(Integral, 1, None, closed="left"), None],
    },
    prefer_skip_nested_validation=False,
)
def get_criterion(name, n_variables=None, n_factors=None, **params):
    """
    Build a rotation criterion from its name.

    Parameters
    ----------
    name : str
        Case-insensitive criterion name; spaces and hyphens count as
        underscores. One of ``'varimax'``, ``'quartimax'``,
        ``'minimum_entropy'`` (``'entropy'``), ``'quartimin'``,
        ``'oblimin'``, ``'crawford_ferguson'`` (``'cf'``), or one of the
        orthogonal Crawford-Ferguson members ``'equamax'``,
        ``'parsimax'``, ``'factor_parsimony'``.
    n_variables, n_factors : int, optional
        Shape of the loadings to rotate. Required by ``'equamax'``,
        ``'parsimax'`` and ``'factor_parsimony'`` whose ``kappa`` depends
        on it.
    **params : dict
        Criterion parameters: ``gamma`` and ``method`` for ``'oblimin'``,
        ``kappa`` and ``method`` for ``'crawford_ferguson'``, ``method``
        for the Crawford-Ferguson members. The fixed-method criteria take
        none.

    Returns
    -------
    criterion : RotationCriterion

    Raises
    ------
    InvalidParameterError
        If the name is unknown, a required shape is missing, or `params`
        does not fit the criterion.

    Examples
    --------
    >>> from gorot.analysis.rotation import get_criterion
    >>> get_criterion("varimax")
    Varimax()
    >>> get_criterion("oblimin", gamma=0.5)
    Oblimin(gamma=0.5, method='oblique')
    >>> get_criterion("equamax", n_variables=10, n_factors=3)
    CrawfordFerguson(kappa=0.15, method='orthogonal')
    """
    key = name.strip().lower().replace("-", "_").replace(" ", "_")
    key = _ALIASES.get(key, key)

    fixed = {
        "varimax": Varimax,
        "quartimax": Quartimax,
        "minimum_entropy": MinimumEntropy,
        "quartimin": Quartimin,
    }
    if key in fixed:
        if params:
            raise InvalidParameterError(
                f"{name!r} takes no parameters, got {sorted(params)}.")
        return fixed[key]()

    try:
        if key == "oblimin":
            return Oblimin(**params)
        if key == "crawford_ferguson":
            return CrawfordFerguson(**params)
    except TypeError as e:
        raise InvalidParameterError(f"Invalid parameters for {name!r}: {e}") from e

    if key in _CF_FAMILY:
        if n_variables is None or n_factors is None:
            raise InvalidParameterError(
                f"{name!r} needs `n_variables` and `n_factors` to derive kappa.")
        unknown = set(params) - {"method"}
        if unknown:
            raise InvalidParameterError(
                f"{name!r} only accepts `method`, got {sorted(unknown)}.")
        kappa = crawford_ferguson_kappa(key, n_variables, n_factors)
        return CrawfordFerguson(kappa=kappa, **params)

    raise InvalidParameterError(
        f"Unknown rotation criterion {name!r}. Expected one of"
        f" {sorted(set(fixed) | _CF_FAMILY | {'oblimin', 'crawford_ferguson'})}."
    )


def factor_correlation(
    T: Union[NDArray, DataFrame]
) -> Union[NDArray, DataFrame]:
    """
    Correlation matrix among the factors of a rotation, ``T.T @ T``.

    Parameters
    ----------
    T : array-like or pandas.DataFrame of shape (p, p)
        Rotation matrix returned by :func:`rotate`.

    Returns
    -------
    phi : ndarray or pandas.DataFrame of shape (p, p)
        Identity for an orthogonal rotation; unit diagonal for an oblique
        rotation. Labelled by the columns of `T` when `T` is a DataFrame.

    Examples
    --------
    >>> import numpy as np
    >>> from gorot.analysis.rotation import factor_correlation
    >>> factor_correlation(np.eye(2))
    array([[1., 0.],
           [0., 1.]])
    """
    T_arr, labels = check_loadings(T, copy=False, input_name="T")
    if T_arr.shape[0] != T_arr.shape[1]:
        raise ValueError(
            f"Rotation matrix must be square, got shape {T_arr.shape}.")
    phi = T_arr.T @ T_arr
    if labels is not None:
        phi = pd.DataFrame(phi, index=labels[1], columns=labels[1])
    return phi
