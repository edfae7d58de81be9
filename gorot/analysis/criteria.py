# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""
Rotation Criteria
=================

Differentiable simple-structure criteria minimized by the gradient
projection algorithms of :mod:`gorot.analysis.gpa`.

Every criterion is an immutable value object exposing a single operation,
:meth:`RotationCriterion.evaluate`, which maps a rotated loading matrix
``L`` of shape ``(d, p)`` to the pair ``(dQ, Q)``: the gradient of the
criterion with respect to ``L`` and its value. Each criterion carries a
:class:`RotationMethod` tag, fixed at construction, which tells
:func:`gorot.analysis.rotation.rotate` whether the rotation matrix lives on
the orthogonal or on the oblique manifold.

Notation used below: ``L2`` is the elementwise square of ``L``, ``N`` is the
``p x p`` matrix of ones with a zero diagonal and ``M`` its ``d x d``
analogue. Products with ``N`` and ``M`` are computed by broadcasting
row/column sums instead of forming those matrices.
"""

from abc import ABCMeta, abstractmethod
from enum import Enum
from numbers import Real

import numpy as np

from ..compat.sklearn import validate_params, Interval, StrOptions
from ..exceptions import RotationMethodError
from .._gorotlog import gorotlog

logger = gorotlog.get_gorot_logger(__name__)

__all__ = [
    "RotationMethod",
    "RotationCriterion",
    "CrawfordFerguson",
    "Varimax",
    "Quartimax",
    "MinimumEntropy",
    "Oblimin",
    "Quartimin",
]


class RotationMethod(str, Enum):
    """Constraint placed on the rotation matrix ``T``."""

    ORTHOGONAL = "orthogonal"
    OBLIQUE = "oblique"

    def __str__(self):
        return self.value


_METHOD_CONSTRAINT = [StrOptions({"orthogonal", "oblique"}), RotationMethod]


def _off_diagonal_row_sums(L2):
    # L2 @ N: for every entry, the sum of the other entries of its row.
    return L2.sum(axis=1, keepdims=True) - L2


def _off_diagonal_col_sums(L2):
    # M @ L2: for every entry, the sum of the other entries of its column.
    return L2.sum(axis=0, keepdims=True) - L2


class RotationCriterion(metaclass=ABCMeta):
    """
    Base class of the factor rotation criteria.

    Subclasses implement :meth:`evaluate` and list in ``_methods`` the
    rotation methods they are defined for. The rotation method of an
    instance is read-only and so are the shape parameters exposed by the
    subclasses, so instances can be shared between concurrent rotations.

    Parameters
    ----------
    method : {'orthogonal', 'oblique'} or RotationMethod
        Rotation method the criterion is used with.

    Raises
    ------
    RotationMethodError
        If the criterion is not defined for `method`.
    """

    __slots__ = ("_method",)

    _methods = (RotationMethod.ORTHOGONAL, RotationMethod.OBLIQUE)

    def __init__(self, method):
        method = RotationMethod(method)
        if method not in self._methods:
            raise RotationMethodError(
                f"{type(self).__name__} is not defined for {method} rotation."
                f" Supported: {[str(m) for m in self._methods]}."
            )
        self._method = method

    @property
    def method(self):
        """:class:`RotationMethod` tag selecting the optimizer."""
        return self._method

    @abstractmethod
    def evaluate(self, L):
        """
        Evaluate the criterion at the rotated loadings `L`.

        Parameters
        ----------
        L : ndarray of shape (d, p)
            Rotated loading matrix.

        Returns
        -------
        gradient : ndarray of shape (d, p)
            Gradient of the criterion with respect to `L`. Always a newly
            allocated array.
        value : float
            Value of the criterion.
        """

    def get_params(self):
        """Return the shape parameters of the criterion as a dict."""
        return {}

    def _key(self):
        return (type(self), self._method, tuple(sorted(self.get_params().items())))

    def __eq__(self, other):
        if not isinstance(other, RotationCriterion):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        params = [f"{k}={v!r}" for k, v in self.get_params().items()]
        if len(self._methods) > 1:
            params.append(f"method={str(self._method)!r}")
        return f"{type(self).__name__}({', '.join(params)})"


class CrawfordFerguson(RotationCriterion):
    r"""
    Crawford-Ferguson family of rotation criteria.

    Valid for both orthogonal and oblique rotation. The criterion is

    .. math::

        Q(L) = \frac{1 - \kappa}{4} \operatorname{tr}(L_2^\top L_2 N)
             + \frac{\kappa}{4} \operatorname{tr}(L_2^\top M L_2)

    with gradient :math:`(1 - \kappa) L \odot (L_2 N) + \kappa L \odot (M L_2)`.

    Parameters
    ----------
    kappa : float, default=0.0
        Non-negative shape parameter. In the orthogonal setting with ``d``
        variables and ``p`` factors, classical members of the family are

        - ``kappa = 0``: quartimax
        - ``kappa = 1 / d``: varimax
        - ``kappa = p / (2 * d)``: equamax
        - ``kappa = (p - 1) / (d + p - 2)``: parsimax
        - ``kappa = 1``: factor parsimony

        See :func:`gorot.analysis.rotation.crawford_ferguson_kappa`.
    method : {'orthogonal', 'oblique'}, default='orthogonal'
        Rotation method.

    Raises
    ------
    InvalidParameterError
        If `kappa` is negative or not a real number.

    References
    ----------
    .. [1] Crawford, C.B. and Ferguson, G.A. (1970). A general rotation
       criterion and its use in orthogonal rotation. Psychometrika, 35,
       321-332.
    .. [2] Browne, M.W. (2001). An overview of analytic rotation in
       exploratory factor analysis. Multivariate Behavioral Research, 36,
       111-150.

    Examples
    --------
    >>> import numpy as np
    >>> from gorot.analysis.criteria import CrawfordFerguson
    >>> L = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])
    >>> grad, value = CrawfordFerguson(kappa=1 / 3).evaluate(L)
    """

    __slots__ = ("_kappa",)

    @validate_params(
        {
            "kappa": [Interval(Real, 0, None, closed="left")],
            "method": _METHOD_CONSTRAINT,
        },
        prefer_skip_nested_validation=False,
    )
    def __init__(self, kappa=0.0, method="orthogonal"):
        super().__init__(method)
        self._kappa = float(kappa)

    @property
    def kappa(self):
        return self._kappa

    def get_params(self):
        return {"kappa": self._kappa}

    def evaluate(self, L):
        kappa = self._kappa
        L2 = L ** 2
        row_part = _off_diagonal_row_sums(L2)
        col_part = _off_diagonal_col_sums(L2)
        gradient = (1 - kappa) * L * row_part + kappa * L * col_part
        value = ((1 - kappa) * np.sum(L2 * row_part)
                 + kappa * np.sum(L2 * col_part)) / 4.0
        return gradient, float(value)


class Varimax(RotationCriterion):
    r"""
    Varimax criterion, orthogonal only.

    Minimizes

    .. math::

        Q(L) = -\frac{1}{4} \lVert L_2 - \bar{L_2} \rVert^2

    where :math:`\bar{L_2}` broadcasts the column means of :math:`L_2`.

    References
    ----------
    .. [1] Kaiser, H.F. (1958). The varimax criterion for analytic rotation
       in factor analysis. Psychometrika, 23, 187-200.
    """

    __slots__ = ()

    _methods = (RotationMethod.ORTHOGONAL,)

    def __init__(self):
        super().__init__(RotationMethod.ORTHOGONAL)

    def evaluate(self, L):
        L2 = L ** 2
        Q = L2 - L2.mean(axis=0, keepdims=True)
        return -L * Q, float(-np.sum(Q ** 2) / 4.0)


class Quartimax(RotationCriterion):
    r"""
    Quartimax criterion, orthogonal only.

    Minimizes :math:`Q(L) = -\lVert L_2 \rVert^2 / 4`.

    References
    ----------
    .. [1] Carroll, J.B. (1953). An analytic solution for approximating
       simple structure in factor analysis. Psychometrika, 18, 23-38.
    .. [2] Neuhaus, J.O. and Wrigley, C. (1954). The quartimax method.
       British Journal of Statistical Psychology, 7, 81-91.
    """

    __slots__ = ()

    _methods = (RotationMethod.ORTHOGONAL,)

    def __init__(self):
        super().__init__(RotationMethod.ORTHOGONAL)

    def evaluate(self, L):
        L2 = L ** 2
        return -L * L2, float(-np.sum(L2 ** 2) / 4.0)


class MinimumEntropy(RotationCriterion):
    r"""
    Simple entropy criterion, orthogonal only.

    Minimizes :math:`Q(L) = -\operatorname{tr}(L_2^\top \log L_2) / 2`.
    There is no oblique version of this criterion.

    Notes
    -----
    The criterion is undefined when a loading is exactly zero: the
    logarithm then produces ``-inf`` and the value and gradient turn into
    NaN. Inputs with exact zero loadings must be avoided by the caller.

    References
    ----------
    .. [1] Jennrich, R.I. (2004). Rotation to simple loadings using
       component loss functions: The orthogonal case. Psychometrika, 69,
       257-273.
    """

    __slots__ = ()

    _methods = (RotationMethod.ORTHOGONAL,)

    def __init__(self):
        super().__init__(RotationMethod.ORTHOGONAL)

    def evaluate(self, L):
        L2 = L ** 2
        log_L2 = np.log(L2)
        return -L * log_L2 - L, float(-np.sum(L2 * log_L2) / 2.0)


class Oblimin(RotationCriterion):
    r"""
    Oblimin family of rotation criteria.

    Valid for both orthogonal and oblique rotation. Minimizes

    .. math::

        Q(L) = \frac{1}{4} \operatorname{tr}\left(L_2^\top
               (I - \tfrac{\gamma}{d} C) L_2 N\right)

    where ``C`` is the ``d x d`` matrix of ones.

    Parameters
    ----------
    gamma : float, default=0.0
        Shape parameter; negative values are allowed and can be useful for
        oblique rotation. For oblique rotation ``gamma = 0`` is quartimin,
        ``0.5`` biquartimin and ``1`` covarimin. For orthogonal rotation the
        family is equivalent to orthomax: ``0`` quartimax, ``0.5``
        biquartimax, ``1`` varimax and ``d / 2`` equamax.
    method : {'orthogonal', 'oblique'}, default='oblique'
        Rotation method.

    References
    ----------
    .. [1] Harman, H.H. (1976). Modern factor analysis (3rd ed.). Chicago:
       The University of Chicago Press. Page 322.
    .. [2] Jennrich, R.I. (1979). Admissible values of gamma in direct
       oblimin rotation. Psychometrika, 44, 173-177.
    """

    __slots__ = ("_gamma",)

    @validate_params(
        {
            "gamma": [Interval(Real, None, None, closed="neither")],
            "method": _METHOD_CONSTRAINT,
        },
        prefer_skip_nested_validation=False,
    )
    def __init__(self, gamma=0.0, method="oblique"):
        super().__init__(method)
        self._gamma = float(gamma)

    @property
    def gamma(self):
        return self._gamma

    def get_params(self):
        return {"gamma": self._gamma}

    def evaluate(self, L):
        d = L.shape[0]
        L2 = L ** 2
        Q = _off_diagonal_row_sums(L2)
        if self._gamma != 0:
            # (I - gamma / d * C) @ Q
            Q = Q - (self._gamma / d) * Q.sum(axis=0, keepdims=True)
        return L * Q, float(np.sum(L2 * Q) / 4.0)


class Quartimin(RotationCriterion):
    r"""
    Quartimin criterion, oblique only.

    Minimizes :math:`Q(L) = \operatorname{tr}(L_2^\top L_2 N) / 4`, the
    oblique member ``gamma = 0`` of the :class:`Oblimin` family.

    References
    ----------
    .. [1] Carroll, J.B. (1960). IBM 704 program for generalized analytic
       rotation solution in factor analysis. Harvard University,
       unpublished.
    """

    __slots__ = ()

    _methods = (RotationMethod.OBLIQUE,)

    def __init__(self):
        super().__init__(RotationMethod.OBLIQUE)

    def evaluate(self, L):
        L2 = L ** 2
        Q = _off_diagonal_row_sums(L2)
        return L * Q, float(np.sum(L2 * Q) / 4.0)
