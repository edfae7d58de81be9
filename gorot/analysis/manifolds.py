# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""
Constraint manifolds of the rotation matrix.

A gradient projection step needs four manifold-specific pieces: how the
rotated loadings are obtained from ``(F, T)``, how the gradient of the
criterion with respect to the loadings becomes a gradient with respect to
``T``, how that gradient is projected on the tangent space at ``T``, and
how a trial point off the manifold is pulled back onto it (retraction).
:class:`OrthogonalManifold` and :class:`ObliqueManifold` provide them with
the same interface so that a single descent loop serves both methods.
"""

import numpy as np
from scipy import linalg

from .criteria import RotationMethod

__all__ = [
    "OrthogonalManifold",
    "ObliqueManifold",
    "column_normalize",
]


def column_normalize(X):
    """Rescale every column of `X` to unit Euclidean norm (new array)."""
    return X / linalg.norm(X, axis=0, keepdims=True)


class OrthogonalManifold:
    r"""
    Square orthogonal matrices, :math:`T^\top T = I`.

    The rotated loadings are :math:`L = F T` and the retraction is the
    orthogonal polar factor :math:`U V^\top` of the trial point's SVD.

    References
    ----------
    .. [1] Jennrich, R.I. (2001). A simple general procedure for orthogonal
       rotation. Psychometrika, 66, 289-306.
    """

    method = RotationMethod.ORTHOGONAL

    @staticmethod
    def initial_point(p, random_state=None):
        """
        Starting rotation: the identity, or the orthogonal factor of the QR
        decomposition of a standard normal ``p x p`` matrix when a
        :class:`numpy.random.RandomState` is given.
        """
        if random_state is None:
            return np.eye(p)
        Q, _ = linalg.qr(random_state.standard_normal((p, p)))
        return Q

    @staticmethod
    def loadings(F, T):
        return F @ T

    @staticmethod
    def gradient(F, T, L, dQ):
        """Gradient of the criterion with respect to `T`: ``F' dQ``."""
        return F.T @ dQ

    @staticmethod
    def project(T, G):
        """Remove from `G` the symmetric part of ``T' G`` (normal space)."""
        M = T.T @ G
        S = (M + M.T) / 2.0
        return G - T @ S

    @staticmethod
    def retract(X):
        U, _, Vt = linalg.svd(X)
        return U @ Vt


class ObliqueManifold:
    r"""
    Square matrices with unit-norm columns.

    The rotated loadings are :math:`L = F T^{-\top}`, obtained by solving
    against ``T`` instead of inverting it, and the retraction rescales
    every column of the trial point to unit length.

    References
    ----------
    .. [1] Jennrich, R.I. (2002). A simple general method for oblique
       rotation. Psychometrika, 67, 7-19.
    """

    method = RotationMethod.OBLIQUE

    @staticmethod
    def initial_point(p, random_state=None):
        """
        Starting rotation: the identity, or a standard normal ``p x p``
        matrix with unit-norm columns when a
        :class:`numpy.random.RandomState` is given.
        """
        if random_state is None:
            return np.eye(p)
        return column_normalize(random_state.standard_normal((p, p)))

    @staticmethod
    def loadings(F, T):
        # (T^-1 F')'
        return linalg.solve(T, F.T).T

    @staticmethod
    def gradient(F, T, L, dQ):
        """Gradient of the criterion with respect to `T`: ``-T^-T dQ' L``."""
        return linalg.solve(T.T, -dQ.T @ L)

    @staticmethod
    def project(T, G):
        """Remove from every column of `G` its component along ``T``'s column."""
        return G - T * np.sum(T * G, axis=0, keepdims=True)

    @staticmethod
    def retract(X):
        return column_normalize(X)

