# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""
Gradient Projection Algorithms
==============================

Orthogonal and oblique gradient projection rotation (GPA). Both variants
run the same descent loop on a different constraint manifold:

1. start from the identity (or a random point of the manifold),
2. evaluate the criterion at the rotated loadings and pull its gradient
   back to the rotation matrix,
3. project that gradient on the tangent space of the manifold,
4. stop when the projected gradient norm is below the tolerance,
5. otherwise backtrack along the projected gradient, retracting every
   trial point onto the manifold, until the criterion decreases enough,
6. accept the trial point and iterate.

References
----------
.. [1] Bernaards, C.A. and Jennrich, R.I. (2005). Gradient projection
   algorithms and software for arbitrary rotation criteria in factor
   analysis. Educational and Psychological Measurement, 65, 676-696.
"""

from numbers import Integral, Real

import numpy as np
from scipy import linalg

from ..api.docstring import _core_docs
from ..compat.sklearn import validate_params, Interval, HasMethods
from ..compat.sklearn import check_random_state
from ..exceptions import ConvergenceError, RotationMethodError
from ..tools.validator import check_loadings
from .._gorotlog import gorotlog
from .criteria import RotationMethod
from .manifolds import OrthogonalManifold, ObliqueManifold

logger = gorotlog.get_gorot_logger(__name__)

__all__ = ["gpa_orthogonal", "gpa_oblique"]

_gpa_constraints = {
    "criterion": [HasMethods(["evaluate"])],
    "normalizerows": ["boolean"],
    "randominit": ["boolean"],
    "maxiter": [Interval(Integral, 0, None, closed="left")],
    "lsiter": [Interval(Integral, 1, None, closed="left")],
    "tol": [Interval(Real, 0, None, closed="neither")],
    "random_state": ["random_state"],
    "callback": [callable, None],
}


def _check_method(criterion, manifold):
    method = getattr(criterion, "method", None)
    if method != manifold.method:
        raise RotationMethodError(
            f"{criterion!r} is a {method} criterion and cannot be used for"
            f" {manifold.method} rotation."
        )


def _gpa(F, criterion, manifold, normalizerows, randominit, maxiter,
         lsiter, tol, random_state, callback):
    """Descent loop shared by the orthogonal and oblique rotations.

    `F` is a private float copy of the loadings and is rescaled in place
    when `normalizerows` is set.
    """
    d, p = F.shape
    if d < 2:
        logger.info("Fewer than two variables (d=%d): loadings left unrotated.", d)
        return F, np.eye(p)

    if normalizerows:
        w = linalg.norm(F, axis=1, keepdims=True)
        F /= w

    rng = check_random_state(random_state) if randominit else None
    T = manifold.initial_point(p, rng)
    alpha = 1.0

    L = manifold.loadings(F, T)
    dQ, f = criterion.evaluate(L)
    G = manifold.gradient(F, T, L, dQ)
    Gp = manifold.project(T, G)
    s = linalg.norm(Gp)

    converged = False
    n_iter = 0
    for n_iter in range(1, maxiter + 1):
        logger.debug(
            "iter %d: criterion=%.10g, grad_norm=%.4g, step=%.4g",
            n_iter, f, s, alpha)
        if callback is not None:
            callback(n_iter, f, s, alpha)

        if s < tol:
            converged = True
            break

        alpha *= 2.0
        for _ in range(lsiter):
            Tt = manifold.retract(T - alpha * Gp)
            Lt = manifold.loadings(F, Tt)
            dQt, ft = criterion.evaluate(Lt)
            # Armijo-type sufficient decrease
            if ft < f - 0.5 * s ** 2 * alpha:
                break
            alpha /= 2.0
        else:
            logger.debug(
                "iter %d: line search exhausted %d trial(s), step=%.4g",
                n_iter, lsiter, alpha)

        T, L, f = Tt, Lt, ft
        G = manifold.gradient(F, T, L, dQt)
        Gp = manifold.project(T, G)
        s = linalg.norm(Gp)

    if not converged:
        logger.warning(
            "%s rotation with %r stopped after %d iteration(s); projected"
            " gradient norm %.4g, tolerance %g.",
            str(manifold.method).capitalize(), criterion, n_iter, s, tol)
        raise ConvergenceError(n_iter, s, tol)

    logger.info(
        "%s rotation with %r converged in %d iteration(s), criterion=%.10g.",
        str(manifold.method).capitalize(), criterion, n_iter, f)

    if normalizerows:
        L = L * w

    return L, T


@validate_params(_gpa_constraints)
def gpa_orthogonal(
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
    F, _ = check_loadings(loadings)
    _check_method(criterion, OrthogonalManifold)
    return _gpa(F, criterion, OrthogonalManifold, normalizerows, randominit,
                maxiter, lsiter, tol, random_state, callback)

gpa_orthogonal.__doc__ = """\
Orthogonal rotation of a loading matrix by gradient projection.

The rotation matrix ``T`` stays on the orthogonal group: the gradient of
the criterion with respect to ``T`` is projected on the tangent space
by removing the symmetric part of ``T' G``, and every trial step is
mapped back with the orthogonal polar factor of its SVD. A step is
accepted when the criterion drops by at least half the squared
projected gradient norm times the step size.

Parameters
----------
{params.loadings}
{params.criterion}
    Its ``method`` must be ``'orthogonal'``.
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
{returns.T}

Raises
------
ConvergenceError
    If the projected gradient norm is still above `tol` after `maxiter`
    iterations.
RotationMethodError
    If `criterion` is not an orthogonal criterion.

Notes
-----
With fewer than two rows the loadings are returned unchanged together
with the identity matrix.

References
----------
.. [1] Jennrich, R.I. (2001). A simple general procedure for orthogonal
   rotation. Psychometrika, 66, 289-306.

Examples
--------
>>> import numpy as np
>>> from gorot.analysis.criteria import Varimax
>>> from gorot.analysis.gpa import gpa_orthogonal
>>> F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])
>>> L, T = gpa_orthogonal(F, Varimax())
>>> np.allclose(T.T @ T, np.eye(2))
True
""".format(params=_core_docs["params"], returns=_core_docs["returns"])


@validate_params(_gpa_constraints)
def gpa_oblique(
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
    F, _ = check_loadings(loadings)
    _check_method(criterion, ObliqueManifold)
    return _gpa(F, criterion, ObliqueManifold, normalizerows, randominit,
                maxiter, lsiter, tol, random_state, callback)

gpa_oblique.__doc__ = """\
Oblique rotation of a loading matrix by gradient projection.

The columns of the rotation matrix ``T`` keep unit length while the
factors are allowed to correlate; the rotated loadings are
``F @ inv(T).T``, computed by solving against ``T``. The gradient with
respect to ``T`` is projected by removing from each column its component
along the matching column of ``T``, and trial steps are retracted by
rescaling their columns to unit norm. The sufficient-decrease test is
the one of :func:`gpa_orthogonal`.

Parameters
----------
{params.loadings}
{params.criterion}
    Its ``method`` must be ``'oblique'``.
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
{returns.T}

Raises
------
ConvergenceError
    If the projected gradient norm is still above `tol` after `maxiter`
    iterations.
RotationMethodError
    If `criterion` is not an oblique criterion.

Notes
-----
With fewer than two rows the loadings are returned unchanged together
with the identity matrix. The factor correlation matrix of the solution
is ``T.T @ T``, see :func:`gorot.analysis.rotation.factor_correlation`.

References
----------
.. [1] Jennrich, R.I. (2002). A simple general method for oblique
   rotation. Psychometrika, 67, 7-19.

Examples
--------
>>> import numpy as np
>>> from gorot.analysis.criteria import Quartimin
>>> from gorot.analysis.gpa import gpa_oblique
>>> F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])
>>> L, T = gpa_oblique(F, Quartimin())
>>> np.allclose(np.linalg.norm(T, axis=0), 1.0)
True
""".format(params=_core_docs["params"], returns=_core_docs["returns"])
