# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""List of `gorot` exceptions for warning users."""

from .compat.sklearn import InvalidParameterError

__all__ = [
    "InvalidParameterError",
    "ConvergenceError",
    "RotationMethodError",
]


class ConvergenceError(Exception):
    """
    Exception raised when a gradient projection rotation fails to converge.

    The projected gradient norm did not fall below the tolerance within the
    allowed number of outer iterations. The attempted iteration count, the
    final gradient norm and the tolerance are kept on the exception so that
    a caller can retry with a larger `maxiter` or a looser `tol`.

    Parameters
    ----------
    n_iter : int
        Number of outer iterations attempted.
    grad_norm : float
        Frobenius norm of the projected gradient at the last iterate.
    tol : float
        Convergence tolerance that was not reached.

    Examples
    --------
    >>> from gorot.exceptions import ConvergenceError
    >>> try:
    ...     raise ConvergenceError(1000, 3.2e-4, 1e-6)
    ... except ConvergenceError as e:
    ...     print(e.n_iter, e.grad_norm, e.tol)
    1000 0.00032 1e-06
    """

    def __init__(self, n_iter, grad_norm, tol):
        self.n_iter = n_iter
        self.grad_norm = grad_norm
        self.tol = tol
        super().__init__(
            f"Rotation did not converge within {n_iter} iteration(s): "
            f"final projected gradient norm {grad_norm:.6g}, tolerance"
            f" {tol:g}. Increase `maxiter` or relax `tol`."
        )

    def __reduce__(self):
        return (self.__class__, (self.n_iter, self.grad_norm, self.tol))


class RotationMethodError(ValueError):
    """
    Exception raised when a rotation criterion declares a rotation method
    for which no optimizer is available.
    """
    pass
