# -*- coding: utf-8 -*-
#   Licence: BSD 3-Clause

"""Provides core components for generating standardized docstrings across
the `gorot` API, so that the rotation routines document their shared
parameters identically."""
from __future__ import annotations
import re

__all__ = [
    'DocstringComponents',
    '_core_params',
    '_core_returns',
    '_core_docs',
    ]

class DocstringComponents:
    """
    Manage and clean docstring components and give dot access to them.

    Parameters
    ----------
    comp_dict : dict
        Component names mapped to raw docstring contents.

    strip_whitespace : bool, optional, default=True
        If True, remove the leading and trailing blank lines of each entry.

    Examples
    --------
    >>> doc = DocstringComponents({"tol": "\\ntol : float\\n    Tolerance.\\n"})
    >>> print(doc.tol)
    tol : float
        Tolerance.
    """

    regexp = re.compile(r"\n((\n|.)+)\n\s*", re.MULTILINE)

    def __init__(self, comp_dict, strip_whitespace=True):
        """Read entries from a dict, optionally stripping outer whitespace."""
        if strip_whitespace:
            entries = {}
            for key, val in comp_dict.items():
                m = re.match(self.regexp, val)
                if m is None:
                    entries[key] = val
                else:
                    entries[key] = m.group(1)
        else:
            entries = comp_dict.copy()

        self.entries = entries

    def __getattr__(self, attr):
        """Provide dot access to entries for clean raw docstrings."""
        entries = self.__dict__.get("entries", {})
        if attr in entries:
            return entries[attr]
        raise AttributeError(
            f"{type(self).__name__!r} object has no entry {attr!r}")

    @classmethod
    def from_nested_components(cls, **kwargs):
        """Add multiple sub-sets of components."""
        return cls(kwargs, strip_whitespace=False)


_core_params = dict(
    loadings="""
loadings: array-like or :class:`pandas.DataFrame` of shape (d, p)
    Unrotated factor loadings, one row per observed variable and one column
    per latent factor. The matrix is validated and copied; the caller's
    object is never modified.
    """,
    criterion="""
criterion: :class:`~gorot.analysis.criteria.RotationCriterion`
    Rotation criterion to minimize, e.g. ``Varimax()`` or
    ``Oblimin(gamma=0.5)``. Its ``method`` tag decides whether the rotation
    is orthogonal or oblique.
    """,
    normalizerows="""
normalizerows: bool, default=False
    If ``True``, rows of the loadings are rescaled to unit length before
    the rotation (Kaiser normalization) and the rows of the rotated
    loadings are scaled back afterwards. Rows of zeros are not supported.
    """,
    randominit="""
randominit: bool, default=False
    If ``True``, the algorithm starts from a random point of the constraint
    manifold instead of the identity matrix.
    """,
    maxiter="""
maxiter: int, default=1000
    Maximum number of outer iterations. Each iteration tests convergence
    once, so ``maxiter=0`` always ends in :class:`~gorot.exceptions.ConvergenceError`
    for matrices with at least two rows.
    """,
    lsiter="""
lsiter: int, default=10
    Maximum number of step-halving trials of the line search run in each
    outer iteration. When none of them decreases the criterion enough, the
    last trial is accepted anyway, so the criterion value may rise between
    iterations. Small values make this more likely.
    """,
    tol="""
tol: float, default=1e-6
    Convergence tolerance on the Frobenius norm of the projected gradient.
    """,
    random_state="""
random_state: int, RandomState instance or None, default=None
    Seed of the random starting point; only used when ``randominit=True``.
    """,
    callback="""
callback: callable, optional
    Called once per outer iteration as
    ``callback(iteration, value, grad_norm, step)`` with the current
    criterion value, the norm of the projected gradient and the step size
    accepted at the previous iteration (1.0 at the first one).
    """,
)

_core_returns = dict(
    L="""
L: ndarray of shape (d, p)
    Rotated loadings, ``F @ T`` for orthogonal rotation and
    ``F @ inv(T).T`` for oblique rotation.
    """,
    T="""
T: ndarray of shape (p, p)
    Rotation matrix. Orthogonal for orthogonal rotation, with unit-norm
    columns for oblique rotation.
    """,
)

_core_docs = dict(
    params=DocstringComponents(_core_params),
    returns=DocstringComponents(_core_returns),
)
