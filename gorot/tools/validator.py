# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""
Validation helpers for loading matrices and rotation outputs.

Loading matrices may be given as nested sequences, NumPy arrays or pandas
DataFrames. They are checked and copied into a private float array so the
optimizers never touch the caller's data, and the labels of a DataFrame are
kept aside to be restored on the outputs.
"""

import numpy as np
import pandas as pd
from sklearn.utils.validation import check_array

from ..api.types import ArrayLike, NDArray, DataFrame, Optional, Tuple, Union

__all__ = [
    "check_loadings",
    "restore_labels",
    "is_frame",
]


def is_frame(arr):
    """Return ``True`` when `arr` is a pandas DataFrame."""
    return isinstance(arr, pd.DataFrame)


def check_loadings(
    loadings: ArrayLike,
    *,
    copy: bool = True,
    input_name: str = "loadings",
) -> Tuple[NDArray, Optional[tuple]]:
    """
    Validate a loading matrix and return it as a 2-D float array.

    Parameters
    ----------
    loadings : array-like or pandas.DataFrame of shape (n_variables, n_factors)
        The unrotated factor loadings. Must be 2-D, numeric and finite.
    copy : bool, default=True
        Whether the returned array is a private copy. The rotation routines
        rely on a copy since row normalization rescales it in place.
    input_name : str, default="loadings"
        Name used in error messages.

    Returns
    -------
    F : ndarray of shape (n_variables, n_factors), dtype float64
        Validated loadings.
    labels : tuple or None
        ``(index, columns)`` of the DataFrame input, ``None`` otherwise.

    Raises
    ------
    ValueError
        If `loadings` is not 2-D, contains NaN or infinite values, or has no factor
        column. Matrices without rows are accepted.

    Examples
    --------
    >>> from gorot.tools.validator import check_loadings
    >>> F, labels = check_loadings([[0.8, 0.1], [0.1, 0.8]])
    >>> F.shape, labels
    ((2, 2), None)
    """
    labels = None
    if is_frame(loadings):
        labels = (loadings.index.copy(), loadings.columns.copy())

    F = check_array(
        loadings,
        dtype=np.float64,
        copy=copy,
        ensure_2d=True,
        ensure_min_samples=0,
        ensure_min_features=1,
        input_name=input_name,
    )
    return F, labels


def restore_labels(
    L: NDArray,
    T: NDArray,
    labels: Optional[tuple],
) -> Tuple[Union[NDArray, DataFrame], Union[NDArray, DataFrame]]:
    """
    Put the DataFrame labels of the input loadings back on the outputs.

    Parameters
    ----------
    L : ndarray of shape (n_variables, n_factors)
        Rotated loadings.
    T : ndarray of shape (n_factors, n_factors)
        Rotation matrix.
    labels : tuple or None
        ``(index, columns)`` as returned by :func:`check_loadings`.

    Returns
    -------
    L, T : ndarray or pandas.DataFrame
        Unchanged arrays when `labels` is ``None``. Otherwise `L` carries the
        input index and columns, and `T` is indexed and labelled by the
        input columns.
    """
    if labels is None:
        return L, T
    index, columns = labels
    L = pd.DataFrame(L, index=index, columns=columns)
    T = pd.DataFrame(T, index=columns, columns=columns)
    return L, T
