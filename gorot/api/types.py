# -*- coding: utf-8 -*-
#   Licence:BSD 3-Clause

"""
`GoRot`_ type variables.

Custom type hints used throughout the package to make the expected shape
of matrices explicit in function signatures.

M
---
Number of rows of a matrix (observed variables of a loading matrix).

N
---
Number of columns of a matrix (latent factors of a loading matrix).

ArrayLike
---------
Any 2-dimensional array-like structure accepted as a loading matrix:
nested sequences, :class:`numpy.ndarray` or :class:`pandas.DataFrame`.

NDArray
-------
A NumPy array with a given shape, e.g. ``NDArray[Shape[M, N]]``.
"""
from __future__ import annotations

from typing import (
    Tuple,
    Callable,
    Union,
    Any,
    Generic,
    Optional,
    TypeVar,
)

__all__ = [
    "Tuple",
    "Callable",
    "Any",
    "Optional",
    "Union",
    "Shape",
    "NDArray",
    "ArrayLike",
    "DataFrame",
    "M",
    "N",
]

_T = TypeVar('_T')
M = TypeVar('M', bound=int)
N = TypeVar('N', bound=int)


class Shape(Generic[M, N]):
    """
    Generic type for the shape of a two-dimensional array with M rows and
    N columns.

    Example:
        >>> def rotation(T: NDArray[Shape[N, N]]): ...
    """

class ArrayLike(Generic[_T]):
    """
    Represents a 2-dimensional array-like structure, such as nested lists,
    NumPy arrays or pandas DataFrames.

    Example:
        >>> import pandas as pd
        >>> def check_dataframe(array: ArrayLike[pd.DataFrame]): ...
    """

class NDArray(Generic[_T]):
    """
    Represents a NumPy array with the given shape.

    Example:
        >>> import numpy as np
        >>> def check_ndarray(array: NDArray[Shape[M, N]]): ...
    """

class DataFrame(Generic[_T]):
    """
    Represents a pandas DataFrame object.

    Example:
        >>> import pandas as pd
        >>> df = pd.DataFrame({'F1': [0.8, 0.1], 'F2': [0.1, 0.8]})
        >>> def check_dataframe(df: DataFrame[float]): ...
    """
