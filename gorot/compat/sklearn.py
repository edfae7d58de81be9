# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
"""
Provides compatibility utilities for different versions of scikit-learn.
GoRot relies on scikit-learn's parameter validation machinery
(`validate_params`, `Interval`, `StrOptions`) and random-state handling;
this module hides the signature differences between releases.

Attributes
----------
SKLEARN_VERSION : packaging.version.Version
    The installed scikit-learn version.
"""
import inspect
import sklearn
from packaging.version import parse
from sklearn.utils import check_random_state
from sklearn.utils._param_validation import validate_params as sklearn_validate_params
from sklearn.utils._param_validation import Interval as sklearn_Interval
from sklearn.utils._param_validation import StrOptions, HasMethods
from sklearn.utils._param_validation import InvalidParameterError

# Determine the installed scikit-learn version
SKLEARN_VERSION = parse(sklearn.__version__)

__all__ = [
    "Interval",
    "StrOptions",
    "HasMethods",
    "InvalidParameterError",
    "validate_params",
    "check_random_state",
    "SKLEARN_VERSION",
]


class Interval:
    """
    Compatibility wrapper for scikit-learn's `Interval` class to handle
    versions that do not include the `inclusive` argument.

    Parameters
    ----------
    *args : tuple
        Positional arguments passed to the `Interval` class, typically the
        expected data types and the range boundaries for the validation
        interval.

    closed : str, optional
        Defines how the interval is closed. Can be "left", "right", "both",
        or "neither".

    kwargs : dict
        Additional keyword arguments passed to the `Interval` class.

    Returns
    -------
    sklearn.utils._param_validation.Interval

    Examples
    --------
    >>> from numbers import Integral
    >>> from gorot.compat.sklearn import Interval
    >>> interval = Interval(Integral, 1, None, closed="left")
    """

    def __new__(cls, *args, **kwargs):
        signature = inspect.signature(sklearn_Interval.__init__)
        if 'inclusive' not in signature.parameters:
            kwargs.pop('inclusive', None)
        return sklearn_Interval(*args, **kwargs)


def validate_params(params, *args, prefer_skip_nested_validation=True, **kwargs):
    """
    Compatibility wrapper for scikit-learn's `validate_params` function
    to handle versions that require the `prefer_skip_nested_validation`
    argument.

    Parameters
    ----------
    params : dict
        A dictionary that defines the validation rules for the parameters.
        Each key should be the name of a parameter of the decorated
        function, and its value a list of accepted constraints
        (types, `Interval`, `StrOptions`, `None`, ...). Parameters without
        an entry are not validated.

    prefer_skip_nested_validation : bool, optional
        Skip the validation of nested calls to other validated functions.
        Defaults to ``True``.

    Returns
    -------
    function
        A decorator raising :class:`InvalidParameterError` when an argument
        violates its constraints.

    Examples
    --------
    >>> from numbers import Integral
    >>> from gorot.compat.sklearn import validate_params, Interval
    >>> @validate_params({'maxiter': [Interval(Integral, 0, None, closed='left')]})
    ... def run(maxiter=10):
    ...     return maxiter
    >>> run(maxiter=-1)
    Traceback (most recent call last):
    ...
    InvalidParameterError: The 'maxiter' parameter of run must be ...
    """
    sig = inspect.signature(sklearn_validate_params)
    if 'prefer_skip_nested_validation' in sig.parameters:
        kwargs['prefer_skip_nested_validation'] = prefer_skip_nested_validation

    return sklearn_validate_params(params, *args, **kwargs)
