# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Provides compatibility utilities for different versions of scikit-learn.
Only the parameter-validation helpers used by :mod:`gofactor.config` are
exposed here.

Attributes
----------
SKLEARN_VERSION : packaging.version.Version
    The installed scikit-learn version.
"""
import inspect
import sklearn
from packaging.version import parse
from sklearn.utils._param_validation import validate_params as sklearn_validate_params
from sklearn.utils._param_validation import Interval, StrOptions
from sklearn.utils._param_validation import InvalidParameterError

__all__ = [
    "SKLEARN_VERSION",
    "validate_params",
    "Interval",
    "StrOptions",
    "InvalidParameterError",
]

SKLEARN_VERSION = parse(sklearn.__version__)


def validate_params(params, *args, prefer_skip_nested_validation=True, **kwargs):
    """
    Compatibility wrapper for scikit-learn's `validate_params` function
    to handle versions that require the `prefer_skip_nested_validation`
    argument.

    Parameters
    ----------
    params : dict
        Maps each parameter name to a list of accepted types or
        constraints (e.g. ``[Integral, None]``).

    prefer_skip_nested_validation : bool, optional
        Forwarded to scikit-learn when its signature accepts it.

    Returns
    -------
    function
        A decorator validating the wrapped callable's arguments. Invalid
        values raise :class:`InvalidParameterError`, a subclass of both
        ``ValueError`` and ``TypeError``.

    Examples
    --------
    >>> from numbers import Integral
    >>> from gofactor.compat.sklearn import validate_params
    >>> @validate_params({'n': [Integral]})
    ... def twice(n):
    ...     return 2 * n
    >>> twice(3)
    6
    """
    sig = inspect.signature(sklearn_validate_params)
    if 'prefer_skip_nested_validation' in sig.parameters:
        kwargs['prefer_skip_nested_validation'] = prefer_skip_nested_validation

    return sklearn_validate_params(params, *args, **kwargs)
