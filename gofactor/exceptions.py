# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""List of `gofactor` exceptions for warning users."""

__all__ = ["InvalidArgumentError", "NumericalError", "BackendError"]


class InvalidArgumentError(ValueError):
    """
    Exception raised for errors in the passed argument values.

    For example, this exception is raised when ``num_factors`` is missing or
    falls outside ``[1, num_vars]``, or when the data matrix is not a
    two-dimensional numeric array. No computation is performed before it
    is raised.
    """
    pass


class NumericalError(ArithmeticError):
    """
    Exception raised when a stage of the factor pipeline produces values
    that cannot be carried forward.

    This covers non-finite covariance entries (e.g. a single observation
    leading to a zero Bessel denominator), non-finite or negative retained
    eigenvalues, and eigen-solver failures. When the failure comes from the
    solver itself, the original error is chained as ``__cause__``.
    """
    pass


class BackendError(InvalidArgumentError):
    """
    Exception raised when an unknown or unavailable computational backend
    is requested.
    """
    pass
