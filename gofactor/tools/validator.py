# -*- coding: utf-8 -*-
# BSD-3-Clause License
# Copyright (c) 2024 gofactor developers.
# All rights reserved.
"""
Input validation helpers shared by the factor pipeline.
"""
import numbers

import numpy as np

from ..exceptions import InvalidArgumentError, NumericalError

__all__ = [
    "check_array",
    "validate_num_factors",
    "validate_positive_integer",
    "check_symmetric",
    "assert_all_finite",
]


def check_array(array, *, dtype=np.float64, copy=False, input_name="X"):
    """Input validation on an array, list, or similar.

    The input is converted to a two-dimensional array of ``dtype``. Unlike
    scikit-learn's helper of the same name, non-finite values are left in
    place: the factor pipeline reports them as :class:`NumericalError` at
    the stage where they make the computation meaningless.

    Parameters
    ----------
    array : array-like of shape (n_samples, n_features)
        Input object to check / convert.
    dtype : numpy dtype, default=np.float64
        Data type of the result.
    copy : bool, default=False
        Whether a forced copy will be triggered. If False, a copy is only
        made when the conversion requires it.
    input_name : str, default="X"
        The data name used to construct the error message.

    Returns
    -------
    array_converted : ndarray of shape (n_samples, n_features)

    Raises
    ------
    InvalidArgumentError
        If the input is not numeric, is empty, or is not two-dimensional.

    Examples
    --------
    >>> from gofactor.tools.validator import check_array
    >>> check_array([[1, 2], [3, 4]]).dtype
    dtype('float64')
    """
    if isinstance(array, (str, bytes)):
        raise InvalidArgumentError(
            f"{input_name} must be an array-like of numbers, got"
            f" {type(array).__name__!r}."
        )
    try:
        raw = np.asarray(array)
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(
            f"{input_name} must be a rectangular array of real numbers:"
            f" {err}"
        ) from err
    if np.iscomplexobj(raw):
        raise InvalidArgumentError(
            f"Complex data not supported; {input_name} must hold real numbers."
        )
    try:
        converted = raw.astype(dtype, copy=copy)
    except (TypeError, ValueError) as err:
        raise InvalidArgumentError(
            f"{input_name} must be a rectangular array of real numbers:"
            f" {err}"
        ) from err

    if converted.ndim == 0:
        raise InvalidArgumentError(
            "Expected 2D array, got scalar array instead:\n"
            f"{input_name}={array!r}.\n"
            "Reshape your data either using array.reshape(-1, 1) if "
            "your data has a single feature or array.reshape(1, -1) "
            "if it contains a single sample."
        )
    if converted.ndim == 1:
        raise InvalidArgumentError(
            "Expected 2D array, got 1D array instead. "
            "Reshape your data either using array.reshape(-1, 1) if "
            "your data has a single feature or array.reshape(1, -1) "
            "if it contains a single sample."
        )
    if converted.ndim >= 3:
        raise InvalidArgumentError(
            f"Found array with dim {converted.ndim}. Expected 2 for"
            f" {input_name}."
        )
    if converted.shape[0] == 0 or converted.shape[1] == 0:
        raise InvalidArgumentError(
            f"Found {input_name} with shape {converted.shape} while at least"
            " one sample and one feature are required."
        )
    return converted


def validate_positive_integer(value, variable_name):
    """
    Validates whether the given value is a positive integer.

    Floats are accepted only when they hold a whole number; booleans are
    rejected.

    Parameters
    ----------
    value : int or float
        The value to validate.
    variable_name : str
        The name of the variable for error message purposes.

    Returns
    -------
    int
        The validated value converted to an integer.

    Raises
    ------
    InvalidArgumentError
        If the value is missing, not a whole number, or below one.
    """
    if value is None:
        raise InvalidArgumentError(f"{variable_name} is required.")
    if isinstance(value, (bool, np.bool_)) or not isinstance(
            value, (numbers.Integral, numbers.Real)):
        raise InvalidArgumentError(
            f"{variable_name} must be an integer, got {type(value).__name__!r}.")
    if not isinstance(value, numbers.Integral):
        if not float(value).is_integer():
            raise InvalidArgumentError(
                f"{variable_name} must be a whole number, got {value}.")
    if value < 1:
        raise InvalidArgumentError(
            f"{variable_name} must be a positive integer, got {value}.")

    return int(value)


def validate_num_factors(num_factors, num_vars):
    """
    Check that ``1 <= num_factors <= num_vars``.

    Parameters
    ----------
    num_factors : int
        Requested number of factors. ``None`` means the caller omitted it.
    num_vars : int
        Number of variables (columns) of the data matrix.

    Returns
    -------
    int

    Raises
    ------
    InvalidArgumentError
        If `num_factors` is missing or outside ``[1, num_vars]``.
    """
    if num_factors is None:
        raise InvalidArgumentError(
            "factor_analysis requires X and num_factors inputs.")
    num_factors = validate_positive_integer(num_factors, "num_factors")
    if num_factors > num_vars:
        raise InvalidArgumentError(
            "num_factors must be between 1 and the number of variables"
            f" ({num_vars}), got {num_factors}."
        )
    return num_factors


def assert_all_finite(array, *, input_name="array", stage=None):
    """
    Raise :class:`NumericalError` if `array` holds NaN or infinite values.

    Parameters
    ----------
    array : ndarray
    input_name : str
        Name used in the error message.
    stage : str, optional
        Pipeline stage reported in the error message.
    """
    array = np.asarray(array)
    if np.iscomplexobj(array) or not np.isfinite(array).all():
        where = f" during {stage}" if stage else ""
        n_bad = (int(np.size(array) - np.isfinite(array).sum())
                 if not np.iscomplexobj(array) else int(np.size(array)))
        raise NumericalError(
            f"{input_name} contains {n_bad} non-finite value(s){where}."
        )
    return array


def check_symmetric(array):
    """Make sure that array is 2D and square, and return it symmetrized.

    Rounding in ``X.T @ X`` can leave the two triangles differing in the
    last bits; averaging with the transpose makes them equal exactly.

    Parameters
    ----------
    array : ndarray
        Input object to check / convert. Must be two-dimensional and square.

    Returns
    -------
    array_sym : ndarray
        Symmetrized version of the input array, i.e. the average of array
        and array.transpose().
    """
    if (array.ndim != 2) or (array.shape[0] != array.shape[1]):
        raise InvalidArgumentError(
            "array must be 2-dimensional and square. shape = {0}".format(array.shape)
        )

    return 0.5 * (array + array.T)
