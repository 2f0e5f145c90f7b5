# -*- coding: utf-8 -*-
"""
Validation helpers used across :mod:`gofactor`.
"""
from .validator import (
    check_array,
    validate_num_factors,
    validate_positive_integer,
    check_symmetric,
    assert_all_finite,
)

__all__ = [
    "check_array",
    "validate_num_factors",
    "validate_positive_integer",
    "check_symmetric",
    "assert_all_finite",
]
