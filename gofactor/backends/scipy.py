# -*- coding: utf-8 -*-
# @author: LKouadio~ @Daniel
"""
ScipyBackend
------------

Backend built on SciPy's LAPACK wrappers. Its symmetric eigen-decomposition
goes through :func:`scipy.linalg.eigh` with ``check_finite=True``, so
non-finite input is rejected by SciPy itself with a ``ValueError``.

>>> from gofactor.backends.scipy import ScipyBackend
>>> scipy_backend = ScipyBackend()
>>> w, v = scipy_backend.eigh([[4.0, 0.0], [0.0, 1.0]])
>>> w
array([1., 4.])
"""

import numpy as np

from .base import BaseBackend


class ScipyBackend(BaseBackend):
    """
    Implements the gofactor computational backend using SciPy.

    SciPy works on NumPy arrays, so the matrix product is NumPy's.

    Examples
    --------
    >>> from gofactor.backends.scipy import ScipyBackend
    >>> backend = ScipyBackend()
    >>> backend.dot([[1., 0.], [0., 2.]], [1., 1.])
    array([1., 2.])
    """

    name = "scipy"

    def __init__(self):
        super().__init__()
        import scipy.linalg
        self._linalg = scipy.linalg

    def dot(self, a, b):
        """
        Perform dot product of two arrays using NumPy.
        """
        return np.dot(a, b)

    def eigh(self, a):
        """
        Eigen-decomposition of a real symmetric matrix using SciPy's linear
        algebra functions.
        """
        return self._linalg.eigh(a, check_finite=True)
