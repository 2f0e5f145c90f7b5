# -*- coding: utf-8 -*-
# @author: LKouadio~ @Daniel
"""
NumpyBackend
------------

Default computational backbone of gofactor. Matrix products go straight to
:func:`numpy.dot`; the symmetric eigen-decomposition uses
:func:`numpy.linalg.eigh` (LAPACK ``syevd``), which reads only the lower
triangle of its input.

>>> from gofactor.backends.numpy import NumpyBackend
>>> backend = NumpyBackend()
>>> w, v = backend.eigh([[2.0, 0.0], [0.0, 1.0]])
"""

import numpy as np

from .base import BaseBackend


class NumpyBackend(BaseBackend):
    """
    The NumpyBackend class provides the numerical operations required by
    the factor pipeline on top of NumPy.

    Examples
    --------
    >>> import numpy as np
    >>> from gofactor.backends.numpy import NumpyBackend
    >>> backend = NumpyBackend()
    >>> a = np.array([[1., 2.], [3., 4.]])
    >>> backend.dot(a.T, a)
    array([[10., 14.],
           [14., 20.]])
    """

    name = "numpy"

    def dot(self, a, b):
        """Perform dot product of two arrays."""
        return np.dot(a, b)

    def eigh(self, a):
        """Eigen-decomposition of a real symmetric matrix via NumPy."""
        return np.linalg.eigh(a)
