# -*- coding: utf-8 -*-
# @author: LKouadio~ @Daniel

"""
BaseBackend Usage Documentation
-------------------------------

The BaseBackend module is the foundation for the computational backends in
gofactor. It defines the two dense linear-algebra primitives the factor
pipeline delegates: the matrix product used for the covariance and the
scores, and the symmetric eigen-decomposition. Element-wise work
(centering, sorting, square roots) stays in NumPy.

Example Usage:

1. Selecting a Backend:
    from gofactor.backends.numpy import NumpyBackend
    numpy_backend = NumpyBackend()

2. Symmetric eigen-decomposition:
    eigenvalues, eigenvectors = numpy_backend.eigh([[2.0, 1.0], [1.0, 2.0]])
    print(eigenvalues)   # ascending: [1. 3.]

Note:
- Eigenvalues are returned in ascending order by every backend; ordering
  for factor extraction happens in :mod:`gofactor.analysis.decomposition`.
- The sign of each returned eigenvector is solver-dependent.
"""


class BaseBackend:
    """
    Base class for all computational backends in gofactor.

    Derived classes (NumpyBackend, ScipyBackend) are expected to implement
    these methods, tailored to their specific computational frameworks.
    """

    name = "base"

    def dot(self, a, b):
        """
        Perform dot product of two arrays.

        Parameters:
        - a, b: Input arrays.

        Returns:
        - The dot product of a and b.
        """
        raise NotImplementedError("This method should be implemented by subclasses.")

    def eigh(self, a):
        """
        Compute the eigenvalues and eigenvectors of a real symmetric matrix.

        Parameters:
        - a: Real symmetric square array.

        Returns:
        - Eigenvalues in ascending order and the matrix whose columns are
          the corresponding unit-norm eigenvectors.
        """
        raise NotImplementedError("This method should be implemented by subclasses.")

    def __repr__(self):
        """
        Representation method to display the class name and its identifier.
        """
        return f"<{self.__class__.__name__} at {hex(id(self))}>"
