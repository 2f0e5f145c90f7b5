# -*- coding: utf-8 -*-
#   Licence: BSD 3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""Provides core components for generating standardized docstrings across
the `gofactor` API."""
from __future__ import annotations
import re

__all__ = [
    'DocstringComponents',
    '_core_params',
    '_core_returns',
    '_core_docs',
    ]


class DocstringComponents:
    """
    Manage docstring components, allowing dot access to cleaned entries.

    Parameters
    ----------
    comp_dict : dict
        Maps component names to raw docstring contents.
    strip_whitespace : bool, optional, default=True
        If True, remove the leading newline and trailing whitespace of
        each entry.

    Examples
    --------
    >>> doc = DocstringComponents({"X": '''
    ... X: ndarray
    ...     Data.
    ... '''})
    >>> print(doc.X)
    X: ndarray
        Data.
    """
    regexp = re.compile(r"\n((\n|.)+)\n\s*", re.MULTILINE)

    def __init__(self, comp_dict, strip_whitespace=True):
        """Read entries from a dict, optionally stripping outer whitespace."""
        if strip_whitespace:
            entries = {}
            for key, val in comp_dict.items():
                m = re.match(self.regexp, val)
                if m is None:
                    entries[key] = val
                else:
                    entries[key] = m.group(1)
        else:
            entries = comp_dict.copy()

        self.entries = entries

    def __getattr__(self, attr):
        """Provide dot access to entries for clean raw docstrings."""
        if attr == 'entries':
            raise AttributeError(attr)
        if attr in self.entries:
            return self.entries[attr]
        return self.__getattribute__(attr)

    @classmethod
    def from_nested_components(cls, **kwargs):
        """Add multiple sub-sets of components."""
        return cls(kwargs, strip_whitespace=False)


_core_params = dict(
    X="""
X: array-like of shape (num_obs, num_vars)
    Data matrix with observations in rows and variables in columns. It is
    converted to a float64 array and never modified in place; every stage
    works on a derived copy.
    """,
    X_centered="""
X_centered: ndarray of shape (num_obs, num_vars)
    Column-centered data matrix, i.e. ``X - X.mean(axis=0)``.
    """,
    num_factors="""
num_factors: int
    Number of factors to retain, ``1 <= num_factors <= num_vars``.
    """,
    backend="""
backend: {'numpy', 'scipy', 'np', 'sp'} or BaseBackend, optional
    Backend providing the matrix product and the symmetric eigen solver.
    Defaults to the package backend set with :func:`gofactor.config.set_backend` (``'numpy'``).
    """,
    symmetrize="""
symmetrize: bool, optional
    If True, replace the covariance matrix ``C`` by ``(C + C.T) / 2``
    before the eigen-decomposition. Defaults to the package setting
    (:func:`gofactor.config.set_symmetrize`, ``False``).
    """,
)

_core_returns = dict(
    loadings="""
loadings: ndarray of shape (num_vars, num_factors)
    Factor loadings; column ``i`` is the ``i``-th eigenvector scaled by the
    square root of its eigenvalue.
    """,
    scores="""
scores: ndarray of shape (num_obs, num_factors)
    Factor scores; the centered data projected on the retained unit
    eigenvectors (not scaled by the eigenvalues).
    """,
    eigenvalues="""
eigenvalues: ndarray of shape (num_factors,)
    Retained eigenvalues of the sample covariance matrix, descending.
    """,
)

_core_docs = dict(
    params=DocstringComponents(_core_params),
    returns=DocstringComponents(_core_returns),
)
