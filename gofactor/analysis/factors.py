# -*- coding: utf-8 -*-
#   Licence:BSD 3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Factor Analysis (FA)
====================

Principal component factor extraction. The loadings are the leading
eigenvectors of the sample covariance matrix scaled by the square root of
their eigenvalues; the scores are the centered data projected on those
eigenvectors.

No rotation is applied. Eigenvectors are only defined up to sign, and for
a repeated eigenvalue up to a rotation inside its eigenspace, so two
backends (or two LAPACK builds) may return loadings and scores that differ
by column signs. Quantities such as ``loadings ** 2``, ``loadings @
loadings.T`` or ``scores @ loadings.T`` do not depend on that choice.
"""

import numpy as np

from ..api.docstring import _core_docs
from ..exceptions import NumericalError
from ..tools.validator import check_array, validate_num_factors
from .._gofactorlog import gofactorlog
from .decomposition import (
    center_data,
    sample_covariance,
    eigen_decompose,
    rank_components,
    compute_loadings,
    compute_scores,
    resolve_backend,
)

logger = gofactorlog.get_gofactor_logger(__name__)

__all__ = ["factor_analysis", "explained_variance_ratio"]


def factor_analysis(X, num_factors=None, *, backend=None, symmetrize=None):
    X = check_array(X, input_name="X")
    num_obs, num_vars = X.shape
    num_factors = validate_num_factors(num_factors, num_vars)

    if symmetrize is None:
        from ..config import get_symmetrize
        symmetrize = get_symmetrize()

    backend = resolve_backend(backend)

    logger.debug("Factor analysis of a (%d, %d) matrix, %d factor(s), %r.",
                 num_obs, num_vars, num_factors, backend)

    X_centered = center_data(X)
    cov_matrix = sample_covariance(X_centered, symmetrize=symmetrize,
                                   backend=backend)
    eig_values, eig_vectors = eigen_decompose(cov_matrix, backend=backend)
    eigenvalues, factors = rank_components(eig_values, eig_vectors, num_factors)

    loadings = compute_loadings(factors, eigenvalues)
    scores = compute_scores(X_centered, factors, backend=backend)

    logger.debug("Retained eigenvalues: %s", eigenvalues)
    return loadings, scores, eigenvalues


factor_analysis.__doc__ = """\
Perform a basic factor analysis using principal component decomposition.

The data are centered column-wise, the sample covariance matrix (``N - 1``
denominator) is eigen-decomposed, and the `num_factors` largest eigenpairs
are kept to build the loadings and scores.

Parameters
----------
{params.X}
{params.num_factors}
{params.backend}
{params.symmetrize}

Returns
-------
{returns.loadings}
{returns.scores}
{returns.eigenvalues}

Raises
------
InvalidArgumentError
    If `num_factors` is missing or outside ``[1, num_vars]``, or `X` is not
    a non-empty two-dimensional numeric array.
NumericalError
    If the covariance matrix or the eigenvalues are not finite (e.g. with a
    single observation), a retained eigenvalue is negative, or the eigen
    solver fails.

Notes
-----
With :math:`X_c = X - \\bar{{X}}`:

.. math::

    C = \\frac{{X_c^T X_c}}{{n_{{obs}} - 1}} = V \\Lambda V^T, \\qquad
    L = V_k \\Lambda_k^{{1/2}}, \\qquad S = X_c V_k

so that ``eigenvalues[i] == (loadings[:, i] ** 2).sum()`` and, when
``num_factors == num_vars``, ``loadings @ loadings.T`` recovers ``C``.

Examples
--------
>>> import numpy as np
>>> from gofactor.analysis.factors import factor_analysis
>>> X = np.array([[1., 2.], [2., 4.], [3., 6.], [4., 8.]])
>>> loadings, scores, eigenvalues = factor_analysis(X, 1)
>>> eigenvalues
array([8.33333333])
>>> np.abs(loadings).ravel() / np.sqrt(eigenvalues)
array([0.4472136 , 0.89442719])
""".format(params=_core_docs["params"], returns=_core_docs["returns"])


def explained_variance_ratio(X, eigenvalues):
    """
    Fraction of the total sample variance carried by each retained factor.

    Parameters
    ----------
    X : array-like of shape (num_obs, num_vars)
        The data matrix passed to :func:`factor_analysis`.
    eigenvalues : array-like of shape (num_factors,)
        Eigenvalues returned by :func:`factor_analysis`.

    Returns
    -------
    ratio : ndarray of shape (num_factors,)
        ``eigenvalues / trace(C)``; sums to 1 when all factors are kept.

    Raises
    ------
    NumericalError
        If the total variance is zero or not finite.

    Examples
    --------
    >>> X = np.array([[1., 2.], [2., 4.], [3., 6.], [4., 8.]])
    >>> _, _, ev = factor_analysis(X, 1)
    >>> explained_variance_ratio(X, ev)
    array([1.])
    """
    X = check_array(X, input_name="X")
    X_centered = center_data(X)
    total_variance = np.trace(sample_covariance(X_centered))
    if total_variance <= 0:
        raise NumericalError(
            "Total variance is zero; the explained variance ratio is undefined.")
    return np.asarray(eigenvalues, dtype=np.float64) / total_variance
