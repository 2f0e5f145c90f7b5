# -*- coding: utf-8 -*-
#   Licence:BSD 3-Clause
#   Author: LKouadio <etanoyau@gmail.com>
"""
Steps behind the principal component factor extraction: centering,
covariance estimation, symmetric eigen-decomposition, ranking of the
eigenpairs and reconstruction of loadings and scores.

Each step is a plain function of the previous step's output so it can be
used and tested on its own; :func:`gofactor.analysis.factors.factor_analysis`
chains them.
"""

import numpy as np

from ..api.docstring import _core_docs
from ..backends.base import BaseBackend
from ..backends.selector import BackendSelector
from ..exceptions import NumericalError
from ..tools.validator import assert_all_finite, check_symmetric
from .._gofactorlog import gofactorlog

logger = gofactorlog.get_gofactor_logger(__name__)

__all__ = [
    "center_data",
    "sample_covariance",
    "eigen_decompose",
    "rank_components",
    "compute_loadings",
    "compute_scores",
    "resolve_backend",
]


def center_data(X):
    """
    Subtract the per-column arithmetic mean from `X`.

    Parameters
    ----------
    X : ndarray of shape (num_obs, num_vars)

    Returns
    -------
    X_centered : ndarray of shape (num_obs, num_vars)
        New array; `X` itself is left untouched.
    """
    return X - np.mean(X, axis=0)


def sample_covariance(X_centered, *, symmetrize=False, backend=None):
    backend = resolve_backend(backend)
    num_obs = X_centered.shape[0]
    with np.errstate(divide="ignore", invalid="ignore"):
        cov_matrix = backend.dot(X_centered.T, X_centered) / np.float64(num_obs - 1)

    try:
        assert_all_finite(cov_matrix, input_name="Covariance matrix",
                          stage="covariance estimation")
    except NumericalError as err:
        hint = (" At least two observations are required (num_obs - 1 = 0)."
                if num_obs < 2 else "")
        logger.error("Covariance estimation failed: %s%s", err, hint)
        raise NumericalError(f"{err}{hint}") from None

    if symmetrize:
        cov_matrix = check_symmetric(cov_matrix)
    return cov_matrix


sample_covariance.__doc__ = """\
Sample covariance matrix with Bessel's correction.

.. math::

    C = \\frac{{1}}{{n_{{obs}} - 1}} X_c^T X_c

Parameters
----------
{params.X_centered}
{params.symmetrize}
{params.backend}

Returns
-------
cov_matrix: ndarray of shape (num_vars, num_vars)

Raises
------
NumericalError
    If the covariance holds NaN or infinite values, which is the case for a
    single observation (zero denominator) or non-finite input data.
""".format(params=_core_docs["params"])


def resolve_backend(backend):
    """Return a backend instance; ``None`` means the package backend."""
    if backend is None:
        from ..config import get_backend
        return get_backend()
    if isinstance(backend, BaseBackend):
        return backend
    return BackendSelector(preferred_backend=backend).get_backend()


def eigen_decompose(cov_matrix, backend=None):
    """
    Full eigen-decomposition of a real symmetric covariance matrix.

    Parameters
    ----------
    cov_matrix : ndarray of shape (num_vars, num_vars)
    backend : str or BaseBackend, optional
        Backend providing ``eigh``. Defaults to the package backend.

    Returns
    -------
    eigenvalues : ndarray of shape (num_vars,)
        In the order returned by the solver (ascending for LAPACK).
    eigenvectors : ndarray of shape (num_vars, num_vars)
        Unit-norm eigenvectors as columns. Their sign is solver-dependent.

    Raises
    ------
    NumericalError
        If `cov_matrix` is not finite, or the solver fails to converge.
    """
    assert_all_finite(cov_matrix, input_name="Covariance matrix",
                      stage="eigen-decomposition")
    backend = resolve_backend(backend)
    logger.debug("Eigen-decomposition of a %s matrix with %r.",
                 cov_matrix.shape, backend)
    try:
        eigenvalues, eigenvectors = backend.eigh(cov_matrix)
    except (np.linalg.LinAlgError, ValueError) as err:
        logger.error("Eigen solver %r failed: %s", backend, err)
        raise NumericalError(
            f"Eigen-decomposition failed with the {backend.name} backend: {err}"
        ) from err

    eigenvalues = np.asarray(eigenvalues)
    if np.iscomplexobj(eigenvalues):
        eigenvalues = eigenvalues.real
    assert_all_finite(eigenvalues, input_name="Eigenvalues",
                      stage="eigen-decomposition")
    return eigenvalues, np.asarray(eigenvectors)


def rank_components(eigenvalues, eigenvectors, num_factors):
    """
    Sort eigenpairs by eigenvalue in descending order and keep the first
    `num_factors`.

    The sort is stable: equal eigenvalues keep the solver's order. Which
    basis the solver picks for a repeated eigenvalue is itself arbitrary.

    Returns
    -------
    eigenvalues : ndarray of shape (num_factors,)
    factors : ndarray of shape (num_vars, num_factors)
    """
    sorted_indices = np.argsort(-eigenvalues, kind="stable")
    eigenvalues = eigenvalues[sorted_indices]
    eigenvectors = eigenvectors[:, sorted_indices]
    return eigenvalues[:num_factors].copy(), eigenvectors[:, :num_factors].copy()


def compute_loadings(factors, eigenvalues):
    """
    Scale each retained eigenvector by the square root of its eigenvalue,
    i.e. ``factors @ diag(sqrt(eigenvalues))``.

    Raises
    ------
    NumericalError
        If a retained eigenvalue is negative. Round-off on a near-singular
        covariance can produce such values; they are reported, never
        clamped to zero.
    """
    negative = np.flatnonzero(eigenvalues < 0)
    if negative.size:
        logger.error("Negative retained eigenvalue(s) at %s: %s",
                     negative.tolist(), eigenvalues[negative].tolist())
        raise NumericalError(
            "Cannot take the square root of negative retained eigenvalue(s)"
            f" {eigenvalues[negative].tolist()} (factor index"
            f" {negative.tolist()}). The covariance matrix is likely"
            " singular; retain fewer factors."
        )
    return factors * np.sqrt(eigenvalues)[np.newaxis, :]


def compute_scores(X_centered, factors, backend=None):
    """Project the centered data on the retained unit eigenvectors."""
    return resolve_backend(backend).dot(X_centered, factors)
