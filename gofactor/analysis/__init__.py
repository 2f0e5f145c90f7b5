
"""
Analysis sub-package: the numeric stages of principal component factor
extraction (:mod:`~gofactor.analysis.decomposition`) and the public factor
analysis entry point (:mod:`~gofactor.analysis.factors`).
"""
from .decomposition import (
    center_data,
    sample_covariance,
    eigen_decompose,
    rank_components,
    compute_loadings,
    compute_scores,
    )
from .factors import (
    factor_analysis,
    explained_variance_ratio,
    )

__all__ = [
    "center_data",
    "sample_covariance",
    "eigen_decompose",
    "rank_components",
    "compute_loadings",
    "compute_scores",
    "factor_analysis",
    "explained_variance_ratio",
    ]
