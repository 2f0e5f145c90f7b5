# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: L. Kouadio <etanoyau@gmail.com>

"""
gofactor: Principal Component Factor Analysis
=============================================

:code:`gofactor` extracts factor loadings, factor scores and the retained
eigenvalues from an observations-by-variables data matrix through the
eigen-decomposition of its sample covariance matrix.

>>> import numpy as np
>>> import gofactor
>>> X = np.random.rand(50, 4)
>>> loadings, scores, eigenvalues = gofactor.factor_analysis(X, 2)
"""
import os
import logging
import warnings
import importlib.util

__version__ = "0.1.0"

# Dependency check
_required_dependencies = [
    ("numpy", None),
    ("scipy", None),
    ("yaml", "pyyaml"),
    ("sklearn", "scikit-learn"),
]

_missing_dependencies = []
for _package, _dist_name in _required_dependencies:
    if importlib.util.find_spec(_package) is None:
        _missing_dependencies.append(f"{_dist_name or _package}")

if _missing_dependencies:
    warnings.warn("Some dependencies are missing. gofactor may not function correctly:\n" +
                  "\n".join(_missing_dependencies), ImportWarning)

from ._gofactorlog import gofactorlog  # noqa: E402

# Library logger: silent unless the application configures logging.
logging.getLogger(__name__).addHandler(logging.NullHandler())
if os.getenv("GOFACTOR_LOG_CONFIG_PATH"):
    gofactorlog.load_configure_set_logfile()

from .exceptions import InvalidArgumentError, NumericalError  # noqa: E402
from .analysis.factors import factor_analysis, explained_variance_ratio  # noqa: E402
from . import config  # noqa: E402

__all__ = [
    "__version__",
    "factor_analysis",
    "explained_variance_ratio",
    "InvalidArgumentError",
    "NumericalError",
    "gofactorlog",
    "config",
]
