# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Provides the configuration settings for the `gofactor` package, allowing
users to customize the default computational backend, the symmetrization
of covariance matrices, logging verbosity, warnings, thread limits and the
global random seed, and an optional log file.

Backend Options
---------------
- `numpy`: :func:`numpy.linalg.eigh` (default).
- `scipy`: :func:`scipy.linalg.eigh`.

How to Use
----------
>>> from gofactor.config import Configure, set_backend, get_backend
>>> config = Configure(verbosity=2, backend='scipy', symmetrize=True)
>>> get_backend().name
'scipy'
>>> set_backend('numpy')

Module Attributes
-----------------
_current_backend : str
    Name of the backend used by :func:`gofactor.factor_analysis` when no
    backend is passed explicitly. Default is ``'numpy'``.
_symmetrize : bool
    Whether covariance matrices are replaced by ``(C + C.T) / 2`` before
    the eigen-decomposition. Default is ``False``.
"""
import os
import logging
import random
import warnings
import numpy as np
from numbers import Integral
from typing import Optional, Union

from .backends.selector import BackendSelector
from .exceptions import BackendError
from .compat.sklearn import validate_params, StrOptions, Interval
from ._gofactorlog import gofactorlog

logger = gofactorlog.get_gofactor_logger(__name__)

_current_backend = 'numpy'
_symmetrize = False

_THREAD_ENV_VARS = (
    "OMP_NUM_THREADS",
    "OPENBLAS_NUM_THREADS",
    "MKL_NUM_THREADS",
    "VECLIB_MAXIMUM_THREADS",
    "NUMEXPR_NUM_THREADS",
)

__all__ = ["Configure", "set_backend", "get_backend",
           "set_symmetrize", "get_symmetrize"]


class Configure:
    """
    A class for managing and customizing the behavior of the `gofactor`
    package.

    Parameters
    ----------
    verbosity : int, optional
        Controls the level of logging detail of the ``gofactor`` logger.
        0 = No logging,
        1 = Errors only,
        2 = Warnings,
        3 = Info,
        4 = Debug.
        Default is 3 (Info).
    backend : {'numpy', 'scipy', 'np', 'sp'} or None, optional
        If given, becomes the package default backend.
    symmetrize : bool or None, optional
        If given, sets whether covariance matrices are explicitly
        symmetrized before the eigen-decomposition.
    random_seed : int or None, optional
        Sets a global random seed for reproducibility. Default is None.
    thread_limit : int or None, optional
        The maximum number of BLAS/OpenMP threads, exported through the
        usual environment variables. Must be set before the linear-algebra
        library spins up its thread pool to take effect.
    warnings_enabled : bool, optional
        If True, warnings are displayed. Default is True.
    log_file : str or None, optional
        If given, records of the ``gofactor`` logger allowed by
        `verbosity` are also appended to this file.

    Examples
    --------
    >>> from gofactor.config import Configure
    >>> config = Configure(verbosity=4, random_seed=42)
    >>> config.set_verbosity(2)
    """

    @validate_params(
        {
            'verbosity': [Interval(Integral, 0, 4, closed='both'), bool],
            'backend': [StrOptions({"numpy", "scipy", "np", "sp"}), None],
            'symmetrize': [bool, None],
            'random_seed': [Integral, None],
            'thread_limit': [Interval(Integral, 1, None, closed='left'), None],
            'warnings_enabled': [bool],
            'log_file': [str, None],
        }
    )
    def __init__(
        self,
        verbosity: Union[int, bool] = 3,
        backend: Optional[str] = None,
        symmetrize: Optional[bool] = None,
        random_seed: Optional[int] = None,
        thread_limit: Optional[int] = None,
        warnings_enabled: bool = True,
        log_file: Optional[str] = None,
    ):
        self.verbosity = int(verbosity)
        self.backend = backend
        self.symmetrize = symmetrize
        self.random_seed = random_seed
        self.thread_limit = thread_limit
        self.warnings_enabled = warnings_enabled
        self.log_file = log_file

        self._setup_logging()

        if self.log_file is not None:
            self.set_log_file(self.log_file)

        if self.backend is not None:
            set_backend(self.backend)

        if self.symmetrize is not None:
            set_symmetrize(self.symmetrize)

        if self.random_seed is not None:
            self._set_random_seed(self.random_seed)

        self._configure_warnings()

        if self.thread_limit is not None:
            self._set_thread_limit(self.thread_limit)

    def set_verbosity(self, level: int):
        """
        Set the verbosity level for logging.

        Parameters
        ----------
        level : int
            Verbosity level between 0 and 4.
        """
        self.verbosity = level
        self._setup_logging()
        logger.info("Verbosity level set to %d", level)

    def set_log_file(self, log_file: str):
        """
        Append the package log records to `log_file`.

        Parameters
        ----------
        log_file : str
            Path of the log file; created if missing.
        """
        self.log_file = log_file
        gofactorlog.set_logger_output(log_file)
        logger.info("Logging to file %s", log_file)

    def set_backend(self, backend_name: str):
        """Set the package default backend."""
        self.backend = backend_name
        set_backend(backend_name)

    def set_symmetrize(self, enable: bool):
        """Enable or disable explicit symmetrization of covariance matrices."""
        self.symmetrize = enable
        set_symmetrize(enable)

    def set_warnings_enabled(self, enable: bool):
        """
        Enable or disable warnings.

        Parameters
        ----------
        enable : bool
            If True, warnings are enabled.
            If False, warnings are suppressed.
        """
        self.warnings_enabled = enable
        self._configure_warnings()
        logger.info("Warnings enabled set to %s", enable)

    def set_thread_limit(self, limit: int):
        """
        Set the maximum number of threads.

        Parameters
        ----------
        limit : int
            The maximum number of threads used by the linear-algebra library.
        """
        self.thread_limit = limit
        self._set_thread_limit(limit)

    def set_random_seed(self, seed: int):
        """
        Set the global random seed for reproducibility.

        Parameters
        ----------
        seed : int
            The seed value to use for random number generation.
        """
        self.random_seed = seed
        self._set_random_seed(seed)

    # Private methods
    def _setup_logging(self):
        """Configure the package logger level based on verbosity."""
        log_levels = {
            0: logging.CRITICAL + 1,
            1: logging.ERROR,
            2: logging.WARNING,
            3: logging.INFO,
            4: logging.DEBUG
        }
        pkg_logger = gofactorlog.get_gofactor_logger('gofactor')
        pkg_logger.setLevel(log_levels.get(self.verbosity, logging.INFO))
        logger.info("Logging initialized. Current verbosity level: %d",
                    self.verbosity)

    def _set_random_seed(self, seed: int):
        """Set the global random seed for reproducibility."""
        random.seed(seed)
        np.random.seed(seed)
        logger.info("Random seed set to %d", seed)

    def _configure_warnings(self):
        """Enable or disable warnings based on user configuration."""
        if not self.warnings_enabled:
            warnings.filterwarnings('ignore')
            logger.info("Warnings are disabled.")
        else:
            warnings.resetwarnings()
            logger.info("Warnings are enabled.")

    def _set_thread_limit(self, limit: int):
        """Export the thread limit to the BLAS/OpenMP environment variables."""
        for var in _THREAD_ENV_VARS:
            os.environ[var] = str(limit)
        logger.info("Thread limit set to %d", limit)


def set_backend(backend_name: str):
    """
    Sets the default computational backend for gofactor.

    Parameters
    ----------
    backend_name : str
        ``'numpy'``, ``'scipy'`` or one of their aliases ``'np'``, ``'sp'``.

    Raises
    ------
    BackendError
        If `backend_name` is not a string or names no supported backend.
        Backend instances are passed per call, e.g.
        ``factor_analysis(X, k, backend=NumpyBackend())``.

    Examples
    --------
    >>> from gofactor.config import set_backend
    >>> set_backend('scipy')
    """
    global _current_backend
    if not isinstance(backend_name, str):
        raise BackendError(
            "The package backend is set by name ('numpy', 'scipy', 'np',"
            f" 'sp'), got {type(backend_name).__name__!r}."
        )
    backend = BackendSelector(preferred_backend=backend_name).get_backend()
    _current_backend = backend.name
    logger.info("Active backend set to: %s", backend.name.capitalize())


def get_backend():
    """
    Returns a fresh instance of the active computational backend.

    Examples
    --------
    >>> from gofactor.config import get_backend
    >>> get_backend()
    <NumpyBackend at 0x...>
    """
    return BackendSelector(preferred_backend=_current_backend).get_backend()


def set_symmetrize(enable: bool):
    """Sets whether covariance matrices are symmetrized by default."""
    global _symmetrize
    _symmetrize = bool(enable)
    logger.info("Covariance symmetrization set to %s", _symmetrize)


def get_symmetrize() -> bool:
    """Returns whether covariance matrices are symmetrized by default."""
    return _symmetrize
