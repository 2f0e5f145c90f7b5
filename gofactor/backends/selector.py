# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: LKouadio (a.k.a. @Daniel) <etanoyau@gmail.com>

"""
Provides an interface to select the computation backend used by the factor
pipeline.

Classes
-------
BackendSelector
    Selects the computational backend from a user preference, an alias
    (``"np"``, ``"sp"``), an already-built backend instance, or automatically
    from the installed libraries.

Examples
--------
>>> from gofactor.backends.selector import BackendSelector
>>> backend = BackendSelector(preferred_backend="np").get_backend()
>>> backend.name
'numpy'
"""

from .base import BaseBackend
from .numpy import NumpyBackend
from .scipy import ScipyBackend
from ..exceptions import BackendError
from .._gofactorlog import gofactorlog

logger = gofactorlog.get_gofactor_logger(__name__)

__all__ = ["BackendSelector"]


class BackendSelector:
    """
    Manages and selects the computational backend for `gofactor` tasks.

    Parameters
    ----------
    preferred_backend : str or BaseBackend, optional
        The preferred backend. Supported names are `"numpy"` and `"scipy"`
        together with the short forms `"np"` and `"sp"`. A `BaseBackend`
        instance is used as is. If `None`, automatic selection is applied.
    verbose : int, optional
        Sets the verbosity level. `0` means no output.

    Attributes
    ----------
    backends : dict
        Maps backend names to their class implementations.
    selected_backend : BaseBackend
        Instance of the selected backend.

    Raises
    ------
    BackendError
        If `preferred_backend` names no known backend.

    Notes
    -----
    Automatic selection prefers SciPy when it is importable and falls back
    to NumPy otherwise.
    """

    def __init__(self, preferred_backend=None, verbose=0):
        self.backends = {
            "numpy": NumpyBackend,
            "scipy": ScipyBackend,
        }
        self.alias_map = {
            "np": "numpy",
            "sp": "scipy",
        }
        self.verbose = verbose
        self.selected_backend = self.select_backend(preferred_backend)

    def select_backend(self, preferred_backend):
        """
        Selects the backend based on user preference, or defaults to
        automatic selection when no preference is given.

        Parameters
        ----------
        preferred_backend : str, BaseBackend or None

        Returns
        -------
        backend_instance : BaseBackend
        """
        if preferred_backend is None:
            return self.auto_select_backend()
        if isinstance(preferred_backend, BaseBackend):
            return preferred_backend

        key = str(preferred_backend).lower()
        normalized_backend = self.alias_map.get(key, key)
        if normalized_backend not in self.backends:
            logger.error("Unknown backend requested: %r", preferred_backend)
            raise BackendError(
                f"Unsupported backend: {preferred_backend!r}. Supported"
                f" backends: {list(self.backends)} (aliases:"
                f" {list(self.alias_map)})."
            )
        if self.verbose > 0:
            print(f"{normalized_backend.capitalize()}Backend selected by user preference.")
        logger.debug("Backend %r selected by user preference.", normalized_backend)
        return self.backends[normalized_backend]()

    def is_scipy_available(self):
        """
        Checks whether the SciPy library is available.

        Returns
        -------
        bool
        """
        try:
            import scipy.linalg  # noqa
            return True
        except ImportError:
            return False

    def auto_select_backend(self):
        """
        Automatically selects the most suitable backend: ``"scipy"`` if
        SciPy is installed, ``"numpy"`` otherwise.

        Returns
        -------
        backend_instance : BaseBackend
        """
        selected_backend = "scipy" if self.is_scipy_available() else "numpy"
        if self.verbose > 0:
            print(f"{selected_backend.capitalize()}Backend"
                  " selected for general computations.")
        logger.debug("Backend %r selected automatically.", selected_backend)
        return self.backends[selected_backend]()

    def get_backend(self):
        """
        Retrieves the selected backend instance.

        Returns
        -------
        backend_instance : BaseBackend
        """
        return self.selected_backend
