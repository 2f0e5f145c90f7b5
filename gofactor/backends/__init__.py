# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: LKouadio <etanoyau@gmail.com>
"""
Computational backends exposing the dense linear-algebra primitives used by
the factor pipeline. NumPy is the default; SciPy is picked automatically
when it is importable.
"""
from .base import BaseBackend
from .numpy import NumpyBackend
from .scipy import ScipyBackend
from .selector import BackendSelector

__all__ = ["BaseBackend", "NumpyBackend", "ScipyBackend", "BackendSelector"]
