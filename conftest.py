# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: L. Kouadio <etanoyau@gmail.com>
"""
conftest.py

Session-wide fixtures. The RNG seed can be pinned with the ``GOFACTOR_SEED``
environment variable to replay a failing run; the package configuration is
reset after every test so backend or symmetrization changes do not leak.
"""

import os
import random

import numpy as np
import pytest


@pytest.fixture(scope='session', autouse=True)
def global_rng_seed():
    """Fixture to set a globally controllable seed for all tests in the session."""
    _random_seed = os.environ.get("GOFACTOR_SEED", np.random.randint(0, 2**32 - 1, dtype=np.int64))
    print(f"I: Seeding RNGs for all tests with {_random_seed}")
    np.random.seed(int(_random_seed))
    random.seed(int(_random_seed))


@pytest.fixture(autouse=True)
def reset_gofactor_config():
    """Restore the default backend and symmetrization after each test."""
    from gofactor import config
    backend, symmetrize = config._current_backend, config._symmetrize
    yield
    config._current_backend = backend
    config._symmetrize = symmetrize
