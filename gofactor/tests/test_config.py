# -*- coding: utf-8 -*-
"""
test_config.py
"""

import logging
import os
import random

import numpy as np
import pytest

from gofactor import config, factor_analysis
from gofactor.backends import NumpyBackend, ScipyBackend
from gofactor.config import Configure, set_backend, get_backend
from gofactor.config import set_symmetrize, get_symmetrize
from gofactor.compat.sklearn import InvalidParameterError
from gofactor.exceptions import BackendError


def test_defaults():
    assert get_backend().name == "numpy"
    assert get_symmetrize() is False


def test_set_backend_alias():
    set_backend("sp")
    assert config._current_backend == "scipy"
    assert get_backend().name == "scipy"


def test_set_backend_unknown():
    with pytest.raises(BackendError):
        set_backend("dask")
    assert get_backend().name == "numpy"


@pytest.mark.parametrize("backend", [ScipyBackend(), NumpyBackend(), 1, None])
def test_set_backend_requires_a_name(backend):
    with pytest.raises(BackendError):
        set_backend(backend)
    assert config._current_backend == "numpy"
    assert get_backend().name == "numpy"
    loadings, _, _ = factor_analysis(np.random.rand(8, 3), 2)
    assert loadings.shape == (3, 2)


def test_set_symmetrize():
    set_symmetrize(True)
    assert get_symmetrize() is True


def test_configure_applies_settings(monkeypatch):
    for var in config._THREAD_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    cfg = Configure(verbosity=4, backend="scipy", symmetrize=True,
                    random_seed=7, thread_limit=2)
    assert get_backend().name == "scipy"
    assert get_symmetrize() is True
    assert logging.getLogger("gofactor").level == logging.DEBUG
    assert os.environ["OMP_NUM_THREADS"] == "2"

    first = (random.random(), np.random.rand())
    cfg.set_random_seed(7)
    assert (random.random(), np.random.rand()) == first

    cfg.set_verbosity(1)
    assert logging.getLogger("gofactor").level == logging.ERROR
    cfg.set_verbosity(3)


def test_configure_leaves_backend_alone_by_default():
    Configure()
    assert get_backend().name == "numpy"
    assert get_symmetrize() is False


def test_configure_log_file(tmp_path):
    log_file = tmp_path / "gofactor.log"
    pkg_logger = logging.getLogger("gofactor")
    saved = (pkg_logger.level, list(pkg_logger.handlers))
    try:
        cfg = Configure(verbosity=4, log_file=str(log_file))
        factor_analysis(np.random.rand(6, 3), 1)
        cfg.set_log_file(str(log_file))
        file_handlers = [h for h in pkg_logger.handlers
                         if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        file_handlers[0].flush()
        assert "Factor analysis of a (6, 3) matrix" in log_file.read_text()
    finally:
        for handler in pkg_logger.handlers:
            if handler not in saved[1]:
                handler.close()
        pkg_logger.setLevel(saved[0])
        pkg_logger.handlers = saved[1]


@pytest.mark.parametrize("kwargs", [{"verbosity": 9}, {"backend": "cupy"},
                                    {"backend": NumpyBackend()},
                                    {"symmetrize": "yes"}, {"thread_limit": 0},
                                    {"log_file": 3}])
def test_configure_rejects_invalid_parameters(kwargs):
    with pytest.raises(InvalidParameterError):
        Configure(**kwargs)


if __name__ == '__main__':
    pytest.main([__file__])
