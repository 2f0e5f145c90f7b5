# -*- coding: utf-8 -*-
"""
test_gofactorlog.py
"""

import logging
import os

import pytest

from gofactor._gofactorlog import gofactorlog, setup_logging_with_expandvars

CONFIG_YAML = """
version: 1
disable_existing_loggers: false
handlers:
  file:
    class: logging.FileHandler
    filename: ${LOG_PATH}/factor.log
loggers:
  gofactor.testing:
    level: DEBUG
    handlers: [file]
    propagate: false
"""


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("gofactor.testing")
    yield logger
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_get_logger_name():
    logger = gofactorlog.get_gofactor_logger("gofactor.analysis")
    assert logger.name == "gofactor.analysis"


def test_yaml_configuration_with_env_path(tmp_path, monkeypatch, restore_logger):
    config_file = tmp_path / "_gflog.yml"
    config_file.write_text(CONFIG_YAML)
    monkeypatch.setenv("LOG_PATH", str(tmp_path))
    monkeypatch.setenv("GOFACTOR_LOG_CONFIG_PATH", str(tmp_path))

    gofactorlog.load_configure_set_logfile()
    restore_logger.debug("covariance estimated")
    for handler in restore_logger.handlers:
        handler.flush()
    assert "covariance estimated" in (tmp_path / "factor.log").read_text()


def test_load_configure_requires_env(monkeypatch):
    monkeypatch.delenv("GOFACTOR_LOG_CONFIG_PATH", raising=False)
    with pytest.raises(EnvironmentError):
        gofactorlog.load_configure_set_logfile()


def test_load_configure_missing_file(tmp_path, monkeypatch):
    monkeypatch.setenv("GOFACTOR_LOG_CONFIG_PATH", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        gofactorlog.load_configure_set_logfile()


def test_packaged_config_is_valid(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_PATH", str(tmp_path))
    pkg_logger = logging.getLogger("gofactor")
    saved = (pkg_logger.level, list(pkg_logger.handlers), pkg_logger.propagate)
    root = logging.getLogger()
    saved_root = (root.level, list(root.handlers))
    try:
        setup_logging_with_expandvars()
        assert any(isinstance(h, logging.FileHandler) for h in pkg_logger.handlers)
    finally:
        for handler in pkg_logger.handlers:
            if handler not in saved[1]:
                handler.close()
        pkg_logger.setLevel(saved[0])
        pkg_logger.handlers = saved[1]
        pkg_logger.propagate = saved[2]
        root.setLevel(saved_root[0])
        root.handlers = saved_root[1]


def test_set_logger_output(tmp_path):
    log_file = os.path.join(tmp_path, "out.log")
    pkg_logger = logging.getLogger("gofactor")
    saved = (pkg_logger.level, list(pkg_logger.handlers))
    try:
        first = gofactorlog.set_logger_output(log_file)
        assert gofactorlog.set_logger_output(log_file) is first
        file_handlers = [h for h in pkg_logger.handlers
                         if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        pkg_logger.info("written")
        file_handlers[0].flush()
        with open(log_file) as f:
            assert "written" in f.read()
    finally:
        for handler in pkg_logger.handlers:
            if handler not in saved[1]:
                handler.close()
        pkg_logger.setLevel(saved[0])
        pkg_logger.handlers = saved[1]


if __name__ == '__main__':
    pytest.main([__file__])
