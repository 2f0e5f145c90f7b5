# -*- coding: utf-8 -*-
#   License: BSD-3-Clause
#   Author: LKouadio <etanoyau@gmail.com>

"""
Logging set-up for the `gofactor` package.

Every module logs through ``gofactorlog.get_gofactor_logger(__name__)``, so
all records land under the ``gofactor`` logger. That logger is silent
until an application configures it, either with the packaged ``_gflog.yml``
(picked up when ``GOFACTOR_LOG_CONFIG_PATH`` is set at import time) or with
a log file requested through :class:`gofactor.config.Configure`.
"""

import os
import yaml
import logging
import logging.config

__all__ = ["gofactorlog", "setup_logging_with_expandvars"]

_DEFAULT_CONFIG = os.path.join(os.path.dirname(__file__), "_gflog.yml")
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class gofactorlog:
    """
    Entry points used by the package to obtain and route its loggers.
    """

    @staticmethod
    def get_gofactor_logger(logger_name: str = '') -> logging.Logger:
        """
        Retrieves a logger with a specified name.

        Parameters
        ----------
        logger_name : str, optional
            The name of the logger. If empty, returns the root logger.

        Returns
        -------
        logging.Logger
        """
        return logging.getLogger(logger_name)

    @staticmethod
    def load_configure_set_logfile(
        config_file: str = '_gflog.yml',
        app_name: str = 'gofactor'
    ) -> None:
        """
        Configures logging from a YAML file located in the directory named
        by the ``<APP_NAME>_LOG_CONFIG_PATH`` environment variable.

        Raises
        ------
        EnvironmentError
            If the environment variable for the log config path is not set.

        FileNotFoundError
            If the specified configuration file does not exist.

        ValueError
            If the configuration file is not a YAML file.
        """
        env_var = f"{app_name.upper()}_LOG_CONFIG_PATH"
        config_dir = os.getenv(env_var, '')
        if not config_dir:
            raise EnvironmentError(
                f"{env_var} environment variable is not set."
            )
        full_path = os.path.join(config_dir, config_file)

        if not full_path.endswith(('.yaml', '.yml')):
            raise ValueError("Only `.yaml` or `.yml` config files are supported.")

        if not os.path.exists(full_path):
            raise FileNotFoundError(f"The config file {full_path} does not exist.")

        setup_logging_with_expandvars(full_path)

    @staticmethod
    def set_logger_output(
        log_filename: str,
        file_mode: str = "a",
        level: int = logging.DEBUG
    ) -> logging.FileHandler:
        """
        Send the records of the ``gofactor`` logger to `log_filename`.

        The logger's own level, set from the verbosity, still decides which
        records reach the file. Asking twice for the same file keeps a
        single handler.

        Parameters
        ----------
        log_filename : str
            Path of the log file.
        file_mode : str, optional
            `'a'` to append, `'w'` to overwrite. Defaults to `'a'`.
        level : int, optional
            Level of the file handler. Defaults to `logging.DEBUG`.

        Returns
        -------
        logging.FileHandler
            The handler writing to `log_filename`.
        """
        logger = gofactorlog.get_gofactor_logger('gofactor')
        target = os.path.abspath(log_filename)
        for handler in logger.handlers:
            if (isinstance(handler, logging.FileHandler)
                    and handler.baseFilename == target):
                return handler

        handler = logging.FileHandler(target, mode=file_mode)
        handler.setLevel(level)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
        return handler


def setup_logging_with_expandvars(config_path: str = _DEFAULT_CONFIG) -> None:
    """
    Sets up logging configuration from a YAML file with environment variable
    placeholders (e.g. ``${LOG_PATH}``) expanded using `os.path.expandvars`.

    Parameters
    ----------
    config_path : str, optional
        Path to the logging configuration YAML file. Defaults to the
        packaged ``_gflog.yml``.

    Raises
    ------
    FileNotFoundError
        If the specified configuration file does not exist.

    yaml.YAMLError
        If there is an error parsing the YAML file.
    """
    os.environ.setdefault("LOG_PATH", os.getcwd())
    with open(config_path, 'rt') as f:
        config_text = f.read()

    config_text = os.path.expandvars(config_text)
    config = yaml.safe_load(config_text)
    logging.config.dictConfig(config)
