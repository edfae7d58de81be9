# -*- coding: utf-8 -*-
#   License: BSD-3-Clause

"""
Track convergence issues and handle all `gorot` log messages.

This module provides a logging utility class `gorotlog` to configure and
manage logging across the `gorot` package. It supports YAML and INI logging
configurations, offers methods to set up a default logger, retrieve named
loggers and redirect log records to a file.
"""

import os
import yaml
import logging
import logging.config
from typing import Optional

__all__ = ["gorotlog"]


class gorotlog:
    """
    A class to configure logging for the `gorot` package, so that rotation
    progress, convergence and failures can be traced from one place.
    """

    @staticmethod
    def load_configuration(
        config_path: Optional[str] = None,
        use_default_logger: bool = True,
        verbose: bool = False
    ) -> None:
        """
        Configures logging based on a specified configuration file.

        Parameters
        ----------
        config_path : str, optional
            Path to the configuration file. Supports `.yaml`, `.yml` and
            `.ini` formats. If `None`, uses basic logging configuration or
            the default logger setup, depending on `use_default_logger`.

        use_default_logger : bool, optional
            Whether to use the default logger configuration if no
            `config_path` is provided. Defaults to `True`.

        verbose : bool, optional
            If `True`, prints additional information during configuration.
            Defaults to `False`.

        Raises
        ------
        FileNotFoundError
            If the specified configuration file does not exist.
        """
        if not config_path:
            if use_default_logger:
                gorotlog.set_default_logger()
            else:
                logging.basicConfig()
            return

        if verbose:
            print(f"Configuring logging with: {config_path}")

        if config_path.endswith((".yaml", ".yml")):
            gorotlog._configure_from_yaml(config_path, verbose)
        elif config_path.endswith(".ini"):
            if not os.path.exists(config_path):
                raise FileNotFoundError(
                    f"The INI config file {config_path} does not exist.")
            logging.config.fileConfig(config_path, disable_existing_loggers=False)
        else:
            logging.warning(
                f"Unsupported logging configuration format: {config_path}"
            )

    @staticmethod
    def _configure_from_yaml(yaml_path: str, verbose: bool = False) -> None:
        """
        Configures logging from a YAML file.

        Raises
        ------
        FileNotFoundError
            If the YAML configuration file does not exist.

        yaml.YAMLError
            If there is an error parsing the YAML file.
        """
        full_path = os.path.abspath(yaml_path)
        if not os.path.exists(full_path):
            logging.error(f"The YAML config file {full_path} does not exist.")
            raise FileNotFoundError(f"The YAML config file {full_path} does not exist.")

        if verbose:
            print(f"Loading YAML config from {full_path}")

        try:
            with open(full_path, "rt") as f:
                config = yaml.safe_load(f.read())
            logging.config.dictConfig(config)
        except yaml.YAMLError as e:
            logging.error(f"Error parsing YAML config file: {e}")
            raise

    @staticmethod
    def set_default_logger() -> None:
        """
        Sets up a default logger configuration: messages with level INFO and
        above go to the console with a simple format.
        """
        logging.basicConfig(
            level=logging.INFO,
            format='%(asctime)s - %(levelname)s - %(message)s'
        )

    @staticmethod
    def get_gorot_logger(logger_name: str = '') -> logging.Logger:
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
    def set_logger_output(
        log_filename: str = "gorot.log",
        date_format: str = '%Y-%m-%d %H:%M:%S',
        file_mode: str = "w",
        format_: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level: int = logging.DEBUG,
        logger_name: str = "gorot",
    ) -> logging.Handler:
        """
        Sends the records of the `gorot` logger to a file.

        Parameters
        ----------
        log_filename : str, optional
            The name of the log file. Defaults to `"gorot.log"`.

        date_format : str, optional
            The date format used in log messages.

        file_mode : str, optional
            The mode for opening the log file (`'a'` for append, `'w'` for
            overwrite). Defaults to `'w'`.

        format_ : str, optional
            The format of the log messages.

        level : int, optional
            The logging level. Defaults to `logging.DEBUG`, which records one
            line per optimizer iteration.

        logger_name : str, optional
            The logger to attach the handler to. Defaults to the package
            logger so that every `gorot.*` module is captured.

        Returns
        -------
        logging.Handler
            The file handler that was attached, so callers can detach it.
        """
        logger = gorotlog.get_gorot_logger(logger_name)
        logger.setLevel(level)

        # One file handler per log file.
        full_path = os.path.abspath(log_filename)
        for h in logger.handlers:
            if isinstance(h, logging.FileHandler) and h.baseFilename == full_path:
                return h

        handler = logging.FileHandler(full_path, mode=file_mode)
        handler.setLevel(level)
        formatter = logging.Formatter(format_, datefmt=date_format)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

        return handler
