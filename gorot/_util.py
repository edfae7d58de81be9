# -*- coding: utf-8 -*-
# License: BSD-3-Clause

"""Provides logging setup helpers for the GoRot package.

The default logging configuration ships with the package as `_gorlog.yml`
so that every module logs consistently through the `gorot` logger.
"""

import os
import logging
from ._gorotlog import gorotlog


__all__ = ['initialize_logging', 'get_logger']


# Determine the directory where __init__.py resides
PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

# Define the default logging configuration file path
DEFAULT_LOG_CONFIG = os.path.join(PACKAGE_DIR, '_gorlog.yml')

def initialize_logging(
    config_file: str = DEFAULT_LOG_CONFIG,
    use_default_logger: bool = True,
    verbose: bool = False
) -> None:
    """
    Initializes the logging configuration for the GoRot package.

    This function configures logging based on a YAML configuration file
    located within the package directory. If the configuration file is not
    found or an error occurs during loading, it falls back to a default
    logger setup.

    Parameters
    ----------
    config_file : str, optional
        Path to the logging configuration file. Defaults to `_gorlog.yml`
        located in the package directory.

    use_default_logger : bool, optional
        Whether to use the default logger configuration if the specified
        `config_file` is not found or fails to load. Defaults to `True`.

    verbose : bool, optional
        If `True`, prints additional information during the logging setup.

    Raises
    ------
    FileNotFoundError
        If the specified `config_file` does not exist and
        `use_default_logger` is set to `False`.
    """
    try:
        gorotlog.load_configuration(
            config_path=config_file,
            use_default_logger=use_default_logger,
            verbose=verbose
        )
    except FileNotFoundError:
        if not use_default_logger:
            raise
        logging.warning(
            f"Logging configuration file not found: {config_file}. "
            "Falling back to default logger."
        )
        gorotlog.set_default_logger()
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # dictConfig reports malformed configurations with these types.
        if not use_default_logger:
            raise
        logging.error(
            f"Failed to load logging configuration from {config_file}: {e}. "
            "Falling back to default logger."
        )
        gorotlog.set_default_logger()

def get_logger(logger_name: str = '') -> logging.Logger:
    """
    Retrieves a logger with the specified name.

    Parameters
    ----------
    logger_name : str, optional
        The name of the logger. If empty, returns the root logger.

    Returns
    -------
    logging.Logger
        The logger instance with the specified name.
    """
    return gorotlog.get_gorot_logger(logger_name)
