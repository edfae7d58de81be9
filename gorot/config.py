# -*- coding: utf-8 -*-
#   License: BSD-3-Clause

"""
Provides the configuration settings for the `gorot` package, allowing
users to customize logging verbosity, the global random seed and the
floating-point warnings raised by the rotation criteria.

Features
--------

- **Logging and Verbosity**:
  Fine-grained control over the level of the ``gorot`` logger, from no
  logging to full debug-level verbosity, where the optimizers report the
  criterion value, the projected gradient norm and the step size of every
  iteration.

- **Random Seed and Reproducibility**:
  Sets a global random seed so that random starting rotations
  (``randominit=True`` without an explicit ``random_state``) are
  reproducible.

- **Numerical Warnings**:
  Silences or restores the NumPy ``RuntimeWarning`` messages emitted from
  `gorot` modules, e.g. when the minimum entropy criterion meets an exact
  zero loading.

Example:

>>> from gorot.config import Configure
>>> config = Configure(verbosity=4, random_seed=42)
>>> config.set_verbosity(2)
"""
import logging
import random
import warnings
import numpy as np
from numbers import Integral
from typing import Optional, Union

from .compat.sklearn import validate_params, Interval

from ._gorotlog import gorotlog
logger = gorotlog.get_gorot_logger(__name__)

__all__ = ["Configure"]

_LOG_LEVELS = {
    0: logging.CRITICAL + 10,
    1: logging.ERROR,
    2: logging.WARNING,
    3: logging.INFO,
    4: logging.DEBUG,
}

_WARNING_MODULES = r"gorot(\..*)?$"


class Configure:
    """
    A class for managing and customizing the behavior of the `gorot`
    package.

    Parameters
    ----------
    verbosity : int, optional
        Controls the level of logging detail of the ``gorot`` logger.
        0 = No logging,
        1 = Errors only,
        2 = Warnings,
        3 = Info,
        4 = Debug (one line per optimizer iteration).
        Default is 3 (Info).
    random_seed : int or None, optional
        Sets the global random seed of NumPy and of :mod:`random`.
        Default is None.
    warnings_enabled : bool, optional
        If False, NumPy ``RuntimeWarning`` messages emitted from `gorot`
        modules are ignored. Default is True.

    Examples
    --------
    >>> from gorot.config import Configure
    >>> config = Configure(verbosity=4, random_seed=0)
    >>> config.set_warnings_enabled(False)
    """

    @validate_params(
        {
            'verbosity': [Interval(Integral, 0, 4, closed="both"), bool],
            'random_seed': [Interval(Integral, 0, 2**32 - 1, closed="both"), None],
            'warnings_enabled': ["boolean"],
        }
    )
    def __init__(
        self,
        verbosity: Union[int, bool] = 3,
        random_seed: Optional[int] = None,
        warnings_enabled: bool = True,
    ):
        self.verbosity = int(verbosity)
        self.random_seed = random_seed
        self.warnings_enabled = warnings_enabled

        self._setup_logging()

        if self.random_seed is not None:
            self._set_random_seed(self.random_seed)

        self._configure_warnings()

    def set_verbosity(self, level: int):
        """
        Set the verbosity level for logging.

        Parameters
        ----------
        level : int
            Verbosity level from 0 (no logging) to 4 (debug).
        """
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"Verbosity must be one of {sorted(_LOG_LEVELS)}, got {level!r}.")
        self.verbosity = level
        self._setup_logging()

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

    def set_warnings_enabled(self, enable: bool):
        """
        Enable or disable the numerical warnings of `gorot` modules.

        Parameters
        ----------
        enable : bool
            If True, warnings are shown. If False, they are ignored.
        """
        self.warnings_enabled = enable
        self._configure_warnings()

    # Private methods
    def _setup_logging(self):
        """Configure the package logger based on verbosity level."""
        package_logger = gorotlog.get_gorot_logger("gorot")
        package_logger.setLevel(_LOG_LEVELS.get(self.verbosity, logging.INFO))
        logger.info("Logging initialized. Current verbosity level: %d",
                    self.verbosity)

    def _set_random_seed(self, seed: int):
        """Set the global random seed for reproducibility."""
        random.seed(seed)
        np.random.seed(seed)
        logger.info("Random seed set to %d", seed)

    def _configure_warnings(self):
        """Enable or disable numerical warnings based on user configuration."""
        action = "default" if self.warnings_enabled else "ignore"
        warnings.filterwarnings(
            action, category=RuntimeWarning, module=_WARNING_MODULES)
        logger.info("Numerical warnings %s.",
                    "enabled" if self.warnings_enabled else "disabled")

    def __repr__(self):
        return (f"{type(self).__name__}(verbosity={self.verbosity},"
                f" random_seed={self.random_seed},"
                f" warnings_enabled={self.warnings_enabled})")
