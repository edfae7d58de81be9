# -*- coding: utf-8 -*-
"""
test_logging.py
"""

import logging

import numpy as np
import pytest

from gorot._gorotlog import gorotlog
from gorot._util import initialize_logging, get_logger, DEFAULT_LOG_CONFIG
from gorot.analysis.criteria import Varimax, Quartimin
from gorot.analysis.rotation import rotate
from gorot.exceptions import ConvergenceError

F = np.array([[0.8, 0.1], [0.1, 0.8], [0.6, 0.6]])


@pytest.fixture
def restore_loggers():
    """Put the package and root loggers back as they were."""
    saved = {}
    for name in ("gorot", ""):
        lg = logging.getLogger(name)
        saved[name] = (list(lg.handlers), lg.level, lg.propagate)
    yield
    for name, (handlers, level, propagate) in saved.items():
        lg = logging.getLogger(name)
        for h in lg.handlers:
            if h not in handlers:
                h.close()
        lg.handlers[:] = handlers
        lg.setLevel(level)
        lg.propagate = propagate


@pytest.fixture
def propagating(monkeypatch):
    # The packaged configuration stops records at the package logger.
    monkeypatch.setattr(logging.getLogger("gorot"), "propagate", True)


def test_configuration_applied_on_import():
    import gorot  # noqa
    lg = logging.getLogger("gorot")
    assert any(h.get_name() == "console" for h in lg.handlers)
    assert lg.propagate is False


def test_get_logger_names():
    assert get_logger("gorot.analysis").name == "gorot.analysis"
    assert gorotlog.get_gorot_logger() is logging.getLogger()


def test_default_configuration_file(restore_loggers):
    initialize_logging()
    lg = logging.getLogger("gorot")
    assert lg.level == logging.INFO
    assert lg.propagate is False
    assert any(isinstance(h, logging.StreamHandler) for h in lg.handlers)
    assert DEFAULT_LOG_CONFIG.endswith("_gorlog.yml")


def test_missing_configuration_falls_back(tmp_path, restore_loggers):
    missing = str(tmp_path / "absent.yml")
    initialize_logging(missing)
    with pytest.raises(FileNotFoundError):
        initialize_logging(missing, use_default_logger=False)
    with pytest.raises(FileNotFoundError):
        gorotlog.load_configuration(str(tmp_path / "absent.ini"))


def test_yaml_configuration(tmp_path, restore_loggers):
    config = tmp_path / "log.yml"
    config.write_text(
        "version: 1\n"
        "disable_existing_loggers: False\n"
        "loggers:\n"
        "  gorot:\n"
        "    level: DEBUG\n"
    )
    gorotlog.load_configuration(str(config))
    assert logging.getLogger("gorot").level == logging.DEBUG


def test_malformed_configuration_falls_back(tmp_path, restore_loggers):
    config = tmp_path / "bad.yml"
    config.write_text("version: 1\nhandlers:\n  h:\n    class: no.such.Handler\n")
    initialize_logging(str(config))
    with pytest.raises(ValueError):
        initialize_logging(str(config), use_default_logger=False)


def test_log_file_output(tmp_path, restore_loggers):
    log_file = tmp_path / "rotation.log"
    handler = gorotlog.set_logger_output(str(log_file))
    # A second call for the same file reuses the handler.
    assert gorotlog.set_logger_output(str(log_file)) is handler
    assert logging.getLogger("gorot").handlers.count(handler) == 1

    rotate(F, Quartimin())
    handler.flush()
    text = log_file.read_text()
    assert "iter 1:" in text
    assert "converged" in text
    assert "gorot.analysis.gpa" in text


def test_iteration_records(caplog, propagating):
    with caplog.at_level(logging.DEBUG, logger="gorot"):
        rotate(F, Quartimin())
    debug = [r for r in caplog.records if r.levelno == logging.DEBUG]
    assert debug and all(r.name == "gorot.analysis.gpa" for r in debug)
    assert any("converged" in r.getMessage() for r in caplog.records
               if r.levelno == logging.INFO)


def test_failure_is_logged(caplog, propagating):
    with caplog.at_level(logging.WARNING, logger="gorot"):
        with pytest.raises(ConvergenceError):
            rotate(F, Quartimin(), maxiter=1)
    assert any(r.levelno == logging.WARNING and "stopped after 1" in r.getMessage()
               for r in caplog.records)


def test_degenerate_input_is_logged(caplog, propagating):
    with caplog.at_level(logging.INFO, logger="gorot"):
        rotate(np.array([[0.3, 0.4]]), Varimax())
    assert any("unrotated" in r.getMessage() for r in caplog.records)
