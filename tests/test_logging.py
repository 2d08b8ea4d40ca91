"""Tests for logging configuration."""

import logging

from banksim.logging import setup_logging


def test_setup_logging_configures_package_logger():
    setup_logging(level="DEBUG")
    package_logger = logging.getLogger("banksim")

    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_setup_logging_replaces_handlers():
    setup_logging()
    setup_logging()

    assert len(logging.getLogger("banksim").handlers) == 1


def test_unknown_level_falls_back_to_warning():
    setup_logging(level="chatty")
    assert logging.getLogger("banksim").level == logging.WARNING


def test_records_go_to_stderr(capsys):
    setup_logging(level="INFO")
    logging.getLogger("banksim.test").info("Deposited %s", "10.00")

    assert "INFO banksim.test: Deposited 10.00" in capsys.readouterr().err
