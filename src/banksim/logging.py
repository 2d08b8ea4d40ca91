"""Logging configuration for banksim."""

import logging
import sys

PACKAGE_LOGGER = "banksim"


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for banksim.

    Log records go to stderr so they never interleave with prompts on stdout.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(log_level)

    # Remove handlers from a previous configuration
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(
        logging.Formatter(fmt="%(levelname)s %(name)s: %(message)s")
    )
    package_logger.addHandler(console_handler)
