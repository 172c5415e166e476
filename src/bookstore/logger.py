"""
Logging for the bookstore package.

Records go to stderr so they never interleave with CLI output on stdout.
Only the ``bookstore`` logger is configured; the root logger is left to
the host application.
"""

import logging
import sys

from bookstore.config import config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_package_logger = logging.getLogger("bookstore")


def get_logger(name: str) -> logging.Logger:
    """Return ``logging.getLogger(name)``, attaching the stderr handler on first use."""
    if not _package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        _package_logger.addHandler(handler)
        _package_logger.setLevel(config.log_level)
    return logging.getLogger(name)
