"""Logging setup for the command-line driver."""

from __future__ import annotations

import logging
import sys
import threading

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_config_lock = threading.Lock()
_handler: logging.Handler | None = None


def setup_logging(level: str | int = logging.INFO, *, stream=None) -> logging.Logger:
    """Attach a single stream handler to the package logger.

    Calling it again swaps the handler instead of adding a second one.
    """
    global _handler

    package_logger = logging.getLogger("euler_digits")
    with _config_lock:
        if _handler is not None:
            package_logger.removeHandler(_handler)

        _handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_handler)
        package_logger.setLevel(level)

    return package_logger


__all__ = ["LOG_FORMAT", "setup_logging"]
