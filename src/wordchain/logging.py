"""Logging setup for wordchain.

Every module logs through ``get_logger(__name__)``; records flow up to the
``wordchain`` logger, which owns the only handler and writes to stderr so
command results on stdout stay machine-readable.
"""

import logging
import sys

ROOT_LOGGER = "wordchain"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def setup_root_logger(level: int = logging.INFO) -> None:
    """Attach the stderr handler to the ``wordchain`` logger once."""
    global _configured

    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # Propagate so pytest's caplog sees records
    root_logger.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Logger for a module, inheriting level and handler from ``wordchain``."""
    setup_root_logger()
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level on the ``wordchain`` logger and its handler."""
    setup_root_logger()

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Turn on debug output for the whole package (``--verbose``)."""
    set_global_log_level(logging.DEBUG)
