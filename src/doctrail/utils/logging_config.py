"""Logger factory shared by doctrail modules."""

from __future__ import annotations

import logging

from doctrail.config import DOCTRAIL_LOG_LEVEL

_PACKAGE_LOGGER = "doctrail"
_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

logging.getLogger(_PACKAGE_LOGGER).addHandler(logging.NullHandler())

_stream_handler: logging.Handler | None = None


def get_logger(name: str) -> logging.Logger:
    """Return a module logger under the doctrail namespace."""
    if name != _PACKAGE_LOGGER and not name.startswith(_PACKAGE_LOGGER + "."):
        name = f"{_PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Libraries only get a ``NullHandler``; call this at the application
    boundary (scripts, host integrations) to actually see output.

    Args:
        level: Logging level name or number. Defaults to ``DOCTRAIL_LOG_LEVEL``.

    Returns:
        The configured package logger.
    """
    global _stream_handler

    logger = logging.getLogger(_PACKAGE_LOGGER)
    resolved = level if level is not None else DOCTRAIL_LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.WARNING
    logger.setLevel(resolved)

    if _stream_handler is None:
        _stream_handler = logging.StreamHandler()
        _stream_handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(_stream_handler)
    return logger
