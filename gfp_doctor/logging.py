"""Logging helpers for gfp-doctor."""

from __future__ import annotations

import logging

_LOGGER_NAME = "gfp_doctor"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a module-scoped logger under the gfp_doctor hierarchy."""
    full_name = f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME
    return logging.getLogger(full_name)


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Attach a console handler to the package logger."""
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(level)
    stream_handler.setFormatter(logging.Formatter("[gfp-doctor] %(levelname)s %(message)s"))
    logger.addHandler(stream_handler)
    return logger


__all__ = ["configure_logging", "get_logger"]
