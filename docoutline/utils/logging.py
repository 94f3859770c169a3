"""Logging bootstrap shared by the CLI and the API."""

from __future__ import annotations

import logging
import os
import sys

ROOT_LOGGER_NAME = "docoutline"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATEFMT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the package logger once and return it.

    Repeated calls only adjust the level, so modules may call this at import
    time and derive children with ``getChild``.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    resolved = level if level is not None else os.environ.get("LOG_LEVEL", "INFO")
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.strip().upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO
    logger.setLevel(resolved)
    if not any(getattr(handler, "_docoutline", False) for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATEFMT))
        handler._docoutline = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging"]
