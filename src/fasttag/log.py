# src/fasttag/log.py
"""
Logging setup shared by the CLI and the API server.
"""

import logging

from fasttag import config


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> logging.Logger:
    """Configure the root handler once and return the package logger."""
    name = (level or config.LOG_LEVEL).strip().upper()
    value = getattr(logging, name, logging.WARNING)
    logging.basicConfig(level=value, format=LOG_FORMAT)

    logger = logging.getLogger("fasttag")
    logger.setLevel(value)
    return logger
