"""Loguru sink configuration.

Environment:
    UPRIGHT_LOG_LEVEL   stderr level (default INFO)
    UPRIGHT_LOG_FILE    optional path of a rotating log file
"""

from __future__ import annotations

import os
import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(level: str | None = None, log_file: str | None = None) -> None:
    level = (level or os.getenv("UPRIGHT_LOG_LEVEL", "INFO")).upper()
    log_file = log_file or os.getenv("UPRIGHT_LOG_FILE")

    logger.remove()
    logger.add(sys.stderr, level=level, format=_FORMAT)
    if log_file:
        logger.add(
            log_file,
            level="DEBUG",
            format=_FORMAT,
            rotation="5 MB",
            retention=10,
            enqueue=True,
            encoding="utf-8",
        )
    logger.debug("Logging configured (level={}, file={})", level, log_file)
