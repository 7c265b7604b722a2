"""Logging configuration for the allocator."""

import sys
from typing import Any, Optional

from loguru import logger as loguru_logger

from allocator import config

SERVICE_NAME = "allocator"

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"

logger = loguru_logger.bind(service=SERVICE_NAME)


def setup_logger(log_level: Optional[str] = None, sink: Any = None):
    """Configure the allocator logger with a single sink.

    Args:
        log_level: Minimum level to emit (default: ALLOCATOR_LOG_LEVEL or INFO)
        sink: Where diagnostics are written (default: stderr)

    Returns:
        logger: Logger bound with the service name
    """
    loguru_logger.remove()
    loguru_logger.add(
        sys.stderr if sink is None else sink,
        level=(log_level or config.get_log_level()).upper(),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    return logger
