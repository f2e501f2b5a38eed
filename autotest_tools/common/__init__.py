"""
================================================================================
Autotest Tools Common Utilities
================================================================================

Shared loguru setup for the suite, the runner script and the tools.

Exports:
    - init_logger: Configure loguru sinks once per process
    - DEFAULT_LOG_FORMAT: Console format used when none is given

Usage:
    from autotest_tools.common import init_logger

    init_logger(level="DEBUG", log_file="logs/suite.log")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger


DEFAULT_LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_string: Log format string. Uses DEFAULT_LOG_FORMAT if not provided.
        log_file: Optional file path to write logs to
        rotation: Rotation policy for the file sink
        retention: Retention policy for the file sink
        force: Reconfigure even if already initialized

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/suite.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    # Remove default handler
    logger.remove()

    format_string = format_string or DEFAULT_LOG_FORMAT
    level = str(level).upper()

    # Add console handler
    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    # Add file handler if specified
    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=rotation,
            retention=retention,
            colorize=False,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


__all__ = [
    "DEFAULT_LOG_FORMAT",
    "init_logger",
]
