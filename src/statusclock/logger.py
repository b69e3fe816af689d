"""Logging configuration for statusclock using loguru.

The package disables its own loguru records on import so an embedding host
sees nothing until it calls ``setup_logger``.
"""

import os
import sys
from typing import Optional

from loguru import logger

logger.disable("statusclock")

# Store the configured log file path to ensure consistency
_log_file_path: Optional[str] = None


def get_project_root() -> str:
    """Return the project root directory (parent of src/statusclock)."""
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
    file_output: bool = True,
) -> None:
    """
    Configure loguru logger with file and console output.

    Args:
        log_file: Path to the log file (if None, uses the previously configured path or default)
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        rotation: Log rotation size
        retention: How long to keep old logs
        compression: Compression format for old logs
        console_output: Whether to output to console
        file_output: Whether to write the log file at all
    """
    global _log_file_path

    if log_file is None:
        if _log_file_path is None:
            _log_file_path = os.path.join(get_project_root(), "statusclock.log")
        log_file = _log_file_path
    else:
        if not os.path.isabs(log_file):
            log_file = os.path.join(get_project_root(), log_file)
        _log_file_path = log_file

    logger.remove()
    logger.enable("statusclock")

    if console_output:
        logger.add(
            sys.stderr,
            level=log_level,
            format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>",
            colorize=True,
        )

    if file_output:
        logger.add(
            log_file,
            level=log_level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation=rotation,
            retention=retention,
            compression=compression,
            encoding="utf-8",
        )


def get_logger(name: Optional[str] = None):
    """
    Get a configured logger instance.

    Args:
        name: Optional name for the logger

    Returns:
        Logger instance
    """
    if name:
        return logger.bind(name=name)
    return logger
