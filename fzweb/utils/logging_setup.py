"""
Logging configuration for fzweb.

Console logging goes to stderr so that standard output only carries
confirmations and the bookmark table.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

PACKAGE_LOGGER = "fzweb"


def setup_logging(
    log_level: str = "WARNING",
    log_file: Optional[Path] = None,
    verbose: bool = False,
) -> logging.Logger:
    """
    Set up logging for the fzweb package logger.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_level: Level name from the settings file
        log_file: Optional log file path; parent directories are created
        verbose: Lower the level to INFO when the configured level is higher

    Returns:
        The configured package logger
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)
    if verbose and level > logging.INFO:
        level = logging.INFO

    # Configure logging format
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, date_format)

    handlers = []

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file is not None:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(level)

    package_logger.debug(f"Log level: {logging.getLevelName(level)}")
    if log_file is not None:
        package_logger.debug(f"Log file: {log_file}")

    return package_logger
