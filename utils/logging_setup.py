"""
Logging setup utilities for Cathedral command line tools.

This module configures logging with console output and an optional log file.
"""

import logging
from pathlib import Path
from typing import Optional


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Set up logging with a console handler and an optional file handler.

    Args:
        level: Logging level (default: logging.INFO)
        log_file: Optional path of a log file to write as well
        format_string: Optional custom format string. If None, uses default format.

    Returns:
        Path to the log file, or None when logging only to the console

    Example:
        >>> setup_logging(logging.DEBUG)
        >>> logger = logging.getLogger(__name__)
        >>> logger.debug("Built Dark Tower facing West at  3, 2")
    """
    # Default format: timestamp, level, logger name, message
    if format_string is None:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    formatter = logging.Formatter(
        format_string,
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    # (useful if setup_logging is called multiple times)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    return log_file
