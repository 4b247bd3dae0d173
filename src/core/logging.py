"""
Logging configuration for the rate iteration package.

Library modules only create module loggers via ``logging.getLogger(__name__)``;
handlers are attached by applications (the CLI) through ``configure_logging``.
"""

import logging
import sys
from pathlib import Path
from typing import Final

PACKAGE_LOGGER_NAME: Final[str] = "src"

LOG_FORMAT: Final[str] = "%(asctime)s - %(name)-20s - %(levelname)-8s - %(message)s"
LOG_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"


class IterationFormatter(logging.Formatter):
    """Formatter with optional source location suffix."""

    def __init__(self, include_location: bool = False):
        format_str = LOG_FORMAT
        if include_location:
            format_str += " [%(filename)s:%(lineno)d]"
        super().__init__(format_str, datefmt=LOG_DATE_FORMAT)


def configure_logging(
    level: str | int = "INFO",
    log_file_path: str | Path | None = None,
    include_location: bool = False,
) -> logging.Logger:
    """
    Configure the package logger.

    Calling this repeatedly replaces previously installed handlers instead
    of stacking duplicates.

    Args:
        level: Logging level name or number (DEBUG, INFO, WARNING, ...)
        log_file_path: Optional file to mirror console output into
        include_location: Append ``[file:line]`` to each message

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown logging level: {level}")
        level = resolved

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)

    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = IterationFormatter(include_location=include_location)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    if log_file_path is not None:
        path = Path(log_file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """Module logger under the package namespace."""
    if name != PACKAGE_LOGGER_NAME and not name.startswith(PACKAGE_LOGGER_NAME + "."):
        name = f"{PACKAGE_LOGGER_NAME}.{name}"
    return logging.getLogger(name)
