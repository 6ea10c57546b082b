"""
Logging setup for applications that use xmltransforms.

Every module logs through ``logging.getLogger(__name__)``, so all records
land under the ``xmltransforms`` logger. ``setup_logger`` only ever touches
that logger; the root logger and any other library's loggers are left alone.
"""

import logging
from pathlib import Path
from typing import Optional, Union


PACKAGE_LOGGER = "xmltransforms"

# Module name first: the transform that logged is what readers look for.
DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"


def _resolve_level(level: Union[str, int]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def setup_logger(
    level: Union[str, int] = "INFO",
    log_file: Optional[str] = None,
    format_string: Optional[str] = None,
) -> logging.Logger:
    """
    Attach console and optional file handlers to the package logger.

    The library itself never calls this; applications and demo scripts do.
    Calling it again replaces the handlers it added before.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ...) or number
        log_file: Optional log file path; parent directories are created
        format_string: Optional format, defaults to ``DEFAULT_FORMAT``

    Returns:
        The ``xmltransforms`` logger

    Raises:
        ValueError: If the level name is unknown
    """
    numeric_level = _resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(numeric_level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Records are handled here; the application's root handlers would repeat them.
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        name = f"{PACKAGE_LOGGER}.{name}"
    return logging.getLogger(name)
