"""
Logging setup for reportquill.

Modules log through ``logging.getLogger(__name__)``; applications that want
console output call :func:`setup_logging` once.
"""

import logging
import sys
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "reportquill"
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_logger(name: str) -> logging.Logger:
    """
    Get logger instance inside the reportquill namespace.

    Args:
        name: Logger name (a dotted module path or a short suffix)

    Returns:
        Logger instance
    """
    if not name or not isinstance(name, str):
        raise ValueError("Logger name must be a non-empty string")

    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(level: str = "INFO", use_rich: bool = True, console: Optional[Console] = None) -> logging.Logger:
    """
    Setup logging for the library.

    Args:
        level: Log level
        use_rich: Whether to use rich logging
        console: Optional rich console (defaults to stderr)

    Returns:
        The configured ``reportquill`` logger
    """
    if level.upper() not in _VALID_LEVELS:
        raise ValueError(f"Invalid log level: {level}")

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper()))
    logger.handlers.clear()

    if use_rich:
        handler: logging.Handler = RichHandler(
            console=console or Console(stderr=True),
            show_time=True,
            show_path=True,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )

    handler.setLevel(getattr(logging, level.upper()))
    logger.addHandler(handler)
    logger.debug(f"Logging initialized at {level.upper()} level (rich={use_rich})")
    return logger
