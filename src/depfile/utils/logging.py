"""Logging configuration using rich."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

# Module-level logger
_logger: Optional[logging.Logger] = None
# Standard output may carry the dependency file
_console = Console(stderr=True)


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Configure logging with rich handler.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    global _logger

    logging.basicConfig(
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=_console,
                rich_tracebacks=True,
                show_path=False,
                markup=False,
            )
        ],
    )

    _logger = logging.getLogger("depfile")
    _logger.setLevel(level.upper())
    return _logger


def get_logger() -> logging.Logger:
    """Get the configured logger, initializing if needed.

    Returns:
        Logger instance
    """
    global _logger
    if _logger is None:
        _logger = setup_logging()
    return _logger


def get_console() -> Console:
    """Get the rich console for direct output.

    Returns:
        Rich console instance
    """
    return _console
