"""Utility modules."""

from .logging import get_console, get_logger, setup_logging

__all__ = ["get_console", "get_logger", "setup_logging"]
