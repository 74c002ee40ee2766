"""Utility modules for filemover."""

from .logging import get_console, get_logger, setup_logging

__all__ = [
    "get_logger",
    "setup_logging",
    "get_console",
]
