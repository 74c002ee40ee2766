"""Command-line interface for filemover."""

from .main import cli

__all__ = ["cli"]
