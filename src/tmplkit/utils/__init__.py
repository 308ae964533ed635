"""Utility modules for tmplkit."""

from .console import console, err_console
from .logging import configure_logging

__all__ = ["console", "err_console", "configure_logging"]
