"""Logging setup for tmplkit.

Library code logs through ``logging.getLogger(__name__)`` and never installs
handlers itself; the CLI calls :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
from typing import Union

from rich.logging import RichHandler

from .console import err_console

LOGGER_NAME = "tmplkit"


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    """Attach a rich handler writing to stderr to the package logger.

    Calling it again replaces the previously installed handler instead of
    stacking a second one.
    """
    logger = logging.getLogger(LOGGER_NAME)
    if isinstance(level, str):
        level = level.upper()
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=err_console,
        show_time=False,
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger

