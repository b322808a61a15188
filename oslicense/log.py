"""Logging setup for oslicense.

Library modules log through ``logging.getLogger(__name__)``. The package
logger carries a NullHandler so nothing is emitted until the CLI calls
configure_logging().
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER_NAME = "oslicense"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def configure_logging(
    verbose: bool = False, console: Optional[Console] = None
) -> logging.Logger:
    """Attach a Rich handler writing to stderr to the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        console: Optional Rich Console to log to. Defaults to a stderr console.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console if console is not None else Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    return logger
