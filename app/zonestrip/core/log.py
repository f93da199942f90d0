"""Logging setup for the zonestrip CLI."""

import logging

from rich.logging import RichHandler

from zonestrip.utils.formatting import err_console

LOGGER_NAME = "zonestrip"


def configure_logging(verbose: bool = False) -> None:
    """Attach a Rich handler to the package logger.

    Warnings are always shown; ``verbose`` lowers the threshold to DEBUG.
    Calling this more than once only adjusts the level.

    Args:
        verbose: Enable debug logging.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
