"""Logging configuration for findr.

Modules log through ``logging.getLogger(__name__)``; this attaches a
single Rich handler on the stderr console to the ``findr`` logger.
"""

import logging

from rich.logging import RichHandler

from findr.utils.formatting import err_console

_LOGGER_NAME = "findr"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Configure the findr logger.

    Args:
        verbose: Log DEBUG records when True, WARNING and above otherwise.

    Returns:
        The configured ``findr`` logger.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = RichHandler(console=err_console, show_time=False, show_path=verbose, markup=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
