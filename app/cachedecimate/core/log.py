"""Logging setup for the command line.

Library modules log through ``logging.getLogger(__name__)`` or an
injected logger. The CLI installs a single Rich handler on the package
logger at start-up and removes it again when the command finishes.
"""

import logging

from rich.logging import RichHandler

from cachedecimate.utils.formatting import err_console

LOGGER_NAME = "cachedecimate"

_handler: logging.Handler | None = None


def get_logger() -> logging.Logger:
    """Return the package logger passed into the core operations."""
    return logging.getLogger(LOGGER_NAME)


def configure_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """Install the Rich log handler on the package logger.

    Calling this again replaces the previously installed handler.

    Args:
        verbose: Log debug messages (skipped symlinks, gate decisions).
        quiet: Only log warnings and errors. Ignored when ``verbose`` is set.

    Returns:
        The configured package logger.
    """
    global _handler
    teardown_logging()

    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    _handler = RichHandler(
        console=err_console,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    _handler.setLevel(level)

    log = get_logger()
    log.setLevel(level)
    log.addHandler(_handler)
    return log


def teardown_logging() -> None:
    """Remove the handler installed by configure_logging, if any."""
    global _handler
    if _handler is None:
        return
    log = get_logger()
    log.removeHandler(_handler)
    _handler.close()
    _handler = None
    log.setLevel(logging.NOTSET)
