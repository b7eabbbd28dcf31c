"""
Logging setup for Code Overview.

Log records go to stderr through a rich handler so that scan output on
stdout (tables or JSON) stays clean.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "code_overview"


def setup_logging(verbose: bool = False, quiet: bool = False) -> logging.Logger:
    """
    Install a rich stderr handler and set the package log level.

    Args:
        verbose: DEBUG level, with source paths and traceback locals
        quiet: ERROR level only (wins over verbose)

    Returns:
        The code_overview package logger
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=False,
        show_path=verbose,
    )
    logging.basicConfig(level=level, format="%(message)s", datefmt="[%X]", handlers=[handler])

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the code_overview namespace (``scanning`` -> ``code_overview.scanning``)."""
    if name is None:
        return logging.getLogger(ROOT_LOGGER)
    if not name.startswith(ROOT_LOGGER):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)
