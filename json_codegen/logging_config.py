"""Logging setup shared by the library and the command line tool.

Library modules obtain loggers through :func:`get_logger`; only the CLI
installs a handler. Log output always goes to stderr so that generated
code written to stdout stays clean.
"""

import logging
from typing import Dict, Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "json_codegen"

_LOGGER_CACHE: Dict[str, logging.Logger] = {}


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """Return a cached :class:`logging.Logger` instance."""
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = logging.getLogger(name)
    return _LOGGER_CACHE[name]


def configure_logging(
    level: Union[int, str] = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """
    Attach a rich handler to the package logger.

    Calling this more than once replaces the previously installed handler
    instead of stacking a second one.

    Args:
        level: Logging level name or number
        console: Console to log to (default: a new stderr console)

    Returns:
        The configured package logger
    """
    if isinstance(level, str):
        level = level.upper()

    logger = get_logger(PACKAGE_LOGGER)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    return logger
