"""
Logging setup for schema_codegen.

Modules obtain loggers through get_logger(); the host application decides
whether to call configure_logging() to attach a rich console handler.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "schema_codegen"

_configured = False


def configure_logging(
    level: int = logging.WARNING, console: Optional[Console] = None
) -> logging.Logger:
    """
    Attach a RichHandler to the package logger.

    Args:
        level: Log level for the package logger
        console: Console to write to (defaults to stderr)

    Returns:
        The configured package logger
    """
    global _configured

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True

    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
