"""Logging for lsp_markup.

Renderers log under the ``lsp_markup`` namespace and stay silent until
:func:`configure_logging` attaches a rich handler to it.
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from .config import RenderSettings

ROOT_LOGGER_NAME = "lsp_markup"


def configure_logging(
    level: Optional[str] = None,
    *,
    settings: Optional[RenderSettings] = None,
    rich_tracebacks: bool = True,
) -> logging.Logger:
    """Send ``lsp_markup`` records through rich on stderr.

    ``level`` wins over ``settings.log_level``. Calling this again replaces the
    previously installed handler instead of stacking a second one.
    """
    if level is None:
        level = settings.log_level if settings is not None else "INFO"
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    console = Console(stderr=True)
    logger.addHandler(RichHandler(console=console, rich_tracebacks=rich_tracebacks, markup=False))
    logger.setLevel(level.upper())
    logger.propagate = False
    return logger


def get_logger(name: str, *extra_names: str) -> logging.Logger:
    """Return a logger below the ``lsp_markup`` namespace."""
    namespace = ".".join([name, *extra_names]) if extra_names else name
    if namespace != ROOT_LOGGER_NAME and not namespace.startswith(ROOT_LOGGER_NAME + "."):
        namespace = f"{ROOT_LOGGER_NAME}.{namespace}"
    return logging.getLogger(namespace)


logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
