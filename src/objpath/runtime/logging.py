from __future__ import annotations

import logging

from rich.logging import RichHandler

from ..config import OBJPATH_CONFIG

LOGGER_NAME = "objpath"


class _ObjPathRichConsoleHandler(RichHandler):
    """Console handler installed by ``configure_logging``."""


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def configure_logging(level: int | str | None = None) -> logging.Logger:
    """Attach the rich console handler to the objpath logger.

    Safe to call repeatedly: the handler is only added once. ``level`` defaults
    to ``OBJPATH_CONFIG.log_level``.
    """
    logger = get_logger()
    if not any(isinstance(h, _ObjPathRichConsoleHandler) for h in logger.handlers):
        handler = _ObjPathRichConsoleHandler(
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    resolved = OBJPATH_CONFIG.log_level if level is None else level
    if isinstance(resolved, str):
        resolved = resolved.upper()
    logger.setLevel(resolved)
    return logger


__all__ = ["LOGGER_NAME", "configure_logging", "get_logger"]
