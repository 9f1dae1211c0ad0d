"""Logging setup for the carousel engine."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_ROOT_LOGGER = "chainlinked"
_configured = False


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """Install a Rich handler on the package logger.

    Args:
        level: Log level name or number. Defaults to the configured setting.

    Returns:
        The package root logger.
    """
    global _configured
    if level is None:
        from chainlinked.config.settings import get_settings

        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger = logging.getLogger(_ROOT_LOGGER)
    logger.setLevel(level)
    if not _configured:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
            markup=False,
        )
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package root."""
    if name == _ROOT_LOGGER or name.startswith(_ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER}.{name}")
