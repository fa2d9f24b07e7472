"""Logging utilities."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO", *, rich_tracebacks: bool = True) -> None:
    """Route all records through a stderr rich handler."""
    console = Console(stderr=True)
    handler = RichHandler(
        console=console,
        rich_tracebacks=rich_tracebacks,
        markup=False,
        show_path=level.upper() == "DEBUG",
    )
    logging.basicConfig(level=level.upper(), format="%(message)s", handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a podlistings module."""
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger"]
