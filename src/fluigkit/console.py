"""Shared console and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

console = Console()


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Route log records through the shared rich console.

    Safe to call more than once; the previous RichHandler is replaced.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)
    root.addHandler(RichHandler(console=console, show_path=False))
    root.setLevel(level)
