"""
Logging configuration.

Stdout carries MCP protocol traffic, so the handler installed here writes to
stderr.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


def configure_logging(level: str = "INFO") -> None:
    """
    Route all logging through a single RichHandler on stderr.

    Calling it again only updates the level.
    """
    root = logging.getLogger()
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        handler = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="[%X]"))
        root.addHandler(handler)
    root.setLevel(level)
