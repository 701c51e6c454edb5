"""Logging setup for the command-line interface."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """Configure the root logger to write through rich.

    Args:
        verbose: Show DEBUG records from chunkcodec, otherwise WARNING and up
        console: Console shared with the CLI output
    """
    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    logging.basicConfig(
        level=logging.WARNING,
        format="%(name)s | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[handler],
        force=True,
    )
    logging.getLogger("chunkcodec").setLevel(logging.DEBUG if verbose else logging.WARNING)
