"""Logging configuration for the CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route log records through rich.

    Args:
        verbose: Show debug output instead of warnings only.
        console: Console to log to. Defaults to stderr.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
