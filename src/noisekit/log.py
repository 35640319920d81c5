"""Logging setup for the noisekit CLI."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route stdlib logging through a RichHandler on stderr.

    Args:
        verbose: Log at DEBUG instead of WARNING.
        console: Console to render records on. Defaults to a stderr console.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=verbose,
        rich_tracebacks=True,
        markup=False,
    )
    logging.basicConfig(
        format="%(message)s",
        level=logging.DEBUG if verbose else logging.WARNING,
        handlers=[handler],
        force=True,
    )
