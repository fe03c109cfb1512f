"""Terminal helpers and logging setup for the CLI."""

import logging
import sys

from rich.console import Console
from rich.logging import RichHandler


def is_input_terminal() -> bool:
    """Checks if stdin is a TTY."""
    return sys.stdin.isatty()


def configure_logging(verbose: bool = False) -> None:
    """Routes visitledger log records to stderr through rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("visitledger")
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
