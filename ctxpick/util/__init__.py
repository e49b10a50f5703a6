"""Shared helpers: the rich console used for user-facing notices, and path display."""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

logger = logging.getLogger(__name__)

# stderr, so notices never mix with the bundle printed to stdout
console = Console(log_path=False, stderr=True)


def path_with_tilde(path: Path | str) -> str:
    """Shorten a path by replacing the home directory with ``~``."""
    home = str(Path.home())
    path = str(path)
    if path.startswith(home):
        return "~" + path[len(home) :]
    return path


def notify_error(msg: str) -> None:
    """Report a non-fatal error to the user and the log."""
    logger.error(msg)
    console.print(f"[red]{escape(msg)}[/red]")
