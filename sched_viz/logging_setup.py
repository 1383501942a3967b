from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool = False, console: Console | None = None) -> None:
    """
    Route the package's log records through Rich (stderr by default).
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=verbose,
        rich_tracebacks=True,
    )

    root = logging.getLogger("sched_viz")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False
