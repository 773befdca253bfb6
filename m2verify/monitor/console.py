"""Logging setup — routes the ``m2verify`` loggers through Rich on stderr."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "WARNING", console: Console | None = None) -> None:
    """Attach a RichHandler to the ``m2verify`` logger.

    Calling it again replaces the previous handler rather than stacking a
    second one.
    """
    root = logging.getLogger("m2verify")
    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root.addHandler(handler)
    root.setLevel(level.upper())
