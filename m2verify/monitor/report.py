"""Plain-text final report on stdout.

Output format
-------------
::

    [ERROR] <message>        (traversal failures, printed as they happen)
    Errors: <count>
    <path>: <reason>         (one line per failing path, sorted by path)

Paths and reasons are printed verbatim: Rich markup, highlighting and
line wrapping are all disabled so the report stays machine-greppable.
"""

from __future__ import annotations

from typing import IO

from rich.console import Console

from m2verify.models.outcomes import RunSummary


def plain_console(stderr: bool = False, file: IO[str] | None = None) -> Console:
    """A Console that never rewrites what it prints."""
    return Console(
        file=file,
        stderr=stderr,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
    )


class ReportRenderer:
    """Renders traversal errors and the final :class:`RunSummary`.

    Parameters
    ----------
    console:
        Rich Console instance.  A plain stdout console is created if not
        provided.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or plain_console()

    def print_traversal_error(self, message: str) -> None:
        self.console.print(f"[ERROR] {message}")

    def print_summary(self, summary: RunSummary) -> None:
        self.console.print(f"Errors: {summary.error_count}")
        for outcome in summary.failures():
            self.console.print(f"{outcome.path}: {outcome.reason}")

    def print_usage(self, usage: str) -> None:
        self.console.print(usage)
