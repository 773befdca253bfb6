"""Live one-character-per-item progress stream on stderr.

``o`` marks a passed check, ``x`` a failed one and ``.`` a skipped
(ignored) file.  Lines wrap at a fixed width.
"""

from __future__ import annotations

import threading

from rich.console import Console

PASS_MARK = "o"
FAIL_MARK = "x"
SKIP_MARK = "."

_MARK_STYLES: dict[str, str] = {
    PASS_MARK: "green",
    FAIL_MARK: "bold red",
    SKIP_MARK: "dim",
}


class ProgressIndicator:
    """Writes progress marks to a Rich console bound to stderr.

    Thread-safe: each mark and its optional line break are written under
    one lock, so concurrent checks never interleave partial output.

    Parameters
    ----------
    console:
        Rich Console instance.  A stderr console is created if not provided.
    width:
        Number of marks per line.
    enabled:
        When False, marks are counted but nothing is written.
    """

    def __init__(
        self,
        console: Console | None = None,
        width: int = 80,
        enabled: bool = True,
    ) -> None:
        self.console = console or Console(stderr=True, highlight=False)
        self._width = width
        self._enabled = enabled
        self._count = 0
        self._line_open = False
        self._lock = threading.Lock()

    @property
    def count(self) -> int:
        return self._count

    def mark(self, char: str) -> None:
        """Emit one progress mark."""
        with self._lock:
            self._count += 1
            if not self._enabled:
                return
            self.console.print(
                char,
                style=_MARK_STYLES.get(char),
                end="",
                markup=False,
                highlight=False,
                soft_wrap=True,
            )
            if self._count % self._width == 0:
                self.console.print()
                self._line_open = False
            else:
                self._line_open = True

    def passed(self) -> None:
        self.mark(PASS_MARK)

    def failed(self) -> None:
        self.mark(FAIL_MARK)

    def skipped(self) -> None:
        self.mark(SKIP_MARK)

    def finish(self) -> None:
        """Terminate the current line if it is still open."""
        with self._lock:
            if self._enabled and self._line_open:
                self.console.print()
            self._line_open = False
