"""Tests for the stderr progress stream."""

from __future__ import annotations

import io
import threading

from rich.console import Console

from m2verify.monitor.progress import ProgressIndicator


def _indicator(width: int = 80, enabled: bool = True) -> tuple[ProgressIndicator, io.StringIO]:
    stream = io.StringIO()
    return ProgressIndicator(console=Console(file=stream), width=width, enabled=enabled), stream


class TestProgressIndicator:
    def test_marks(self):
        progress, stream = _indicator()
        progress.passed()
        progress.failed()
        progress.skipped()
        assert stream.getvalue() == "ox."

    def test_wraps_at_width(self):
        progress, stream = _indicator(width=3)
        for _ in range(7):
            progress.passed()
        assert stream.getvalue() == "ooo\nooo\no"

    def test_finish_terminates_open_line(self):
        progress, stream = _indicator(width=3)
        progress.passed()
        progress.finish()
        assert stream.getvalue() == "o\n"

    def test_finish_after_wrap_adds_nothing(self):
        progress, stream = _indicator(width=2)
        progress.passed()
        progress.passed()
        progress.finish()
        assert stream.getvalue() == "oo\n"

    def test_finish_without_marks(self):
        progress, stream = _indicator()
        progress.finish()
        assert stream.getvalue() == ""

    def test_disabled_counts_silently(self):
        progress, stream = _indicator(enabled=False)
        progress.passed()
        progress.finish()
        assert progress.count == 1
        assert stream.getvalue() == ""

    def test_concurrent_marks_keep_line_width(self):
        progress, stream = _indicator(width=10)

        def _worker() -> None:
            for _ in range(50):
                progress.passed()

        threads = [threading.Thread(target=_worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        progress.finish()
        lines = stream.getvalue().splitlines()
        assert len(lines) == 40
        assert all(line == "o" * 10 for line in lines)
