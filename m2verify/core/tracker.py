"""Run-scoped record of per-file outcomes.

Replaces process-wide counters with an object owned by one verification
run.  Every mutation happens under a single lock so that checks running on
a thread pool can share one tracker.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

from m2verify.models.outcomes import Outcome, RunSummary
from m2verify.monitor.progress import ProgressIndicator

logger = logging.getLogger(__name__)


class ResultTracker:
    """Keeps at most one :class:`Outcome` per path.

    ``claim`` is an atomic check-and-reserve: the first caller to claim a
    path owns producing its outcome, every later caller gets False and must
    leave the path alone.  ``record_pass``/``record_fail`` are no-ops for a
    path that already has an outcome.
    """

    def __init__(self, progress: ProgressIndicator | None = None) -> None:
        self._progress = progress
        self._lock = threading.Lock()
        self._claimed: set[str] = set()
        self._outcomes: dict[str, Outcome] = {}
        self._error_count = 0
        self._skipped = 0

    @staticmethod
    def _key(path: Path | str) -> str:
        return str(path)

    # ------------------------------------------------------------------
    # Claims
    # ------------------------------------------------------------------

    def claim(self, path: Path | str) -> bool:
        """Reserve *path* for checking; False if it was already claimed."""
        key = self._key(path)
        with self._lock:
            if key in self._claimed:
                return False
            self._claimed.add(key)
            return True

    def is_claimed(self, path: Path | str) -> bool:
        with self._lock:
            return self._key(path) in self._claimed

    # ------------------------------------------------------------------
    # Outcomes
    # ------------------------------------------------------------------

    def _record(self, outcome: Outcome) -> bool:
        with self._lock:
            if outcome.path in self._outcomes:
                logger.debug("Outcome for %s already recorded, ignoring", outcome.path)
                return False
            self._claimed.add(outcome.path)
            self._outcomes[outcome.path] = outcome
            if not outcome.passed:
                self._error_count += 1
        if self._progress is not None:
            if outcome.passed:
                self._progress.passed()
            else:
                self._progress.failed()
        return True

    def record_pass(self, path: Path | str) -> bool:
        return self._record(Outcome(path=self._key(path), passed=True))

    def record_fail(self, path: Path | str, reason: str) -> bool:
        logger.debug("FAIL %s: %s", path, reason)
        return self._record(Outcome(path=self._key(path), passed=False, reason=reason))

    def skip(self) -> None:
        """Count a visited file that produces no outcome."""
        with self._lock:
            self._skipped += 1
        if self._progress is not None:
            self._progress.skipped()

    def outcome(self, path: Path | str) -> Outcome | None:
        with self._lock:
            return self._outcomes.get(self._key(path))

    def has_outcome(self, path: Path | str) -> bool:
        return self.outcome(path) is not None

    @property
    def error_count(self) -> int:
        with self._lock:
            return self._error_count

    # ------------------------------------------------------------------
    # Summary
    # ------------------------------------------------------------------

    def summary(
        self,
        roots: Iterable[Path] = (),
        traversal_errors: Iterable[str] = (),
    ) -> RunSummary:
        """Freeze the current state into a :class:`RunSummary`."""
        with self._lock:
            return RunSummary(
                roots=list(roots),
                outcomes=dict(self._outcomes),
                error_count=self._error_count,
                visited_count=len(self._outcomes) + self._skipped,
                traversal_errors=list(traversal_errors),
            )
