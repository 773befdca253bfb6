"""Per-file outcomes and the run summary built from them."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class Outcome(BaseModel):
    """The pass/fail verdict recorded for a single checked path."""

    model_config = ConfigDict(frozen=True)

    path: str
    passed: bool
    reason: str = ""

    @property
    def status(self) -> str:
        return "pass" if self.passed else "fail"


class RunSummary(BaseModel):
    """Aggregate result of one verification run.

    Built once after every root has been traversed and every check has
    completed.  ``outcomes`` is keyed by path string.
    """

    model_config = ConfigDict(frozen=True)

    roots: list[Path] = []
    outcomes: dict[str, Outcome] = {}
    error_count: int = 0
    visited_count: int = 0
    traversal_errors: list[str] = []

    @property
    def passed(self) -> bool:
        """True when no file failed its check."""
        return self.error_count == 0

    def failures(self) -> list[Outcome]:
        """Failing outcomes sorted lexicographically by path."""
        return [
            self.outcomes[key]
            for key in sorted(self.outcomes)
            if not self.outcomes[key].passed
        ]

    def passes(self) -> list[Outcome]:
        return [
            self.outcomes[key]
            for key in sorted(self.outcomes)
            if self.outcomes[key].passed
        ]
