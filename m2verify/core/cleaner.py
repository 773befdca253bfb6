"""Collaborator interface for removing invalid files in ``--clean`` mode.

Only a dry-run implementation exists: it logs what it would remove and
leaves the filesystem untouched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class Cleaner(Protocol):
    """Anything that can be asked to remove an invalid file."""

    def remove(self, path: Path) -> None: ...


class DryRunCleaner:
    """Records removal candidates without deleting anything."""

    def __init__(self) -> None:
        self.candidates: list[Path] = []

    def remove(self, path: Path) -> None:
        self.candidates.append(path)
        logger.info("Would remove invalid file %s (clean is not implemented)", path)
