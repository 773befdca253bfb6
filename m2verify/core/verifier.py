"""RepositoryVerifier — walks repository roots and checks every file.

For each visited file:

- ``*.sha1`` sidecar: parse it (recording the sidecar's own outcome); if it
  parsed and the file it describes exists, hash that file and compare.
- archive (``*.jar`` by default): use ``<archive>.sha1`` when present and
  parsable, otherwise fall back to reading every entry of the archive.
- anything else: counted as skipped.

Each path is claimed in the :class:`ResultTracker` before it is checked, so
an archive already verified through its sidecar is not verified again when
the walk reaches it, whichever order the two are visited in.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path

from m2verify.config import VerifyConfig
from m2verify.core.archive_validator import validate_archive
from m2verify.core.checksum_reader import read_checksum
from m2verify.core.classifier import classify
from m2verify.core.cleaner import Cleaner
from m2verify.core.errors import (
    ChecksumFormatError,
    CorruptArchiveError,
    DigestMismatchError,
    TraversalError,
)
from m2verify.core.hasher import verify_digest
from m2verify.core.tracker import ResultTracker
from m2verify.core.traverser import walk_files
from m2verify.models.classification import Classification, PathRole
from m2verify.models.digest import Digest
from m2verify.models.outcomes import RunSummary
from m2verify.monitor.progress import ProgressIndicator
from m2verify.monitor.report import ReportRenderer

logger = logging.getLogger(__name__)


class RepositoryVerifier:
    """Verifies the integrity of one or more repository directory trees.

    Parameters
    ----------
    config:
        Verification settings.  Defaults to a fresh ``VerifyConfig``.
    tracker:
        Outcome store for this run.  Created (wired to *progress*) if not
        provided.
    progress:
        Progress stream.  Created from the config if not provided.
    renderer:
        Destination for ``[ERROR]`` traversal lines.
    cleaner:
        Receives every failing path after the run when ``clean=True``.
    """

    def __init__(
        self,
        config: VerifyConfig | None = None,
        *,
        tracker: ResultTracker | None = None,
        progress: ProgressIndicator | None = None,
        renderer: ReportRenderer | None = None,
        cleaner: Cleaner | None = None,
    ) -> None:
        self.config = config or VerifyConfig()
        self.progress = progress or ProgressIndicator(
            width=self.config.progress_width,
            enabled=self.config.show_progress,
        )
        self.tracker = tracker or ResultTracker(self.progress)
        self.renderer = renderer or ReportRenderer()
        self.cleaner = cleaner
        self._traversal_errors: list[str] = []
        self._errors_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Run
    # ------------------------------------------------------------------

    def verify(self, roots: Iterable[Path], *, clean: bool = False) -> RunSummary:
        """Check every file under *roots* and return the run summary.

        The summary is built only after every root has been walked and
        every submitted check has finished.
        """
        roots = [Path(r) for r in roots]
        workers = max(1, self.config.workers)
        logger.info("Verifying %d root(s) with %d worker(s)", len(roots), workers)

        if workers == 1:
            for root in roots:
                for path in walk_files(root, self._on_traversal_error):
                    self.verify_path(path)
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                futures: list[Future[None]] = []
                for root in roots:
                    for path in walk_files(root, self._on_traversal_error):
                        futures.append(pool.submit(self.verify_path, path))
                for future in futures:
                    future.result()

        self.progress.finish()
        with self._errors_lock:
            errors = list(self._traversal_errors)
        summary = self.tracker.summary(roots, errors)

        if clean and self.cleaner is not None:
            for outcome in summary.failures():
                self.cleaner.remove(Path(outcome.path))

        return summary

    def _on_traversal_error(self, error: TraversalError) -> None:
        logger.debug("Traversal error: %s", error.reason)
        with self._errors_lock:
            self._traversal_errors.append(error.reason)
        self.renderer.print_traversal_error(error.reason)

    # ------------------------------------------------------------------
    # Per-file dispatch
    # ------------------------------------------------------------------

    def classify(self, path: Path) -> Classification:
        return classify(
            path,
            archive_suffixes=self.config.archive_suffixes,
            sidecar_suffix=self.config.sidecar_suffix,
        )

    def verify_path(self, path: Path) -> None:
        """Classify *path* and run the matching check.

        An ``OSError`` escaping a check is recorded as a failure of *path*
        so that one unreadable file never ends the run.
        """
        classification = self.classify(path)
        try:
            if classification.role is PathRole.SIDECAR:
                self._check_sidecar(classification)
            elif classification.role is PathRole.ARCHIVE:
                self._check_archive(classification)
            elif not self.tracker.is_claimed(path):
                # a .pom checked through its sidecar is not counted again
                self.tracker.skip()
        except OSError as exc:
            self.tracker.record_fail(path, str(exc))

    def _check_sidecar(self, classification: Classification) -> None:
        sidecar = classification.path
        if not self.tracker.claim(sidecar):
            return
        digest = self._load_checksum(sidecar)
        if digest is None:
            return

        target = classification.target_path
        try:
            target_exists = target.exists()
        except OSError as exc:
            if self.tracker.claim(target):
                self.tracker.record_fail(target, str(exc))
            return
        if not target_exists:
            # Orphan sidecar: only the sidecar itself gets an outcome.
            logger.info("No file for sidecar %s, nothing to compare", sidecar)
            return
        if not self.tracker.claim(target):
            return
        self._check_digest(target, digest)

    def _check_archive(self, classification: Classification) -> None:
        archive = classification.path
        if not self.tracker.claim(archive):
            return

        digest: Digest | None = None
        sidecar = classification.sidecar_path
        try:
            has_sidecar = sidecar.exists()
        except OSError as exc:
            # e.g. the sidecar name would exceed the file name limit
            logger.debug("Cannot look up sidecar %s: %s", sidecar, exc)
            has_sidecar = False
        if has_sidecar:
            self.tracker.claim(sidecar)
            digest = self._load_checksum(sidecar)

        if digest is not None:
            self._check_digest(archive, digest)
        else:
            self._check_structure(archive)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _load_checksum(self, sidecar: Path) -> Digest | None:
        """Parse a sidecar, recording its outcome unless one already exists."""
        try:
            digest = read_checksum(
                sidecar,
                max_bytes=self.config.max_checksum_bytes,
                strict=self.config.strict_checksum,
            )
        except ChecksumFormatError as exc:
            self.tracker.record_fail(sidecar, exc.reason)
            return None
        except OSError as exc:
            self.tracker.record_fail(sidecar, str(exc))
            return None
        self.tracker.record_pass(sidecar)
        return digest

    def _check_digest(self, path: Path, expected: Digest) -> None:
        try:
            verify_digest(path, expected, self.config.chunk_size)
        except DigestMismatchError as exc:
            self.tracker.record_fail(path, exc.reason)
        except OSError as exc:
            self.tracker.record_fail(path, str(exc))
        else:
            self.tracker.record_pass(path)

    def _check_structure(self, path: Path) -> None:
        try:
            validate_archive(path, self.config.chunk_size)
        except CorruptArchiveError as exc:
            self.tracker.record_fail(path, exc.reason)
        else:
            self.tracker.record_pass(path)
