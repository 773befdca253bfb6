"""Error taxonomy for repository verification.

Per-file errors carry a human-readable ``reason`` that ends up verbatim in
the final report.  None of them abort a run; the verifier records them as
failed outcomes and moves on.
"""

from __future__ import annotations


class VerificationError(RuntimeError):
    """Base class for every error produced while checking a repository."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ChecksumFormatError(VerificationError):
    """A sidecar checksum file is too large, multi-line, or not hex."""


class DigestMismatchError(VerificationError):
    """The computed digest of a file differs from its sidecar digest."""

    def __init__(self, reason: str, *, actual: str = "", expected: str = "") -> None:
        super().__init__(reason)
        self.actual = actual
        self.expected = expected


class CorruptArchiveError(VerificationError):
    """An archive could not be opened or one of its entries could not be read."""


class TraversalError(VerificationError):
    """A directory could not be walked.

    Not attributed to any single file; reported immediately as an
    ``[ERROR]`` line and never recorded as an outcome.
    """
