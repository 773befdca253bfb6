"""Streaming SHA-1 digests and digest comparison.

Files are read in fixed-size chunks so memory use stays bounded by the
chunk size regardless of how large an archive is.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from m2verify.core.errors import DigestMismatchError
from m2verify.models.digest import Digest

DEFAULT_CHUNK_SIZE = 64 * 1024


def sha1_file(path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Digest:
    """Return the SHA-1 digest of the file at *path*.

    I/O errors propagate as ``OSError``.
    """
    digest = hashlib.sha1()
    with open(path, "rb") as fh:
        while chunk := fh.read(chunk_size):
            digest.update(chunk)
    return Digest(value=digest.digest())


def mismatch_reason(actual: Digest, expected: Digest) -> str:
    return f"SHA-1 mismatch: file={actual.hex}, sha1={expected.hex}"


def verify_digest(
    path: Path,
    expected: Digest,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> Digest:
    """Hash *path* and compare it against *expected*.

    Returns the computed digest when it matches.

    Raises
    ------
    DigestMismatchError
        If the computed digest differs; the reason carries both values.
    """
    actual = sha1_file(path, chunk_size)
    if actual.value != expected.value:
        raise DigestMismatchError(
            mismatch_reason(actual, expected),
            actual=actual.hex,
            expected=expected.hex,
        )
    return actual
