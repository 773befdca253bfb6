"""Parsing of ``.sha1`` sidecar files into :class:`Digest` values.

Checks run in a fixed order and the first violation wins:

1. the file must be smaller than ``max_bytes``;
2. it must decode as UTF-8;
3. it must hold exactly one line (a single trailing terminator is fine);
4. its first 40 characters must be 20 hex byte pairs.

Anything after the 40th character is ignored unless ``strict`` is set,
because sidecars written by some tools append ``  <filename>``.

Undecodable bytes get their own ``Undecodable text (...)`` reason.  They
are neither folded into the line-count reason nor printed as an
``[ERROR]`` line: the problem belongs to this one sidecar, so it is
recorded as that sidecar's failure.
"""

from __future__ import annotations

import re
import string
from pathlib import Path

from m2verify.core.errors import ChecksumFormatError
from m2verify.models.digest import DIGEST_SIZE, Digest

DEFAULT_MAX_BYTES = 256
HEX_LENGTH = DIGEST_SIZE * 2

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_HEX_DIGITS = frozenset(string.hexdigits)


def split_lines(text: str) -> list[str]:
    """Split text into lines the way line-oriented readers do.

    ``\\r\\n``, ``\\r`` and ``\\n`` all terminate a line; a terminator at the
    very end does not open a new, empty line.  Empty text has zero lines.
    """
    if not text:
        return []
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_checksum_line(line: str, *, strict: bool = False) -> Digest:
    """Parse the digest at the start of a sidecar line."""
    head = line[:HEX_LENGTH]
    if len(head) < HEX_LENGTH or not _HEX_DIGITS.issuperset(head):
        raise ChecksumFormatError(f"Illegal SHA-1 format: {line.strip()}")
    if strict:
        tokens = line.split()
        if tokens[0] != head:
            raise ChecksumFormatError(f"Illegal SHA-1 format: {line.strip()}")
    return Digest.from_hex(head)


def read_checksum(
    path: Path,
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
    strict: bool = False,
) -> Digest:
    """Read and validate a sidecar file.

    Raises
    ------
    ChecksumFormatError
        If the sidecar violates any of the format rules.
    OSError
        If the file cannot be read at all.
    """
    size = path.stat().st_size
    if size >= max_bytes:
        raise ChecksumFormatError(f"Too large ({size} bytes)")

    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ChecksumFormatError(f"Undecodable text ({exc.reason})") from exc

    lines = split_lines(text)
    if len(lines) != 1:
        raise ChecksumFormatError(f"Multiple lines ({len(lines)} lines)")

    return parse_checksum_line(lines[0], strict=strict)
