"""Tests for sidecar parsing — size, line count and hex format rules."""

from __future__ import annotations

from pathlib import Path

import pytest

from m2verify.core.checksum_reader import (
    parse_checksum_line,
    read_checksum,
    split_lines,
)
from m2verify.core.errors import ChecksumFormatError, VerificationError

GOOD = "da39a3ee5e6b4b0d3255bfef95601890afd80709"


def _write(tmp_path: Path, data: str | bytes) -> Path:
    path = tmp_path / "lib.jar.sha1"
    path.write_bytes(data.encode("utf-8") if isinstance(data, str) else data)
    return path


class TestReadChecksum:
    def test_valid_lowercase(self, tmp_path: Path):
        digest = read_checksum(_write(tmp_path, GOOD))
        assert digest.hex == GOOD

    def test_valid_with_trailing_newline(self, tmp_path: Path):
        assert read_checksum(_write(tmp_path, GOOD + "\n")).hex == GOOD

    def test_valid_with_crlf(self, tmp_path: Path):
        assert read_checksum(_write(tmp_path, GOOD + "\r\n")).hex == GOOD

    def test_uppercase_hex(self, tmp_path: Path):
        assert read_checksum(_write(tmp_path, GOOD.upper())).hex == GOOD

    def test_trailing_filename_ignored(self, tmp_path: Path):
        assert read_checksum(_write(tmp_path, f"{GOOD}  lib.jar\n")).hex == GOOD

    def test_too_large(self, tmp_path: Path):
        path = _write(tmp_path, "a" * 300)
        with pytest.raises(ChecksumFormatError) as exc_info:
            read_checksum(path)
        assert exc_info.value.reason == "Too large (300 bytes)"

    def test_exactly_limit_is_too_large(self, tmp_path: Path):
        path = _write(tmp_path, GOOD + " " * (256 - len(GOOD)))
        with pytest.raises(ChecksumFormatError, match=r"Too large \(256 bytes\)"):
            read_checksum(path)

    def test_size_checked_before_content(self, tmp_path: Path):
        path = _write(tmp_path, (GOOD + "\n") * 10)
        with pytest.raises(ChecksumFormatError, match="Too large"):
            read_checksum(path)

    def test_two_lines(self, tmp_path: Path):
        path = _write(tmp_path, GOOD + "\n" + GOOD + "\n")
        with pytest.raises(ChecksumFormatError) as exc_info:
            read_checksum(path)
        assert exc_info.value.reason == "Multiple lines (2 lines)"

    def test_trailing_blank_line_counts(self, tmp_path: Path):
        path = _write(tmp_path, GOOD[:39] + "\n\n")
        with pytest.raises(ChecksumFormatError, match=r"Multiple lines \(2 lines\)"):
            read_checksum(path)

    def test_empty_file(self, tmp_path: Path):
        with pytest.raises(ChecksumFormatError, match=r"Multiple lines \(0 lines\)"):
            read_checksum(_write(tmp_path, ""))

    def test_not_utf8(self, tmp_path: Path):
        with pytest.raises(ChecksumFormatError, match="Undecodable text"):
            read_checksum(_write(tmp_path, b"\xff\xfe\xfd"))

    def test_non_hex(self, tmp_path: Path):
        bad = "zz" + GOOD[2:]
        with pytest.raises(ChecksumFormatError) as exc_info:
            read_checksum(_write(tmp_path, bad + "\n"))
        assert exc_info.value.reason == f"Illegal SHA-1 format: {bad}"

    def test_too_short(self, tmp_path: Path):
        with pytest.raises(ChecksumFormatError, match="Illegal SHA-1 format"):
            read_checksum(_write(tmp_path, GOOD[:39]))

    def test_missing_file_raises_oserror(self, tmp_path: Path):
        with pytest.raises(OSError):
            read_checksum(tmp_path / "missing.sha1")

    def test_custom_max_bytes(self, tmp_path: Path):
        with pytest.raises(ChecksumFormatError, match=r"Too large \(41 bytes\)"):
            read_checksum(_write(tmp_path, GOOD + "\n"), max_bytes=41)

    def test_format_error_is_verification_error(self):
        assert issubclass(ChecksumFormatError, VerificationError)


class TestStrictParsing:
    def test_strict_accepts_bare_digest(self):
        assert parse_checksum_line(GOOD + "  ", strict=True).hex == GOOD

    def test_strict_accepts_digest_then_filename(self):
        assert parse_checksum_line(f"{GOOD} lib.jar", strict=True).hex == GOOD

    def test_strict_rejects_glued_suffix(self):
        with pytest.raises(ChecksumFormatError):
            parse_checksum_line(GOOD + "ff", strict=True)

    def test_lenient_ignores_glued_suffix(self):
        assert parse_checksum_line(GOOD + "ff").hex == GOOD


class TestSplitLines:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("", []),
            ("a", ["a"]),
            ("a\n", ["a"]),
            ("a\n\n", ["a", ""]),
            ("a\r\nb", ["a", "b"]),
            ("a\rb\r", ["a", "b"]),
            ("\n", [""]),
        ],
    )
    def test_split(self, text: str, expected: list[str]):
        assert split_lines(text) == expected
