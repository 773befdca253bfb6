"""Shared test fixtures for m2verify."""

from __future__ import annotations

import hashlib
import io
import zipfile
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from m2verify.config import VerifyConfig
from m2verify.core.tracker import ResultTracker
from m2verify.core.verifier import RepositoryVerifier
from m2verify.monitor.progress import ProgressIndicator
from m2verify.monitor.report import ReportRenderer, plain_console

DEFAULT_ENTRIES: dict[str, bytes] = {
    "META-INF/MANIFEST.MF": b"Manifest-Version: 1.0\r\n\r\n",
    "com/example/Lib.class": b"\xca\xfe\xba\xbe" + b"\x00" * 64,
    "com/example/lib.properties": b"version=1.0\n",
}


def sha1_hex(path: Path) -> str:
    return hashlib.sha1(path.read_bytes()).hexdigest()


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """Provide an empty repository root."""
    root = tmp_path / "repository"
    root.mkdir()
    return root


@pytest.fixture
def make_jar() -> Callable[..., Path]:
    """Factory fixture: write a zip archive with the given entries."""

    def _factory(
        path: Path,
        entries: dict[str, bytes] | None = None,
        *,
        compression: int = zipfile.ZIP_DEFLATED,
        with_dirs: bool = True,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        with zipfile.ZipFile(path, "w", compression=compression) as zf:
            if with_dirs:
                zf.writestr("META-INF/", b"")
            for name, data in (entries if entries is not None else DEFAULT_ENTRIES).items():
                zf.writestr(name, data)
        return path

    return _factory


@pytest.fixture
def write_sidecar() -> Callable[..., Path]:
    """Factory fixture: write ``<target>.sha1`` with the given text.

    With no text, the correct digest of *target* is written.
    """

    def _factory(target: Path, text: str | bytes | None = None) -> Path:
        sidecar = target.with_name(target.name + ".sha1")
        if text is None:
            text = sha1_hex(target)
        if isinstance(text, str):
            text = text.encode("utf-8")
        sidecar.write_bytes(text)
        return sidecar

    return _factory


@pytest.fixture
def progress_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def report_stream() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def progress(progress_stream: io.StringIO) -> ProgressIndicator:
    """A ProgressIndicator writing plain marks into a buffer."""
    return ProgressIndicator(console=Console(file=progress_stream, highlight=False))


@pytest.fixture
def tracker(progress: ProgressIndicator) -> ResultTracker:
    return ResultTracker(progress)


@pytest.fixture
def renderer(report_stream: io.StringIO) -> ReportRenderer:
    return ReportRenderer(console=plain_console(file=report_stream))


@pytest.fixture
def verify_config() -> VerifyConfig:
    return VerifyConfig(show_progress=True, workers=1)


@pytest.fixture
def verifier(
    verify_config: VerifyConfig,
    tracker: ResultTracker,
    progress: ProgressIndicator,
    renderer: ReportRenderer,
) -> RepositoryVerifier:
    """A sequential verifier whose output is captured in buffers."""
    return RepositoryVerifier(
        verify_config,
        tracker=tracker,
        progress=progress,
        renderer=renderer,
    )
