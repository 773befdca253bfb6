"""Pure, name-based classification of visited files.

No filesystem access happens here; whether a sidecar's target actually
exists is decided by the verifier.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from m2verify.models.classification import Classification, PathRole

DEFAULT_SIDECAR_SUFFIX = ".sha1"
DEFAULT_ARCHIVE_SUFFIXES: tuple[str, ...] = (".jar",)


def sidecar_for(path: Path, sidecar_suffix: str = DEFAULT_SIDECAR_SUFFIX) -> Path:
    """Return the sidecar path of *path*: ``<path><suffix>``."""
    return path.with_name(path.name + sidecar_suffix)


def target_for(sidecar: Path, sidecar_suffix: str = DEFAULT_SIDECAR_SUFFIX) -> Path:
    """Return the file a sidecar describes by trimming its suffix.

    Inverse of :func:`sidecar_for`.
    """
    name = sidecar.name
    if not name.endswith(sidecar_suffix):
        raise ValueError(f"{sidecar} does not end with {sidecar_suffix}")
    return sidecar.with_name(name[: -len(sidecar_suffix)])


def classify(
    path: Path,
    archive_suffixes: Iterable[str] = DEFAULT_ARCHIVE_SUFFIXES,
    sidecar_suffix: str = DEFAULT_SIDECAR_SUFFIX,
) -> Classification:
    """Decide whether *path* is a sidecar, an archive, or ignored."""
    name = path.name
    if name.endswith(sidecar_suffix) and len(name) > len(sidecar_suffix):
        return Classification(
            role=PathRole.SIDECAR,
            path=path,
            sidecar_path=path,
            target_path=target_for(path, sidecar_suffix),
        )
    if any(name.endswith(suffix) for suffix in archive_suffixes):
        return Classification(
            role=PathRole.ARCHIVE,
            path=path,
            sidecar_path=sidecar_for(path, sidecar_suffix),
            target_path=path,
        )
    return Classification(role=PathRole.IGNORED, path=path)
