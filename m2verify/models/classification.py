"""Path classification models — the role a visited file plays in a check."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class PathRole(str, Enum):
    """What a visited file is, judged from its name alone."""

    SIDECAR = "sidecar"
    ARCHIVE = "archive"
    IGNORED = "ignored"


class Classification(BaseModel):
    """Tagged result of classifying one path.

    For ``SIDECAR`` and ``ARCHIVE`` both ``sidecar_path`` and
    ``target_path`` are set and satisfy
    ``target_path + sidecar suffix == sidecar_path``.  For ``IGNORED``
    both are ``None``.
    """

    model_config = ConfigDict(frozen=True)

    role: PathRole
    path: Path
    sidecar_path: Path | None = None
    target_path: Path | None = None
