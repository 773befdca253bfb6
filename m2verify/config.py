"""Runtime configuration — env-driven via pydantic-settings.

Reads from a .env file and M2VERIFY_* environment variables.  Command-line
flags override individual fields with ``model_copy(update=...)``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_repository() -> Path:
    return Path.home() / ".m2" / "repository"


class VerifyConfig(BaseSettings):
    """Verification settings with environment variable overrides.

    Examples
    --------
    Override via environment::

        export M2VERIFY_LOG_LEVEL=DEBUG
        export M2VERIFY_WORKERS=4
        export M2VERIFY_DEFAULT_REPOSITORY=/srv/maven/repository
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="M2VERIFY_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = "WARNING"

    # Scanned when no directories are given on the command line
    default_repository: Path = Field(default_factory=_default_repository)

    # Checksum sidecars
    sidecar_suffix: str = ".sha1"
    max_checksum_bytes: int = 256
    strict_checksum: bool = False

    # Archives
    archive_suffixes: list[str] = [".jar"]
    chunk_size: int = 64 * 1024

    # Execution
    workers: int = 1
    fail_on_errors: bool = True

    # Progress stream
    show_progress: bool = True
    progress_width: int = 80


# Module-level singleton — import as `from m2verify.config import config`
config = VerifyConfig()
