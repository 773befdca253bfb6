"""SHA-1 digest value model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

DIGEST_SIZE = 20


class Digest(BaseModel):
    """A 20-byte SHA-1 digest, either computed from a file or parsed from a sidecar."""

    model_config = ConfigDict(frozen=True)

    value: bytes

    @field_validator("value")
    @classmethod
    def _check_size(cls, v: bytes) -> bytes:
        if len(v) != DIGEST_SIZE:
            raise ValueError(f"digest must be {DIGEST_SIZE} bytes, got {len(v)}")
        return v

    @classmethod
    def from_hex(cls, text: str) -> Digest:
        """Build a digest from exactly 40 hex characters."""
        return cls(value=bytes.fromhex(text))

    @property
    def hex(self) -> str:
        return self.value.hex()

    def __str__(self) -> str:
        return self.hex
