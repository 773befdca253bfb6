"""m2verify data models — all Pydantic v2, all frozen (immutable)."""

from m2verify.models.classification import Classification, PathRole
from m2verify.models.digest import DIGEST_SIZE, Digest
from m2verify.models.outcomes import Outcome, RunSummary

__all__ = [
    # digest
    "DIGEST_SIZE",
    "Digest",
    # classification
    "PathRole",
    "Classification",
    # outcomes
    "Outcome",
    "RunSummary",
]
