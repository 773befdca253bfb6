"""m2verify: integrity checks for a local Maven repository cache.

Recomputes SHA-1 digests of archives and compares them with their ``.sha1``
sidecar files, flags oversized, multi-line or malformed sidecars, and fully
reads jar archives that have no usable sidecar to catch corrupt entries.

The command-line app lives in ``m2verify.cli.app`` and is not imported here.
"""

__version__ = "0.1.0"
__description__ = "Integrity checker for local Maven repository caches"

from m2verify.core.verifier import RepositoryVerifier
from m2verify.models.outcomes import Outcome, RunSummary

__all__ = ["RepositoryVerifier", "Outcome", "RunSummary", "__version__"]
