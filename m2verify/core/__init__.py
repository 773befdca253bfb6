"""Verification engine.

Modules
-------
traverser
    ``walk_files`` enumerates files under a root, following symlinks.
classifier
    ``classify`` decides whether a file is a sidecar, an archive or ignored.
checksum_reader
    ``read_checksum`` parses ``.sha1`` sidecar files.
hasher
    ``sha1_file`` / ``verify_digest`` stream and compare SHA-1 digests.
archive_validator
    ``validate_archive`` reads every zip entry to surface corruption.
tracker
    ``ResultTracker`` holds at most one outcome per path for a run.
verifier
    ``RepositoryVerifier`` ties all of the above together.
cleaner
    ``Cleaner`` protocol and the logging-only ``DryRunCleaner``.
"""
