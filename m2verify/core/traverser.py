"""Recursive, symlink-following enumeration of files under a root.

Directories whose path relative to the root starts with ``.`` (``.cache``,
``.git``, ...) are pruned along with everything beneath them; dot-files
deeper in the tree are still visited.  A directory reached through a
symbolic link is walked like any other unless it is one of its own
ancestors, in which case the loop is reported instead of followed.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from m2verify.core.errors import TraversalError

logger = logging.getLogger(__name__)

ErrorHandler = Callable[[TraversalError], None]


def _is_hidden(relative: str) -> bool:
    return relative.startswith(".")


def walk_files(root: Path, on_error: ErrorHandler) -> Iterator[Path]:
    """Yield every regular file reachable from *root*.

    Walk failures (missing root, unreadable directories, symlink loops) are
    handed to *on_error* and the walk carries on with whatever remains.
    Paths are yielded absolute; no ordering is guaranteed.
    """
    root = Path(os.path.abspath(root))
    try:
        st = os.stat(root)
    except OSError as exc:
        on_error(TraversalError(str(exc)))
        return

    if not stat.S_ISDIR(st.st_mode):
        yield root
        return
    yield from _walk_dir(root, root, frozenset(), on_error)


def _walk_dir(
    directory: Path,
    root: Path,
    ancestors: frozenset[tuple[int, int]],
    on_error: ErrorHandler,
) -> Iterator[Path]:
    try:
        st = os.stat(directory)
    except OSError as exc:
        on_error(TraversalError(str(exc)))
        return
    key = (st.st_dev, st.st_ino)
    if key in ancestors:
        logger.warning("Symlink loop at %s, not descending", directory)
        on_error(TraversalError(f"{directory}: file system loop detected"))
        return
    ancestors = ancestors | {key}

    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as exc:
        on_error(TraversalError(str(exc)))
        return

    at_top = directory == root
    for entry in entries:
        if at_top and _is_hidden(entry.name):
            continue
        path = Path(entry.path)
        try:
            is_dir = entry.is_dir()
        except OSError:
            is_dir = False
        if is_dir:
            yield from _walk_dir(path, root, ancestors, on_error)
        else:
            yield path
