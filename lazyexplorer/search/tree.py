"""Recursive name search over a directory subtree.

Matching is a case-sensitive substring test on entry names. The walk is
depth-first pre-order in enumeration order, without sorting.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..file_model.fs import FileSystemPort, default_filesystem, join_path, resolve_kind
from ..file_model.types import EntryKind

logger = logging.getLogger(__name__)

PSEUDO_ENTRIES = frozenset({".", ".."})


def name_matches(name: str, pattern: str) -> bool:
    return pattern in name


def iter_search(root: str, pattern: str, fs: FileSystemPort | None = None) -> Iterator[str]:
    """Yield absolute paths under ``root`` whose names contain ``pattern``.

    Directories that cannot be enumerated are skipped. Every directory is
    entered whether or not its own name matches. A directory already entered
    during this walk (same device and inode) is not entered again.
    """
    fs = fs if fs is not None else default_filesystem()
    visited: set[tuple[int, int]] = set()

    def directory_identity(path: str) -> tuple[int, int] | None:
        try:
            return fs.identity(path)
        except OSError:
            return None

    def walk(directory: str) -> Iterator[str]:
        identity = directory_identity(directory)
        if identity is not None:
            if identity in visited:
                logger.debug("skipping already visited directory %s", directory)
                return
            visited.add(identity)

        try:
            names = fs.enumerate(directory)
        except OSError as exc:
            logger.debug("skipping unreadable directory %s: %s", directory, exc)
            return

        for entry in names:
            if entry.name in PSEUDO_ENTRIES:
                continue
            full_path = join_path(directory, entry.name)
            if name_matches(entry.name, pattern):
                yield full_path
            if resolve_kind(fs, full_path, entry.type_hint) is EntryKind.DIRECTORY:
                yield from walk(full_path)

    yield from walk(root)


def search(root: str, pattern: str, fs: FileSystemPort | None = None) -> list[str]:
    """Walk the whole subtree of ``root`` and return every matching path."""
    return list(iter_search(root, pattern, fs))


__all__ = [
    "PSEUDO_ENTRIES",
    "iter_search",
    "name_matches",
    "search",
]
