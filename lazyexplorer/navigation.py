"""Current-directory cursor and navigation-token resolution.

This module intentionally has no UI concerns and never calls ``os.chdir``.
The cursor's path is handed to operations explicitly by the session.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from .errors import ErrorKind, NavigationError
from .file_model.fs import ROOT, SEPARATOR, FileSystemPort, default_filesystem, join_path

logger = logging.getLogger(__name__)

PARENT_TOKEN = ".."


@dataclass(frozen=True)
class NavigationResult:
    path: str | None = None
    error: NavigationError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def initial_directory() -> str:
    """Return the process's starting directory, or ``/`` when unavailable."""
    try:
        cwd = os.getcwd()
    except OSError:
        return ROOT
    if not cwd or not cwd.startswith(SEPARATOR):
        return ROOT
    return cwd


def parent_path(path: str) -> str:
    """Truncate ``path`` at its last separator; the root is its own parent."""
    pos = path.rfind(SEPARATOR)
    if pos <= 0:
        return ROOT
    return path[:pos]


def resolve_token(current: str, token: str) -> str:
    """Resolve a navigation token against ``current``.

    Only a bare ``..`` is interpreted; absolute tokens are taken verbatim and
    anything else is appended. ``a/../b`` and ``.`` segments are left as typed.
    """
    if token == PARENT_TOKEN:
        return parent_path(current)
    if token.startswith(SEPARATOR):
        return token
    return join_path(current, token)


class PathCursor:
    """Holds the single current-directory path.

    The stored path only changes after the target has been probed as
    enterable, so a failed ``navigate`` leaves it untouched.
    """

    def __init__(self, path: str | None = None, fs: FileSystemPort | None = None) -> None:
        self.fs = fs if fs is not None else default_filesystem()
        if path is None:
            path = initial_directory()
        if not path or not path.startswith(SEPARATOR):
            raise ValueError(f"cursor path must be absolute: {path!r}")
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def navigate(self, token: str) -> NavigationResult:
        if not token or not token.strip():
            return NavigationResult(
                error=NavigationError(ErrorKind.INVALID_ARGUMENT, "Error: Directory path must not be empty")
            )

        target = resolve_token(self._path, token)
        if not self.fs.probe_enter(target):
            logger.debug("navigation to %s rejected", target)
            return NavigationResult(
                error=NavigationError(
                    ErrorKind.UNREACHABLE,
                    f"Error: Cannot change to directory: {target}",
                    path=target,
                )
            )

        logger.info("current directory %s -> %s", self._path, target)
        self._path = target
        return NavigationResult(path=target)

    def __repr__(self) -> str:
        return f"PathCursor({self._path!r})"


__all__ = [
    "PARENT_TOKEN",
    "NavigationResult",
    "PathCursor",
    "initial_directory",
    "parent_path",
    "resolve_token",
]
