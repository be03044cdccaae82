"""Filesystem access port and its ``os``-backed implementation.

Everything that touches the disk goes through ``FileSystemPort`` so the
navigation, search, and operation layers can be exercised against fakes.
"""

from __future__ import annotations

import grp
import logging
import os
import pwd
from abc import ABC, abstractmethod
from typing import BinaryIO

from .types import EntryKind, EntryMetadata, EnumeratedName

logger = logging.getLogger(__name__)

ROOT = "/"
SEPARATOR = "/"


def join_path(base: str, name: str) -> str:
    """Concatenate ``base`` and ``name`` without any normalization.

    Only the root directory is special-cased so ``/`` + ``etc`` becomes
    ``/etc`` rather than ``//etc``.
    """
    if base.endswith(SEPARATOR):
        return base + name
    return base + SEPARATOR + name


class FileSystemPort(ABC):
    """Primitive filesystem calls consumed by the explorer.

    Methods raise ``OSError`` on failure, except the best-effort helpers
    (``probe_enter`` and owner/group name lookups) which report absence instead.
    """

    @abstractmethod
    def enumerate(self, path: str) -> list[EnumeratedName]:
        """List entry names of directory ``path`` in platform order."""

    @abstractmethod
    def stat(self, path: str, follow_symlinks: bool = True) -> EntryMetadata:
        """Return a metadata snapshot for ``path``."""

    @abstractmethod
    def identity(self, path: str) -> tuple[int, int]:
        """Return ``(device, inode)`` for ``path`` without resolving owner names."""

    @abstractmethod
    def probe_enter(self, path: str) -> bool:
        """Return whether ``path`` is a directory the process may enter."""

    @abstractmethod
    def resolve_user(self, uid: int) -> str | None: ...

    @abstractmethod
    def resolve_group(self, gid: int) -> str | None: ...

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO: ...

    @abstractmethod
    def open_write(self, path: str) -> BinaryIO:
        """Open ``path`` for unbuffered binary writing, truncating it."""

    @abstractmethod
    def create_file(self, path: str, mode: int) -> None: ...

    @abstractmethod
    def mkdir(self, path: str, mode: int) -> None: ...

    @abstractmethod
    def rmdir(self, path: str) -> None: ...

    @abstractmethod
    def unlink(self, path: str) -> None: ...

    @abstractmethod
    def rename(self, src: str, dest: str) -> None: ...

    @abstractmethod
    def chmod(self, path: str, mode: int) -> None: ...


class LocalFileSystem(FileSystemPort):
    """``FileSystemPort`` over the host operating system."""

    def enumerate(self, path: str) -> list[EnumeratedName]:
        names: list[EnumeratedName] = []
        with os.scandir(path) as entries:
            for entry in entries:
                names.append(EnumeratedName(name=entry.name, type_hint=_type_hint(entry)))
        return names

    def stat(self, path: str, follow_symlinks: bool = True) -> EntryMetadata:
        st = os.stat(path, follow_symlinks=follow_symlinks)
        return EntryMetadata(
            kind=EntryKind.from_mode(st.st_mode),
            size=int(st.st_size),
            mode=int(st.st_mode),
            uid=int(st.st_uid),
            gid=int(st.st_gid),
            mtime=float(st.st_mtime),
            atime=float(st.st_atime),
            ctime=float(st.st_ctime),
            owner=self.resolve_user(st.st_uid),
            group=self.resolve_group(st.st_gid),
            device=int(st.st_dev),
            inode=int(st.st_ino),
        )

    def identity(self, path: str) -> tuple[int, int]:
        st = os.stat(path)
        return int(st.st_dev), int(st.st_ino)

    def probe_enter(self, path: str) -> bool:
        try:
            return os.path.isdir(path) and os.access(path, os.X_OK)
        except (OSError, ValueError):
            return False

    def resolve_user(self, uid: int) -> str | None:
        try:
            return pwd.getpwuid(uid).pw_name
        except KeyError:
            return None

    def resolve_group(self, gid: int) -> str | None:
        try:
            return grp.getgrgid(gid).gr_name
        except KeyError:
            return None

    def open_read(self, path: str) -> BinaryIO:
        return open(path, "rb")

    def open_write(self, path: str) -> BinaryIO:
        return open(path, "wb", buffering=0)

    def create_file(self, path: str, mode: int) -> None:
        fd = os.open(path, os.O_CREAT | os.O_WRONLY, mode)
        os.close(fd)

    def mkdir(self, path: str, mode: int) -> None:
        os.mkdir(path, mode)

    def rmdir(self, path: str) -> None:
        os.rmdir(path)

    def unlink(self, path: str) -> None:
        os.unlink(path)

    def rename(self, src: str, dest: str) -> None:
        os.rename(src, dest)

    def chmod(self, path: str, mode: int) -> None:
        os.chmod(path, mode)


def _type_hint(entry: os.DirEntry) -> EntryKind | None:
    """Classify a scandir entry without following symlinks.

    Returns ``None`` when the platform needs a stat call that failed.
    """
    try:
        if entry.is_symlink():
            return EntryKind.OTHER
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        if entry.is_file(follow_symlinks=False):
            return EntryKind.FILE
    except OSError:
        return None
    return EntryKind.OTHER


def resolve_kind(fs: FileSystemPort, path: str, type_hint: EntryKind | None) -> EntryKind:
    """Return ``type_hint`` or stat ``path`` when the hint is missing."""
    if type_hint is not None:
        return type_hint
    try:
        return fs.stat(path, follow_symlinks=False).kind
    except OSError as exc:
        logger.debug("cannot classify %s: %s", path, exc)
        return EntryKind.OTHER


_default_fs: FileSystemPort | None = None


def default_filesystem() -> FileSystemPort:
    """Return the process-wide ``LocalFileSystem`` instance."""
    global _default_fs
    if _default_fs is None:
        _default_fs = LocalFileSystem()
    return _default_fs


__all__ = [
    "ROOT",
    "SEPARATOR",
    "FileSystemPort",
    "LocalFileSystem",
    "default_filesystem",
    "join_path",
    "resolve_kind",
]
