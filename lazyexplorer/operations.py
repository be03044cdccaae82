"""File and directory operations scoped to an explicit current directory.

Each function takes the current directory as ``cwd`` and resolves names by
plain concatenation. Expected filesystem failures come back as failed
``OpResult`` values; nothing here raises for them.
"""

from __future__ import annotations

import errno
import logging
import stat as stat_module
from typing import BinaryIO

from .errors import ErrorKind, FileOpError, OpResult
from .file_model.fs import FileSystemPort, default_filesystem, join_path
from .file_model.types import DirectoryEntry
from .navigation import PARENT_TOKEN, parent_path
from .search import search

logger = logging.getLogger(__name__)

DIRECTORY_MODE = 0o755
FILE_MODE = 0o644
COPY_CHUNK_SIZE = 4096
OCTAL_DIGITS = frozenset("01234567")


def _require_name(value: str, what: str) -> FileOpError | None:
    if not value or not value.strip():
        return FileOpError(ErrorKind.INVALID_ARGUMENT, f"Error: {what} must not be empty")
    return None


def _fs(fs: FileSystemPort | None) -> FileSystemPort:
    return fs if fs is not None else default_filesystem()


def list_directory(
    cwd: str,
    fs: FileSystemPort | None = None,
    show_hidden: bool = True,
) -> OpResult[list[DirectoryEntry]]:
    """List ``cwd`` with directories first, then files, each sorted by name.

    A ``..`` row for the parent is included. Entries whose metadata cannot be
    read are left out.
    """
    fs = _fs(fs)
    try:
        names = fs.enumerate(cwd)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, cwd, "open directory"))

    entries: list[DirectoryEntry] = []
    for row in names:
        name = row.name
        if name == ".":
            continue
        if not show_hidden and name.startswith(".") and name != PARENT_TOKEN:
            continue
        path = join_path(cwd, name)
        try:
            metadata = fs.stat(path)
        except OSError as exc:
            logger.debug("dropping %s from listing: %s", path, exc)
            continue
        entries.append(DirectoryEntry(name=name, path=path, metadata=metadata))

    if not any(entry.name == PARENT_TOKEN for entry in entries):
        try:
            parent_meta = fs.stat(parent_path(cwd))
        except OSError:
            parent_meta = None
        if parent_meta is not None:
            entries.append(DirectoryEntry(name=PARENT_TOKEN, path=parent_path(cwd), metadata=parent_meta))

    entries.sort(key=lambda entry: (not entry.is_dir, entry.name))
    return OpResult.success(entries)


def create_directory(cwd: str, name: str, fs: FileSystemPort | None = None) -> OpResult[str]:
    invalid = _require_name(name, "Directory name")
    if invalid is not None:
        return OpResult.failure(invalid)
    path = join_path(cwd, name)
    try:
        _fs(fs).mkdir(path, DIRECTORY_MODE)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, path, "create directory"))
    logger.info("created directory %s", path)
    return OpResult.success(path, f"Directory created: {name}")


def create_file(cwd: str, name: str, fs: FileSystemPort | None = None) -> OpResult[str]:
    """Create ``name`` if missing; an existing file is left as it is."""
    invalid = _require_name(name, "File name")
    if invalid is not None:
        return OpResult.failure(invalid)
    path = join_path(cwd, name)
    try:
        _fs(fs).create_file(path, FILE_MODE)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, path, "create file"))
    logger.info("created file %s", path)
    return OpResult.success(path, f"File created: {name}")


def delete_entry(cwd: str, name: str, fs: FileSystemPort | None = None) -> OpResult[str]:
    """Remove a file with ``unlink`` or an empty directory with ``rmdir``."""
    invalid = _require_name(name, "Name")
    if invalid is not None:
        return OpResult.failure(invalid)
    fs = _fs(fs)
    path = join_path(cwd, name)
    try:
        metadata = fs.stat(path, follow_symlinks=False)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, path, "delete"))

    if metadata.is_dir:
        try:
            fs.rmdir(path)
        except OSError as exc:
            if exc.errno in (errno.ENOTEMPTY, errno.EEXIST):
                return OpResult.failure(
                    FileOpError(ErrorKind.NOT_EMPTY, f"Cannot delete directory: {path}: directory not empty", path)
                )
            return OpResult.failure(FileOpError.from_os_error(exc, path, "delete directory"))
        logger.info("deleted directory %s", path)
        return OpResult.success(path, f"Directory deleted: {name}")

    try:
        fs.unlink(path)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, path, "delete file"))
    logger.info("deleted file %s", path)
    return OpResult.success(path, f"File deleted: {name}")


def _pump(src: BinaryIO, dest: BinaryIO, dest_path: str) -> None:
    """Stream ``src`` into ``dest``; a short write raises ``OSError``."""
    while True:
        chunk = src.read(COPY_CHUNK_SIZE)
        if not chunk:
            return
        written = dest.write(chunk)
        if written is not None and written != len(chunk):
            raise OSError(errno.EIO, f"short write ({written} of {len(chunk)} bytes)", dest_path)


def copy_file(cwd: str, src: str, dest: str, fs: FileSystemPort | None = None) -> OpResult[str]:
    """Copy a regular file's bytes, then give the copy the source's mode bits.

    The chmod is a separate step. When the byte copy fails after the
    destination was opened, the partial destination is removed.
    """
    for value, what in ((src, "Source name"), (dest, "Destination name")):
        invalid = _require_name(value, what)
        if invalid is not None:
            return OpResult.failure(invalid)
    fs = _fs(fs)
    src_path = join_path(cwd, src)
    dest_path = join_path(cwd, dest)

    try:
        src_meta = fs.stat(src_path)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, src_path, "copy"))
    if src_meta.is_dir:
        return OpResult.failure(
            FileOpError(ErrorKind.IS_A_DIRECTORY, f"Cannot copy: {src_path}: source is a directory", src_path)
        )

    try:
        dest_meta = fs.stat(dest_path)
    except OSError:
        dest_meta = None
    if dest_meta is not None and (dest_meta.device, dest_meta.inode) == (src_meta.device, src_meta.inode):
        return OpResult.failure(
            FileOpError(
                ErrorKind.INVALID_ARGUMENT,
                f"Cannot copy: {src_path} and {dest_path} are the same file",
                dest_path,
            )
        )

    try:
        src_handle = fs.open_read(src_path)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, src_path, "open source file"))

    copy_error: FileOpError | None = None
    with src_handle:
        try:
            dest_handle = fs.open_write(dest_path)
        except OSError as exc:
            return OpResult.failure(FileOpError.from_os_error(exc, dest_path, "create destination file"))
        with dest_handle:
            try:
                _pump(src_handle, dest_handle, dest_path)
            except OSError as exc:
                copy_error = FileOpError.from_os_error(exc, dest_path, "copy")

    if copy_error is not None:
        try:
            fs.unlink(dest_path)
        except OSError as exc:
            logger.warning("could not remove partial copy %s: %s", dest_path, exc)
        return OpResult.failure(copy_error)

    try:
        fs.chmod(dest_path, stat_module.S_IMODE(src_meta.mode))
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, dest_path, "set permissions on copy"))
    logger.info("copied %s -> %s", src_path, dest_path)
    return OpResult.success(dest_path, f"File copied: {src} -> {dest}")


def move_entry(cwd: str, src: str, dest: str, fs: FileSystemPort | None = None) -> OpResult[str]:
    for value, what in ((src, "Source name"), (dest, "Destination name")):
        invalid = _require_name(value, what)
        if invalid is not None:
            return OpResult.failure(invalid)
    src_path = join_path(cwd, src)
    dest_path = join_path(cwd, dest)
    try:
        _fs(fs).rename(src_path, dest_path)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, src_path, "move/rename"))
    logger.info("moved %s -> %s", src_path, dest_path)
    return OpResult.success(dest_path, f"Moved/Renamed: {src} -> {dest}")


def parse_permissions(perms: str) -> int:
    """Convert a 3-digit octal string such as ``755`` to mode bits.

    Raises ``FileOpError`` (``INVALID_ARGUMENT``) for any other input.
    """
    if len(perms) != 3 or not set(perms) <= OCTAL_DIGITS:
        raise FileOpError(
            ErrorKind.INVALID_ARGUMENT,
            "Error: Invalid permission format (use 3 digits, e.g., 755)",
        )
    return int(perms, 8)


def change_permissions(cwd: str, name: str, perms: str, fs: FileSystemPort | None = None) -> OpResult[int]:
    invalid = _require_name(name, "Name")
    if invalid is not None:
        return OpResult.failure(invalid)
    try:
        mode = parse_permissions(perms)
    except FileOpError as exc:
        return OpResult.failure(exc)
    path = join_path(cwd, name)
    try:
        _fs(fs).chmod(path, mode)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, path, "change permissions"))
    logger.info("chmod %s %s", perms, path)
    return OpResult.success(mode, f"Permissions changed: {name} -> {perms}")


def file_info(cwd: str, name: str, fs: FileSystemPort | None = None) -> OpResult[DirectoryEntry]:
    invalid = _require_name(name, "Name")
    if invalid is not None:
        return OpResult.failure(invalid)
    path = join_path(cwd, name)
    try:
        metadata = _fs(fs).stat(path)
    except OSError as exc:
        return OpResult.failure(FileOpError.from_os_error(exc, path, "read file information"))
    return OpResult.success(DirectoryEntry(name=name, path=path, metadata=metadata))


def search_files(cwd: str, pattern: str, fs: FileSystemPort | None = None) -> OpResult[list[str]]:
    results = search(cwd, pattern, fs)
    logger.debug("search %r under %s found %d result(s)", pattern, cwd, len(results))
    return OpResult.success(results)


__all__ = [
    "COPY_CHUNK_SIZE",
    "DIRECTORY_MODE",
    "FILE_MODE",
    "change_permissions",
    "copy_file",
    "create_directory",
    "create_file",
    "delete_entry",
    "file_info",
    "list_directory",
    "move_entry",
    "parse_permissions",
    "search_files",
]
