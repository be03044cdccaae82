"""Domain model for filesystem entries plus the filesystem access port.

This package contains non-UI primitives:
- entry/metadata datatypes and lazy entry-kind resolution
- the ``FileSystemPort`` interface and its ``os``-backed implementation
- size/permission/timestamp formatting helpers
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryKind, EntryMetadata, EnumeratedName
from .fs import (
    ROOT,
    SEPARATOR,
    FileSystemPort,
    LocalFileSystem,
    default_filesystem,
    join_path,
    resolve_kind,
)
from .formatting import (
    INFO_TIME_FORMAT,
    LISTING_TIME_FORMAT,
    format_size,
    format_timestamp,
    octal_mode,
    permission_string,
)

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "EntryMetadata",
    "EnumeratedName",
    "ROOT",
    "SEPARATOR",
    "FileSystemPort",
    "LocalFileSystem",
    "default_filesystem",
    "join_path",
    "resolve_kind",
    "INFO_TIME_FORMAT",
    "LISTING_TIME_FORMAT",
    "format_size",
    "format_timestamp",
    "octal_mode",
    "permission_string",
]
