"""Domain datatypes for enumerated and inspected filesystem entries."""

from __future__ import annotations

import stat as stat_module
from dataclasses import dataclass
from enum import Enum


class EntryKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> EntryKind:
        if stat_module.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat_module.S_ISREG(mode):
            return cls.FILE
        return cls.OTHER


@dataclass(frozen=True)
class EnumeratedName:
    """One directory-enumeration row.

    ``type_hint`` is ``None`` when the platform could not classify the entry
    without an extra metadata lookup.
    """

    name: str
    type_hint: EntryKind | None = None


@dataclass(frozen=True)
class EntryMetadata:
    """Snapshot of ``stat`` data with owner/group names resolved best-effort."""

    kind: EntryKind
    size: int
    mode: int
    uid: int
    gid: int
    mtime: float
    atime: float
    ctime: float
    owner: str | None = None
    group: str | None = None
    device: int = 0
    inode: int = 0

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def permission_bits(self) -> int:
        return stat_module.S_IMODE(self.mode)

    @property
    def is_executable(self) -> bool:
        return bool(self.mode & stat_module.S_IXUSR)

    @property
    def owner_label(self) -> str:
        return self.owner if self.owner is not None else str(self.uid)

    @property
    def group_label(self) -> str:
        return self.group if self.group is not None else str(self.gid)


@dataclass(frozen=True)
class DirectoryEntry:
    """Live view of one filesystem object; never cached between commands."""

    name: str
    path: str
    metadata: EntryMetadata

    @property
    def is_dir(self) -> bool:
        return self.metadata.is_dir


__all__ = [
    "EntryKind",
    "EnumeratedName",
    "EntryMetadata",
    "DirectoryEntry",
]
