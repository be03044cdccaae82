"""Execution context shared by every command of one explorer session.

The session owns the ``PathCursor`` and the filesystem port. Each command
reads ``cwd`` once and passes it to the stateless operation functions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .. import operations
from ..errors import OpResult
from ..file_model.fs import FileSystemPort, default_filesystem
from ..file_model.types import DirectoryEntry
from ..navigation import NavigationResult, PathCursor


@dataclass
class ExplorerSession:
    cursor: PathCursor
    fs: FileSystemPort = field(default_factory=default_filesystem)
    show_hidden: bool = True

    @classmethod
    def start(
        cls,
        path: str | None = None,
        fs: FileSystemPort | None = None,
        show_hidden: bool = True,
    ) -> ExplorerSession:
        fs = fs if fs is not None else default_filesystem()
        return cls(cursor=PathCursor(path, fs=fs), fs=fs, show_hidden=show_hidden)

    @property
    def cwd(self) -> str:
        return self.cursor.path

    def change_directory(self, token: str) -> NavigationResult:
        return self.cursor.navigate(token)

    def list_directory(self) -> OpResult[list[DirectoryEntry]]:
        return operations.list_directory(self.cwd, self.fs, show_hidden=self.show_hidden)

    def create_directory(self, name: str) -> OpResult[str]:
        return operations.create_directory(self.cwd, name, self.fs)

    def create_file(self, name: str) -> OpResult[str]:
        return operations.create_file(self.cwd, name, self.fs)

    def delete_entry(self, name: str) -> OpResult[str]:
        return operations.delete_entry(self.cwd, name, self.fs)

    def copy_file(self, src: str, dest: str) -> OpResult[str]:
        return operations.copy_file(self.cwd, src, dest, self.fs)

    def move_entry(self, src: str, dest: str) -> OpResult[str]:
        return operations.move_entry(self.cwd, src, dest, self.fs)

    def search_files(self, pattern: str) -> OpResult[list[str]]:
        return operations.search_files(self.cwd, pattern, self.fs)

    def file_info(self, name: str) -> OpResult[DirectoryEntry]:
        return operations.file_info(self.cwd, name, self.fs)

    def change_permissions(self, name: str, perms: str) -> OpResult[int]:
        return operations.change_permissions(self.cwd, name, perms, self.fs)


__all__ = ["ExplorerSession"]
