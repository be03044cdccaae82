"""Error taxonomy and result values for filesystem operations.

Operations never raise for expected filesystem conditions. They return an
``OpResult`` whose ``error`` carries a ``FileOpError`` describing the failure.
"""

from __future__ import annotations

import errno
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(Enum):
    NOT_FOUND = "not found"
    NOT_A_DIRECTORY = "not a directory"
    IS_A_DIRECTORY = "is a directory"
    PERMISSION_DENIED = "permission denied"
    ALREADY_EXISTS = "already exists"
    NOT_EMPTY = "directory not empty"
    INVALID_ARGUMENT = "invalid argument"
    IO_ERROR = "i/o error"
    UNREACHABLE = "unreachable"


_ERRNO_KINDS: dict[int, ErrorKind] = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.ENOTDIR: ErrorKind.NOT_A_DIRECTORY,
    errno.EISDIR: ErrorKind.IS_A_DIRECTORY,
    errno.EACCES: ErrorKind.PERMISSION_DENIED,
    errno.EPERM: ErrorKind.PERMISSION_DENIED,
    errno.EEXIST: ErrorKind.ALREADY_EXISTS,
    errno.ENOTEMPTY: ErrorKind.NOT_EMPTY,
    errno.EINVAL: ErrorKind.INVALID_ARGUMENT,
    errno.ENAMETOOLONG: ErrorKind.INVALID_ARGUMENT,
}


def kind_for_errno(code: int | None) -> ErrorKind:
    """Map an ``errno`` value onto the explorer error taxonomy."""
    if code is None:
        return ErrorKind.IO_ERROR
    return _ERRNO_KINDS.get(code, ErrorKind.IO_ERROR)


class FileOpError(Exception):
    """A failed filesystem operation, classified by ``ErrorKind``."""

    def __init__(self, kind: ErrorKind, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path

    @classmethod
    def from_os_error(cls, exc: OSError, path: str | None = None, action: str = "") -> FileOpError:
        kind = kind_for_errno(exc.errno)
        detail = exc.strerror or kind.value
        prefix = f"Cannot {action}" if action else "Error"
        target = path if path is not None else exc.filename
        message = f"{prefix}: {target}: {detail}" if target else f"{prefix}: {detail}"
        return cls(kind, message, path=target if isinstance(target, str) else None)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.kind.name}, {self.message!r})"


class NavigationError(FileOpError):
    """Navigation request rejected; the cursor keeps its previous path."""


@dataclass(frozen=True)
class OpResult(Generic[T]):
    value: T | None = None
    error: FileOpError | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None, message: str = "") -> OpResult[T]:
        return cls(value=value, error=None, message=message)

    @classmethod
    def failure(cls, error: FileOpError) -> OpResult[T]:
        return cls(value=None, error=error, message=error.message)


__all__ = [
    "ErrorKind",
    "FileOpError",
    "NavigationError",
    "OpResult",
    "kind_for_errno",
]
