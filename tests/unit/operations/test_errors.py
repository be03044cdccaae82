"""Tests for errno classification and result values."""

from __future__ import annotations

import errno
import unittest

from lazyexplorer.errors import ErrorKind, FileOpError, NavigationError, OpResult, kind_for_errno


class ErrorTaxonomyTests(unittest.TestCase):
    def test_errno_mapping(self) -> None:
        self.assertIs(kind_for_errno(errno.ENOENT), ErrorKind.NOT_FOUND)
        self.assertIs(kind_for_errno(errno.ENOTDIR), ErrorKind.NOT_A_DIRECTORY)
        self.assertIs(kind_for_errno(errno.EACCES), ErrorKind.PERMISSION_DENIED)
        self.assertIs(kind_for_errno(errno.EEXIST), ErrorKind.ALREADY_EXISTS)
        self.assertIs(kind_for_errno(errno.ENOTEMPTY), ErrorKind.NOT_EMPTY)
        self.assertIs(kind_for_errno(errno.EIO), ErrorKind.IO_ERROR)
        self.assertIs(kind_for_errno(None), ErrorKind.IO_ERROR)

    def test_from_os_error_message(self) -> None:
        exc = FileNotFoundError(errno.ENOENT, "No such file or directory", "/tmp/x")
        error = FileOpError.from_os_error(exc, "/tmp/x", "delete")
        self.assertIs(error.kind, ErrorKind.NOT_FOUND)
        self.assertEqual(error.path, "/tmp/x")
        self.assertEqual(error.message, "Cannot delete: /tmp/x: No such file or directory")

    def test_result_helpers(self) -> None:
        ok = OpResult.success(5, "fine")
        self.assertTrue(ok.ok)
        self.assertEqual(ok.value, 5)

        failed = OpResult.failure(NavigationError(ErrorKind.UNREACHABLE, "nope"))
        self.assertFalse(failed.ok)
        self.assertIsNone(failed.value)
        self.assertEqual(failed.message, "nope")
        self.assertIsInstance(failed.error, FileOpError)


if __name__ == "__main__":
    unittest.main()
