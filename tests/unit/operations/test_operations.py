"""Tests for the cwd-scoped file operations and their failure results."""

from __future__ import annotations

import io
import os
import stat
import tempfile
import unittest
from pathlib import Path
from typing import BinaryIO

from lazyexplorer import operations
from lazyexplorer.errors import ErrorKind, FileOpError
from lazyexplorer.file_model import LocalFileSystem


class _ShortWriter(io.RawIOBase):
    """Unbuffered writer that accepts only half of every chunk."""

    def __init__(self, target: BinaryIO) -> None:
        self.target = target

    def writable(self) -> bool:
        return True

    def write(self, data) -> int:
        accepted = max(0, len(data) // 2)
        self.target.write(bytes(data[:accepted]))
        return accepted

    def close(self) -> None:
        self.target.close()
        super().close()


class _ShortWriteFileSystem(LocalFileSystem):
    def open_write(self, path: str) -> BinaryIO:
        return _ShortWriter(super().open_write(path))


class _TempDirTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        self.cwd = str(self.root)


class ListDirectoryTests(_TempDirTestCase):
    def test_directories_first_then_files_sorted(self) -> None:
        (self.root / "zeta").mkdir()
        (self.root / "alpha").mkdir()
        (self.root / "b.txt").write_text("", encoding="utf-8")
        (self.root / "a.txt").write_text("", encoding="utf-8")

        result = operations.list_directory(self.cwd)

        self.assertTrue(result.ok)
        self.assertEqual([entry.name for entry in result.value], ["..", "alpha", "zeta", "a.txt", "b.txt"])
        self.assertEqual(result.value[1].path, f"{self.cwd}/alpha")

    def test_hidden_entries_can_be_left_out(self) -> None:
        (self.root / ".secret").write_text("", encoding="utf-8")
        (self.root / "shown").write_text("", encoding="utf-8")

        shown = [entry.name for entry in operations.list_directory(self.cwd).value]
        hidden = [entry.name for entry in operations.list_directory(self.cwd, show_hidden=False).value]

        self.assertIn(".secret", shown)
        self.assertEqual(hidden, ["..", "shown"])

    def test_dangling_symlink_is_dropped(self) -> None:
        (self.root / "dangling").symlink_to(self.root / "nowhere")
        names = [entry.name for entry in operations.list_directory(self.cwd).value]
        self.assertNotIn("dangling", names)

    def test_missing_directory_is_a_failure(self) -> None:
        result = operations.list_directory(f"{self.cwd}/missing")
        self.assertFalse(result.ok)
        self.assertEqual(result.error.kind, ErrorKind.NOT_FOUND)


class CreateTests(_TempDirTestCase):
    def test_create_directory(self) -> None:
        result = operations.create_directory(self.cwd, "new")
        self.assertTrue(result.ok)
        self.assertTrue((self.root / "new").is_dir())
        self.assertEqual(result.message, "Directory created: new")

    def test_create_directory_twice_reports_already_exists(self) -> None:
        operations.create_directory(self.cwd, "new")
        result = operations.create_directory(self.cwd, "new")
        self.assertEqual(result.error.kind, ErrorKind.ALREADY_EXISTS)

    def test_create_file_keeps_existing_contents(self) -> None:
        target = self.root / "keep.txt"
        target.write_text("data", encoding="utf-8")

        result = operations.create_file(self.cwd, "keep.txt")

        self.assertTrue(result.ok)
        self.assertEqual(target.read_text(encoding="utf-8"), "data")

    def test_create_file_in_missing_directory(self) -> None:
        result = operations.create_file(self.cwd, "missing/file.txt")
        self.assertEqual(result.error.kind, ErrorKind.NOT_FOUND)

    def test_empty_names_are_invalid(self) -> None:
        for result in (
            operations.create_directory(self.cwd, ""),
            operations.create_file(self.cwd, " "),
            operations.delete_entry(self.cwd, ""),
            operations.move_entry(self.cwd, "", "x"),
            operations.copy_file(self.cwd, "x", ""),
            operations.file_info(self.cwd, ""),
        ):
            self.assertEqual(result.error.kind, ErrorKind.INVALID_ARGUMENT)
        self.assertEqual(list(self.root.iterdir()), [])


class DeleteTests(_TempDirTestCase):
    def test_non_empty_directory_then_empty(self) -> None:
        folder = self.root / "folder"
        folder.mkdir()
        (folder / "inner.txt").write_text("", encoding="utf-8")

        first = operations.delete_entry(self.cwd, "folder")
        self.assertEqual(first.error.kind, ErrorKind.NOT_EMPTY)
        self.assertTrue(folder.exists())

        self.assertTrue(operations.delete_entry(self.cwd, "folder/inner.txt").ok)
        second = operations.delete_entry(self.cwd, "folder")
        self.assertTrue(second.ok)
        self.assertEqual(second.message, "Directory deleted: folder")
        self.assertFalse(folder.exists())

    def test_missing_entry(self) -> None:
        result = operations.delete_entry(self.cwd, "ghost")
        self.assertEqual(result.error.kind, ErrorKind.NOT_FOUND)

    def test_symlink_to_directory_is_unlinked_not_followed(self) -> None:
        (self.root / "real").mkdir()
        (self.root / "link").symlink_to(self.root / "real")

        self.assertTrue(operations.delete_entry(self.cwd, "link").ok)
        self.assertTrue((self.root / "real").is_dir())


class CopyTests(_TempDirTestCase):
    def test_copy_preserves_bytes_and_mode(self) -> None:
        payload = os.urandom(3 * operations.COPY_CHUNK_SIZE + 17)
        source = self.root / "src.bin"
        source.write_bytes(payload)
        source.chmod(0o751)

        result = operations.copy_file(self.cwd, "src.bin", "dest.bin")

        self.assertTrue(result.ok)
        dest = self.root / "dest.bin"
        self.assertEqual(dest.read_bytes(), source.read_bytes())
        self.assertEqual(stat.S_IMODE(dest.stat().st_mode), 0o751)

    def test_copy_truncates_existing_destination(self) -> None:
        (self.root / "src").write_bytes(b"new")
        (self.root / "dest").write_bytes(b"much longer old content")

        self.assertTrue(operations.copy_file(self.cwd, "src", "dest").ok)
        self.assertEqual((self.root / "dest").read_bytes(), b"new")

    def test_copy_directory_source_is_rejected(self) -> None:
        (self.root / "dir").mkdir()
        result = operations.copy_file(self.cwd, "dir", "copy")
        self.assertEqual(result.error.kind, ErrorKind.IS_A_DIRECTORY)
        self.assertFalse((self.root / "copy").exists())

    def test_copy_missing_source(self) -> None:
        result = operations.copy_file(self.cwd, "nope", "copy")
        self.assertEqual(result.error.kind, ErrorKind.NOT_FOUND)

    def test_copy_onto_itself_is_rejected_without_truncating(self) -> None:
        source = self.root / "a.txt"
        source.write_bytes(b"precious")
        (self.root / "alias.txt").symlink_to(source)

        for dest in ("a.txt", "alias.txt", "./a.txt"):
            result = operations.copy_file(self.cwd, "a.txt", dest)
            self.assertFalse(result.ok)
            self.assertEqual(result.error.kind, ErrorKind.INVALID_ARGUMENT)

        self.assertEqual(source.read_bytes(), b"precious")

    def test_short_write_fails_and_removes_partial_destination(self) -> None:
        (self.root / "src").write_bytes(b"x" * 100)

        result = operations.copy_file(self.cwd, "src", "dest", fs=_ShortWriteFileSystem())

        self.assertFalse(result.ok)
        self.assertEqual(result.error.kind, ErrorKind.IO_ERROR)
        self.assertFalse((self.root / "dest").exists())


class MoveTests(_TempDirTestCase):
    def test_rename(self) -> None:
        (self.root / "old").write_text("v", encoding="utf-8")
        result = operations.move_entry(self.cwd, "old", "new")
        self.assertTrue(result.ok)
        self.assertEqual((self.root / "new").read_text(encoding="utf-8"), "v")
        self.assertFalse((self.root / "old").exists())

    def test_missing_source(self) -> None:
        result = operations.move_entry(self.cwd, "old", "new")
        self.assertEqual(result.error.kind, ErrorKind.NOT_FOUND)


class PermissionTests(_TempDirTestCase):
    def test_parse_permissions(self) -> None:
        self.assertEqual(operations.parse_permissions("755"), 0o755)
        self.assertEqual(operations.parse_permissions("000"), 0)
        for bad in ("", "75", "7555", "abc", "789", "-75"):
            with self.assertRaises(FileOpError) as ctx:
                operations.parse_permissions(bad)
            self.assertEqual(ctx.exception.kind, ErrorKind.INVALID_ARGUMENT)

    def test_change_permissions(self) -> None:
        target = self.root / "script.sh"
        target.write_text("", encoding="utf-8")

        result = operations.change_permissions(self.cwd, "script.sh", "700")

        self.assertTrue(result.ok)
        self.assertEqual(result.value, 0o700)
        self.assertEqual(stat.S_IMODE(target.stat().st_mode), 0o700)

    def test_invalid_permission_string_does_not_mutate(self) -> None:
        target = self.root / "file"
        target.write_text("", encoding="utf-8")
        target.chmod(0o644)

        for bad in ("7", "0755", "rwx"):
            result = operations.change_permissions(self.cwd, "file", bad)
            self.assertEqual(result.error.kind, ErrorKind.INVALID_ARGUMENT)

        self.assertEqual(stat.S_IMODE(target.stat().st_mode), 0o644)

    def test_missing_target(self) -> None:
        result = operations.change_permissions(self.cwd, "ghost", "644")
        self.assertEqual(result.error.kind, ErrorKind.NOT_FOUND)


class InfoAndSearchTests(_TempDirTestCase):
    def test_file_info(self) -> None:
        (self.root / "data").write_bytes(b"abc")
        result = operations.file_info(self.cwd, "data")
        self.assertTrue(result.ok)
        self.assertEqual(result.value.path, f"{self.cwd}/data")
        self.assertEqual(result.value.metadata.size, 3)

    def test_file_info_missing(self) -> None:
        self.assertEqual(operations.file_info(self.cwd, "nope").error.kind, ErrorKind.NOT_FOUND)

    def test_search_files_is_rooted_at_cwd(self) -> None:
        (self.root / "sub").mkdir()
        (self.root / "sub" / "match.txt").write_text("", encoding="utf-8")

        result = operations.search_files(f"{self.cwd}/sub", "match")

        self.assertEqual(result.value, [f"{self.cwd}/sub/match.txt"])


if __name__ == "__main__":
    unittest.main()
