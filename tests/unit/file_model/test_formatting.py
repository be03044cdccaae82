"""Tests for size, permission, and timestamp formatting."""

from __future__ import annotations

import stat
import time
import unittest

from lazyexplorer.file_model import format_size, format_timestamp, octal_mode, permission_string


class FormattingTests(unittest.TestCase):
    def test_format_size_scales_by_1024(self) -> None:
        self.assertEqual(format_size(0), "0.00 B")
        self.assertEqual(format_size(1023), "1023.00 B")
        self.assertEqual(format_size(1024), "1.00 KB")
        self.assertEqual(format_size(1536), "1.50 KB")
        self.assertEqual(format_size(5 * 1024**3), "5.00 GB")

    def test_format_size_caps_at_terabytes(self) -> None:
        self.assertEqual(format_size(2048 * 1024**4), "2048.00 TB")

    def test_permission_string(self) -> None:
        self.assertEqual(permission_string(stat.S_IFDIR | 0o755), "drwxr-xr-x")
        self.assertEqual(permission_string(stat.S_IFREG | 0o640), "-rw-r-----")
        self.assertEqual(permission_string(stat.S_IFLNK | 0o777), "-rwxrwxrwx")

    def test_octal_mode_ignores_type_and_special_bits(self) -> None:
        self.assertEqual(octal_mode(stat.S_IFREG | 0o4755), "755")
        self.assertEqual(octal_mode(0o644), "644")
        self.assertEqual(octal_mode(0o044), "044")
        self.assertEqual(octal_mode(stat.S_IFDIR), "000")

    def test_format_timestamp_uses_local_time(self) -> None:
        ts = time.mktime((2024, 3, 5, 14, 7, 9, 0, 0, -1))
        self.assertEqual(format_timestamp(ts), "2024-03-05 14:07")
        self.assertEqual(format_timestamp(ts, "%Y-%m-%d %H:%M:%S"), "2024-03-05 14:07:09")


if __name__ == "__main__":
    unittest.main()
