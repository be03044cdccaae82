"""Human-readable formatting of sizes, permission bits, and timestamps."""

from __future__ import annotations

import stat as stat_module
import time

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")
LISTING_TIME_FORMAT = "%Y-%m-%d %H:%M"
INFO_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_size(size: int) -> str:
    """Format ``size`` bytes with two decimals in base-1024 units, capped at TB."""
    value = float(size)
    unit_index = 0
    while value >= 1024 and unit_index < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_index += 1
    return f"{value:.2f} {SIZE_UNITS[unit_index]}"


def permission_string(mode: int) -> str:
    """Return an ``ls``-style string such as ``drwxr-xr-x``.

    Only the directory flag and the nine rwx bits are shown; anything that is
    not a directory gets a leading ``-``.
    """
    chars = ["d" if stat_module.S_ISDIR(mode) else "-"]
    for read_bit, write_bit, exec_bit in (
        (stat_module.S_IRUSR, stat_module.S_IWUSR, stat_module.S_IXUSR),
        (stat_module.S_IRGRP, stat_module.S_IWGRP, stat_module.S_IXGRP),
        (stat_module.S_IROTH, stat_module.S_IWOTH, stat_module.S_IXOTH),
    ):
        chars.append("r" if mode & read_bit else "-")
        chars.append("w" if mode & write_bit else "-")
        chars.append("x" if mode & exec_bit else "-")
    return "".join(chars)


def octal_mode(mode: int) -> str:
    """Return the rwx bits of ``mode`` as three octal digits, e.g. ``755`` or ``044``."""
    return f"{mode & 0o777:03o}"


def format_timestamp(timestamp: float, fmt: str = LISTING_TIME_FORMAT) -> str:
    return time.strftime(fmt, time.localtime(timestamp))


__all__ = [
    "SIZE_UNITS",
    "LISTING_TIME_FORMAT",
    "INFO_TIME_FORMAT",
    "format_size",
    "permission_string",
    "octal_mode",
    "format_timestamp",
]
