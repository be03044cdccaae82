"""Text rendering for listings, entry details, search hits, and statuses."""

from __future__ import annotations

import os

from ..errors import FileOpError
from ..file_model.formatting import (
    INFO_TIME_FORMAT,
    LISTING_TIME_FORMAT,
    format_size,
    format_timestamp,
    octal_mode,
    permission_string,
)
from ..file_model.types import DirectoryEntry
from ..ui_theme import UITheme

LISTING_RULE_WIDTH = 80
INFO_RULE_WIDTH = 60
DETAIL_COLUMNS: tuple[tuple[str, int], ...] = (
    ("Permissions", 12),
    ("Owner", 10),
    ("Group", 10),
    ("Size", 12),
    ("Modified", 20),
)


def display_text(text: str) -> str:
    """Return ``text`` with undecodable filename bytes shown as ``\\xNN`` escapes.

    Names from ``os.scandir`` carry such bytes as lone surrogates, which a
    strict UTF-8 stream refuses to write.
    """
    try:
        raw = os.fsencode(text)
    except UnicodeEncodeError:
        raw = text.encode("utf-8", "backslashreplace")
    return raw.decode("utf-8", "backslashreplace")


def _name_color(entry: DirectoryEntry, theme: UITheme) -> str:
    if entry.is_dir:
        return theme.directory
    if entry.metadata.is_executable:
        return theme.executable
    return theme.reset


def render_listing(cwd: str, entries: list[DirectoryEntry], theme: UITheme, *, detailed: bool = False) -> str:
    """Render a directory listing.

    The simple form prints ``[DIR]`` rows before plain file rows; the detailed
    form prints one aligned column row per entry.
    """
    out: list[str] = [
        "",
        f"{theme.heading}Current Directory: {display_text(cwd)}{theme.reset}",
        theme.divider + "=" * LISTING_RULE_WIDTH + theme.reset,
    ]
    if detailed:
        out.append("".join(label.ljust(width) for label, width in DETAIL_COLUMNS) + "Name")
        out.append(theme.divider + "-" * LISTING_RULE_WIDTH + theme.reset)
        for entry in entries:
            meta = entry.metadata
            cells = (
                permission_string(meta.mode),
                meta.owner_label,
                meta.group_label,
                "<DIR>" if entry.is_dir else format_size(meta.size),
                format_timestamp(meta.mtime, LISTING_TIME_FORMAT),
            )
            row = "".join(cell.ljust(width) for cell, (_label, width) in zip(cells, DETAIL_COLUMNS))
            out.append(f"{row}{_name_color(entry, theme)}{display_text(entry.name)}{theme.reset}")
    else:
        for entry in entries:
            if entry.is_dir:
                out.append(f"{theme.directory}[DIR]  {display_text(entry.name)}{theme.reset}")
        for entry in entries:
            if not entry.is_dir:
                out.append(f"       {display_text(entry.name)}")
    out.append(theme.divider + "=" * LISTING_RULE_WIDTH + theme.reset)
    return "\n".join(out) + "\n"


def render_entry_info(entry: DirectoryEntry, theme: UITheme) -> str:
    meta = entry.metadata
    rows = (
        ("Type", "Directory" if entry.is_dir else "File"),
        ("Size", f"{format_size(meta.size)} ({meta.size} bytes)"),
        ("Permissions", f"{permission_string(meta.mode)} ({octal_mode(meta.mode)})"),
        ("Owner", meta.owner_label),
        ("Group", meta.group_label),
        ("Modified", format_timestamp(meta.mtime, INFO_TIME_FORMAT)),
        ("Accessed", format_timestamp(meta.atime, INFO_TIME_FORMAT)),
        ("Changed", format_timestamp(meta.ctime, INFO_TIME_FORMAT)),
    )
    out = [
        "",
        f"{theme.heading}File Information: {display_text(entry.name)}{theme.reset}",
        "=" * INFO_RULE_WIDTH,
    ]
    out.extend(f"{(label + ':').ljust(13)}{value}" for label, value in rows)
    out.append("=" * INFO_RULE_WIDTH)
    return "\n".join(out) + "\n"


def render_search_results(cwd: str, pattern: str, results: list[str], theme: UITheme) -> str:
    out = ["", f"{theme.search_banner}Searching for '{display_text(pattern)}' in {display_text(cwd)}...{theme.reset}"]
    if not results:
        out.append("No files found matching pattern.")
    else:
        out.append(f"{theme.success}Found {len(results)} result(s):{theme.reset}")
        out.extend(f"  {display_text(path)}" for path in results)
    return "\n".join(out) + "\n"


def render_success(message: str, theme: UITheme) -> str:
    return f"{theme.success}{display_text(message)}{theme.reset}\n"


def render_error(error: FileOpError | str, theme: UITheme) -> str:
    message = error.message if isinstance(error, FileOpError) else error
    return f"{theme.error}{display_text(message)}{theme.reset}\n"


__all__ = [
    "display_text",
    "render_entry_info",
    "render_error",
    "render_listing",
    "render_search_results",
    "render_success",
]
