"""Main interactive menu loop.

Reads a numbered choice, prompts for line-based arguments, runs the matching
session command, and prints its outcome. No command failure ends the loop;
only choice ``0`` or end of input does.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass

from ..errors import OpResult
from ..render import (
    render_banner,
    render_entry_info,
    render_error,
    render_goodbye,
    render_listing,
    render_menu,
    render_prompt,
    render_search_results,
    render_success,
)
from ..ui_theme import UITheme
from .session import ExplorerSession

logger = logging.getLogger(__name__)

EXIT_CHOICE = "0"


class EndOfInput(Exception):
    """Raised by ``MenuIO.ask`` when standard input is exhausted."""


@dataclass(frozen=True)
class MenuIO:
    """Injected line I/O used by ``run_menu_loop``."""

    read_line: Callable[[], str]
    write_out: Callable[[str], None]
    write_err: Callable[[str], None]
    pause_after_command: bool = True

    @classmethod
    def from_std_streams(cls, pause_after_command: bool = True) -> MenuIO:
        def write_out(text: str) -> None:
            sys.stdout.write(text)
            sys.stdout.flush()

        def write_err(text: str) -> None:
            sys.stderr.write(text)
            sys.stderr.flush()

        return cls(
            read_line=sys.stdin.readline,
            write_out=write_out,
            write_err=write_err,
            pause_after_command=pause_after_command,
        )

    def ask(self, prompt: str) -> str:
        self.write_out(prompt)
        raw = self.read_line()
        if raw == "":
            raise EndOfInput
        return raw.rstrip("\r\n")


CommandHandler = Callable[[ExplorerSession, MenuIO, UITheme], None]


def _report(io: MenuIO, theme: UITheme, result: OpResult) -> None:
    if result.ok:
        io.write_out(render_success(result.message, theme))
    else:
        io.write_err(render_error(result.error, theme))


def _list_simple(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    _list(session, io, theme, detailed=False)


def _list_detailed(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    _list(session, io, theme, detailed=True)


def _list(session: ExplorerSession, io: MenuIO, theme: UITheme, *, detailed: bool) -> None:
    cwd = session.cwd
    result = session.list_directory()
    if not result.ok:
        io.write_err(render_error(result.error, theme))
        return
    io.write_out(render_listing(cwd, result.value or [], theme, detailed=detailed))


def _change_directory(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    token = io.ask("Enter directory path (or .. for parent): ")
    result = session.change_directory(token)
    if result.ok:
        io.write_out(render_success(f"Changed to: {result.path}", theme))
    else:
        io.write_err(render_error(result.error, theme))


def _show_path(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    io.write_out(render_success(f"Current path: {session.cwd}", theme))


def _create_directory(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    _report(io, theme, session.create_directory(io.ask("Enter directory name: ")))


def _create_file(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    _report(io, theme, session.create_file(io.ask("Enter file name: ")))


def _delete_entry(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    _report(io, theme, session.delete_entry(io.ask("Enter file/directory name: ")))


def _copy_file(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    src = io.ask("Enter source file name: ")
    dest = io.ask("Enter destination file name: ")
    _report(io, theme, session.copy_file(src, dest))


def _move_entry(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    src = io.ask("Enter source name: ")
    dest = io.ask("Enter destination name: ")
    _report(io, theme, session.move_entry(src, dest))


def _search_files(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    pattern = io.ask("Enter search pattern: ")
    cwd = session.cwd
    result = session.search_files(pattern)
    io.write_out(render_search_results(cwd, pattern, result.value or [], theme))


def _file_info(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    result = session.file_info(io.ask("Enter file/directory name: "))
    if result.ok and result.value is not None:
        io.write_out(render_entry_info(result.value, theme))
    else:
        io.write_err(render_error(result.error, theme))


def _change_permissions(session: ExplorerSession, io: MenuIO, theme: UITheme) -> None:
    name = io.ask("Enter file/directory name: ")
    perms = io.ask("Enter permissions (e.g., 755): ")
    _report(io, theme, session.change_permissions(name, perms))


COMMANDS: dict[str, CommandHandler] = {
    "1": _list_simple,
    "2": _list_detailed,
    "3": _change_directory,
    "4": _show_path,
    "5": _create_directory,
    "6": _create_file,
    "7": _delete_entry,
    "8": _copy_file,
    "9": _move_entry,
    "10": _search_files,
    "11": _file_info,
    "12": _change_permissions,
}


def normalize_choice(raw: str) -> str | None:
    """Return the canonical menu key for ``raw`` (``"07"`` -> ``"7"``)."""
    text = raw.strip()
    if not text.isdigit():
        return None
    return str(int(text))


def _run_command(
    handler: CommandHandler,
    choice: str,
    session: ExplorerSession,
    io: MenuIO,
    theme: UITheme,
) -> None:
    """Run one menu command; an unexpected error is reported, not fatal."""
    try:
        handler(session, io, theme)
    except EndOfInput:
        raise
    except Exception as exc:
        logger.exception("menu command %s failed", choice)
        io.write_err(render_error(f"Error: command failed: {exc}", theme))


def run_menu_loop(session: ExplorerSession, theme: UITheme, io: MenuIO) -> int:
    """Run the menu until choice ``0`` or end of input; return the exit code."""
    io.write_out(render_banner(theme))
    while True:
        io.write_out(render_menu(theme))
        try:
            choice = normalize_choice(io.ask(render_prompt(theme, "Enter choice: ")))
            if choice == EXIT_CHOICE:
                io.write_out(render_goodbye(theme))
                return 0

            handler = COMMANDS.get(choice or "")
            if handler is None:
                io.write_err(render_error("Invalid choice. Please try again.", theme))
            else:
                logger.debug("running menu command %s in %s", choice, session.cwd)
                _run_command(handler, choice or "", session, io, theme)

            if io.pause_after_command:
                io.ask("\nPress Enter to continue...")
        except EndOfInput:
            io.write_out("\n")
            return 0


__all__ = [
    "COMMANDS",
    "EXIT_CHOICE",
    "EndOfInput",
    "MenuIO",
    "normalize_choice",
    "run_menu_loop",
]
