"""Session state, persisted settings, and the interactive menu loop."""

from __future__ import annotations

from .loop import COMMANDS, EndOfInput, MenuIO, run_menu_loop
from .session import ExplorerSession

__all__ = [
    "COMMANDS",
    "EndOfInput",
    "ExplorerSession",
    "MenuIO",
    "run_menu_loop",
]
