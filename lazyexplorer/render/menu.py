"""Menu, banner, and prompt text for the interactive explorer.

Rendering helpers here are presentation-only and side-effect free.
"""

from __future__ import annotations

from ..ui_theme import UITheme

MENU_RULE_WIDTH = 40

MENU_SECTIONS: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "Navigation & Listing:",
        (
            ("1", "List files (simple)"),
            ("2", "List files (detailed)"),
            ("3", "Change directory"),
            ("4", "Show current path"),
        ),
    ),
    (
        "File/Directory Operations:",
        (
            ("5", "Create directory"),
            ("6", "Create file"),
            ("7", "Delete file/directory"),
            ("8", "Copy file"),
            ("9", "Move/Rename file"),
        ),
    ),
    (
        "Search & Information:",
        (
            ("10", "Search files"),
            ("11", "View file information"),
        ),
    ),
    ("Permissions:", (("12", "Change permissions"),)),
    ("Other:", (("0", "Exit"),)),
)


def render_banner(theme: UITheme) -> str:
    lines = (
        "╔══════════════════════════════════════════╗",
        "║  Welcome to Linux File Explorer          ║",
        "╚══════════════════════════════════════════╝",
    )
    return theme.banner + "\n".join(lines) + theme.reset + "\n"


def render_menu(theme: UITheme) -> str:
    out: list[str] = [
        "",
        f"{theme.menu_title}╔═══════════════════════════════════════╗",
        "║     LINUX FILE EXPLORER MENU          ║",
        f"╚═══════════════════════════════════════╝{theme.reset}",
    ]
    for idx, (title, items) in enumerate(MENU_SECTIONS):
        if idx:
            out.append("")
        out.append(f"{theme.menu_section}{title}{theme.reset}")
        for key, label in items:
            out.append(f"  {(key + '.').ljust(4)}{label}")
    out.append("-" * MENU_RULE_WIDTH)
    return "\n".join(out) + "\n"


def render_prompt(theme: UITheme, text: str) -> str:
    return f"{theme.prompt}{text}{theme.reset}"


def render_goodbye(theme: UITheme) -> str:
    return f"{theme.bold}{theme.success}Thank you for using File Explorer!{theme.reset}\n"


__all__ = [
    "MENU_SECTIONS",
    "render_banner",
    "render_goodbye",
    "render_menu",
    "render_prompt",
]
