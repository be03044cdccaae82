"""Presentation helpers that turn explorer results into terminal text."""

from __future__ import annotations

from .listing import (
    display_text,
    render_entry_info,
    render_error,
    render_listing,
    render_search_results,
    render_success,
)
from .menu import MENU_SECTIONS, render_banner, render_goodbye, render_menu, render_prompt

__all__ = [
    "MENU_SECTIONS",
    "display_text",
    "render_banner",
    "render_entry_info",
    "render_error",
    "render_goodbye",
    "render_listing",
    "render_menu",
    "render_prompt",
    "render_search_results",
    "render_success",
]
