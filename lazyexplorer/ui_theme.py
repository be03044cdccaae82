"""UI theme definitions and selection helpers.

Themes are ANSI palettes for listings, menus, and status lines. The plain
theme renders every slot as an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    bold: str
    heading: str
    divider: str
    directory: str
    executable: str
    success: str
    error: str
    prompt: str
    search_banner: str
    menu_title: str
    menu_section: str
    banner: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    bold="\033[1m",
    heading="\033[1;36m",
    divider="",
    directory="\033[34m",
    executable="\033[32m",
    success="\033[32m",
    error="\033[31m",
    prompt="\033[33m",
    search_banner="\033[33m",
    menu_title="\033[1;35m",
    menu_section="\033[36m",
    banner="\033[1;32m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    bold="\033[1m",
    heading="\033[1;38;5;45m",
    divider="\033[2;38;5;31m",
    directory="\033[1;38;5;45m",
    executable="\033[38;5;84m",
    success="\033[38;5;84m",
    error="\033[38;5;203m",
    prompt="\033[38;5;153m",
    search_banner="\033[38;5;215m",
    menu_title="\033[1;38;5;39m",
    menu_section="\033[38;5;117m",
    banner="\033[1;38;5;45m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    bold="",
    heading="",
    divider="",
    directory="",
    executable="",
    success="",
    error="",
    prompt="",
    search_banner="",
    menu_title="",
    menu_section="",
    banner="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES.get(normalize_theme_name(name), DEFAULT_THEME)


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
