"""Explorer settings kept in a JSON file under the user config directory.

Holds presentation choices only (theme, dotfile visibility, log level).
The current directory is never written here.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

logger = logging.getLogger(__name__)


def load_config() -> dict[str, object]:
    """Read the explorer settings file.

    A missing file yields ``{}`` quietly. An unreadable or non-JSON file is
    logged at DEBUG and also yields ``{}``, as does any JSON value that is
    not an object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Write ``data`` to the settings file, creating its directory first.

    A failed write is logged as a warning and the session carries on with
    the in-memory choice.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def load_show_hidden() -> bool:
    """Whether listings include dotfiles; ``True`` unless a boolean says otherwise."""
    value = load_config().get("show_hidden")
    return value if isinstance(value, bool) else True


def save_show_hidden(show_hidden: bool) -> None:
    config = load_config()
    config["show_hidden"] = bool(show_hidden)
    save_config(config)


def load_theme_name() -> str | None:
    """Saved theme name, stripped; ``None`` when absent, blank, or not a string."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = stripped
    save_config(config)


def normalize_log_level(value: object) -> str | None:
    if not isinstance(value, str):
        return None
    candidate = value.strip().upper()
    return candidate if candidate in LOG_LEVELS else None


def load_log_level() -> str:
    return normalize_log_level(load_config().get("log_level")) or DEFAULT_LOG_LEVEL


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_LOG_LEVEL",
    "LOG_LEVELS",
    "load_config",
    "save_config",
    "load_show_hidden",
    "save_show_hidden",
    "load_theme_name",
    "save_theme_name",
    "normalize_log_level",
    "load_log_level",
]
