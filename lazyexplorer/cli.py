"""Command-line front door for lazyexplorer.

Parses CLI options, merges them with persisted settings, configures logging,
and hands control to the interactive menu loop.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .runtime import config
from .runtime.loop import MenuIO, run_menu_loop
from .runtime.session import ExplorerSession
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"


def _log_level(value: str) -> str:
    """argparse type for logging level names."""
    level = config.normalize_log_level(value)
    if level is None:
        raise argparse.ArgumentTypeError(
            f"invalid log level: {value!r} (choose from {', '.join(config.LOG_LEVELS)})"
        )
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyexplorer",
        description="Interactive menu-driven file manager for the terminal.",
    )
    parser.add_argument(
        "--start",
        metavar="PATH",
        default=None,
        help="Absolute directory to start in. Defaults to the current directory.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    hidden = parser.add_mutually_exclusive_group()
    hidden.add_argument("--show-hidden", dest="show_hidden", action="store_true", default=None)
    hidden.add_argument("--hide-hidden", dest="show_hidden", action="store_false", help="Leave dotfiles out of listings.")
    parser.add_argument(
        "--remember",
        action="store_true",
        help="Persist --theme and hidden-file choices as defaults.",
    )
    parser.add_argument("--no-pause", action="store_true", help="Skip the 'Press Enter' prompt after commands.")
    parser.add_argument("--log-level", type=_log_level, default=None, help="Logging level written to stderr.")
    return parser


def _stdout_is_tty() -> bool:
    return sys.stdout.isatty()


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level), format=LOG_FORMAT, stream=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments and run the explorer until the user quits.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used. The
    return value is the process exit code.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level or config.load_log_level())

    start: str | None = None
    if args.start is not None:
        start_path = Path(args.start).expanduser()
        if not start_path.is_absolute():
            start_path = Path.cwd() / start_path
        if not start_path.is_dir():
            raise SystemExit(f"Directory not found: {args.start}")
        start = str(start_path)

    show_hidden = args.show_hidden if args.show_hidden is not None else config.load_show_hidden()
    theme_name = args.theme if args.theme is not None else config.load_theme_name()
    if args.remember:
        if args.theme is not None:
            config.save_theme_name(args.theme)
        if args.show_hidden is not None:
            config.save_show_hidden(args.show_hidden)

    no_color = args.no_color or not _stdout_is_tty()
    theme = resolve_theme(theme_name, no_color=no_color)
    session = ExplorerSession.start(start, show_hidden=show_hidden)
    return run_menu_loop(session, theme, MenuIO.from_std_streams(pause_after_command=not args.no_pause))


if __name__ == "__main__":
    sys.exit(main())
