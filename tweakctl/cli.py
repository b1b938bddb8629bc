"""macOS Tweaks command line.

Without a subcommand the interactive menu starts. ``list``, ``apply`` and
``revert`` work on the same catalog without the TUI.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from rich.console import Console
from rich.markup import escape

from macos_tweaks import __version__
from macos_tweaks.core import config as config_mod
from macos_tweaks.core.catalog import Category, find_action, runnable_actions
from macos_tweaks.core.config import TweaksConfig
from macos_tweaks.core.session import Session
from macos_tweaks.utils.shell import CommandError, ShellRunner

from tweakctl.catalog import get_categories

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str, log_file: Optional[Path] = None) -> None:
    """Configure root logging; the TUI logs to a file so the screen stays intact."""
    handlers: List[logging.Handler] = []
    if log_file is not None:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        except OSError:
            handlers.append(logging.NullHandler())
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers or None,
        force=True,
    )


# ---------------------------------------------------------------------------
# Subcommands
# ---------------------------------------------------------------------------
def cmd_list(categories: List[Category]) -> int:
    console.print("Available tweaks:")
    for category in categories:
        actions = runnable_actions(category)
        if not actions:
            continue
        console.print(f"\n[bold]{escape(category.name)}:[/bold]")
        for action in actions:
            console.print(f"  - {escape(action.display_name)}")
    return 0


def cmd_apply(categories: List[Category], name: str, runner: ShellRunner) -> int:
    action = find_action(categories, name)
    if action is None:
        err_console.print(f"[red]Tweak not found: '{escape(name)}'[/red]")
        return 1
    if not action.is_runnable:
        err_console.print(f"[red]Tweak '{escape(name)}' is a category or not directly runnable.[/red]")
        return 1

    console.print(f"Applying tweak: '{escape(action.display_name)}'")
    try:
        runner.handoff(action.enable_command)
    except CommandError as e:
        err_console.print(f"[red]Error applying '{escape(action.display_name)}': {escape(str(e))}[/red]")
        return 1
    console.print(f"[green]Successfully applied tweak: '{escape(action.display_name)}'[/green]")
    return 0


def cmd_revert(categories: List[Category], name: str, runner: ShellRunner) -> int:
    action = find_action(categories, name)
    if action is None:
        err_console.print(f"[red]Tweak not found: '{escape(name)}'[/red]")
        return 1
    if not action.disable_command:
        err_console.print(f"[red]Revert command not available for tweak: '{escape(name)}'[/red]")
        return 1

    console.print(f"Reverting tweak: '{escape(action.display_name)}'")
    try:
        runner.handoff(action.disable_command)
    except CommandError as e:
        err_console.print(f"[red]Error reverting '{escape(action.display_name)}': {escape(str(e))}[/red]")
        return 1
    console.print(f"[green]Successfully reverted tweak: '{escape(action.display_name)}'[/green]")
    return 0


def cmd_menu(categories: List[Category], config: TweaksConfig) -> int:
    """Launch the interactive TUI menu."""
    try:
        from tweakctl.tui import run_textual
    except ImportError as e:
        err_console.print(f"Error: TUI menu requires additional dependencies: {e}")
        err_console.print("Install with: pip install textual")
        return 1

    def session_factory(runner) -> Session:
        return Session(categories, runner, version=__version__)

    run_textual(session_factory, config)
    return 0


# ---------------------------------------------------------------------------
# CLI entrypoint
# ---------------------------------------------------------------------------
def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="tweakctl", description="Browse and apply macOS tweaks")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--config", help="Path to config.yaml (default: ~/.config/macos-tweaks/config.yaml)")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("menu", help="Launch the interactive menu (default)")
    sub.add_parser("list", help="List all available, runnable tweaks")
    p_apply = sub.add_parser("apply", help="Apply a specific tweak by name")
    p_apply.add_argument("name", help="The name of the tweak to apply")
    p_revert = sub.add_parser("revert", help="Revert a specific tweak by name")
    p_revert.add_argument("name", help="The name of the tweak to revert")

    args = parser.parse_args(list(argv) if argv is not None else None)

    interactive = args.command in (None, "menu")
    config_path = Path(args.config) if args.config else config_mod.default_config_path()
    log_file = config_path.parent / "tweaks.log" if interactive else None
    setup_logging(args.log_level, log_file)

    config = config_mod.load(config_path)
    categories = get_categories()

    if args.command == "list":
        return cmd_list(categories)
    if args.command == "apply":
        return cmd_apply(categories, args.name, ShellRunner(config.shell))
    if args.command == "revert":
        return cmd_revert(categories, args.name, ShellRunner(config.shell))
    return cmd_menu(categories, config)


if __name__ == "__main__":
    raise SystemExit(main())
