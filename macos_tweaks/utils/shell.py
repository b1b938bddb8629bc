"""Shell execution helpers.

Every tweak is a shell string run as ``<shell> -c <command>``. Two flavours:

- ``run_captured``: output is captured and returned, the terminal stays with
  the caller.
- ``run_interactive``: the child inherits stdin/stdout/stderr so prompts such
  as ``sudo`` can talk to the user. The caller is responsible for releasing the
  terminal first (see ``tweakctl.tui.TextualCommandRunner``).

Both raise ``CommandError`` on a non-zero exit or when the shell cannot be
spawned. They go through a swappable runner (``subprocess.run`` by default);
tests install a fake with ``set_runner`` and restore it with ``reset_runner``.
"""
from __future__ import annotations

import logging
import shutil
import subprocess
from typing import Callable

logger = logging.getLogger(__name__)

DEFAULT_SHELL = "zsh"

_runner: Callable = subprocess.run


def set_runner(runner: Callable) -> None:
    """Install ``runner(cmd, **kwargs) -> CompletedProcess-like``."""
    global _runner
    _runner = runner


def reset_runner() -> None:
    global _runner
    _runner = subprocess.run


class CommandError(RuntimeError):
    """A tweak command failed or could not be started."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


def run_captured(command: str, shell: str = DEFAULT_SHELL) -> str:
    """Run ``command`` and return its stdout."""
    logger.info("Running captured command: %s", command)
    try:
        result = _runner([shell, "-c", command], capture_output=True, text=True, check=False)
    except OSError as e:
        raise CommandError(f"Failed to start {shell}: {e}") from e
    if result.returncode != 0:
        stderr = (result.stderr or "").strip()
        logger.warning("Command exited with %s: %s", result.returncode, stderr)
        raise CommandError(f"Command failed: {stderr}", returncode=result.returncode)
    return result.stdout or ""


def run_interactive(command: str, shell: str = DEFAULT_SHELL) -> None:
    """Run ``command`` attached to the current terminal."""
    logger.info("Running interactive command: %s", command)
    try:
        result = _runner([shell, "-c", command], check=False)
    except OSError as e:
        raise CommandError(f"Failed to start {shell}: {e}") from e
    if result.returncode != 0:
        logger.warning("Interactive command exited with %s", result.returncode)
        raise CommandError(
            f"Command failed with status: {result.returncode}",
            returncode=result.returncode,
        )


def command_exists(name: str) -> bool:
    return shutil.which(name) is not None


class ShellRunner:
    """Runs commands with a fixed shell and no terminal management.

    Used by the CLI, where the process already owns a plain line-mode terminal.
    The TUI subclasses it to suspend the screen around ``handoff``.
    """

    def __init__(self, shell: str = DEFAULT_SHELL):
        self.shell = shell

    def capture(self, command: str) -> str:
        return run_captured(command, self.shell)

    def handoff(self, command: str) -> None:
        run_interactive(command, self.shell)

    def exists(self, name: str) -> bool:
        return command_exists(name)
