"""Runs classified catalog leaves and resolves their overlays."""
from __future__ import annotations

import logging
from typing import Optional, Protocol, Set

from .catalog import Leaf
from .classifier import BuiltinKind, PlanKind
from .overlay import ConfirmOverlay, ListOverlay, ListPurpose, Overlay, PromptOverlay, PuzzleOverlay, TextOverlay
from .status import StatusLine
from macos_tweaks.utils.shell import CommandError

logger = logging.getLogger(__name__)

CANCELED = "Action canceled."


class CommandRunner(Protocol):
    def capture(self, command: str) -> str: ...

    def handoff(self, command: str) -> None: ...

    def exists(self, name: str) -> bool: ...


class Dispatcher:
    """Decides how a selected leaf runs and records the outcome.

    Methods return the overlay to open next, or ``None`` to return to the
    menu. Command failures never escape: they become error status messages.
    """

    def __init__(self, runner: CommandRunner, status: StatusLine, version: str = ""):
        self.runner = runner
        self.status = status
        self.version = version
        self.applied: Set[str] = set()

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def dispatch(self, leaf: Leaf) -> Optional[Overlay]:
        plan = leaf.plan
        name = leaf.action.name
        logger.info("Dispatching %s as %s", name.strip(), plan.kind.value)

        if plan.kind is PlanKind.BUILTIN:
            return self._builtin(plan.builtin)
        if plan.kind is PlanKind.PROMPT_THEN_RUN:
            return PromptOverlay(
                action_name=name,
                prompt=leaf.action.description or f"Enter a value for {name.strip()}",
                template=plan.template,
            )
        if plan.kind is PlanKind.CONFIRM_THEN_RUN:
            return ConfirmOverlay(action_name=name, command=plan.command, repeatable=plan.repeatable)
        if plan.kind is PlanKind.HANDOFF_RUN:
            self._handoff(name, plan.command, repeatable=plan.repeatable)
            return None
        if plan.kind is PlanKind.CAPTURED_RUN:
            return self._captured(name, plan.command, info=plan.info, repeatable=plan.repeatable)
        return None

    # ------------------------------------------------------------------
    # Overlay resolutions
    # ------------------------------------------------------------------
    def submit_prompt(self, overlay: PromptOverlay) -> Optional[Overlay]:
        return self._captured(overlay.action_name, overlay.command(), info=False, repeatable=False)

    def cancel(self) -> None:
        self.status.show(CANCELED)

    def confirm(self, overlay: ConfirmOverlay) -> None:
        if not overlay.accepted:
            logger.info("Confirmation declined for %s", overlay.action_name.strip())
            self.cancel()
            return
        self._handoff(overlay.action_name, overlay.command, repeatable=overlay.repeatable)

    def run_follow_up(self, overlay: ListOverlay) -> None:
        command = overlay.follow_up_command()
        try:
            self.runner.handoff(command)
        except CommandError as e:
            self.status.error(f"Error executing '{command}': {e}")

    # ------------------------------------------------------------------
    # Execution modes
    # ------------------------------------------------------------------
    def _mark_applied(self, name: str, repeatable: bool) -> None:
        if not repeatable:
            self.applied.add(name)

    def _handoff(self, name: str, command: str, repeatable: bool) -> None:
        try:
            self.runner.handoff(command)
        except CommandError as e:
            self.status.error(f"Error executing '{name.strip()}': {e}")
            return
        self._mark_applied(name, repeatable)
        self.status.show(f"Successfully applied: {name.strip()}")

    def _captured(self, name: str, command: str, info: bool, repeatable: bool) -> Optional[Overlay]:
        try:
            output = self.runner.capture(command)
        except CommandError as e:
            self.status.error(f"Error executing '{name.strip()}': {e}")
            return None

        if info:
            if not output.strip():
                output = f"'{name.strip()}' executed successfully with no output."
            return TextOverlay(output)

        self._mark_applied(name, repeatable)
        if output.strip():
            return TextOverlay(output)
        self.status.show(f"Successfully applied: {name.strip()}")
        return None

    def _builtin(self, kind: Optional[BuiltinKind]) -> Optional[Overlay]:
        if kind is BuiltinKind.VERSION:
            return TextOverlay(f"macOS Tweaks v{self.version}")
        if kind is BuiltinKind.CHECK_BREW:
            if self.runner.exists("brew"):
                return TextOverlay("Homebrew is installed and available in your PATH.")
            return TextOverlay("Homebrew is not installed or not in your PATH.")
        if kind is BuiltinKind.LIST_INSTALLED:
            return self._package_list(
                "brew list",
                ListPurpose.INSTALLED,
                title="Installed Packages (Press Enter for info)",
                empty="No installed Homebrew packages found.",
                what="installed",
            )
        if kind is BuiltinKind.LIST_OUTDATED:
            return self._package_list(
                "brew outdated",
                ListPurpose.OUTDATED,
                title="Outdated Packages (Press Enter to upgrade)",
                empty="All Homebrew packages are up to date.",
                what="outdated",
            )
        if kind is BuiltinKind.PUZZLE:
            return PuzzleOverlay()
        return None

    def _package_list(self, command: str, purpose: ListPurpose, title: str, empty: str, what: str) -> Overlay:
        try:
            output = self.runner.capture(command)
        except CommandError as e:
            return TextOverlay(f"Error fetching {what} packages: {e}")
        packages = [line for line in output.splitlines() if line.strip()]
        if not packages:
            return TextOverlay(empty)
        return ListOverlay(title=title, items=packages, purpose=purpose)
