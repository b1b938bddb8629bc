"""Interactive session: routes keys to the active overlay or the navigator."""
from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from .catalog import Category, build_tree
from .dispatcher import CommandRunner, Dispatcher
from .navigation import DrillResult, Navigator
from .overlay import ConfirmOverlay, ListOverlay, Overlay, PromptOverlay, PuzzleOverlay, Resolution
from .status import StatusLine

logger = logging.getLogger(__name__)

EMPTY_CATEGORY = "This category is empty."


class Session:
    """All state of one interactive run.

    ``overlay`` is the single modal mode; ``None`` means the menu has input.
    """

    def __init__(
        self,
        categories: Iterable[Category],
        runner: CommandRunner,
        version: str = "",
        clock: Callable[[], float] = time.monotonic,
    ):
        self.navigator = Navigator(build_tree(categories))
        self.status = StatusLine(clock)
        self.dispatcher = Dispatcher(runner, self.status, version=version)
        self.overlay: Optional[Overlay] = None
        self.should_quit = False

    @property
    def applied(self) -> set:
        return self.dispatcher.applied

    def tick(self) -> None:
        self.status.tick()

    def handle_key(self, key: str, character: Optional[str] = None) -> None:
        if self.overlay is not None:
            self._handle_overlay_key(key, character)
        else:
            self._handle_menu_key(key, character)

    # ------------------------------------------------------------------
    def _handle_overlay_key(self, key: str, character: Optional[str]) -> None:
        overlay = self.overlay
        resolution = overlay.handle_key(key, character)
        if resolution is None:
            return

        # The overlay is gone before any follow-up runs, whatever the outcome.
        self.overlay = None
        if isinstance(overlay, ConfirmOverlay):
            if resolution is Resolution.SUBMIT:
                self.dispatcher.confirm(overlay)
            else:
                self.dispatcher.cancel()
        elif isinstance(overlay, PromptOverlay):
            if resolution is Resolution.SUBMIT:
                self.overlay = self.dispatcher.submit_prompt(overlay)
            else:
                self.dispatcher.cancel()
        elif isinstance(overlay, ListOverlay):
            if resolution is Resolution.SUBMIT:
                self.dispatcher.run_follow_up(overlay)
        elif isinstance(overlay, PuzzleOverlay):
            if overlay.puzzle.solved:
                self.status.show(f"Puzzle solved in {overlay.puzzle.moves} moves.")

    def _handle_menu_key(self, key: str, character: Optional[str]) -> None:
        nav = self.navigator
        if character == "q":
            self.should_quit = True
        elif key == "up":
            nav.move(-1)
        elif key == "down":
            nav.move(1)
        elif key == "left":
            nav.drill_out()
        elif key in ("right", "enter"):
            self._drill_in(run=key == "enter")

    def _drill_in(self, run: bool) -> None:
        drill = self.navigator.drill_in()
        if drill.result is DrillResult.EMPTY_CATEGORY:
            self.status.show(EMPTY_CATEGORY)
        elif drill.result is DrillResult.RUN and run:
            self.overlay = self.dispatcher.dispatch(drill.leaf)
