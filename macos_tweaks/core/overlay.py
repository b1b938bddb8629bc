"""Modal overlays.

While an overlay is open it receives every key. ``handle_key`` returns
``None`` while the overlay stays open, or a ``Resolution`` once the user is
done with it; the session then discards the overlay and acts on the result.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from .classifier import PromptTemplate
from .puzzle import MOVES, GridPuzzle

CONFIRM_WORD = "yes"


class Resolution(Enum):
    DISMISS = "dismiss"
    SUBMIT = "submit"
    CANCEL = "cancel"


class ListPurpose(Enum):
    INSTALLED = "installed"
    OUTDATED = "outdated"


def _is_text(character: Optional[str]) -> bool:
    return bool(character) and character.isprintable()


@dataclass
class TextOverlay:
    """Fullscreen text; up/down scroll, any other key closes it."""

    text: str
    scroll: int = 0

    @property
    def lines(self) -> List[str]:
        return self.text.splitlines() or [""]

    def handle_key(self, key: str, character: Optional[str] = None) -> Optional[Resolution]:
        if key == "up":
            self.scroll = max(0, self.scroll - 1)
            return None
        if key == "down":
            self.scroll = min(len(self.lines) - 1, self.scroll + 1)
            return None
        return Resolution.DISMISS


@dataclass
class ListOverlay:
    """Fullscreen selectable list of Homebrew packages."""

    title: str
    items: List[str]
    purpose: ListPurpose
    cursor: int = 0

    @property
    def selected(self) -> str:
        return self.items[self.cursor]

    def follow_up_command(self) -> str:
        # `brew outdated --verbose` style lines carry versions after the name
        parts = self.selected.split()
        package = parts[0] if parts else self.selected
        if self.purpose is ListPurpose.OUTDATED:
            return f"brew upgrade {package}"
        return f"brew info {package}"

    def handle_key(self, key: str, character: Optional[str] = None) -> Optional[Resolution]:
        if key in ("up", "down"):
            if self.items:
                step = -1 if key == "up" else 1
                self.cursor = (self.cursor + step) % len(self.items)
            return None
        if key == "enter":
            return Resolution.SUBMIT if self.items else Resolution.DISMISS
        if key == "escape" or character == "q":
            return Resolution.DISMISS
        return None


@dataclass
class _InputOverlay:
    buffer: str = field(default="", init=False)

    def handle_key(self, key: str, character: Optional[str] = None) -> Optional[Resolution]:
        if key == "enter":
            return Resolution.SUBMIT
        if key == "escape":
            return Resolution.CANCEL
        if key == "backspace":
            self.buffer = self.buffer[:-1]
            return None
        if _is_text(character):
            self.buffer += character
        return None


@dataclass
class PromptOverlay(_InputOverlay):
    """Free-text prompt whose input is substituted into ``template``."""

    action_name: str = ""
    prompt: str = ""
    template: str = ""

    def command(self) -> str:
        return PromptTemplate(self.template).fill(self.buffer)


@dataclass
class ConfirmOverlay(_InputOverlay):
    """Typed confirmation guarding a destructive command."""

    action_name: str = ""
    command: str = ""
    repeatable: bool = False

    @property
    def message(self) -> str:
        return (
            f"⚠️  DESTRUCTIVE ACTION: {self.action_name.strip()}\n"
            f"Type '{CONFIRM_WORD}' to confirm or press Esc to cancel"
        )

    @property
    def accepted(self) -> bool:
        return self.buffer.strip().lower() == CONFIRM_WORD


@dataclass
class PuzzleOverlay:
    puzzle: GridPuzzle = field(default_factory=GridPuzzle)

    def handle_key(self, key: str, character: Optional[str] = None) -> Optional[Resolution]:
        if key in MOVES:
            self.puzzle.move(key)
            return None
        if key == "escape" or character == "q":
            return Resolution.DISMISS
        return None


Overlay = Union[PuzzleOverlay, ListOverlay, TextOverlay, PromptOverlay, ConfirmOverlay]
