"""Textual front-end for the tweaks menu.

The app owns no menu logic: every key goes to ``Session.handle_key`` and the
widgets are repainted from the session afterwards. Rendering helpers are plain
functions so they can be exercised without a running app.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from macos_tweaks.core.catalog import Header
from macos_tweaks.core.config import TweaksConfig
from macos_tweaks.core.navigation import View
from macos_tweaks.core.overlay import ConfirmOverlay, ListOverlay, PromptOverlay, PuzzleOverlay, TextOverlay
from macos_tweaks.core.session import Session
from macos_tweaks.utils.shell import ShellRunner

logger = logging.getLogger(__name__)

TICK_SECONDS = 0.1
TITLE = "macOS-tweaks"

HINTS = {
    View.CATEGORY_LIST: "Navigation: ↑↓ to select, → or Enter to view category, q to quit",
    View.HEADER_LIST: "Navigation: ↑↓ to select, → or Enter to view options, ← to go back, q to quit",
    View.OPTION_LIST: "Navigation: ↑↓ to select, Enter to apply, ← to go back, q to quit",
}


class TextualCommandRunner(ShellRunner):
    """Shell runner that releases the screen while a command owns the terminal."""

    def __init__(self, app: App, shell: str):
        super().__init__(shell)
        self.app = app

    def handoff(self, command: str) -> None:
        try:
            with self.app.suspend():
                super().handoff(command)
        finally:
            self.app.refresh(layout=True, repaint=True)


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------
def render_menu(session: Session, config: TweaksConfig) -> Text:
    nav = session.navigator
    primary = config.get_color("primary")
    text = Text()
    for i, node in enumerate(nav.entries()):
        if i == nav.cursor:
            text.append("> ", style=primary)
            style = f"bold {primary}"
        else:
            text.append("  ")
            if nav.view is View.HEADER_LIST and isinstance(node, Header):
                style = f"bold {config.get_color('secondary')}"
            else:
                style = config.get_color("text_dim")
        text.append(node.name.strip(), style=style)
        if node.name in session.applied:
            text.append(" ✓", style=config.get_color("success"))
        text.append("\n")
    return text


def render_breadcrumb(session: Session) -> str:
    nav = session.navigator
    if nav.view is View.CATEGORY_LIST:
        return TITLE
    parts = [TITLE, nav.category.name]
    if nav.active_header is not None:
        parts.append(nav.active_header.name.strip())
    return " › ".join(parts)


def render_status(session: Session, config: TweaksConfig) -> Text:
    overlay = session.overlay
    if isinstance(overlay, ConfirmOverlay):
        return Text(f"{overlay.message}\nInput: {overlay.buffer}", style=f"bold {config.get_color('error')}")
    if session.status.message is not None:
        return Text(session.status.message, style=config.get_color("primary"))
    return Text(HINTS[session.navigator.view], style=config.get_color("primary"))


def render_overlay(session: Session, config: TweaksConfig, height: int = 0) -> Optional[Text]:
    """Fullscreen content for the active overlay, or ``None`` for the menu."""
    overlay = session.overlay
    primary = config.get_color("primary")
    if isinstance(overlay, PuzzleOverlay):
        puzzle = overlay.puzzle
        lines = ["Grid Puzzle  (arrows move, Esc leaves)", ""] + puzzle.rows()
        lines += ["", f"Moves: {puzzle.moves}" + ("  Solved!" if puzzle.solved else "")]
        return Text("\n".join(lines), style=primary)
    if isinstance(overlay, ListOverlay):
        text = Text(f"{overlay.title}\n\n", style=f"bold {primary}")
        for i, item in enumerate(overlay.items):
            if i == overlay.cursor:
                text.append(f"> {item}\n", style=f"bold {primary}")
            else:
                text.append(f"  {item}\n", style=config.get_color("text"))
        return text
    if isinstance(overlay, TextOverlay):
        lines: List[str] = overlay.lines[overlay.scroll:]
        if height > 2:
            lines = lines[: height - 2]
        return Text("\n".join(lines) + "\n\n[ ↑↓ scroll, any other key to return ]", style=primary)
    if isinstance(overlay, PromptOverlay):
        return Text(
            f"{overlay.action_name.strip()}\n\n{overlay.prompt}\n> {overlay.buffer}\n\n"
            "[ Enter to run, Esc to cancel ]",
            style=primary,
        )
    return None


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
class TweaksApp(App):
    TITLE = TITLE

    CSS = """
    Screen { layout: vertical; background: #080a0f; }
    #title { height: 2; text-style: bold; content-align: center middle; }
    #menu { height: 1fr; padding: 0 1; }
    #status { height: auto; min-height: 2; content-align: center middle; padding: 0 1; }
    #overlay { height: 1fr; padding: 0 1; display: none; }
    """

    def __init__(self, session_factory, config: TweaksConfig):
        super().__init__()
        self._config = config
        self._runner = TextualCommandRunner(self, config.shell)
        self._session: Session = session_factory(self._runner)

    def compose(self) -> ComposeResult:
        yield Static(TITLE, id="title", markup=False)
        yield Static("", id="menu", markup=False)
        yield Static("", id="status", markup=False)
        yield Static("", id="overlay", markup=False)

    def on_mount(self) -> None:
        self.query_one("#title", Static).styles.color = self._config.get_color("primary")
        self.set_interval(TICK_SECONDS, self._tick)
        self._render_all()

    def _tick(self) -> None:
        self._session.tick()
        self._render_status()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self._session.handle_key(event.key, event.character)
        if self._session.should_quit:
            self.exit()
            return
        self._render_all()

    def _render_status(self) -> None:
        self.query_one("#status", Static).update(render_status(self._session, self._config))

    def _render_all(self) -> None:
        overlay_widget = self.query_one("#overlay", Static)
        content = render_overlay(self._session, self._config, height=self.size.height)
        fullscreen = content is not None
        for widget_id in ("#title", "#menu", "#status"):
            self.query_one(widget_id).styles.display = "none" if fullscreen else "block"
        overlay_widget.styles.display = "block" if fullscreen else "none"
        if fullscreen:
            overlay_widget.update(content)
            return
        self.query_one("#title", Static).update(render_breadcrumb(self._session))
        self.query_one("#menu", Static).update(render_menu(self._session, self._config))
        self._render_status()


def run_textual(session_factory, config: TweaksConfig) -> None:
    app = TweaksApp(session_factory=session_factory, config=config)
    app.run()
