import pytest

from macos_tweaks.core.dispatcher import CANCELED
from macos_tweaks.core.navigation import View
from macos_tweaks.core.overlay import ConfirmOverlay, ListOverlay, PromptOverlay, PuzzleOverlay, TextOverlay
from macos_tweaks.core.session import EMPTY_CATEGORY


def press(session, *keys):
    for key in keys:
        session.handle_key(key)


def type_text(session, text):
    for ch in text:
        session.handle_key(ch, ch)


def open_destructive(session):
    # Optimization -> Clean Up Caches -> Clear User Cache (destructive)
    press(session, "down", "down", "down", "enter", "enter", "enter")
    assert isinstance(session.overlay, ConfirmOverlay)


def test_q_quits_from_menu(session):
    session.handle_key("q", "q")
    assert session.should_quit


def test_empty_category_shows_status(session):
    press(session, "down", "enter")
    assert session.status.message == EMPTY_CATEGORY
    assert session.navigator.view is View.CATEGORY_LIST


def test_right_arrow_navigates_but_does_not_run(session, runner):
    press(session, "right", "right", "right")
    assert session.navigator.view is View.OPTION_LIST
    assert runner.captured == []
    press(session, "enter")
    assert runner.captured == ["defaults write com.apple.dock tilesize -int 32"]
    assert "  Small (32px)" in session.applied


def test_left_arrow_backs_out(session):
    press(session, "enter", "enter", "left", "left")
    assert session.navigator.view is View.CATEGORY_LIST


def test_confirmed_destructive_runs_via_handoff(session, runner):
    open_destructive(session)
    type_text(session, "yes")
    press(session, "enter")
    assert runner.handed_off == ["rm -rf ~/Library/Caches/*"]
    assert session.overlay is None
    assert session.status.message == "Successfully applied: Clear User Cache (destructive)"


@pytest.mark.parametrize("typed", ["y", "", "no", "yess"])
def test_wrong_confirmation_cancels(session, runner, typed):
    open_destructive(session)
    type_text(session, typed)
    press(session, "enter")
    assert runner.handed_off == []
    assert session.status.message == CANCELED
    assert session.overlay is None


def test_escape_cancels_and_next_confirmation_starts_clean(session, runner):
    open_destructive(session)
    type_text(session, "ye")
    press(session, "escape")
    assert session.status.message == CANCELED

    press(session, "enter")
    assert isinstance(session.overlay, ConfirmOverlay)
    assert session.overlay.buffer == ""
    type_text(session, "s")
    press(session, "enter")
    assert runner.handed_off == []


def test_menu_keys_are_swallowed_by_confirmation(session):
    open_destructive(session)
    type_text(session, "q")
    press(session, "left")
    assert not session.should_quit
    assert session.overlay.buffer == "q"


def test_prompt_fills_template_and_runs(session, runner):
    press(session, "down", "down", "down", "enter", "down", "enter", "enter")
    assert isinstance(session.overlay, PromptOverlay)
    type_text(session, "My Label")
    press(session, "enter")
    assert runner.captured == ['cmd --set "My Label"']
    assert session.overlay is None


def test_prompt_escape_cancels(session, runner):
    press(session, "down", "down", "down", "enter", "down", "enter", "enter", "escape")
    assert runner.captured == []
    assert session.status.message == CANCELED


def test_outdated_list_follow_up_upgrades(session, runner):
    runner.outputs["brew outdated"] = "git\nwget\n"
    press(session, "up", "enter", "enter", "down", "enter")
    assert isinstance(session.overlay, ListOverlay)
    press(session, "down", "enter")
    assert runner.handed_off == ["brew upgrade wget"]
    assert session.overlay is None


def test_text_overlay_dismisses_on_any_key(session):
    press(session, "up", "enter", "enter", "down", "down", "down", "enter")
    assert isinstance(session.overlay, TextOverlay)
    assert session.overlay.text == "macOS Tweaks v9.9.9"
    session.handle_key("q", "q")
    assert session.overlay is None
    assert not session.should_quit


def test_solved_puzzle_reports_moves(session):
    press(session, "up", "enter", "enter", "up", "enter")
    assert isinstance(session.overlay, PuzzleOverlay)
    puzzle = session.overlay.puzzle
    puzzle.player = puzzle.goal
    puzzle.moves = 3
    press(session, "escape")
    assert session.status.message == "Puzzle solved in 3 moves."


def test_status_expires_on_tick(session, clock):
    press(session, "down", "enter")
    clock.value = 10.0
    session.tick()
    assert session.status.message is None


def test_failed_confirmed_run_reports_error(session, runner, clock):
    runner.failures["rm -rf ~/Library/Caches/*"] = "Command failed with status: 1"
    open_destructive(session)
    type_text(session, "yes")
    press(session, "enter")

    assert runner.handed_off == ["rm -rf ~/Library/Caches/*"]
    assert session.overlay is None
    assert session.status.message == (
        "Error executing 'Clear User Cache (destructive)': Command failed with status: 1"
    )
    assert session.applied == set()
    clock.value = 6.0
    session.tick()
    assert session.status.message is not None
    clock.value = 8.0
    session.tick()
    assert session.status.message is None
