"""Test configuration and fixtures."""
from dataclasses import dataclass, field
from typing import Dict, List

import pytest

from macos_tweaks.core.catalog import Action, Category
from macos_tweaks.core.session import Session
from macos_tweaks.utils.shell import CommandError


@dataclass
class FakeClock:
    value: float = 0.0

    def __call__(self) -> float:
        return self.value


@dataclass
class RecordingRunner:
    """CommandRunner double: records commands, returns canned output."""

    outputs: Dict[str, str] = field(default_factory=dict)
    failures: Dict[str, str] = field(default_factory=dict)
    installed: set = field(default_factory=set)
    captured: List[str] = field(default_factory=list)
    handed_off: List[str] = field(default_factory=list)

    def capture(self, command: str) -> str:
        self.captured.append(command)
        if command in self.failures:
            raise CommandError(self.failures[command], returncode=1)
        return self.outputs.get(command, "")

    def handoff(self, command: str) -> None:
        self.handed_off.append(command)
        if command in self.failures:
            raise CommandError(self.failures[command], returncode=1)

    def exists(self, name: str) -> bool:
        return name in self.installed


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def runner():
    return RecordingRunner()


@pytest.fixture
def categories():
    return [
        Category("Dock", "Dock settings", [
            Action("Dock Size", "Icon size"),
            Action("  Small (32px)", "Small icons", "defaults write com.apple.dock tilesize -int 32"),
            Action("  Large (64px)", "Large icons", "defaults write com.apple.dock tilesize -int 64",
                   "defaults delete com.apple.dock tilesize"),
            Action("Dock Spacers", "Spacers"),
            Action("  Add Small Spacer", "Adds a spacer", "defaults write spacer"),
        ]),
        Category("Empty", "Nothing here", []),
        Category("Networking", "Network", [
            Action("Flush DNS Cache", "Flush", "sudo dscacheutil -flushcache"),
            Action("Info", "Reports"),
            Action("  Show Wi-Fi Network", "Current network", "networksetup -getairportnetwork en0"),
        ]),
        Category("Optimization", "Cleanup", [
            Action("Clean Up Caches", "Caches"),
            Action("  Clear User Cache (destructive)", "Removes caches", "rm -rf ~/Library/Caches/*"),
            Action("Screenshots", "Screenshot settings"),
            Action("  Set Screenshot Name Prefix", "Enter a prefix",
                   '__PROMPT__:cmd --set "{}"'),
        ]),
        Category("Brew", "Homebrew", [
            Action("Packages", "Packages"),
            Action("  List Installed Packages", "Installed", "__LIST_INSTALLED__"),
            Action("  List Outdated Packages", "Outdated", "__LIST_OUTDATED__"),
            Action("  Check Homebrew Status", "Probe", "__CHECK_BREW__"),
            Action("  Version", "Version", "__SHOW_VERSION__"),
            Action("  Grid Puzzle", "Puzzle", "__PUZZLE__"),
        ]),
    ]


@pytest.fixture
def session(categories, runner, clock):
    return Session(categories, runner, version="9.9.9", clock=clock)


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / "macos-tweaks" / "config.yaml"
    monkeypatch.setenv("MACOS_TWEAKS_CONFIG", str(path))
    return path
