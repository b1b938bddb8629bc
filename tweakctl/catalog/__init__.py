"""Static tweak catalog.

Each module contributes one category. Names indented by two spaces belong to
the nearest unindented header above them; a name tag ``(destructive)`` asks
for typed confirmation and ``(interactive)`` hands the terminal to the command.
"""
from __future__ import annotations

from typing import List

from macos_tweaks.core.catalog import Category

from . import about, brew, dock, network, optimization, power, wallpaper


def get_categories() -> List[Category]:
    return [
        dock.get_category(),
        wallpaper.get_category(),
        power.get_category(),
        network.get_category(),
        optimization.get_category(),
        brew.get_category(),
        about.get_category(),
    ]
