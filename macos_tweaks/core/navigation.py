"""Two-level drill navigation over the catalog tree."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from .catalog import CategoryNode, Entry, Header, Leaf


class Depth(Enum):
    TOP = 0
    DRILLED = 1


class View(Enum):
    CATEGORY_LIST = "categories"
    HEADER_LIST = "headers"
    OPTION_LIST = "options"


class DrillResult(Enum):
    NOOP = "noop"
    ENTERED = "entered"
    EMPTY_CATEGORY = "empty"
    RUN = "run"


@dataclass
class Drill:
    result: DrillResult
    leaf: Optional[Leaf] = None


class Navigator:
    """Cursor and drill state for the catalog tree.

    ``selected[d]`` always indexes the list shown at depth ``d`` and is reset
    to 0 whenever that list changes.
    """

    def __init__(self, tree: List[CategoryNode]):
        self.tree = tree
        self.depth = Depth.TOP
        self.selected = [0, 0]
        self.active_header: Optional[Header] = None

    @property
    def view(self) -> View:
        if self.depth is Depth.TOP:
            return View.CATEGORY_LIST
        if self.active_header is None:
            return View.HEADER_LIST
        return View.OPTION_LIST

    @property
    def category(self) -> CategoryNode:
        return self.tree[self.selected[0]]

    @property
    def cursor(self) -> int:
        return self.selected[self.depth.value]

    def entries(self) -> list:
        """Nodes displayed at the current depth."""
        if self.depth is Depth.TOP:
            return list(self.tree)
        if self.active_header is None:
            return list(self.category.entries)
        return list(self.active_header.children)

    def items(self) -> List[str]:
        return [node.name.strip() for node in self.entries()]

    def selected_entry(self) -> Optional[Entry]:
        if self.depth is Depth.TOP:
            return None
        entries = self.entries()
        if not entries:
            return None
        return entries[self.cursor]

    def move(self, delta: int) -> None:
        count = len(self.entries())
        if count == 0:
            return
        self.selected[self.depth.value] = (self.cursor + delta) % count

    def drill_in(self) -> Drill:
        if self.depth is Depth.TOP:
            if not self.tree:
                return Drill(DrillResult.NOOP)
            if self.category.is_empty:
                return Drill(DrillResult.EMPTY_CATEGORY)
            self.depth = Depth.DRILLED
            self.selected[1] = 0
            return Drill(DrillResult.ENTERED)

        entry = self.selected_entry()
        if entry is None:
            return Drill(DrillResult.NOOP)
        if isinstance(entry, Header):
            if self.active_header is not None:
                return Drill(DrillResult.NOOP)
            self.active_header = entry
            self.selected[1] = 0
            return Drill(DrillResult.ENTERED)
        return Drill(DrillResult.RUN, entry)

    def drill_out(self) -> None:
        if self.depth is Depth.TOP:
            return
        if self.active_header is not None:
            self.active_header = None
            self.selected[1] = 0
        else:
            self.depth = Depth.TOP
