"""Catalog model and the tree built from it.

Catalog data is authored flat: within a category an action whose name starts
with two spaces belongs to the nearest unindented action above it (its header).
``build_tree`` turns that convention into explicit ``Header``/``Leaf`` nodes
once, at load time, and rejects catalogs that break it.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Union

from .classifier import ExecutionPlan, UnknownSentinelError, classify, is_sentinel

INDENT = "  "


class CatalogError(ValueError):
    """The catalog data violates the nesting convention or uses a bad command."""


@dataclass(frozen=True)
class Action:
    """A single catalog entry; a header when ``enable_command`` is empty."""

    name: str
    description: str
    enable_command: str = ""
    disable_command: str = ""

    @property
    def display_name(self) -> str:
        return self.name.strip()

    @property
    def is_indented(self) -> bool:
        return self.name.startswith(INDENT)

    @property
    def is_header(self) -> bool:
        return not self.enable_command

    @property
    def is_runnable(self) -> bool:
        """Runnable from the CLI: neither a header nor a built-in."""
        return bool(self.enable_command) and not is_sentinel(self.enable_command)


@dataclass
class Category:
    name: str
    description: str
    actions: List[Action] = field(default_factory=list)


@dataclass
class Leaf:
    action: Action
    plan: ExecutionPlan

    @property
    def name(self) -> str:
        return self.action.name


@dataclass
class Header:
    action: Action
    children: List[Leaf] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.action.name


Entry = Union[Header, Leaf]


@dataclass
class CategoryNode:
    category: Category
    entries: List[Entry] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.category.name

    @property
    def is_empty(self) -> bool:
        return not self.category.actions


def _leaf(category: Category, action: Action) -> Leaf:
    try:
        plan = classify(action.name, action.enable_command)
    except UnknownSentinelError as e:
        raise CatalogError(f"{category.name} / {action.display_name}: {e}") from None
    return Leaf(action, plan)


def build_category(category: Category) -> CategoryNode:
    node = CategoryNode(category)
    current: Optional[Header] = None
    for action in category.actions:
        if action.is_indented:
            if current is None:
                raise CatalogError(
                    f"{category.name}: '{action.display_name}' is indented but has no header above it"
                )
            if action.is_header:
                raise CatalogError(f"{category.name}: nested header '{action.display_name}' is not supported")
            current.children.append(_leaf(category, action))
            continue
        if action.is_header:
            current = Header(action)
            node.entries.append(current)
        else:
            # A runnable top-level action closes the previous header's run.
            current = None
            node.entries.append(_leaf(category, action))
    return node


def build_tree(categories: Iterable[Category]) -> List[CategoryNode]:
    return [build_category(category) for category in categories]


def iter_actions(categories: Iterable[Category]) -> Iterator[tuple[Category, Action]]:
    for category in categories:
        for action in category.actions:
            yield category, action


def find_action(categories: Iterable[Category], name: str) -> Optional[Action]:
    """Case-insensitive lookup on trimmed names; first match wins."""
    wanted = name.strip().casefold()
    for _, action in iter_actions(categories):
        if action.display_name.casefold() == wanted:
            return action
    return None


def runnable_actions(category: Category) -> List[Action]:
    return [action for action in category.actions if action.is_runnable]
