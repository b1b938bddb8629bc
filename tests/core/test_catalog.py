import pytest

from macos_tweaks.core.catalog import (
    Action,
    CatalogError,
    Category,
    Header,
    Leaf,
    build_category,
    build_tree,
    find_action,
    runnable_actions,
)
from macos_tweaks.core.classifier import PlanKind


def test_indented_run_belongs_to_nearest_header():
    category = Category("Test", "", [
        Action("H1", "header"),
        Action("  opt1", "", "echo 1"),
        Action("  opt2", "", "echo 2"),
        Action("H2", "header"),
        Action("  opt3", "", "echo 3"),
    ])

    node = build_category(category)

    assert [e.name for e in node.entries] == ["H1", "H2"]
    h1, h2 = node.entries
    assert isinstance(h1, Header)
    assert [c.action.display_name for c in h1.children] == ["opt1", "opt2"]
    assert [c.action.display_name for c in h2.children] == ["opt3"]


def test_top_level_leaf_is_kept_as_leaf():
    node = build_category(Category("Net", "", [Action("Flush DNS Cache", "", "sudo flush")]))

    (entry,) = node.entries
    assert isinstance(entry, Leaf)
    assert entry.plan.kind is PlanKind.HANDOFF_RUN


def test_indented_action_without_header_is_rejected():
    with pytest.raises(CatalogError, match="no header"):
        build_category(Category("Bad", "", [Action("  orphan", "", "echo")]))


def test_indented_action_after_runnable_action_is_rejected():
    category = Category("Bad", "", [
        Action("H", "header"),
        Action("  ok", "", "echo ok"),
        Action("Standalone", "", "echo standalone"),
        Action("  stray", "", "echo stray"),
    ])
    with pytest.raises(CatalogError):
        build_category(category)


def test_unknown_sentinel_is_rejected():
    with pytest.raises(CatalogError, match="__NOPE__"):
        build_tree([Category("Bad", "", [Action("X", "", "__NOPE__")])])


def test_empty_category_builds_empty_node():
    (node,) = build_tree([Category("Empty", "", [])])
    assert node.is_empty
    assert node.entries == []


def test_find_action_is_trimmed_and_case_insensitive(categories):
    action = find_action(categories, "  small (32PX) ")
    assert action is not None
    assert action.name == "  Small (32px)"
    assert find_action(categories, "does not exist") is None


def test_runnable_actions_skip_headers_and_builtins(categories):
    brew = categories[4]
    assert runnable_actions(brew) == []

    dock = categories[0]
    assert [a.display_name for a in runnable_actions(dock)] == [
        "Small (32px)",
        "Large (64px)",
        "Add Small Spacer",
    ]
