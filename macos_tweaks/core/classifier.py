"""Command parsing and classification for catalog actions.

An action's ``enable_command`` is overloaded. ``parse_command`` turns it into
one of three explicit forms (``Shell``, ``Builtin``, ``PromptTemplate``) or
``None`` for a header, and ``classify`` derives the execution plan the
dispatcher follows.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

SENTINEL_PREFIX = "__"
PROMPT_PREFIX = "__PROMPT__:"
PLACEHOLDER = "{}"

DESTRUCTIVE_TAG = "(destructive)"
INTERACTIVE_TAG = "(interactive)"
ELEVATION_MARKER = "sudo"

# Name fragments of read-only / reporting actions; their output is shown.
INFO_MARKERS = (
    "List",
    "Show",
    "About",
    "Version",
    "Dependencies",
    "System Information",
    "Count",
    "Find",
)

# Actions that may be run any number of times and are never marked applied.
REPEATABLE_ACTIONS = ("Add Small Spacer",)


class BuiltinKind(Enum):
    VERSION = "__SHOW_VERSION__"
    CHECK_BREW = "__CHECK_BREW__"
    LIST_INSTALLED = "__LIST_INSTALLED__"
    LIST_OUTDATED = "__LIST_OUTDATED__"
    PUZZLE = "__PUZZLE__"


class PlanKind(Enum):
    BUILTIN = "builtin"
    PROMPT_THEN_RUN = "prompt"
    DRILL = "drill"
    CONFIRM_THEN_RUN = "confirm"
    HANDOFF_RUN = "handoff"
    CAPTURED_RUN = "captured"


class UnknownSentinelError(ValueError):
    """``enable_command`` uses the reserved prefix but names no built-in."""


@dataclass(frozen=True)
class Shell:
    command: str


@dataclass(frozen=True)
class Builtin:
    kind: BuiltinKind


@dataclass(frozen=True)
class PromptTemplate:
    template: str

    def fill(self, text: str) -> str:
        return self.template.replace(PLACEHOLDER, text, 1)


CommandForm = Union[Shell, Builtin, PromptTemplate]


@dataclass(frozen=True)
class ExecutionPlan:
    """How a leaf action is run."""

    kind: PlanKind
    command: str = ""
    builtin: Optional[BuiltinKind] = None
    template: str = ""
    destructive: bool = False
    interactive: bool = False
    info: bool = False
    repeatable: bool = False

    @property
    def runnable(self) -> bool:
        return self.kind is not PlanKind.DRILL


def parse_command(enable_command: str) -> Optional[CommandForm]:
    """Return the explicit form of ``enable_command``; ``None`` means header."""
    if not enable_command:
        return None
    if enable_command.startswith(PROMPT_PREFIX):
        return PromptTemplate(enable_command[len(PROMPT_PREFIX):])
    if enable_command.startswith(SENTINEL_PREFIX):
        try:
            return Builtin(BuiltinKind(enable_command))
        except ValueError:
            raise UnknownSentinelError(f"Unknown built-in command: {enable_command!r}") from None
    return Shell(enable_command)


def is_sentinel(enable_command: str) -> bool:
    return enable_command.startswith(SENTINEL_PREFIX)


def classify(name: str, enable_command: str) -> ExecutionPlan:
    """Classify an action. Checks run in a fixed order; the first match wins."""
    form = parse_command(enable_command)
    if isinstance(form, Builtin):
        return ExecutionPlan(PlanKind.BUILTIN, builtin=form.kind)
    if isinstance(form, PromptTemplate):
        return ExecutionPlan(PlanKind.PROMPT_THEN_RUN, template=form.template)
    if form is None:
        return ExecutionPlan(PlanKind.DRILL)

    destructive = DESTRUCTIVE_TAG in name
    interactive = ELEVATION_MARKER in enable_command or destructive or INTERACTIVE_TAG in name
    info = any(marker in name for marker in INFO_MARKERS)
    repeatable = any(entry in name for entry in REPEATABLE_ACTIONS)

    if destructive:
        kind = PlanKind.CONFIRM_THEN_RUN
    elif interactive:
        kind = PlanKind.HANDOFF_RUN
    else:
        kind = PlanKind.CAPTURED_RUN
    return ExecutionPlan(
        kind,
        command=enable_command,
        destructive=destructive,
        interactive=interactive,
        info=info,
        repeatable=repeatable,
    )
