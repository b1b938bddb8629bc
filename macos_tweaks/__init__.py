"""macOS Tweaks - browse and apply macOS system tweaks from the terminal."""

from .core.catalog import Action, Category, CatalogError, build_tree, find_action
from .core.classifier import ExecutionPlan, PlanKind, classify
from .core.config import TweaksConfig, load as load_config
from .core.session import Session

__version__ = "0.3.0"
__all__ = [
    "Action",
    "Category",
    "CatalogError",
    "build_tree",
    "find_action",
    "ExecutionPlan",
    "PlanKind",
    "classify",
    "TweaksConfig",
    "load_config",
    "Session",
]
