"""Sleep timers. All of these need sudo and run attached to the terminal."""
from macos_tweaks.core.catalog import Action, Category


def _sleep(target: str, label: str, value: str, default: str) -> Action:
    if value == "Never":
        description = f"Prevent {target} from sleeping"
    else:
        description = f"Set {target} sleep timer to {label}"
    return Action(
        f"  {label}",
        description,
        f"sudo systemsetup -set{target}sleep {value}",
        f"sudo systemsetup -set{target}sleep {default}",
    )


def get_category() -> Category:
    return Category(
        name="Power Management",
        description="Configure sleep and power settings",
        actions=[
            Action("Computer Sleep", "Adjust computer sleep settings"),
            _sleep("computer", "Computer Never Sleeps", "Never", "15"),
            _sleep("computer", "15 minutes (Default)", "15", "15"),
            _sleep("computer", "30 minutes", "30", "15"),
            _sleep("computer", "1 hour", "60", "15"),
            Action("Display Sleep", "Adjust display sleep settings"),
            _sleep("display", "5 minutes", "5", "10"),
            _sleep("display", "10 minutes (Default)", "10", "10"),
            _sleep("display", "15 minutes", "15", "10"),
            _sleep("display", "Display Never Sleeps", "Never", "10"),
        ],
    )
