from macos_tweaks.core.catalog import Action, Category

ABOUT_TEXT = (
    "macOS Tweaks - A terminal-based GUI for managing macOS system tweaks and optimizations.\\n\\n"
    "Built with Python, Textual and Rich.\\n\\n"
    "Features:\\n"
    "- Drill-down menu with organized categories\\n"
    "- Typed confirmation for destructive actions\\n"
    "- Real-time status updates\\n"
    "- Customizable color schemes\\n"
    "- Scriptable list/apply/revert commands\\n\\n"
    "License: MIT"
)

DEPENDENCIES_TEXT = (
    "Dependencies:\\n"
    "- Python 3.9+\\n"
    "- textual (terminal UI framework)\\n"
    "- rich (terminal rendering)\\n"
    "- PyYAML (configuration)"
)


def get_category() -> Category:
    return Category(
        name="About",
        description="Application information and system details",
        actions=[
            Action("Application Info", "Information about this application"),
            Action("  Version", "Show application version", "__SHOW_VERSION__"),
            Action("  About", "Show detailed information about the application",
                   f"printf '{ABOUT_TEXT}\\n'"),
            Action("  System Information", "Show system information",
                   "sw_vers && echo '\\n---\\n' && system_profiler SPHardwareDataType "
                   "| grep -E '(Model Name|Model Identifier|Processor|Memory|Serial Number)'"),
            Action("  Dependencies", "Show application dependencies",
                   f"printf '{DEPENDENCIES_TEXT}\\n'"),
            Action("Extras", "Things that are not tweaks"),
            Action("  Grid Puzzle", "Walk @ to * with the arrow keys", "__PUZZLE__"),
        ],
    )
