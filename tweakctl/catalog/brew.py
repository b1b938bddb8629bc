"""Homebrew management.

The installed/outdated listings are built-ins that open a selectable list;
Enter on a package runs ``brew info`` or ``brew upgrade`` for it.
"""
from macos_tweaks.core.catalog import Action, Category

BREW_INSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/install.sh"
BREW_UNINSTALL_URL = "https://raw.githubusercontent.com/Homebrew/install/HEAD/uninstall.sh"


def get_category() -> Category:
    return Category(
        name="Brew Management",
        description="Manage Homebrew package manager",
        actions=[
            Action("Brew Installation", "Manage Homebrew installation"),
            Action("  Install Homebrew (interactive)", "Install Homebrew package manager",
                   f"curl -fsSL {BREW_INSTALL_URL} | bash"),
            Action("  Uninstall Homebrew (destructive)", "Remove Homebrew and all packages (destructive)",
                   f"curl -fsSL {BREW_UNINSTALL_URL} | bash"),
            Action("  Check Homebrew Status", "Check if Homebrew is installed and working", "__CHECK_BREW__"),

            Action("Brew Maintenance", "Maintain and update Homebrew"),
            Action("  Update Homebrew", "Update Homebrew and all packages", "brew update && brew upgrade"),
            Action("  Clean Up Homebrew", "Remove old versions and clean cache", "brew cleanup"),
            Action("  List Installed Packages", "View all installed Homebrew packages", "__LIST_INSTALLED__"),
            Action("  List Outdated Packages", "View packages that have updates available", "__LIST_OUTDATED__"),

            Action("Brew Analytics", "Manage Homebrew analytics"),
            Action("  Disable Analytics", "Disable Homebrew analytics collection",
                   "brew analytics off", "brew analytics on"),
            Action("  Enable Analytics", "Enable Homebrew analytics collection",
                   "brew analytics on", "brew analytics off"),
            Action("  Show Analytics Status", "Check if analytics are enabled", "brew analytics state"),
        ],
    )
