"""Dock size, behaviour and spacer tweaks."""
from macos_tweaks.core.catalog import Action, Category


def get_category() -> Category:
    return Category(
        name="Dock",
        description="Customize macOS Dock settings",
        actions=[
            Action("Dock Size", "Change the size of Dock icons"),
            Action("  Small (32px)", "Set Dock icon size to small",
                   "defaults write com.apple.dock tilesize -int 32 && killall Dock",
                   "defaults delete com.apple.dock tilesize && killall Dock"),
            Action("  Medium (48px)", "Set Dock icon size to medium",
                   "defaults write com.apple.dock tilesize -int 48 && killall Dock",
                   "defaults delete com.apple.dock tilesize && killall Dock"),
            Action("  Large (64px)", "Set Dock icon size to large",
                   "defaults write com.apple.dock tilesize -int 64 && killall Dock",
                   "defaults delete com.apple.dock tilesize && killall Dock"),
            Action("Dock Behavior", "Configure Dock behavior settings"),
            Action("  Disable Magnification", "Disable dock magnification effect",
                   "defaults write com.apple.dock magnification -bool false && killall Dock",
                   "defaults write com.apple.dock magnification -bool true && killall Dock"),
            Action("  Auto-hide Dock", "Auto-hide the dock",
                   "defaults write com.apple.dock autohide -bool true && killall Dock",
                   "defaults write com.apple.dock autohide -bool false && killall Dock"),
            Action("Dock Spacers", "Manage Dock spacers and organization"),
            Action("  Add Small Spacer", "Add a small spacer tile to the Dock",
                   "defaults write com.apple.dock persistent-apps -array-add "
                   "'{\"tile-type\"=\"small-spacer-tile\";}' && killall Dock"),
            Action("  Remove All Spacers", "Remove all small spacers from the Dock",
                   "defaults write com.apple.dock persistent-apps -array '()' && killall Dock"),
            Action("Reset Options", "Reset Dock to default settings"),
            Action("  Reset Dock to Default", "Reset Dock to its default settings",
                   "defaults delete com.apple.dock && killall Dock"),
        ],
    )
