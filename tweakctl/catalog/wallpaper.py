from macos_tweaks.core.catalog import Action, Category


def get_category() -> Category:
    return Category(
        name="Animated Wallpapers",
        description="Enable animated wallpapers",
        actions=[
            Action("Video Wallpaper (mpv)", "Set a video as your wallpaper (requires mpv)"),
            Action("  Play video as wallpaper (experimental)",
                   "Play ~/Movies/wallpaper.mp4 as wallpaper (requires mpv)",
                   "mpv --wid=$(osascript -e 'tell application \"Finder\" to get id of window 1') "
                   "--loop --no-border --geometry=100%:100% --panscan=1.0 --no-osc "
                   "--no-input-default-bindings --no-audio ~/Movies/wallpaper.mp4",
                   "pkill -x mpv"),
        ],
    )
