"""Cache cleanup, Desktop organisation and disk usage helpers."""
from pathlib import Path

from macos_tweaks.core.catalog import Action, Category

ORGANIZE_SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "organize_projects.sh"

_FIND_DESKTOP = "find ~/Desktop -maxdepth 1 -type f"


def get_category() -> Category:
    return Category(
        name="Optimization",
        description="Apply system performance tweaks",
        actions=[
            Action("Clean Up Caches", "Remove temporary cache files"),
            Action("  Clear User Cache (destructive)", "Removes all files from ~/Library/Caches",
                   "rm -rf ~/Library/Caches/*"),
            Action("  Clear System Cache (destructive)", "Removes all files from /Library/Caches",
                   "sudo rm -rf /Library/Caches/*"),

            Action("Organize Desktop", "Move files from Desktop to organized folders"),
            Action("  Move screenshots to Pictures folder",
                   "Finds all screenshots on Desktop and moves them to ~/Pictures/Screenshots",
                   "mkdir -p ~/Pictures/Screenshots && find ~/Desktop -maxdepth 1 "
                   "\\( -name 'Screen Shot*.png' -o -name 'Screenshot*.png' \\) "
                   "-exec mv -n {} ~/Pictures/Screenshots/ \\;"),
            Action("  Move project folders to ~/Developer",
                   "Moves folders with .git, .gitignore, or source code",
                   f"zsh '{ORGANIZE_SCRIPT}'"),
            Action("  Move images to ~/Pictures", "Moves common image files from Desktop to Pictures",
                   f"{_FIND_DESKTOP} \\( -iname '*.png' -o -iname '*.jpg' -o -iname '*.jpeg' "
                   "-o -iname '*.gif' \\) -exec mv -n {} ~/Pictures/ \\;"),
            Action("  Move videos to ~/Movies", "Moves common video files from Desktop to Movies",
                   f"{_FIND_DESKTOP} \\( -iname '*.mov' -o -iname '*.mp4' \\) -exec mv -n {{}} ~/Movies/ \\;"),
            Action("  Move documents to ~/Documents", "Moves common document files from Desktop to Documents",
                   f"{_FIND_DESKTOP} \\( -iname '*.pdf' -o -iname '*.docx' \\) -exec mv -n {{}} ~/Documents/ \\;"),

            Action("Screenshots", "Screenshot naming and format"),
            Action("  Set Screenshot Name Prefix", "Text to use instead of 'Screenshot' in file names",
                   "__PROMPT__:defaults write com.apple.screencapture name \"{}\" && killall SystemUIServer",
                   "defaults delete com.apple.screencapture name && killall SystemUIServer"),
            Action("  Save Screenshots as JPG", "Use JPG instead of PNG for screenshots",
                   "defaults write com.apple.screencapture type jpg && killall SystemUIServer",
                   "defaults write com.apple.screencapture type png && killall SystemUIServer"),

            Action("Find Large Files", "Identify large files to free up space"),
            Action("  List 10 largest files in Home",
                   "Shows a list of the 10 biggest files in your home directory.",
                   "echo 'Large files in home directory:' && ls -lah ~ | grep -v '^d' | sort -k5 -hr | head -n 10"),
            Action("  Count files on Desktop", "Count the regular files sitting on the Desktop",
                   f"{_FIND_DESKTOP} | wc -l"),
        ],
    )
