"""Icon names for the selection dialog."""

import shutil
from pathlib import Path
from typing import Optional

DEFAULT_ICON = "web-browser"

# Checked in order against the desktop file name
KNOWN_BROWSER_ICONS = [
    ("firefox", "firefox"),
    ("chrome", "google-chrome"),
    ("chromium", "google-chrome"),
    ("edge", "microsoft-edge"),
    ("brave", "brave-browser"),
    ("vivaldi", "vivaldi"),
    ("opera", "opera"),
    ("epiphany", "org.gnome.Epiphany"),
    ("zen", "zen-browser"),
]


def guess_icon(desktop_file: Path) -> str:
    """Guess a themed icon name from a desktop file name."""
    stem = Path(desktop_file).stem
    for fragment, icon in KNOWN_BROWSER_ICONS:
        if fragment in stem:
            return icon
    return DEFAULT_ICON


def get_browser_icon(desktop_file: Path, declared_icon: Optional[str]) -> str:
    """Pick the icon to show for a browser.

    Uses the entry's own Icon= value when there is one and the GTK icon
    cache tooling is present; otherwise falls back to a guess from the
    file name.

    Args:
        desktop_file: Path to the browser's .desktop file
        declared_icon: Icon= value from that file, if any

    Returns:
        Icon name or path
    """
    if declared_icon and shutil.which("gtk-update-icon-cache"):
        return declared_icon
    return guess_icon(desktop_file)
