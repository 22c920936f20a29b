"""Centralized constants for Browser Selector.

Provides the desktop entry keys, placeholder codes and subprocess timeouts
used throughout the codebase. Values that users are expected to change
(search directories, the capability marker) live in search-paths.yaml
instead; the defaults here are only used when that file omits a key.
"""

# =============================================================================
# DESKTOP ENTRY KEYS
# =============================================================================

NAME_KEY = "Name="
EXEC_KEY = "Exec="
MIME_TYPE_KEY = "MimeType="
ICON_KEY = "Icon="

DESKTOP_FILE_PATTERN = "*.desktop"

# Field codes stripped from Exec= lines. Matching is case-sensitive.
# See the Desktop Entry Specification, "The Exec key".
PLACEHOLDER_CODES = "uUfFdDnNickvm"

# =============================================================================
# DEFAULT SEARCH CONFIGURATION
# =============================================================================

# Marker for entries that can open http links
DEFAULT_CAPABILITY_MARKER = "x-scheme-handler/http"

# System, local, user, then the two Flatpak export locations
DEFAULT_SEARCH_DIRS = [
    "/usr/share/applications",
    "/usr/local/share/applications",
    "~/.local/share/applications",
    "/var/lib/flatpak/exports/share/applications",
    "~/.local/share/flatpak/exports/share/applications",
]

# Our own desktop entries, never offered as browsers
TUI_DESKTOP_FILE = "browser-selector.desktop"
GUI_DESKTOP_FILE = "browser-selector-gui.desktop"
DEFAULT_SELF_DESKTOP_FILES = [TUI_DESKTOP_FILE, GUI_DESKTOP_FILE]

MATCH_MODES = ("lenient", "strict")

# =============================================================================
# SUBPROCESS TIMEOUTS (in seconds)
# =============================================================================

# Version checks and `command --help` probes
TIMEOUT_PREREQUISITE = 10

# update-desktop-database, xdg-settings
TIMEOUT_DESKTOP_INTEGRATION = 30

# How long the "Opening ..." notification stays visible
NOTIFICATION_TIMEOUT = 3

# =============================================================================
# DISPLAY
# =============================================================================

# URLs longer than this are shortened in the dialog text
URL_DISPLAY_MAX = 60
URL_DISPLAY_HEAD = 40
URL_DISPLAY_TAIL = 15

# =============================================================================
# PERMISSION MODES
# =============================================================================

# Installed desktop entries must be world-readable for the desktop database
DESKTOP_FILE_MODE = 0o644
