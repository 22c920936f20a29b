"""Desktop integration: register Browser Selector as a web browser.

Writes our own .desktop file into the user's applications directory so
the desktop can route http/https links to us, refreshes the desktop
database, and optionally makes us the default browser through
xdg-settings.

Installed files:
    ~/.local/share/applications/browser-selector.desktop      (terminal menu)
    ~/.local/share/applications/browser-selector-gui.desktop  (zenity dialog)

These file names are exactly the ones the scanner always skips.
"""

import os
import shutil
import subprocess
import sys
from pathlib import Path
from typing import Any, Optional

from ..utils.constants import (
    DESKTOP_FILE_MODE,
    GUI_DESKTOP_FILE,
    TIMEOUT_DESKTOP_INTEGRATION,
    TUI_DESKTOP_FILE,
)

HANDLED_MIME_TYPES = [
    "x-scheme-handler/http",
    "x-scheme-handler/https",
    "x-scheme-handler/ftp",
    "text/html",
    "application/xhtml+xml",
]


class DesktopIntegrationError(OSError):
    """Raised when the desktop file can't be written."""
    pass


def get_applications_dir() -> Path:
    """Get the per-user applications directory.

    Returns:
        $XDG_DATA_HOME/applications (default: ~/.local/share/applications)
    """
    xdg_data = os.environ.get("XDG_DATA_HOME")
    base = Path(xdg_data).expanduser() if xdg_data else Path.home() / ".local" / "share"
    return base / "applications"


def desktop_file_name(gui: bool) -> str:
    return GUI_DESKTOP_FILE if gui else TUI_DESKTOP_FILE


def default_exec_command() -> str:
    """Command line that starts this tool.

    Prefers the installed console script; falls back to running the
    package with the current interpreter.
    """
    script = shutil.which("browser-selector")
    if script:
        return script
    return f"{sys.executable} -m browserselector"


def render_desktop_entry(exec_command: str, gui: bool = False) -> str:
    """Render the .desktop file text.

    Args:
        exec_command: Program (and options) that starts the selector
        gui: Render the zenity variant

    Returns:
        Desktop entry text ending with a newline
    """
    if gui:
        name = "Browser Selector (GUI)"
        comment = "Select which browser to use when opening URLs (GUI version)"
        exec_line = f"{exec_command} --gui %U"
    else:
        name = "Browser Selector"
        comment = "Select which browser to use when opening URLs"
        exec_line = f"{exec_command} %U"

    lines = [
        "[Desktop Entry]",
        "Version=1.0",
        f"Name={name}",
        "GenericName=Web Browser Selector",
        f"Comment={comment}",
        f"Exec={exec_line}",
        "Icon=web-browser",
        f"Terminal={'false' if gui else 'true'}",
        "Type=Application",
        "Categories=Network;WebBrowser;System;",
        f"MimeType={';'.join(HANDLED_MIME_TYPES)};",
        f"StartupNotify={'true' if gui else 'false'}",
        "NoDisplay=false",
    ]
    return "\n".join(lines) + "\n"


def install_desktop_entry(
    applications_dir: Path,
    exec_command: str,
    gui: bool = False,
) -> Path:
    """Write our desktop file.

    Args:
        applications_dir: Target directory (created if missing)
        exec_command: Program that starts the selector
        gui: Install the zenity variant

    Returns:
        Path to the written file

    Raises:
        DesktopIntegrationError: If the directory or file can't be written
    """
    target = applications_dir / desktop_file_name(gui)
    try:
        applications_dir.mkdir(parents=True, exist_ok=True)
        target.write_text(render_desktop_entry(exec_command, gui), encoding="utf-8")
        target.chmod(DESKTOP_FILE_MODE)
    except OSError as e:
        raise DesktopIntegrationError(f"Cannot write {target}: {e}") from e
    return target


def update_desktop_database(applications_dir: Path) -> tuple[bool, Optional[str]]:
    """Refresh the MIME cache for an applications directory.

    Returns:
        Tuple of (success, warning_message)
    """
    if shutil.which("update-desktop-database") is None:
        return False, "update-desktop-database not found, skipping (non-critical)"

    try:
        result = subprocess.run(
            ["update-desktop-database", str(applications_dir)],
            capture_output=True,
            text=True,
            timeout=TIMEOUT_DESKTOP_INTEGRATION,
        )
    except subprocess.TimeoutExpired:
        return False, "Timeout updating desktop database (non-critical)"
    except OSError as e:
        return False, f"Failed to update desktop database (non-critical): {e}"

    if result.returncode != 0:
        return False, "Failed to update desktop database (non-critical)"
    return True, None


def set_default_browser(desktop_name: str) -> tuple[bool, Optional[str]]:
    """Make a desktop entry the default web browser.

    Returns:
        Tuple of (success, error_message)
    """
    if shutil.which("xdg-settings") is None:
        return False, "xdg-settings not found. Cannot set as default browser automatically."

    try:
        result = subprocess.run(
            ["xdg-settings", "set", "default-web-browser", desktop_name],
            capture_output=True,
            text=True,
            timeout=TIMEOUT_DESKTOP_INTEGRATION,
        )
    except subprocess.TimeoutExpired:
        return False, "Timeout running xdg-settings"
    except OSError as e:
        return False, f"Failed to run xdg-settings: {e}"

    if result.returncode != 0:
        return False, (
            "Failed to set as default browser. You can set it manually with:\n"
            f"xdg-settings set default-web-browser {desktop_name}"
        )
    return True, None


def install(
    gui: bool = False,
    set_default: bool = False,
    applications_dir: Optional[Path] = None,
    exec_command: Optional[str] = None,
) -> dict[str, Any]:
    """Run the complete desktop integration.

    Args:
        gui: Install the zenity variant
        set_default: Also register as default web browser
        applications_dir: Target directory (default: get_applications_dir())
        exec_command: Program that starts the selector (default: default_exec_command())

    Returns:
        Dictionary with 'status', 'desktop_file', 'default_browser',
        'warnings' and 'errors'
    """
    applications_dir = applications_dir or get_applications_dir()
    exec_command = exec_command or default_exec_command()
    desktop_name = desktop_file_name(gui)

    results: dict[str, Any] = {
        "status": "success",
        "desktop_file": None,
        "default_browser": False,
        "warnings": [],
        "errors": [],
    }

    try:
        results["desktop_file"] = str(install_desktop_entry(applications_dir, exec_command, gui))
    except DesktopIntegrationError as e:
        results["status"] = "error"
        results["errors"].append(str(e))
        return results

    updated, warning = update_desktop_database(applications_dir)
    if not updated:
        results["warnings"].append(warning)

    if set_default:
        ok, error = set_default_browser(desktop_name)
        results["default_browser"] = ok
        if not ok:
            results["status"] = "partial"
            results["errors"].append(error)

    return results
