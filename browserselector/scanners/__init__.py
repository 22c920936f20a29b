"""Scanner modules for discovering installed browsers.

Modules:
    desktop_entries: Scan application directories for http-capable .desktop files
    exec_command: Turn a .desktop file's Exec= line into an argument list
"""

from .desktop_entries import (
    Candidate,
    DesktopEntry,
    first_value,
    parse_desktop_entry,
    read_desktop_entry,
    scan_directories,
)
from .exec_command import (
    EntryNotFoundError,
    NoLaunchTemplateError,
    read_launch_template,
    resolve_command_line,
    resolve_exec_command,
    strip_placeholders,
)

__all__ = [
    # desktop_entries
    "Candidate",
    "DesktopEntry",
    "first_value",
    "parse_desktop_entry",
    "read_desktop_entry",
    "scan_directories",
    # exec_command
    "EntryNotFoundError",
    "NoLaunchTemplateError",
    "read_launch_template",
    "resolve_command_line",
    "resolve_exec_command",
    "strip_placeholders",
]
