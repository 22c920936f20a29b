"""Launch command resolution for desktop entries.

Turns the Exec= line of a .desktop file into an argument list:

    Exec=/usr/bin/flatpak run --branch=stable --arch=x86_64 --command=firefox org.mozilla.firefox @@u %u @@
    ->
    ['/usr/bin/flatpak', 'run', '--branch=stable', '--arch=x86_64',
     '--command=firefox', 'org.mozilla.firefox', '@@u', '@@']

Field codes (%u, %U, %f, ...) are removed from the whole line before it
is split, so multi-word Flatpak invocations survive intact. The URL is
appended by the caller as one extra argument.

The file is re-read on every call; nothing is cached between scan and
resolve.
"""

import re
from pathlib import Path
from typing import Union

from ..utils.constants import EXEC_KEY, PLACEHOLDER_CODES
from .desktop_entries import first_value

_PLACEHOLDER_RE = re.compile(f"%[{PLACEHOLDER_CODES}]")
_WHITESPACE_RE = re.compile(r"\s+")


class EntryNotFoundError(LookupError):
    """Raised when a desktop entry vanished or can't be read."""
    pass


class NoLaunchTemplateError(LookupError):
    """Raised when a desktop entry has no usable Exec= line."""
    pass


def strip_placeholders(template: str) -> str:
    """Remove field codes and normalize whitespace.

    Args:
        template: Raw Exec= value

    Returns:
        Cleaned command line with single spaces and no leading or
        trailing whitespace

    Examples:
        >>> strip_placeholders("test-browser %U --new-window")
        'test-browser --new-window'
        >>> strip_placeholders("app %f  --flag %u   --x")
        'app --flag --x'
    """
    without_codes = _PLACEHOLDER_RE.sub("", template)
    return _WHITESPACE_RE.sub(" ", without_codes).strip()


def read_launch_template(desktop_file: Union[str, Path]) -> str:
    """Read the raw Exec= value from a desktop entry.

    Args:
        desktop_file: Path to the .desktop file

    Returns:
        Value of the first Exec= line

    Raises:
        EntryNotFoundError: If the file is missing, not a file, or unreadable
        NoLaunchTemplateError: If there is no Exec= line
    """
    path = Path(desktop_file)
    if not path.is_file():
        raise EntryNotFoundError(f"Desktop file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except (PermissionError, OSError) as e:
        raise EntryNotFoundError(f"Cannot read desktop file {path}: {e}") from e

    template = first_value(content, EXEC_KEY)
    if template is None:
        raise NoLaunchTemplateError(f"No Exec= line in {path}")

    return template


def resolve_command_line(desktop_file: Union[str, Path]) -> str:
    """Resolve a desktop entry to a cleaned command line string.

    Raises:
        EntryNotFoundError: If the file is missing or unreadable
        NoLaunchTemplateError: If Exec= is missing or empty after cleaning
    """
    command_line = strip_placeholders(read_launch_template(desktop_file))
    if not command_line:
        raise NoLaunchTemplateError(f"Exec= line in {desktop_file} is empty")
    return command_line


def resolve_exec_command(desktop_file: Union[str, Path]) -> list[str]:
    """Resolve a desktop entry to an argument list.

    Args:
        desktop_file: Path to the .desktop file

    Returns:
        Program followed by its arguments, placeholders removed

    Raises:
        EntryNotFoundError: If the file is missing or unreadable
        NoLaunchTemplateError: If Exec= is missing or empty after cleaning
    """
    return resolve_command_line(desktop_file).split(" ")
