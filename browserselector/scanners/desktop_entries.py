"""Scanner for installed web browsers.

Scans the freedesktop application directories for .desktop files that
declare they can open http links, and returns (name, path) candidates.

Matching is deliberately loose: an entry qualifies when the capability
marker appears anywhere in the file, the same way `grep -q` would find it.
Entries with unusually formatted MimeType= lines are still found. Strict
mode checks the MimeType= list element by element instead.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, NamedTuple, Optional

from ..utils.constants import (
    DEFAULT_CAPABILITY_MARKER,
    DEFAULT_SELF_DESKTOP_FILES,
    DESKTOP_FILE_PATTERN,
    EXEC_KEY,
    ICON_KEY,
    MIME_TYPE_KEY,
    NAME_KEY,
)


class Candidate(NamedTuple):
    """A browser the user can pick."""
    name: str
    path: Path


@dataclass
class DesktopEntry:
    """The parts of a .desktop file the selector cares about.

    Only the first occurrence of each key is kept, so keys from
    [Desktop Action ...] groups further down never override the main entry.

    Attributes:
        source_path: File the entry was read from
        display_name: Value of the first Name= line
        launch_template: Value of the first Exec= line
        icon: Value of the first Icon= line
        declared_mime_types: Elements of the first MimeType= line
        raw_content: Full file text
    """
    source_path: Path
    display_name: Optional[str] = None
    launch_template: Optional[str] = None
    icon: Optional[str] = None
    declared_mime_types: list[str] = field(default_factory=list)
    raw_content: str = ""

    def handles(self, marker: str = DEFAULT_CAPABILITY_MARKER, strict: bool = False) -> bool:
        """Check if this entry declares the capability marker.

        Args:
            marker: MIME type to look for
            strict: Require an exact MimeType= element instead of a substring

        Returns:
            True if the entry is eligible
        """
        if strict:
            return marker in self.declared_mime_types
        return marker in self.raw_content


def first_value(content: str, key: str) -> Optional[str]:
    """Return the text after `key` on the first line that starts with it.

    The value is kept verbatim, including any surrounding whitespace.
    Lines are split on "\n" only; a trailing "\r" is dropped.
    """
    for line in content.split("\n"):
        line = line.removesuffix("\r")
        if line.startswith(key):
            return line[len(key):]
    return None


def parse_desktop_entry(path: Path, content: str) -> DesktopEntry:
    """Build a DesktopEntry from file content."""
    mime_line = first_value(content, MIME_TYPE_KEY)
    mime_types = [m.strip() for m in mime_line.split(";") if m.strip()] if mime_line else []

    return DesktopEntry(
        source_path=path,
        display_name=first_value(content, NAME_KEY),
        launch_template=first_value(content, EXEC_KEY),
        icon=first_value(content, ICON_KEY),
        declared_mime_types=mime_types,
        raw_content=content,
    )


def read_desktop_entry(path: Path) -> Optional[DesktopEntry]:
    """Read and parse a .desktop file.

    Args:
        path: Path to the .desktop file

    Returns:
        DesktopEntry, or None if the file can't be read
    """
    try:
        content = path.read_text(encoding="utf-8", errors="replace")
    except (PermissionError, OSError):
        return None
    return parse_desktop_entry(path, content)


def _scan_directory(
    directory: Path,
    excluded_names: frozenset[str],
    marker: str,
    strict: bool,
) -> list[Candidate]:
    """Collect candidates from a single directory (non-recursive)."""
    if not directory.is_dir():
        return []

    try:
        paths = list(directory.glob(DESKTOP_FILE_PATTERN))
    except (PermissionError, OSError):
        return []

    candidates = []
    for path in paths:
        # Skip our own desktop files before reading anything
        if path.name in excluded_names:
            continue

        # is_file() follows symlinks; Flatpak exports are symlinks
        if not path.is_file():
            continue

        entry = read_desktop_entry(path)
        if entry is None or not entry.handles(marker, strict):
            continue

        if not entry.display_name:
            continue

        candidates.append(Candidate(entry.display_name, path))

    return candidates


def scan_directories(
    directories: Iterable[Path],
    excluded_names: Iterable[str] = (),
    marker: str = DEFAULT_CAPABILITY_MARKER,
    strict: bool = False,
) -> list[Candidate]:
    """Scan directories for browser desktop entries.

    Args:
        directories: Directories to scan, in order
        excluded_names: Extra base filenames that are never candidates; our
            own desktop files are always excluded
        marker: MIME type that marks an entry as a browser
        strict: Match the marker against MimeType= elements only

    Returns:
        Candidates sorted by (name, path) with exact duplicates removed.
        Empty if nothing qualifies.
    """
    excluded = frozenset(DEFAULT_SELF_DESKTOP_FILES).union(excluded_names)

    found: list[Candidate] = []
    for directory in directories:
        found.extend(_scan_directory(Path(directory), excluded, marker, strict))

    return sorted(set(found))


if __name__ == "__main__":
    import json

    from ..utils.search_paths import load_search_config

    config = load_search_config()
    result = scan_directories(
        config.search_dirs,
        config.self_desktop_files,
        config.capability_marker,
        config.strict,
    )
    print(json.dumps([{"name": c.name, "path": str(c.path)} for c in result], indent=2))
