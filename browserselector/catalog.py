"""BrowserCatalog: the one place the menu and the dialog get browsers from.

Binds a SearchConfig to the scanner and resolver so presentation code
never has to pass directories or markers around.

Example:
    >>> catalog = BrowserCatalog()
    >>> for candidate in catalog.require_candidates():
    ...     print(candidate.name, catalog.resolve(candidate.path))
"""

from pathlib import Path
from typing import Any, Optional, Union

from .scanners.desktop_entries import Candidate, read_desktop_entry, scan_directories
from .scanners.exec_command import (
    EntryNotFoundError,
    NoLaunchTemplateError,
    resolve_command_line,
    resolve_exec_command,
)
from .utils.search_paths import SearchConfig, load_search_config


class NoCandidatesError(LookupError):
    """Raised when no installed browser could be found."""
    pass


class BrowserCatalog:
    """Scan for browsers and resolve their launch commands.

    Holds no state beyond its configuration: every scan() walks the
    directories again and every resolve() re-reads the file.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """Initialize the catalog.

        Args:
            config: Search configuration (loads the active file if not given)
        """
        self.config = config or load_search_config()

    def scan(self) -> list[Candidate]:
        """Return all installed browsers, sorted and deduplicated."""
        return scan_directories(
            self.config.search_dirs,
            self.config.self_desktop_files,
            self.config.capability_marker,
            self.config.strict,
        )

    def require_candidates(self) -> list[Candidate]:
        """Like scan(), but an empty result is an error.

        Raises:
            NoCandidatesError: If no browser was found
        """
        candidates = self.scan()
        if not candidates:
            raise NoCandidatesError("No web browsers found.")
        return candidates

    def resolve(self, desktop_file: Union[str, Path]) -> list[str]:
        """Resolve a candidate's desktop file to an argument list."""
        return resolve_exec_command(desktop_file)

    def command_line(self, desktop_file: Union[str, Path]) -> str:
        """Resolve a candidate's desktop file to a display string."""
        return resolve_command_line(desktop_file)

    def icon_for(self, desktop_file: Union[str, Path]) -> Optional[str]:
        """Return the Icon= value of a desktop file, if readable."""
        entry = read_desktop_entry(Path(desktop_file))
        return entry.icon if entry else None

    def describe(self) -> dict[str, Any]:
        """Scan and resolve everything, for --list output.

        Resolution errors are recorded per browser instead of raised.

        Returns:
            Dictionary with 'browsers', 'count', 'errors' and 'config'
        """
        browsers = []
        errors = []

        for candidate in self.scan():
            item: dict[str, Any] = {
                "name": candidate.name,
                "path": str(candidate.path),
                "command": None,
            }
            try:
                item["command"] = self.command_line(candidate.path)
            except (EntryNotFoundError, NoLaunchTemplateError) as e:
                errors.append({"path": str(candidate.path), "error": str(e)})
            browsers.append(item)

        return {
            "browsers": browsers,
            "count": len(browsers),
            "errors": errors,
            "config": self.config.to_dict(),
        }
