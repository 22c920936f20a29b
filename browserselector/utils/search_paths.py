"""Search configuration loader.

Loads the ordered list of application directories and the matching rules
from a YAML file. The packaged data/search-paths.yaml is the default; a
user copy can replace it.

Lookup order for the active file:
    1. An explicit path (the --config option)
    2. $BROWSER_SELECTOR_CONFIG
    3. $XDG_CONFIG_HOME/browser-selector/search-paths.yaml, if it exists
    4. The packaged default

Keys missing from the file keep their built-in defaults from
utils.constants, so a user file may override just `search_dirs`.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .constants import (
    DEFAULT_CAPABILITY_MARKER,
    DEFAULT_SEARCH_DIRS,
    DEFAULT_SELF_DESKTOP_FILES,
    MATCH_MODES,
)

CONFIG_ENV_VAR = "BROWSER_SELECTOR_CONFIG"
CONFIG_FILENAME = "search-paths.yaml"


class SearchPathConfigError(ValueError):
    """Raised when a search configuration file is malformed."""
    pass


@dataclass
class SearchConfig:
    """Resolved search configuration.

    Attributes:
        search_dirs: Directories to scan, in order, already expanded
        self_desktop_files: Base filenames that are never candidates (always
            includes our own desktop files)
        capability_marker: MIME type that marks an entry as a browser
        match_mode: 'lenient' (substring) or 'strict' (MimeType= element)
        dialog_timeout: Seconds before the dialog gives up, or None
        source: File the configuration was read from, None for built-ins
    """
    search_dirs: list[Path] = field(default_factory=list)
    self_desktop_files: list[str] = field(default_factory=list)
    capability_marker: str = DEFAULT_CAPABILITY_MARKER
    match_mode: str = "lenient"
    dialog_timeout: Optional[int] = None
    source: Optional[Path] = None

    @property
    def strict(self) -> bool:
        return self.match_mode == "strict"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "search_dirs": [str(d) for d in self.search_dirs],
            "self_desktop_files": list(self.self_desktop_files),
            "capability_marker": self.capability_marker,
            "match_mode": self.match_mode,
            "dialog_timeout": self.dialog_timeout,
            "source": str(self.source) if self.source else None,
        }


def expand_dir(raw: str) -> Path:
    """Expand `~` and $VARIABLES in a configured directory."""
    return Path(os.path.expandvars(raw)).expanduser()


def get_default_config_path() -> Path:
    """Get the path to the packaged search-paths.yaml."""
    # Navigate from utils/ up to the package root, then to data/
    module_dir = Path(__file__).parent
    return module_dir.parent / "data" / CONFIG_FILENAME


def get_user_config_path() -> Path:
    """Get the per-user configuration path under $XDG_CONFIG_HOME.

    Returns:
        Path to the user file (may not exist)
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_config).expanduser() if xdg_config else Path.home() / ".config"
    return base / "browser-selector" / CONFIG_FILENAME


def find_config_path(explicit: Optional[Path] = None) -> Path:
    """Pick the configuration file to load.

    Args:
        explicit: Path given on the command line, if any

    Returns:
        The first candidate from the lookup order described above
    """
    if explicit is not None:
        return Path(explicit).expanduser()

    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path).expanduser()

    user_path = get_user_config_path()
    if user_path.is_file():
        return user_path

    return get_default_config_path()


def _string_list(data: dict[str, Any], key: str, default: list[str], source: Optional[Path]) -> list[str]:
    value = data.get(key)
    if value is None:
        return list(default)
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise SearchPathConfigError(f"'{key}' in {source} must be a list of strings")
    return value


def parse_search_config(data: Optional[dict[str, Any]], source: Optional[Path] = None) -> SearchConfig:
    """Validate raw YAML data and build a SearchConfig.

    Args:
        data: Mapping loaded from YAML (None for an empty file)
        source: File the data came from, for error messages

    Returns:
        SearchConfig with defaults filled in

    Raises:
        SearchPathConfigError: If a key has the wrong type or value
    """
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise SearchPathConfigError(f"Top level of {source} must be a mapping")

    search_dirs = _string_list(data, "search_dirs", DEFAULT_SEARCH_DIRS, source)
    # Configured names extend the built-in ones, never replace them
    self_files = list(DEFAULT_SELF_DESKTOP_FILES)
    for name in _string_list(data, "self_desktop_files", [], source):
        if name not in self_files:
            self_files.append(name)

    marker = data.get("capability_marker") or DEFAULT_CAPABILITY_MARKER
    if not isinstance(marker, str):
        raise SearchPathConfigError(f"'capability_marker' in {source} must be a string")

    match_mode = data.get("match_mode") or "lenient"
    if match_mode not in MATCH_MODES:
        raise SearchPathConfigError(
            f"'match_mode' in {source} must be one of {', '.join(MATCH_MODES)}, got {match_mode!r}"
        )

    timeout = data.get("dialog_timeout")
    if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout <= 0):
        raise SearchPathConfigError(f"'dialog_timeout' in {source} must be a positive integer or null")

    return SearchConfig(
        search_dirs=[expand_dir(d) for d in search_dirs],
        self_desktop_files=self_files,
        capability_marker=marker,
        match_mode=match_mode,
        dialog_timeout=timeout,
        source=source,
    )


def load_search_config(config_path: Optional[Path] = None) -> SearchConfig:
    """Load the active search configuration.

    Args:
        config_path: Explicit configuration file (skips the lookup order)

    Returns:
        SearchConfig ready for the catalog

    Raises:
        FileNotFoundError: If an explicitly requested file doesn't exist
        SearchPathConfigError: If the file is malformed
    """
    path = find_config_path(config_path)

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SearchPathConfigError(f"Invalid YAML in {path}: {e}") from e

    return parse_search_config(data, source=path)


def default_search_config() -> SearchConfig:
    """Built-in configuration without reading any file."""
    return parse_search_config({})
