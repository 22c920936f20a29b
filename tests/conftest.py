"""Shared fixtures: fake application directories with .desktop files."""

from pathlib import Path

import pytest

from browserselector.utils.search_paths import SearchConfig

BROWSER_ENTRY = """[Desktop Entry]
Version=1.0
Name={name}
Exec={exec_line}
Icon={icon}
Type=Application
MimeType=text/html;x-scheme-handler/http;x-scheme-handler/https;
"""

EDITOR_ENTRY = """[Desktop Entry]
Name=Text Editor
Exec=gedit %U
Type=Application
MimeType=text/plain;
"""


def write_entry(directory: Path, filename: str, content: str) -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content)
    return path


def write_browser(directory: Path, filename: str, name: str,
                  exec_line: str = "browser %U", icon: str = "browser") -> Path:
    return write_entry(
        directory, filename,
        BROWSER_ENTRY.format(name=name, exec_line=exec_line, icon=icon),
    )


@pytest.fixture
def apps_dirs(tmp_path):
    """Two application directories: system and user."""
    system = tmp_path / "usr" / "share" / "applications"
    user = tmp_path / "home" / ".local" / "share" / "applications"
    system.mkdir(parents=True)
    user.mkdir(parents=True)
    return system, user


@pytest.fixture
def make_config():
    """Build a SearchConfig for a list of directories."""
    def _make(dirs, **kwargs):
        return SearchConfig(
            search_dirs=[Path(d) for d in dirs],
            self_desktop_files=kwargs.pop(
                "self_desktop_files",
                ["browser-selector.desktop", "browser-selector-gui.desktop"],
            ),
            **kwargs,
        )
    return _make
