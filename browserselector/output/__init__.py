"""Output modules that write outside the selector's own process.

Modules:
    desktop_entry: Install our .desktop file and register as default browser
"""

from .desktop_entry import (
    HANDLED_MIME_TYPES,
    DesktopIntegrationError,
    desktop_file_name,
    get_applications_dir,
    install,
    install_desktop_entry,
    render_desktop_entry,
    set_default_browser,
    update_desktop_database,
)

__all__ = [
    "HANDLED_MIME_TYPES",
    "DesktopIntegrationError",
    "desktop_file_name",
    "get_applications_dir",
    "install",
    "install_desktop_entry",
    "render_desktop_entry",
    "set_default_browser",
    "update_desktop_database",
]
